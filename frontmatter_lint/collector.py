"""Accumulates violations per page across a whole build."""

from collections.abc import Iterable

from .violations import Violation


class ErrorCollector:
    def __init__(self):
        self._errors: dict[str, list[Violation]] = {}

    def append(self, identity: str, violation: Violation) -> None:
        self._errors.setdefault(identity, []).append(violation)

    def extend(self, identity: str, violations: Iterable[Violation]) -> None:
        """Append several violations; a page with none gets no entry."""
        for violation in violations:
            self.append(identity, violation)

    def is_empty(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, identity: str) -> bool:
        return identity in self._errors

    def snapshot(self) -> dict[str, list[Violation]]:
        """Copy of the current contents, leaving the collector untouched."""
        return {identity: list(found) for identity, found in self._errors.items()}

    def drain(self) -> dict[str, list[Violation]]:
        """Hand over everything collected so far and start again empty."""
        errors, self._errors = self._errors, {}
        return errors
