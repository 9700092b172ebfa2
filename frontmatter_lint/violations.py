"""
Violations found in a page's frontmatter.

Each kind serialises to the dict shape written to the error dump:

    {"error": "INVALID_VALUE", "key": "tag", "expected": "[\"blog\", \"news\"]", "got": "opinion"}
"""

import json
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Violation:
    error: ClassVar[str] = ""

    def to_dict(self) -> dict:
        return {"error": self.error}


@dataclass(frozen=True)
class MissingKey(Violation):
    error: ClassVar[str] = "MISSING_KEY"
    key: str

    def to_dict(self) -> dict:
        return {"error": self.error, "key": self.key}


@dataclass(frozen=True)
class EmptyKey(Violation):
    error: ClassVar[str] = "EMPTY_KEY"


@dataclass(frozen=True)
class InvalidKey(Violation):
    error: ClassVar[str] = "INVALID_KEY"
    key: str

    def to_dict(self) -> dict:
        return {"error": self.error, "key": self.key}


@dataclass(frozen=True)
class EmptyValue(Violation):
    error: ClassVar[str] = "EMPTY_VALUE"
    key: str

    def to_dict(self) -> dict:
        return {"error": self.error, "key": self.key}


@dataclass(frozen=True)
class InvalidType(Violation):
    error: ClassVar[str] = "INVALID_TYPE"
    key: str
    expected: str
    got: str

    def to_dict(self) -> dict:
        return {"error": self.error, "key": self.key, "expected": self.expected, "got": self.got}


@dataclass(frozen=True)
class InvalidValue(Violation):
    error: ClassVar[str] = "INVALID_VALUE"
    key: str
    expected: tuple
    got: Any

    def to_dict(self) -> dict:
        return {
            "error": self.error,
            "key": self.key,
            "expected": json.dumps(list(self.expected), default=str),
            "got": self.got,
        }


VIOLATION_KINDS = {
    cls.error: cls
    for cls in (MissingKey, EmptyKey, InvalidKey, EmptyValue, InvalidType, InvalidValue)
}


def violation_from_dict(data: dict) -> Violation:
    """Rebuild a Violation from its dumped dict form."""
    try:
        cls = VIOLATION_KINDS[data["error"]]
    except KeyError:
        raise ValueError(f"Unknown frontmatter error: {data!r}") from None

    if cls is EmptyKey:
        return EmptyKey()
    if cls is InvalidType:
        return InvalidType(data["key"], data.get("expected", ""), data.get("got", ""))
    if cls is InvalidValue:
        expected = data.get("expected", "[]")
        if isinstance(expected, str):
            expected = json.loads(expected)
        return InvalidValue(data["key"], tuple(expected), data.get("got"))
    return cls(data["key"])
