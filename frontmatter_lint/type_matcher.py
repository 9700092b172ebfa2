"""Check frontmatter values against the expected type of their field."""

import enum
from dataclasses import dataclass
from typing import Any

from .schema import TypeDescriptor


@dataclass(frozen=True)
class MatchResult:
    valid: bool
    expected_type: str


def runtime_kind(value: Any) -> str:
    """Name the primitive kind of a value, or "object" for anything structured."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, enum.Enum):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def _is_instance(value: Any, expected: TypeDescriptor) -> bool:
    if expected.pytype is None:
        return False
    try:
        return isinstance(value, expected.pytype)
    except TypeError:
        return False


def match_type(value: Any, expected: TypeDescriptor) -> MatchResult:
    if expected.primitive:
        kind = runtime_kind(value)
        valid = kind == expected.name.lower()
        # Structured values such as Decimal can still be a Number.
        if not valid and kind == "object":
            valid = _is_instance(value, expected)
    else:
        valid = _is_instance(value, expected)
    return MatchResult(valid, expected.name)
