"""Validate one page's frontmatter against a Schema."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .schema import Schema
from .type_matcher import match_type, runtime_kind
from .violations import (
    EmptyKey,
    EmptyValue,
    InvalidKey,
    InvalidType,
    InvalidValue,
    MissingKey,
    Violation,
)


@dataclass(frozen=True)
class DocumentRecord:
    """A page's identity (its path) and its parsed frontmatter."""

    identity: str
    metadata: Mapping[str, Any] = field(default_factory=dict)


def is_allowed_value(value: Any, allowed_values) -> bool:
    # bool is an int subclass: keep True from matching 1 and vice versa
    return any(
        candidate == value and isinstance(candidate, bool) == isinstance(value, bool)
        for candidate in allowed_values
    )


def key_name(key: Any) -> str:
    """Name a frontmatter key the way YAML spells it (`~` is "null")."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _check_key(key: Any, value: Any, schema: Schema) -> Violation | None:
    name = key_name(key)
    if name == "":
        return EmptyKey()
    spec = schema.get(name)
    if spec is None:
        return InvalidKey(name)
    if value is None:
        return EmptyValue(name)

    result = match_type(value, spec.expected_type)
    if not result.valid:
        return InvalidType(name, result.expected_type, runtime_kind(value))

    if spec.allowed_values is not None and not is_allowed_value(value, spec.allowed_values):
        return InvalidValue(name, spec.allowed_values, value)
    return None


def validate_record(record: DocumentRecord, schema: Schema) -> list[Violation]:
    """Return every violation in the record: missing required fields first,
    then at most one violation per key in the frontmatter's own order."""
    metadata = record.metadata
    present = {key_name(key) for key in metadata}

    violations: list[Violation] = [
        MissingKey(name) for name in schema.required_fields() if name not in present
    ]
    for key, value in metadata.items():
        violation = _check_key(key, value, schema)
        if violation is not None:
            violations.append(violation)
    return violations
