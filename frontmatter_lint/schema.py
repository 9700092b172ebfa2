"""
Frontmatter specs: the schema every page's frontmatter is checked against.

A spec file maps field names to constraints:

    title:
      required: true
      type: String
    tag:
      type: String
      allowedValues: [blog, news]

Type names are resolved to a TypeDescriptor once, when the Schema is built.
"""

import datetime
import enum
import json
import numbers
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema
import yaml

from .errors import SchemaError

PRIMITIVE_NAMES = ("String", "Number", "Boolean", "Function", "Symbol")

# Shape of a spec file once parsed. Python callers going through
# Schema.from_mapping may also pass classes as "type", which JSON cannot hold.
SPECS_META_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "properties": {
            "required": {"type": "boolean"},
            "type": {"type": "string"},
            "allowedValues": {"type": "array"},
            "allowed_values": {"type": "array"},
            "description": {"type": "string"},
        },
        "additionalProperties": False,
    },
}


@dataclass(frozen=True)
class TypeDescriptor:
    """Expected type of a field.

    ``name`` is the canonical name reported in INVALID_TYPE errors. ``pytype``
    is what structured values are checked against with isinstance; when it is
    None the structured check always fails.
    """

    name: str
    primitive: bool = False
    pytype: Any = None


STRING = TypeDescriptor("String", True, str)
NUMBER = TypeDescriptor("Number", True, numbers.Number)
BOOLEAN = TypeDescriptor("Boolean", True, bool)
FUNCTION = TypeDescriptor("Function", True, Callable)
SYMBOL = TypeDescriptor("Symbol", True, enum.Enum)
ARRAY = TypeDescriptor("Array", False, list)
OBJECT = TypeDescriptor("Object", False, Mapping)
DATE = TypeDescriptor("Date", False, datetime.date)
DATETIME = TypeDescriptor("DateTime", False, datetime.datetime)
UNRESOLVED = TypeDescriptor("")

_TYPE_ALIASES = {
    "string": STRING,
    "str": STRING,
    "text": STRING,
    "number": NUMBER,
    "int": NUMBER,
    "float": NUMBER,
    "boolean": BOOLEAN,
    "bool": BOOLEAN,
    "function": FUNCTION,
    "callable": FUNCTION,
    "symbol": SYMBOL,
    "enum": SYMBOL,
    "array": ARRAY,
    "list": ARRAY,
    "object": OBJECT,
    "dict": OBJECT,
    "mapping": OBJECT,
    "date": DATE,
    "datetime": DATETIME,
}

_CLASS_ALIASES = {
    str: STRING,
    bool: BOOLEAN,
    int: NUMBER,
    float: NUMBER,
    list: ARRAY,
    dict: OBJECT,
    datetime.date: DATE,
    datetime.datetime: DATETIME,
}


def resolve_type(expected: Any) -> TypeDescriptor:
    """Turn a type name or a Python class into a TypeDescriptor."""
    if isinstance(expected, TypeDescriptor):
        return expected
    if isinstance(expected, str):
        name = expected.strip()
        if not name:
            return UNRESOLVED
        return _TYPE_ALIASES.get(name.lower(), TypeDescriptor(name))
    if isinstance(expected, type):
        if expected in _CLASS_ALIASES:
            return _CLASS_ALIASES[expected]
        return TypeDescriptor(expected.__name__, False, expected)
    return UNRESOLVED


@dataclass(frozen=True)
class FieldSpec:
    required: bool
    expected_type: TypeDescriptor
    allowed_values: tuple | None = None


def _field_spec(name: str, raw: Any) -> FieldSpec:
    if not isinstance(raw, Mapping):
        raise SchemaError(
            f"Invalid spec for field {name!r}: expected mapping, got {type(raw).__name__}"
        )
    required = raw.get("required", False)
    if not isinstance(required, bool):
        raise SchemaError(
            f"Invalid spec for field {name!r}: 'required' must be a boolean, got {type(required).__name__}"
        )
    allowed = raw.get("allowedValues", raw.get("allowed_values"))
    if allowed is not None:
        if not isinstance(allowed, (list, tuple)):
            raise SchemaError(
                f"Invalid spec for field {name!r}: 'allowedValues' must be a list, got {type(allowed).__name__}"
            )
        allowed = tuple(allowed)
    return FieldSpec(required, resolve_type(raw.get("type")), allowed)


class Schema(Mapping):
    """Read-only mapping of field name to FieldSpec."""

    def __init__(self, fields: Mapping[str, FieldSpec]):
        self._fields = MappingProxyType(dict(fields))

    @classmethod
    def from_mapping(cls, specs: Any) -> "Schema":
        if isinstance(specs, Schema):
            return specs
        if not isinstance(specs, Mapping):
            raise SchemaError(
                f"Invalid frontmatter specs type: expected mapping, got {type(specs).__name__}"
            )
        return cls({str(name): _field_spec(str(name), raw) for name, raw in specs.items()})

    def __getitem__(self, name: str) -> FieldSpec:
        return self._fields[name]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema({dict(self._fields)!r})"

    def required_fields(self) -> list[str]:
        """Names of required fields, in declaration order."""
        return [name for name, spec in self._fields.items() if spec.required]


def load_schema_file(path: Path) -> Schema:
    """Read a YAML or JSON spec file and build a Schema from it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaError(f"Cannot read frontmatter specs {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            specs = json.loads(text)
        else:
            specs = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SchemaError(f"Cannot parse frontmatter specs {path}: {e}") from e

    try:
        jsonschema.validate(instance=specs, schema=SPECS_META_SCHEMA)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise SchemaError(f"{path} fails specs validation at {where}: {e.message}") from e

    return Schema.from_mapping(specs)
