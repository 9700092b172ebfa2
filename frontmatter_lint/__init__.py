"""Lint page frontmatter against declarative field specs."""

from .collector import ErrorCollector
from .config import LintOptions
from .errors import FrontmatterLintError, PostProcessError, SchemaError
from .plugin import FrontmatterLint, RunContext, RunResult, lint_corpus, make_exclude_predicate
from .schema import FieldSpec, Schema, TypeDescriptor, load_schema_file, resolve_type
from .type_matcher import match_type, runtime_kind
from .validator import DocumentRecord, validate_record
from .violations import (
    EmptyKey,
    EmptyValue,
    InvalidKey,
    InvalidType,
    InvalidValue,
    MissingKey,
    Violation,
    violation_from_dict,
)

__version__ = "0.1.0"
