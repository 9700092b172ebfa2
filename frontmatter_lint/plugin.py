"""
Hooks a build system calls to lint the frontmatter of every page.

    lint = FrontmatterLint(LintOptions(specs=...), reporter=Reporter())
    for record in pages:
        lint.on_record(record)
    lint.on_corpus_complete()      # after an incremental rebuild
    result = lint.on_run_finalize(RunContext(source_dir))

Whether violations fail the build is up to the caller (see cli.py).
"""

import fnmatch
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .collector import ErrorCollector
from .config import PLUGIN_NAME, LintOptions
from .errors import PostProcessError
from .schema import Schema
from .validator import DocumentRecord, validate_record
from .violations import Violation, violation_from_dict


@dataclass(frozen=True)
class RunContext:
    source_dir: Path | None = None


@dataclass
class RunResult:
    errors: dict[str, list[Violation]] = field(default_factory=dict)

    @property
    def has_violations(self) -> bool:
        return any(self.errors.values())


def _coerce_errors(errors) -> dict[str, list[Violation]]:
    """Check what a post-processing hook returned.

    Entries may be Violations or their dumped dict form.
    """
    if not isinstance(errors, Mapping):
        raise PostProcessError(
            f"post_process_errors must return a mapping, got {type(errors).__name__}"
        )
    coerced = {}
    for identity, found in errors.items():
        if not isinstance(found, (list, tuple)):
            raise PostProcessError(
                f"post_process_errors returned {type(found).__name__} for {identity!r}, expected a list"
            )
        violations = []
        for item in found:
            if isinstance(item, Violation):
                violations.append(item)
            elif isinstance(item, Mapping):
                try:
                    violations.append(violation_from_dict(dict(item)))
                except (KeyError, ValueError) as e:
                    raise PostProcessError(f"Invalid error for {identity!r}: {e}") from e
            else:
                raise PostProcessError(
                    f"post_process_errors returned {type(item).__name__} for {identity!r}, expected a violation"
                )
        coerced[identity] = violations
    return coerced


def make_exclude_predicate(patterns: Iterable[str]) -> Callable[[str], bool]:
    patterns = list(patterns or [])

    def is_excluded(identity: str) -> bool:
        return any(fnmatch.fnmatchcase(identity, pattern) for pattern in patterns)

    return is_excluded


class FrontmatterLint:
    def __init__(self, options: LintOptions, reporter=None, exclude: Callable[[str], bool] | None = None):
        self.options = options
        self.reporter = reporter
        self.collector = ErrorCollector()
        self.is_excluded = exclude or make_exclude_predicate(options.exclude)

        if options.specs is None:
            print(f"plugin-{PLUGIN_NAME} No frontmatter specs found.")
            self.schema = None
        else:
            self.schema = Schema.from_mapping(options.specs)

    @property
    def enabled(self) -> bool:
        return self.schema is not None

    def on_record(self, record: DocumentRecord) -> list[Violation]:
        if not self.enabled or self.is_excluded(record.identity):
            return []
        violations = validate_record(record, self.schema)
        self.collector.extend(record.identity, violations)
        return violations

    def on_corpus_complete(self) -> dict[str, list[Violation]]:
        errors = self.collector.snapshot()
        if errors and self.reporter is not None:
            self.reporter.report(errors)
        return errors

    def on_run_finalize(self, context: RunContext | None = None) -> RunResult:
        if not self.enabled:
            return RunResult()
        context = context or RunContext()

        hook = self.options.post_process_errors
        if hook is None:
            errors = self.collector.drain()
        else:
            # The collector is only drained once the hook has succeeded.
            errors = _coerce_errors(hook(self.collector.snapshot(), context))
            self.collector.drain()

        result = RunResult(errors)
        if result.has_violations and self.reporter is not None:
            self.reporter.report(errors)
            if self.options.dump_to_file:
                self.reporter.dump(errors, self.options.dump_file, context.source_dir)
        return result


def lint_corpus(
    records: Iterable[DocumentRecord],
    options: LintOptions,
    context: RunContext | None = None,
    reporter=None,
) -> RunResult:
    """Run every page through a fresh FrontmatterLint and finalize."""
    lint = FrontmatterLint(options, reporter=reporter)
    for record in records:
        lint.on_record(record)
    return lint.on_run_finalize(context)

