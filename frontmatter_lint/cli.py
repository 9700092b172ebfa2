#!/usr/bin/env python3
"""
Validate the frontmatter of every Markdown page under a docs directory
against a specs file, and report the pages that do not conform.

Usage:
    frontmatter-lint docs --schema frontmatter.yml
    frontmatter-lint docs --schema frontmatter.yml --exclude '/drafts/*' --dump --abort

Every option can also come from FRONTMATTER_LINT_* environment variables or a
.env file; command-line values win.

Exit codes: 0 success, 1 violations with --abort, 2 configuration error.
"""

import argparse
import importlib
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .config import DEFAULT_GLOB, LintOptions, options_from_env
from .errors import FrontmatterLintError, PostProcessError
from .loader import iter_documents
from .plugin import FrontmatterLint, RunContext
from .reporter import Reporter
from .schema import load_schema_file

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG = 2


def load_post_process(spec: str):
    """Import a ``module:function`` post-processing hook."""
    module_name, sep, func_name = spec.partition(":")
    if not sep or not module_name or not func_name:
        raise PostProcessError(f"Invalid post-process hook {spec!r}: expected module:function")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PostProcessError(f"Cannot import post-process hook {spec!r}: {e}") from e
    hook = getattr(module, func_name, None)
    if not callable(hook):
        raise PostProcessError(f"Post-process hook {spec!r} is not callable")
    return hook


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frontmatter-lint",
        description="Validate Markdown frontmatter against a specs file",
    )
    parser.add_argument("source_dir", type=Path, help="Docs directory to scan")
    parser.add_argument("--schema", type=Path, help="YAML or JSON frontmatter specs")
    parser.add_argument(
        "--exclude", action="append", default=None, metavar="PATTERN",
        help="Glob matched against page paths such as /guide/intro.md (repeatable)",
    )
    parser.add_argument("--glob", default=DEFAULT_GLOB, help=f"Pages to scan (default: {DEFAULT_GLOB})")
    parser.add_argument("--dump", action="store_true", default=None, help="Dump errors to a JSON file")
    parser.add_argument("--dump-file", help="Where to dump errors")
    parser.add_argument("--abort", action="store_true", default=None, help="Exit with status 1 on any error")
    parser.add_argument("--post-process", metavar="MODULE:FUNC", help="Hook applied to the errors before reporting")
    return parser


def resolve_options(args: argparse.Namespace) -> LintOptions:
    env = options_from_env()

    schema_path = args.schema or env["schema"]
    specs = load_schema_file(Path(schema_path)) if schema_path else None

    post_process = args.post_process or env["post_process"]
    return LintOptions(
        specs=specs,
        exclude=args.exclude if args.exclude is not None else env["exclude"],
        dump_to_file=args.dump if args.dump is not None else env["dump_to_file"],
        dump_file=args.dump_file or env["dump_file"],
        abort_build=args.abort if args.abort is not None else env["abort_build"],
        post_process_errors=load_post_process(post_process) if post_process else None,
    )


def main(argv=None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    if not args.source_dir.is_dir():
        print(f"ERROR: {args.source_dir} is not a directory", file=sys.stderr)
        return EXIT_CONFIG

    try:
        options = resolve_options(args)
        lint = FrontmatterLint(options, reporter=Reporter())
        for record in iter_documents(args.source_dir, args.glob):
            lint.on_record(record)
        result = lint.on_run_finalize(RunContext(args.source_dir))
    except FrontmatterLintError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG

    if result.has_violations and options.abort_build:
        print("\nAborting build.\n", file=sys.stderr)
        return EXIT_VIOLATIONS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
