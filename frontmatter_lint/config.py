"""Options for a frontmatter-lint run, read from the environment (and .env)."""

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# Configuration
PLUGIN_NAME = "frontmatter-lint"
DEFAULT_DUMP_FILE = "./frontmatter-errors.json"
DEFAULT_GLOB = "**/*.md"

ENV_PREFIX = "FRONTMATTER_LINT_"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class LintOptions:
    specs: Any = None
    exclude: list[str] = field(default_factory=list)
    dump_to_file: bool = False
    dump_file: str = DEFAULT_DUMP_FILE
    abort_build: bool = False
    post_process_errors: Callable | None = None


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def env_list(name: str) -> list[str]:
    raw = os.environ.get(ENV_PREFIX + name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def options_from_env() -> dict:
    """Read FRONTMATTER_LINT_* variables.

    Returns plain values; the schema path and post-process hook are returned
    unresolved so the caller decides how to load them.
    """
    return {
        "schema": os.environ.get(ENV_PREFIX + "SCHEMA") or None,
        "exclude": env_list("EXCLUDE"),
        "dump_to_file": env_flag("DUMP"),
        "dump_file": os.environ.get(ENV_PREFIX + "DUMP_FILE") or DEFAULT_DUMP_FILE,
        "abort_build": env_flag("ABORT"),
        "post_process": os.environ.get(ENV_PREFIX + "POST_PROCESS") or None,
    }
