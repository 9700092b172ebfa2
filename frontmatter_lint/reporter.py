"""
Render collected frontmatter errors for humans, and dump them for tools.

The dump is the JSON form of {page path: [error dict, ...]}, indented by four
spaces, and can be read back with load_error_dump().
"""

import json
import sys
from collections.abc import Mapping
from pathlib import Path

from .config import DEFAULT_DUMP_FILE, PLUGIN_NAME
from .violations import Violation, violation_from_dict


def errors_to_dict(errors: Mapping[str, list[Violation]]) -> dict:
    return {path: [v.to_dict() for v in found] for path, found in errors.items()}


def format_report(errors: Mapping[str, list[Violation]]) -> str:
    lines = [f"plugin-{PLUGIN_NAME} Some pages do not have a valid frontmatter.", ""]
    for path, found in errors.items():
        lines.append(f"- {path}")
        for violation in found:
            e = violation.to_dict()
            if "key" not in e:
                lines.append(f"  {e['error']}")
                continue
            lines.append(f"  {e['error']} on field {e['key']}")
            if e.get("expected"):
                lines.append(f"    Expected: {e['expected']}")
            if e.get("got") not in (None, ""):
                lines.append(f"    Got: {e['got']}")
        lines.append("")
    return "\n".join(lines) + "\n"


class Reporter:
    """Console report plus optional JSON dump."""

    def __init__(self, stream=None):
        self.stream = stream

    def report(self, errors: Mapping[str, list[Violation]]) -> None:
        print("\n" + format_report(errors), file=self.stream or sys.stderr)

    def dump(self, errors: Mapping[str, list[Violation]], file_name: str | None = None, source_dir=None) -> Path:
        out_path = dump_errors_to_file(errors, file_name or DEFAULT_DUMP_FILE)
        print(f"Frontmatter errors have been dumped to {out_path}")
        if source_dir is not None:
            print(f"  Source directory: {source_dir}")
        print()
        return out_path


def dump_errors_to_file(errors: Mapping[str, list[Violation]], file_name: str) -> Path:
    out_path = Path(file_name)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(errors_to_dict(errors), indent=4, ensure_ascii=False, default=str),
        encoding="utf-8",
    )
    return out_path


def load_error_dump(path: Path) -> dict[str, list[Violation]]:
    """Read a dump written by dump_errors_to_file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return {page: [violation_from_dict(e) for e in found] for page, found in data.items()}
