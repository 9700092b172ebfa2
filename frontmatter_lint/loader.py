"""
Walk a docs tree and parse YAML frontmatter from its Markdown files.

Each file becomes a DocumentRecord whose identity is its path relative to the
source directory, with a leading slash:

    docs/
      index.md          -> /index.md
      guide/intro.md    -> /guide/intro.md
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import frontmatter
import yaml

from .config import DEFAULT_GLOB
from .validator import DocumentRecord


def page_identity(md_path: Path, source_dir: Path) -> str:
    return "/" + md_path.relative_to(source_dir).as_posix()


def extract_frontmatter(md_path: Path) -> dict | None:
    """Parse a markdown file and return its frontmatter as a dict."""
    try:
        post = frontmatter.load(md_path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        print(f"  WARNING: Could not parse {md_path}: {e}", file=sys.stderr)
        return None
    return dict(post.metadata)


def iter_documents(source_dir: Path, pattern: str = DEFAULT_GLOB) -> Iterator[DocumentRecord]:
    source_dir = Path(source_dir)
    for md_file in sorted(source_dir.glob(pattern)):
        if not md_file.is_file():
            continue
        meta = extract_frontmatter(md_file)
        if meta is None:
            continue
        yield DocumentRecord(page_identity(md_file, source_dir), meta)
