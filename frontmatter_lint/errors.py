"""Exceptions raised by frontmatter-lint.

Only configuration problems are raised. Frontmatter violations are data and
are collected, never raised.
"""


class FrontmatterLintError(Exception):
    pass


class SchemaError(FrontmatterLintError, ValueError):
    """The frontmatter specs cannot be used to validate anything."""


class PostProcessError(FrontmatterLintError):
    """A post-processing hook could not be loaded or returned garbage."""
