"""Shared helpers for CLI commands."""

from typing import List

EXIT_SUCCESS = 0
EXIT_ABORTED = 1
EXIT_ERROR = 2


def split_csv(value) -> List[str]:
    """Split a comma-separated option into stripped, non-empty tokens."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [token.strip() for token in str(value).split(',') if token.strip()]
