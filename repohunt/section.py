"""Section labels derived from a repository's relative path."""

from __future__ import annotations

from typing import Optional


def leading_segments(rel: str, n: int) -> Optional[str]:
    """Return rel cut before its n-th separator, or None if it has fewer."""
    parts = rel.split("/")
    if len(parts) <= n:
        return None
    return "/".join(parts[:n])


def trailing_segments(rel: str, n: int) -> Optional[str]:
    """Return rel with its last n segments removed, or None if it has fewer separators."""
    parts = rel.split("/")
    if len(parts) <= n:
        return None
    return "/".join(parts[:-n])


def section_from_path(rel: str, n: int) -> Optional[str]:
    """Derive a section label from a relative repo path.

    n > 0 keeps the first n path segments ("a/b/c/d", 2 -> "a/b").
    n < 0 drops the last |n| segments ("a/b/c/d", -1 -> "a/b/c").
    n == 0 disables sections. An empty result is treated as no section.
    """
    if n > 0:
        section = leading_segments(rel, n)
    elif n < 0:
        section = trailing_segments(rel, -n)
    else:
        return None
    return section or None
