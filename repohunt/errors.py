"""Diagnostics for the scanner — plain lines on stderr, never fatal."""

from __future__ import annotations

import sys


class OwnerLookupError(LookupError):
    """No user database entry exists for a repository owner's uid."""

    def __init__(self, uid: int, errno: int = 0) -> None:
        super().__init__(f"no passwd entry for uid {uid}")
        self.uid = uid
        self.errno = errno


def report(message: str) -> None:
    """Print a diagnostic line to stderr."""
    print(message, file=sys.stderr)


def report_os_error(what: str, path: str, exc: OSError) -> None:
    """Report an OSError as '<what> <path>: <message> (<errno>)'."""
    message = exc.strerror or str(exc)
    report(f"{what} {path}: {message} ({exc.errno or 0})")
