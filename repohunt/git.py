"""Git layout checks and git config extraction — subprocess-based, no libgit."""

from __future__ import annotations

import os
import stat
import subprocess
from typing import Optional

from repohunt.errors import report_os_error

# Legacy gitweb keys and the native attribute each one feeds
GITWEB_KEYS = {
    "gitweb.owner": "owner",
    "gitweb.description": "desc",
    "gitweb.category": "section",
}

NATIVE_PREFIX = "cgit."


def _stat_mode(path: str) -> Optional[int]:
    """Return st_mode for path, or None if it can't be stat'ed.

    Missing paths are silent; any other failure is reported.
    """
    try:
        return os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        report_os_error("Error checking path", path, exc)
        return None


def is_git_dir(path: str) -> bool:
    """Return True if path has an objects/ directory and a HEAD file."""
    mode = _stat_mode(os.path.join(path, "objects"))
    if mode is None or not stat.S_ISDIR(mode):
        return False

    mode = _stat_mode(os.path.join(path, "HEAD"))
    if mode is None or not stat.S_ISREG(mode):
        return False

    return True


def _run_git(args: list[str], timeout: int = 10) -> str:
    """Run a git command and return stdout."""
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            timeout=timeout,
            errors="replace",
        )
        return result.stdout
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return ""


def parse_config_list(output: str) -> list[tuple[str, str]]:
    """Parse `git config --null --list` output into (key, value) pairs.

    Each record is "key\\nvalue" terminated by NUL; a key given without
    "= value" in the file has no newline at all.
    """
    pairs: list[tuple[str, str]] = []
    for record in output.split("\0"):
        if not record:
            continue
        key, _, value = record.partition("\n")
        pairs.append((key, value))
    return pairs


def read_git_config(path: str) -> list[tuple[str, str]]:
    """Read every variable from a git config file, in file order."""
    output = _run_git(["config", "--file", path, "--null", "--list"])
    if not output:
        return []
    return parse_config_list(output)


def translate_config_key(key: str, value: str) -> Optional[tuple[str, str]]:
    """Map a git config variable onto a native repo setting.

    gitweb.owner, gitweb.description and gitweb.category become owner, desc
    and section. cgit.* keys pass through with the prefix removed. Anything
    else is dropped (None).
    """
    if key in GITWEB_KEYS:
        return GITWEB_KEYS[key], value
    if key.startswith(NATIVE_PREFIX):
        return key[len(NATIVE_PREFIX):], value
    return None
