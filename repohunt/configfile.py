"""Reader for cgitrc-style `key = value` files."""

from __future__ import annotations

from typing import Callable

ConfigCallback = Callable[[str, str], None]


def parse_configfile(path: str, fn: ConfigCallback) -> None:
    """Call fn(key, value) for every `key = value` line in path.

    Blank lines and lines starting with '#' are skipped, as are lines
    without '='. Whitespace around keys and values is stripped.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            key = key.strip()
            if not sep or not key:
                continue
            fn(key, value.strip())
