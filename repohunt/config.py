"""Scan settings, optionally loaded from a global cgitrc-style file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from repohunt.configfile import parse_configfile
from repohunt.errors import report

DEFAULT_MAX_DEPTH = 64


@dataclass
class ScanConfig:
    strict_export: Optional[str] = None   # marker file a repo must contain
    enable_git_config: bool = False
    remove_suffix: bool = False
    scan_hidden_path: bool = False
    section_from_path: int = 0            # +n: first n segments, -n: drop last n
    max_depth: int = DEFAULT_MAX_DEPTH
    scan_path: Optional[str] = None
    project_list: Optional[str] = None


_FLAG_KEYS = {
    "enable-git-config": "enable_git_config",
    "remove-suffix": "remove_suffix",
    "scan-hidden-path": "scan_hidden_path",
}

_INT_KEYS = {
    "section-from-path": "section_from_path",
    "max-depth": "max_depth",
}

_STR_KEYS = {
    "strict-export": "strict_export",
    "scan-path": "scan_path",
    "project-list": "project_list",
}


def _parse_int(key: str, value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        report(f"Invalid integer for {key}: {value!r}")
        return None


def load_config(path: str, config: Optional[ScanConfig] = None) -> ScanConfig:
    """Read scan settings from a cgitrc-style file into config.

    Unknown keys are ignored so a full cgitrc can be pointed at directly.
    Raises OSError if the file can't be read.
    """
    config = config or ScanConfig()

    def apply(key: str, value: str) -> None:
        if key in _FLAG_KEYS:
            setattr(config, _FLAG_KEYS[key], value == "1")
        elif key in _INT_KEYS:
            number = _parse_int(key, value)
            if number is not None:
                setattr(config, _INT_KEYS[key], number)
        elif key in _STR_KEYS:
            setattr(config, _STR_KEYS[key], value or None)

    parse_configfile(path, apply)
    return config
