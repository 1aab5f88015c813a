"""Repository records and the registry that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

DEFAULT_DESC = "[no description]"


@dataclass
class RepoRecord:
    url: str
    name: str = ""
    path: Optional[str] = None
    owner: Optional[str] = None
    desc: str = DEFAULT_DESC
    section: Optional[str] = None
    defbranch: Optional[str] = None
    clone_url: Optional[str] = None
    homepage: Optional[str] = None
    hide: bool = False
    ignore: bool = False
    extra: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.url

    @property
    def has_default_desc(self) -> bool:
        return not self.desc or self.desc == DEFAULT_DESC


# Registration callback: (record, key, value)
RepoConfigFn = Callable[[RepoRecord, str, str], None]

_STRING_KEYS = {
    "url": "url",
    "name": "name",
    "path": "path",
    "desc": "desc",
    "owner": "owner",
    "section": "section",
    "defbranch": "defbranch",
    "clone-url": "clone_url",
    "homepage": "homepage",
}

_BOOL_KEYS = {"hide", "ignore"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "yes", "true", "on")


def repo_config(record: RepoRecord, key: str, value: str) -> None:
    """Apply one native setting to a record.

    Known keys land on their attribute; everything else is kept in
    record.extra for whoever renders the record.
    """
    if key in _STRING_KEYS:
        setattr(record, _STRING_KEYS[key], value)
    elif key in _BOOL_KEYS:
        setattr(record, key, _as_bool(value))
    else:
        record.extra[key] = value


class RepoRegistry:
    """Insertion-ordered map of relative name -> RepoRecord."""

    def __init__(self) -> None:
        self._records: dict[str, RepoRecord] = {}

    def add(self, url: str) -> RepoRecord:
        """Return the record registered under url, creating it if needed."""
        record = self._records.get(url)
        if record is None:
            record = RepoRecord(url=url)
            self._records[url] = record
        return record

    def get(self, url: str) -> Optional[RepoRecord]:
        return self._records.get(url)

    def __contains__(self, url: object) -> bool:
        return url in self._records

    def __iter__(self) -> Iterator[RepoRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def visible(self) -> list[RepoRecord]:
        """Records not flagged with ignore."""
        return [r for r in self._records.values() if not r.ignore]

    def by_section(self) -> dict[str, list[RepoRecord]]:
        """Group visible records by section ("" for none), sorted by name."""
        groups: dict[str, list[RepoRecord]] = {}
        for record in sorted(self.visible(), key=lambda r: (r.section or "", r.name)):
            groups.setdefault(record.section or "", []).append(record)
        return groups
