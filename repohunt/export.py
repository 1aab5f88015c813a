"""Export utilities — JSON document and cgitrc repo stanzas."""

from __future__ import annotations

import json
from typing import Any

from repohunt.repo import RepoRecord, RepoRegistry


# ── JSON ──────────────────────────────────────────────────────────────

def to_dict(record: RepoRecord) -> dict[str, Any]:
    """Flatten a record into JSON-friendly data."""
    return {
        "url": record.url,
        "name": record.name,
        "path": record.path,
        "owner": record.owner,
        "desc": record.desc,
        "section": record.section,
        "defbranch": record.defbranch,
        "clone_url": record.clone_url,
        "homepage": record.homepage,
        "hide": record.hide,
        "extra": dict(record.extra),
    }


def to_json(registry: RepoRegistry, indent: int = 2) -> str:
    """Dump every visible record as a JSON document."""
    data = {
        "total_repos": len(registry.visible()),
        "repos": [to_dict(r) for r in registry.visible()],
    }
    return json.dumps(data, indent=indent)


# ── cgitrc ────────────────────────────────────────────────────────────

def _one_line(value: str) -> str:
    # cgitrc values end at the newline
    return " ".join(value.split())


def to_cgitrc(registry: RepoRegistry) -> str:
    """Render records as repo.* settings a cgitrc can include.

    section= lines are only written when the section changes, the way a
    hand-written cgitrc groups its repositories.
    """
    lines: list[str] = []
    current_section: str | None = None

    for r in registry.visible():
        section = r.section or ""
        if section != (current_section or ""):
            lines.append(f"section={_one_line(section)}")
            lines.append("")
            current_section = section

        lines.append(f"repo.url={_one_line(r.url)}")
        if r.name != r.url:
            lines.append(f"repo.name={_one_line(r.name)}")
        if r.path:
            lines.append(f"repo.path={_one_line(r.path)}")
        lines.append(f"repo.desc={_one_line(r.desc)}")
        if r.owner:
            lines.append(f"repo.owner={_one_line(r.owner)}")
        if r.defbranch:
            lines.append(f"repo.defbranch={_one_line(r.defbranch)}")
        if r.clone_url:
            lines.append(f"repo.clone-url={_one_line(r.clone_url)}")
        if r.homepage:
            lines.append(f"repo.homepage={_one_line(r.homepage)}")
        if r.hide:
            lines.append("repo.hide=1")
        for key, value in r.extra.items():
            lines.append(f"repo.{key}={_one_line(value)}")
        lines.append("")

    return "\n".join(lines)
