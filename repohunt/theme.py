"""Shared visual constants and helpers for repohunt."""

from __future__ import annotations

from rich.style import Style
from rich.table import Table
from rich.text import Text

from repohunt.repo import RepoRegistry

# ── Color Palette (GitHub Dark + Neon Accents) ──────────────────────────

SURFACE = "#161b22"
MUTED = "#8b949e"

CYAN = "#58a6ff"
GREEN = "#39d353"
PURPLE = "#bc8cff"
YELLOW = "#e3b341"
RED = "#f85149"

NO_SECTION = "(no section)"

# ── ASCII Banner ────────────────────────────────────────────────────────

BANNER = r"""
                       _                 _
  _ __ ___ _ __   ___ | |__  _   _ _ __ | |_
 | '__/ _ \ '_ \ / _ \| '_ \| | | | '_ \| __|
 | | |  __/ |_) | (_) | | | | |_| | | | | |_
 |_|  \___| .__/ \___/|_| |_|\__,_|_| |_|\__|
          |_|"""

TAGLINE = "every repo, every owner, every section"


def render_banner() -> Text:
    """Render the repohunt ASCII banner as styled Rich Text."""
    text = Text(justify="center")
    for line in BANNER.strip("\n").split("\n"):
        text.append(line + "\n", style=Style(color=GREEN, bold=True))
    text.append(f"  {TAGLINE}\n", style=Style(color=MUTED, italic=True))
    return text


def render_table(registry: RepoRegistry) -> Table:
    """Render visible repositories as a Rich table, grouped by section."""
    table = Table(border_style=SURFACE, show_edge=True, pad_edge=True)
    table.add_column("Section", style=f"bold {PURPLE}")
    table.add_column("Repo", style=f"bold {CYAN}")
    table.add_column("Owner", style=YELLOW)
    table.add_column("Description", style=MUTED)

    for section, records in registry.by_section().items():
        label = section or NO_SECTION
        for i, r in enumerate(records):
            table.add_row(
                label if i == 0 else "",
                r.name,
                r.owner or "—",
                r.desc.strip(),
            )
        table.add_section()

    return table
