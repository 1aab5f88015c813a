"""CLI entry point for repohunt."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from repohunt import __version__
from repohunt.config import ScanConfig, load_config
from repohunt.errors import report_os_error
from repohunt.export import to_cgitrc, to_json
from repohunt.repo import RepoRegistry
from repohunt.scanner import scan_projects, scan_tree


def build_config(args: argparse.Namespace) -> Optional[ScanConfig]:
    """Merge the optional config file with command-line flags (flags win)."""
    config = ScanConfig()
    if args.config:
        try:
            load_config(args.config, config)
        except OSError as exc:
            report_os_error("Error opening config", args.config, exc)
            return None

    if args.strict_export is not None:
        config.strict_export = args.strict_export or None
    if args.enable_git_config:
        config.enable_git_config = True
    if args.remove_suffix:
        config.remove_suffix = True
    if args.scan_hidden_path:
        config.scan_hidden_path = True
    if args.section_from_path is not None:
        config.section_from_path = args.section_from_path
    if args.max_depth is not None:
        config.max_depth = args.max_depth
    if args.path is not None:
        config.scan_path = args.path
    if args.project_list is not None:
        config.project_list = args.project_list
    return config


def discover(config: ScanConfig) -> RepoRegistry:
    """Run the scan described by config."""
    root = config.scan_path or "."
    if config.project_list:
        return scan_projects(root, config.project_list, config=config)
    return scan_tree(root, config=config)


def print_summary(registry: RepoRegistry, scan_path: str) -> None:
    """Print a Rich table of everything found."""
    from rich.console import Console

    from repohunt.theme import CYAN, MUTED, RED, render_banner, render_table

    console = Console()
    console.print(render_banner())

    visible = registry.visible()
    if not visible:
        console.print(f"[{RED}]No git repos found.[/{RED}] Try: repohunt ~/git")
        return

    sections = len(registry.by_section())
    console.print(
        f"  [bold {CYAN}]{len(visible)}[/bold {CYAN}][{MUTED}] repos in [/{MUTED}]"
        f"[bold {CYAN}]{sections}[/bold {CYAN}][{MUTED}] sections under {scan_path}[/{MUTED}]\n"
    )
    console.print(render_table(registry))


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the repohunt CLI."""
    parser = argparse.ArgumentParser(
        prog="repohunt",
        description="Find git repositories and collect owner, description and section metadata.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan for git repos (default: scan-path from --config, else .)",
    )
    parser.add_argument(
        "--project-list",
        metavar="FILE",
        help="Only scan the paths listed in FILE, one per line, relative to PATH",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Read scan settings from a cgitrc-style file",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output repositories as JSON",
    )
    output.add_argument(
        "--cgitrc",
        action="store_true",
        help="Output repositories as cgitrc repo.* settings",
    )
    parser.add_argument(
        "--enable-git-config",
        action="store_true",
        help="Read gitweb.* and cgit.* settings from each repo's git config",
    )
    parser.add_argument(
        "--remove-suffix",
        action="store_true",
        help="Strip a trailing .git from repository urls",
    )
    parser.add_argument(
        "--scan-hidden-path",
        action="store_true",
        help="Also descend into directories starting with '.'",
    )
    parser.add_argument(
        "--strict-export",
        metavar="NAME",
        help="Only register repos containing a file called NAME",
    )
    parser.add_argument(
        "--section-from-path",
        metavar="N",
        type=int,
        help="Section from the first N path segments (negative: all but the last |N|)",
    )
    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        help="Stop descending N directories below the scan root (default: 64)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"repohunt {__version__}",
    )

    args = parser.parse_args(argv)
    config = build_config(args)
    if config is None:
        return 1

    registry = discover(config)
    print(f"  Found {len(registry.visible())} repos.", file=sys.stderr)

    if args.json_output:
        print(to_json(registry))
    elif args.cgitrc:
        print(to_cgitrc(registry), end="")
    else:
        print_summary(registry, config.scan_path or ".")
    return 0


if __name__ == "__main__":
    sys.exit(main())
