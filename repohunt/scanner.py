"""Repo discovery — walk a tree (or a project list) and register every git repository found."""

from __future__ import annotations

import os
import stat
from typing import Optional

from repohunt.config import ScanConfig
from repohunt.configfile import parse_configfile
from repohunt.errors import OwnerLookupError, report, report_os_error
from repohunt.git import is_git_dir, read_git_config, translate_config_key
from repohunt.owner import resolve_owner
from repohunt.repo import RepoConfigFn, RepoRecord, RepoRegistry, repo_config
from repohunt.section import section_from_path

# A repository containing this file opts out of discovery
NOWEB = "noweb"

DESCRIPTION_MAX_BYTES = 64 * 1024


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        report_os_error("Error checking path", path, exc)
        return False
    return True


def _read_description(path: str) -> Optional[str]:
    try:
        with open(path, "rb") as f:
            data = f.read(DESCRIPTION_MAX_BYTES)
    except OSError as exc:
        report_os_error("Error reading", path, exc)
        return None
    return data.decode("utf-8", errors="replace")


def relative_name(base: str, path: str) -> str:
    """Derive a repository's logical name from its path under base.

    "/a/b" + "/a/b/c/d/.git" -> "c/d". Paths outside base keep their full
    path (minus the leading slash). A repository at base itself is named
    after its working directory.
    """
    root = base.rstrip("/")
    if path.rstrip("/") == root:
        rel = ""
    elif path.startswith(root + "/"):
        rel = path[len(root) + 1:]
    else:
        rel = path

    if rel.endswith("/"):
        rel = rel[:-1]
    if rel.endswith("/.git"):
        rel = rel[:-5]
    elif rel == ".git":
        rel = ""
    rel = rel.strip("/")

    if not rel:
        workdir = path.rstrip("/")
        if os.path.basename(workdir) == ".git":
            workdir = os.path.dirname(workdir)
        workdir = os.path.abspath(workdir)
        rel = os.path.basename(workdir) or workdir
    return rel


def add_repo(
    base: str,
    path: str,
    fn: RepoConfigFn,
    *,
    config: ScanConfig,
    registry: RepoRegistry,
) -> Optional[RepoRecord]:
    """Register the repository whose git directory is path.

    Settings are merged in order: git config (gitweb.* / cgit.*), the
    .git suffix rule, path, owner, description file, section from path,
    and finally the repository's own cgitrc, which wins over everything
    before it. Returns None when the repository is skipped.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        report_os_error("Error accessing", path, exc)
        return None

    if config.strict_export and not _exists(os.path.join(path, config.strict_export)):
        return None
    if _exists(os.path.join(path, NOWEB)):
        return None

    rel = relative_name(base, path)
    record = registry.add(rel)
    # url and name are rebuilt from their sources on every pass
    record.url = record.name = rel

    def apply(key: str, value: str) -> None:
        fn(record, key, value)

    if config.enable_git_config:
        for key, value in read_git_config(os.path.join(path, "config")):
            setting = translate_config_key(key, value)
            if setting is not None:
                apply(*setting)

    if config.remove_suffix and record.url.endswith(".git"):
        record.url = record.url[:-4]

    record.path = os.path.abspath(path)

    if record.owner is None:
        try:
            record.owner = resolve_owner(st.st_uid)
        except OwnerLookupError as exc:
            report(f"Error reading owner-info for {path}: {exc} ({exc.errno})")

    if record.has_default_desc:
        desc_path = os.path.join(path, "description")
        if _exists(desc_path):
            desc = _read_description(desc_path)
            if desc is not None:
                record.desc = desc

    if config.section_from_path:
        section = section_from_path(rel, config.section_from_path)
        if section:
            record.section = section
            if record.name.startswith(section):
                name = record.name[len(section):]
                record.name = name[1:] if name.startswith("/") else name

    cgitrc = os.path.join(path, "cgitrc")
    if _exists(cgitrc):
        try:
            parse_configfile(cgitrc, apply)
        except OSError as exc:
            report_os_error("Error reading", cgitrc, exc)

    return record


def scan_path(
    base: str,
    path: str,
    fn: RepoConfigFn,
    *,
    config: ScanConfig,
    registry: RepoRegistry,
    depth: int = 0,
) -> None:
    """Depth-first walk of path; a repository is never descended into."""
    if depth > config.max_depth:
        report(f"Not scanning {path}: deeper than {config.max_depth} levels")
        return

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        report_os_error("Error opening directory", path, exc)
        return

    if is_git_dir(path):
        add_repo(base, path, fn, config=config, registry=registry)
        return
    dotgit = os.path.join(path, ".git")
    if is_git_dir(dotgit):
        add_repo(base, dotgit, fn, config=config, registry=registry)
        return

    for entry in entries:
        if entry.name.startswith(".") and not config.scan_hidden_path:
            continue
        # stat, not entry.is_dir(): symlinks are followed like the git dir checks
        try:
            st = os.stat(entry.path)
        except OSError as exc:
            report_os_error("Error checking path", entry.path, exc)
            continue
        if stat.S_ISDIR(st.st_mode):
            scan_path(base, entry.path, fn, config=config, registry=registry, depth=depth + 1)


def scan_tree(
    path: str,
    fn: RepoConfigFn = repo_config,
    *,
    config: Optional[ScanConfig] = None,
    registry: Optional[RepoRegistry] = None,
) -> RepoRegistry:
    """Find and register every repository under path."""
    config = config or ScanConfig()
    registry = registry if registry is not None else RepoRegistry()
    scan_path(path, path, fn, config=config, registry=registry)
    return registry


def scan_projects(
    path: str,
    projectsfile: str,
    fn: RepoConfigFn = repo_config,
    *,
    config: Optional[ScanConfig] = None,
    registry: Optional[RepoRegistry] = None,
) -> RepoRegistry:
    """Scan only the entries of projectsfile, each a path relative to path.

    Every line is walked like a tree of its own, so it may name a single
    repository or a directory holding many.
    """
    config = config or ScanConfig()
    registry = registry if registry is not None else RepoRegistry()

    try:
        f = open(projectsfile, encoding="utf-8", errors="replace")
    except OSError as exc:
        report_os_error("Error opening projectsfile", projectsfile, exc)
        return registry

    with f:
        try:
            for line in f:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                scan_path(path, path + "/" + line, fn, config=config, registry=registry)
        except OSError as exc:
            report_os_error("Error reading from projectsfile", projectsfile, exc)

    return registry
