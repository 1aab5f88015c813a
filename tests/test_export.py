"""Tests for export formats."""

import json

from repohunt.export import to_cgitrc, to_dict, to_json
from repohunt.repo import RepoRegistry


def _registry() -> RepoRegistry:
    registry = RepoRegistry()
    tools = registry.add("tools")
    tools.path = "/srv/git/tools.git"
    tools.owner = "Ann Example"
    tools.desc = "Handy scripts\n"

    deploy = registry.add("ops/deploy")
    deploy.name = "deploy"
    deploy.section = "ops"
    deploy.path = "/srv/git/ops/deploy/.git"
    deploy.defbranch = "main"
    deploy.extra["logo"] = "/deploy.png"

    backup = registry.add("ops/backup")
    backup.name = "backup"
    backup.section = "ops"
    backup.hide = True

    registry.add("attic").ignore = True
    return registry


def test_to_dict():
    data = to_dict(_registry().get("ops/deploy"))
    assert data["url"] == "ops/deploy"
    assert data["name"] == "deploy"
    assert data["section"] == "ops"
    assert data["extra"] == {"logo": "/deploy.png"}


def test_to_json_skips_ignored():
    data = json.loads(to_json(_registry()))
    assert data["total_repos"] == 3
    assert [r["url"] for r in data["repos"]] == ["tools", "ops/deploy", "ops/backup"]


def test_to_cgitrc():
    text = to_cgitrc(_registry())
    lines = text.splitlines()
    assert lines[0] == "repo.url=tools"
    assert "repo.desc=Handy scripts" in lines
    assert "repo.owner=Ann Example" in lines
    assert "repo.name=deploy" in lines
    assert "repo.defbranch=main" in lines
    assert "repo.logo=/deploy.png" in lines
    assert "repo.hide=1" in lines
    assert "repo.url=attic" not in lines
    # section line written once, before the first repo in it
    assert lines.count("section=ops") == 1
    assert lines.index("section=ops") < lines.index("repo.url=ops/deploy")
    assert lines.index("section=ops") > lines.index("repo.url=tools")


def test_to_cgitrc_empty():
    assert to_cgitrc(RepoRegistry()) == ""


def test_to_cgitrc_keeps_every_value_on_one_line():
    registry = RepoRegistry()
    r = registry.add("x")
    r.clone_url = "git://h/x\nrepo.url=evil"
    r.name = "pretty\nname"
    r.homepage = "https://h/\nrepo.hide=1"
    r.defbranch = "main\n"
    lines = to_cgitrc(registry).splitlines()
    assert "repo.clone-url=git://h/x repo.url=evil" in lines
    assert "repo.name=pretty name" in lines
    assert "repo.homepage=https://h/ repo.hide=1" in lines
    assert "repo.defbranch=main" in lines
    assert [line for line in lines if line.startswith("repo.url=")] == ["repo.url=x"]
    assert "repo.hide=1" not in lines
