"""Tests for repository records and the registry."""

from repohunt.repo import DEFAULT_DESC, RepoRecord, RepoRegistry, repo_config


def test_record_defaults():
    r = RepoRecord(url="team/api")
    assert r.name == "team/api"
    assert r.desc == DEFAULT_DESC
    assert r.owner is None
    assert r.section is None
    assert r.has_default_desc


def test_has_default_desc_empty():
    r = RepoRecord(url="x", desc="")
    assert r.has_default_desc
    r.desc = "custom"
    assert not r.has_default_desc


def test_repo_config_known_keys():
    r = RepoRecord(url="x")
    repo_config(r, "desc", "Tools")
    repo_config(r, "owner", "Ann")
    repo_config(r, "section", "Ops")
    repo_config(r, "clone-url", "git://host/x")
    repo_config(r, "defbranch", "dev")
    repo_config(r, "name", "Pretty")
    assert (r.desc, r.owner, r.section) == ("Tools", "Ann", "Ops")
    assert r.clone_url == "git://host/x"
    assert r.defbranch == "dev"
    assert r.name == "Pretty"
    assert r.url == "x"


def test_repo_config_bool_keys():
    r = RepoRecord(url="x")
    repo_config(r, "hide", "1")
    repo_config(r, "ignore", "0")
    assert r.hide is True
    assert r.ignore is False


def test_repo_config_unknown_keys_kept():
    r = RepoRecord(url="x")
    repo_config(r, "logo", "/logo.png")
    assert r.extra == {"logo": "/logo.png"}


def test_registry_create_or_fetch():
    registry = RepoRegistry()
    first = registry.add("a")
    second = registry.add("a")
    assert first is second
    assert len(registry) == 1
    assert "a" in registry
    assert registry.get("b") is None


def test_registry_keeps_insertion_order():
    registry = RepoRegistry()
    for url in ("z", "a", "m"):
        registry.add(url)
    assert [r.url for r in registry] == ["z", "a", "m"]


def test_registry_by_section():
    registry = RepoRegistry()
    registry.add("ops/deploy").section = "ops"
    registry.add("tools")
    registry.add("ops/backup").section = "ops"
    hidden = registry.add("old")
    hidden.ignore = True
    groups = registry.by_section()
    assert list(groups) == ["", "ops"]
    assert [r.url for r in groups["ops"]] == ["ops/backup", "ops/deploy"]
    assert [r.url for r in groups[""]] == ["tools"]
