"""Shared fixtures for release tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutrelease.test.fakes import README, FakeRunner


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    from cutrelease.git import repository as repository_mod
    from cutrelease.release import gh as gh_mod

    runner = FakeRunner()
    monkeypatch.setattr(repository_mod, "run_process", runner)
    monkeypatch.setattr(gh_mod, "run_process", runner)
    return runner


@pytest.fixture
def gh_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    from cutrelease.release import gh as gh_mod

    def fake_which(name: str) -> str | None:
        return f"/usr/bin/{name}"

    monkeypatch.setattr(gh_mod.shutil, "which", fake_which)


@pytest.fixture
def release_repo(tmp_path: Path, fake_run: FakeRunner, gh_installed: None) -> Path:
    """A clean checkout on main with an origin remote and a changelog marker."""
    (tmp_path / "README.md").write_text(README, encoding="utf-8")

    fake_run.ok("git", "rev-parse", "--is-inside-work-tree", stdout="true\n")
    fake_run.ok("git", "branch", "--show-current", stdout="main\n")
    fake_run.ok("git", "tag", "-l", stdout="v0.9.0\nv1.0.0\n")
    fake_run.ok("git", "status", "--porcelain=v1", stdout="")
    fake_run.ok("git", "remote", stdout="origin\nupstream\n")
    fake_run.ok(
        "gh",
        "release",
        "view",
        stdout='{"url": "https://github.com/HundredAcreStudio/zsh-claude/releases/tag/v1.0.1"}',
    )
    return tmp_path
