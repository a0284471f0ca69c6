"""Tests for cutrelease.git.repository module."""

from __future__ import annotations

from pathlib import Path

from cutrelease.core.result import Err, Ok
from cutrelease.git.repository import (
    GIT_NETWORK_TIMEOUT_SECONDS,
    GIT_TIMEOUT_SECONDS,
    GitStatus,
    Repository,
    StatusEntry,
)
from cutrelease.test.fakes import FakeRunner


class TestWorkTree:
    def test_inside(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "rev-parse", "--is-inside-work-tree", stdout="true\n")
        assert Repository(tmp_path).is_work_tree() is True

    def test_outside(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.fail("git", "rev-parse", stderr="fatal: not a git repository")
        assert Repository(tmp_path).is_work_tree() is False

    def test_inside_git_dir(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "rev-parse", "--is-inside-work-tree", stdout="false\n")
        assert Repository(tmp_path).is_work_tree() is False


class TestBranch:
    def test_current_branch(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "branch", "--show-current", stdout="feature/x\n")
        assert Repository(tmp_path).current_branch() == Ok("feature/x")

    def test_detached_head(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "branch", "--show-current", stdout="\n")
        assert Repository(tmp_path).current_branch() == Ok(None)

    def test_error(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.fail("git", "branch", stderr="fatal: bad")
        result = Repository(tmp_path).current_branch()
        assert isinstance(result, Err)
        assert result.error.message == "fatal: bad"


class TestTags:
    def test_exact_match_only(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "tag", "-l", stdout="v1.0.0\nv1.0.0-beta\n")
        repo = Repository(tmp_path)
        assert repo.tag_exists("v1.0.0") == Ok(True)
        assert repo.tag_exists("v1.0") == Ok(False)
        assert repo.tag_exists("v1.0.0-bet") == Ok(False)

    def test_no_tags(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "tag", "-l", stdout="")
        assert Repository(tmp_path).tags() == Ok(())

    def test_create_annotated_tag(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        result = Repository(tmp_path).create_annotated_tag("v1.0.1", "Release v1.0.1")
        assert result == Ok(None)
        assert fake_run.calls[-1] == ("git", "tag", "-a", "v1.0.1", "-m", "Release v1.0.1")

    def test_push_tag_failure(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.fail("git", "push", "origin", stderr="rejected", returncode=128)
        result = Repository(tmp_path).push_tag("origin", "v1.0.1")
        assert isinstance(result, Err)
        assert result.error.command == "push origin v1.0.1"
        assert result.error.returncode == 128


class TestStatus:
    def test_clean(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "status", stdout="")
        result = Repository(tmp_path).status()
        assert result == Ok(GitStatus())
        assert result.unwrap().is_clean

    def test_entries(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "status", stdout=" M README.md\nA  new.txt\n?? scratch.md\n")
        status = Repository(tmp_path).status().unwrap()
        assert not status.is_clean
        assert status.entries == (
            StatusEntry(" M", "README.md"),
            StatusEntry("A ", "new.txt"),
            StatusEntry("??", "scratch.md"),
        )
        assert status.entries[0].short() == " M README.md"


class TestRemotes:
    def test_has_remote_is_exact(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        fake_run.ok("git", "remote", stdout="origin-mirror\nupstream\n")
        repo = Repository(tmp_path)
        assert repo.has_remote("origin") == Ok(False)
        assert repo.has_remote("upstream") == Ok(True)

    def test_pull_arguments(self, tmp_path: Path, fake_run: FakeRunner) -> None:
        Repository(tmp_path).pull("origin", "main")
        assert fake_run.calls[-1] == ("git", "pull", "origin", "main")


class TestTimeouts:
    def test_network_commands_get_longer_timeout(
        self, tmp_path: Path, fake_run: FakeRunner
    ) -> None:
        repo = Repository(tmp_path)
        repo.fetch("origin")
        repo.tags()

        assert fake_run.timeouts == [GIT_NETWORK_TIMEOUT_SECONDS, GIT_TIMEOUT_SECONDS]
