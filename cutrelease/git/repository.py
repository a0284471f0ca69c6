"""Git repository abstraction.

`Repository` wraps the git CLI for the operations a release needs:
branch and tag queries, working-tree status, remotes, fetch/pull, and
annotated tag creation and push. Every fallible method returns a Result.

Usage:
    repo = Repository(Path.cwd())

    match repo.tag_exists("v1.2.0"):
        case Ok(True):
            print("already released")
        case Ok(False):
            repo.create_annotated_tag("v1.2.0", "Release v1.2.0")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cutrelease.core.result import Err, Ok, Result
from cutrelease.platform.process import ProcessError
from cutrelease.platform.process import run as run_process

GIT_TIMEOUT_SECONDS = 30.0
GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

_NETWORK_COMMANDS = frozenset({"fetch", "pull", "push"})

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "push origin v1.0.0")
        message: Error message, usually git's stderr
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single entry of `git status --porcelain`.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str

    def short(self) -> str:
        """Render like `git status --short`."""
        return f"{self.xy} {self.path}"


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Working tree state."""

    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True if there are no staged, unstaged or untracked changes."""
        return len(self.entries) == 0


class Repository:
    """A git working tree.

    Attributes:
        path: Directory git commands run in (any directory inside the tree)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_work_tree(self) -> bool:
        """True if `path` is inside a git working tree.

        Returns False when git is missing or the directory is not a repo.
        """
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        match result:
            case Ok(stdout):
                return stdout.strip() == "true"
            case Err(_):
                return False

    def current_branch(self) -> Result[str | None, GitError]:
        """Get the current branch name; None on a detached HEAD."""
        return (
            self._run(["branch", "--show-current"])
            .map(lambda stdout: stdout.strip() or None)
            .map_err(lambda e: self._error("branch --show-current", e))
        )

    def tags(self) -> Result[tuple[str, ...], GitError]:
        """List all local tags."""
        return self._run(["tag", "-l"]).map(_lines).map_err(lambda e: self._error("tag -l", e))

    def tag_exists(self, tag: str) -> Result[bool, GitError]:
        """Check for a tag by exact name."""
        return self.tags().map(lambda names: tag in names)

    def status(self) -> Result[GitStatus, GitError]:
        """Get working tree status (`git status --porcelain=v1`)."""
        return (
            self._run(["status", "--porcelain=v1"])
            .map(self._parse_status)
            .map_err(lambda e: self._error("status", e))
        )

    def remotes(self) -> Result[tuple[str, ...], GitError]:
        """List configured remote names."""
        return self._run(["remote"]).map(_lines).map_err(lambda e: self._error("remote", e))

    def has_remote(self, name: str) -> Result[bool, GitError]:
        return self.remotes().map(lambda names: name in names)

    def fetch(self, remote: str) -> Result[str, GitError]:
        return (
            self._run(["fetch", remote])
            .map(str.strip)
            .map_err(lambda e: self._error(f"fetch {remote}", e))
        )

    def pull(self, remote: str, branch: str) -> Result[str, GitError]:
        """Pull `branch` from `remote` into the current branch."""
        return (
            self._run(["pull", remote, branch])
            .map(str.strip)
            .map_err(lambda e: self._error(f"pull {remote} {branch}", e))
        )

    def create_annotated_tag(self, tag: str, message: str) -> Result[None, GitError]:
        return (
            self._run(["tag", "-a", tag, "-m", message])
            .map(lambda _: None)
            .map_err(lambda e: self._error(f"tag -a {tag}", e))
        )

    def push_tag(self, remote: str, tag: str) -> Result[None, GitError]:
        return (
            self._run(["push", remote, tag])
            .map(lambda _: None)
            .map_err(lambda e: self._error(f"push {remote} {tag}", e))
        )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        command = args[0] if args else ""
        timeout = (
            GIT_NETWORK_TIMEOUT_SECONDS if command in _NETWORK_COMMANDS else GIT_TIMEOUT_SECONDS
        )
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, timeout=timeout)

    @staticmethod
    def _error(command: str, e: ProcessError) -> GitError:
        return GitError(
            command=command,
            message=e.detail() or f"git {command} failed",
            returncode=e.returncode,
        )

    def _parse_status(self, output: str) -> GitStatus:
        entries: list[StatusEntry] = []
        for line in output.splitlines():
            entry = self._parse_entry(line)
            if entry:
                entries.append(entry)
        return GitStatus(entries=tuple(entries))

    def _parse_entry(self, line: str) -> StatusEntry | None:
        """Parse a single porcelain line: `XY path`."""
        if len(line) < 4:
            return None
        if line.startswith("?? "):
            return StatusEntry(xy="??", path=line[3:])
        return StatusEntry(xy=line[:2], path=line[3:])


def _lines(output: str) -> tuple[str, ...]:
    return tuple(line.strip() for line in output.splitlines() if line.strip())
