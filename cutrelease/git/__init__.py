"""Git operations.

Usage:
    from cutrelease.git import Repository

    repo = Repository(Path.cwd())
    match repo.status():
        case Ok(status) if not status.is_clean:
            print("uncommitted changes")
"""

from cutrelease.git.repository import (
    GitError,
    GitStatus,
    Repository,
    StatusEntry,
)

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
]
