"""Exit codes for the cutrelease CLI.

Each release error kind maps to its own process exit code so scripts and
tests can tell failures apart. Validation failures exit with 1.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are part of the CLI contract."""

    OK = 0
    VALIDATION_ERROR = 1
    USAGE_ERROR = 2
    DEPENDENCY_ERROR = 3
    ENV_ERROR = 4
    ABORTED = 5
    CONFLICT = 6
    DIRTY_STATE = 7
    SYNC_ERROR = 8
    PUBLISH_ERROR = 9
    IO_ERROR = 10
    CONFIG_ERROR = 11

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
