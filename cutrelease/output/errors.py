"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cutrelease.core.errors import ErrorCode
from cutrelease.output.console import Style

if TYPE_CHECKING:
    from cutrelease.core.config import ConfigError
    from cutrelease.output.console import ConsoleProtocol
    from cutrelease.release.errors import ReleaseError

__all__ = ["print_config_error", "print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error with its details and hint."""
    console.error(error.message)
    for line in error.details:
        console.print(f"  {line}")
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"config: {error.path}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get the process exit code for a release error."""
    match error.kind:
        case "validation":
            return int(ErrorCode.VALIDATION_ERROR)
        case "usage":
            return int(ErrorCode.USAGE_ERROR)
        case "dependency":
            return int(ErrorCode.DEPENDENCY_ERROR)
        case "environment":
            return int(ErrorCode.ENV_ERROR)
        case "aborted":
            return int(ErrorCode.ABORTED)
        case "conflict":
            return int(ErrorCode.CONFLICT)
        case "dirty_state":
            return int(ErrorCode.DIRTY_STATE)
        case "sync":
            return int(ErrorCode.SYNC_ERROR)
        case "publish":
            return int(ErrorCode.PUBLISH_ERROR)
        case "io":
            return int(ErrorCode.IO_ERROR)
