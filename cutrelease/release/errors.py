"""Error payload shared by every release step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "usage",
    "validation",
    "dependency",
    "environment",
    "aborted",
    "conflict",
    "dirty_state",
    "sync",
    "publish",
    "io",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error.

    Attributes:
        kind: Error category; selects the exit code.
        message: One-line diagnostic.
        hint: Optional remediation or underlying tool output.
        details: Extra lines shown under the message (e.g. dirty files).
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    details: tuple[str, ...] = ()
