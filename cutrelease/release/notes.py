from __future__ import annotations

from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias, Union

from cutrelease.core.config import ProductConfig
from cutrelease.core.result import Err, Ok, Result
from cutrelease.platform.files import write_temp_text
from cutrelease.release.errors import ReleaseError
from cutrelease.release.templates import generated_notes

NotesSource = Literal["file", "text", "generated"]


@dataclass(frozen=True, slots=True)
class NotesFile:
    path: Path
    generated: bool = False

    @property
    def source(self) -> NotesSource:
        return "generated" if self.generated else "file"

    def gh_args(self) -> list[str]:
        return ["--notes-file", str(self.path)]


@dataclass(frozen=True, slots=True)
class NotesText:
    text: str

    @property
    def source(self) -> NotesSource:
        return "text"

    def gh_args(self) -> list[str]:
        return ["--notes", self.text]


ReleaseNotes: TypeAlias = Union[NotesFile, NotesText]


def resolve_notes(
    notes: str | None,
    *,
    version: str,
    product: ProductConfig,
    cwd: Path,
    cleanup: ExitStack,
) -> Result[ReleaseNotes, ReleaseError]:
    """Turn the optional notes argument into something `gh` can publish.

    An argument naming an existing file becomes a file reference, any other
    non-empty argument is literal text, and no argument generates notes
    into a temp file. The temp file is removed when `cleanup` closes.
    """
    if notes:
        candidate = Path(notes).expanduser()
        if not candidate.is_absolute():
            candidate = cwd / candidate
        if candidate.is_file():
            return Ok(NotesFile(path=candidate))
        return Ok(NotesText(text=notes))

    try:
        path = write_temp_text(generated_notes(version, product), prefix=f"{product.name}-notes-")
    except OSError as e:
        return Err(ReleaseError(kind="io", message=f"failed to write release notes: {e}"))

    cleanup.callback(path.unlink, missing_ok=True)
    return Ok(NotesFile(path=path, generated=True))


def describe_notes(notes: ReleaseNotes, *, display: str | None = None) -> str:
    match notes:
        case NotesFile(generated=True):
            return "Using generated release notes"
        case NotesFile(path=path):
            return f"Using release notes from file: {display or path}"
        case NotesText():
            return "Using provided release notes"
