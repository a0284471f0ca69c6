"""README changelog update.

A new ``### <version>`` section with one placeholder bullet is inserted
right after every line that starts with the changelog marker. Documents
without the marker are left alone. Everything outside the inserted lines
is preserved byte for byte, including line endings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cutrelease.core.config import ChangelogConfig, DuplicatePolicy
from cutrelease.core.result import Err, Ok, Result
from cutrelease.output.console import ConsoleProtocol, Style
from cutrelease.platform.files import atomic_write_text
from cutrelease.release.errors import ReleaseError


@dataclass(frozen=True, slots=True)
class ChangelogUpdate:
    path: Path
    updated: bool
    reason: str | None = None


def _line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    return ""


def _split_lines(document: str) -> list[str]:
    """Split after each ``\\n`` only, keeping line endings.

    Unlike `str.splitlines`, a lone ``\\r``, form feed or Unicode line
    separator stays inside its line.
    """
    pieces = document.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def has_version_section(document: str, version: str) -> bool:
    header = f"### {version}"
    return any(line.rstrip(" \t\r\n") == header for line in _split_lines(document))


def insert_changelog_entry(
    document: str,
    *,
    version: str,
    marker: str,
    placeholder: str,
) -> str | None:
    """Return the document with a new version section, or None if no marker line."""
    lines = _split_lines(document)
    out: list[str] = []
    inserted = False

    for line in lines:
        if not line.startswith(marker):
            out.append(line)
            continue

        eol = _line_ending(line) or "\n"
        if not _line_ending(line):
            # marker on the last line without a trailing newline
            line += eol
        out.append(line)
        out.extend([eol, f"### {version}{eol}", f"{placeholder}{eol}", eol])
        inserted = True

    if not inserted:
        return None
    return "".join(out)


def update_changelog(
    *,
    root: Path,
    version: str,
    config: ChangelogConfig,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[ChangelogUpdate, ReleaseError]:
    """Insert the version section into the configured README, if applicable."""
    path = root / config.path
    if not path.is_file():
        return Ok(ChangelogUpdate(path=path, updated=False, reason=f"{config.path} not found"))

    console.info(f"Updating {config.path} changelog...")
    try:
        document = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ReleaseError(
                kind="io",
                message=f"failed to read {config.path}: {e}",
                hint=str(path),
            )
        )

    if config.on_duplicate == DuplicatePolicy.SKIP and has_version_section(document, version):
        return Ok(
            ChangelogUpdate(path=path, updated=False, reason=f"{version} already in changelog")
        )

    updated = insert_changelog_entry(
        document,
        version=version,
        marker=config.marker,
        placeholder=config.placeholder,
    )
    if updated is None:
        return Ok(ChangelogUpdate(path=path, updated=False, reason="changelog marker not found"))

    if dry_run:
        console.print(f"would insert '### {version}' into {config.path}", Style.DIM)
        return Ok(ChangelogUpdate(path=path, updated=True))

    try:
        atomic_write_text(path, updated)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io",
                message=f"failed to write {config.path}: {e}",
                hint=str(path),
            )
        )

    console.info(f"Updated changelog in {config.path}")
    return Ok(ChangelogUpdate(path=path, updated=True))
