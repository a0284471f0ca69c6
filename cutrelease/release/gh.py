from __future__ import annotations

import json
import shutil
from pathlib import Path

from cutrelease.core.result import Err, Ok, Result
from cutrelease.core.structured import as_str_dict, get_str
from cutrelease.platform.process import run as run_process
from cutrelease.release.errors import ReleaseError
from cutrelease.release.notes import ReleaseNotes

GH_TIMEOUT_SECONDS = 60.0
GH_INSTALL_HINT = "Install it from: https://github.com/cli/cli#installation"


def ensure_gh_available() -> Result[None, ReleaseError]:
    if shutil.which("gh") is None:
        return Err(
            ReleaseError(
                kind="dependency",
                message="GitHub CLI (gh) is required but not installed.",
                hint=GH_INSTALL_HINT,
            )
        )
    return Ok(None)


def release_create_cmd(*, tag: str, title: str, notes: ReleaseNotes) -> list[str]:
    return ["gh", "release", "create", tag, "--title", title, *notes.gh_args()]


def create_release(
    *,
    workspace_root: Path,
    tag: str,
    title: str,
    notes: ReleaseNotes,
) -> Result[str, ReleaseError]:
    """Create a GitHub release for an already pushed tag.

    Returns gh's stdout (normally the release URL).
    """
    cmd = release_create_cmd(tag=tag, title=title, notes=notes)
    return (
        run_process(cmd, cwd=workspace_root, timeout=GH_TIMEOUT_SECONDS)
        .map(str.strip)
        .map_err(
            lambda e: ReleaseError(
                kind="publish",
                message=f"gh release create failed (exit {e.returncode})",
                hint=e.detail(),
            )
        )
    )


def release_url(*, workspace_root: Path, tag: str) -> Result[str, ReleaseError]:
    result = run_process(
        ["gh", "release", "view", tag, "--json", "url"],
        cwd=workspace_root,
        timeout=GH_TIMEOUT_SECONDS,
    )
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="publish",
                message=f"failed to look up release URL: {tag}",
                hint=result.error.detail(),
            )
        )

    try:
        obj: object = json.loads(result.value)
    except json.JSONDecodeError as e:
        return Err(
            ReleaseError(
                kind="publish",
                message=f"invalid JSON from gh release view: {e}",
            )
        )

    data = as_str_dict(obj)
    url = get_str(data, "url") if data is not None else None
    if url is None:
        return Err(ReleaseError(kind="publish", message="missing url in gh release view output"))
    return Ok(url)
