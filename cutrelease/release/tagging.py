from __future__ import annotations

from dataclasses import dataclass

from cutrelease.core.config import GitConfig, ProductConfig
from cutrelease.core.result import Err, Ok, Result
from cutrelease.git.repository import Repository
from cutrelease.output.console import ConsoleProtocol
from cutrelease.release.errors import ReleaseError
from cutrelease.release.templates import tag_message


@dataclass(frozen=True, slots=True)
class PushedTag:
    tag: str
    remote: str


def create_and_push_tag(
    *,
    repo: Repository,
    version: str,
    git: GitConfig,
    product: ProductConfig,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[PushedTag, ReleaseError]:
    """Create the annotated tag and push it.

    The push goes to the primary remote, with one retry against the
    fallback remote. There are no further retries.
    """
    console.info(f"Creating git tag: {version}")
    console.command(["git", "tag", "-a", version, "-m", "<release message>"])
    if not dry_run:
        created = repo.create_annotated_tag(version, tag_message(version, product)).map_err(
            lambda e: ReleaseError(
                kind="publish", message=f"failed to create tag {version}", hint=e.message
            )
        )
        if isinstance(created, Err):
            return created

    remotes = [git.remote]
    if git.fallback_remote and git.fallback_remote != git.remote:
        remotes.append(git.fallback_remote)

    console.info(f"Pushing tag to {git.remote}...")
    failures: list[str] = []
    for index, remote in enumerate(remotes):
        if index > 0:
            console.warning(f"Failed to push to {remotes[index - 1]}, trying {remote}...")
        console.command(["git", "push", remote, version])
        if dry_run:
            return Ok(PushedTag(tag=version, remote=remote))

        pushed = repo.push_tag(remote, version)
        if isinstance(pushed, Ok):
            return Ok(PushedTag(tag=version, remote=remote))
        failures.append(f"{remote}: {pushed.error.message}")

    return Err(
        ReleaseError(
            kind="publish",
            message="Failed to push tag to any remote",
            hint=f"the local tag {version} was kept; push it manually or delete it with "
            f"'git tag -d {version}'",
            details=tuple(failures),
        )
    )
