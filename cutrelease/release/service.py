"""Release orchestration.

`run_release` is a strict, fail-fast sequence of checks and actions. The
first failing step returns an `Err(ReleaseError)` and nothing after it
runs. Steps that touch the remote (push, release) only start once every
local precondition holds.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path

from cutrelease.core.config import BranchPolicy, Config, SyncPolicy, UrlPolicy
from cutrelease.core.result import Err, Ok, Result
from cutrelease.git.repository import GitError, Repository
from cutrelease.output.console import ConsoleProtocol, Style
from cutrelease.release import gh
from cutrelease.release.changelog import update_changelog
from cutrelease.release.errors import ReleaseError
from cutrelease.release.notes import NotesSource, describe_notes, resolve_notes
from cutrelease.release.report import print_summary
from cutrelease.release.semver import is_valid_version
from cutrelease.release.tagging import create_and_push_tag
from cutrelease.release.templates import release_title

ConfirmFn = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    branch_policy: BranchPolicy = BranchPolicy.PROMPT
    sync_policy: SyncPolicy = SyncPolicy.STRICT
    url_policy: UrlPolicy = UrlPolicy.BEST_EFFORT
    dry_run: bool = False

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        branch_policy: BranchPolicy | None = None,
        sync_policy: SyncPolicy | None = None,
        url_policy: UrlPolicy | None = None,
        dry_run: bool = False,
    ) -> ReleaseOptions:
        """Config policies, overridden by whatever the caller passes."""
        return cls(
            branch_policy=branch_policy or config.policy.branch,
            sync_policy=sync_policy or config.policy.sync,
            url_policy=url_policy or config.policy.url,
            dry_run=dry_run,
        )


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    tag: str
    remote: str
    changelog_updated: bool
    notes_source: NotesSource
    release_url: str | None
    dry_run: bool = False


def _env_error(message: str, error: GitError) -> ReleaseError:
    return ReleaseError(kind="environment", message=message, hint=error.message)


def check_arguments(version: str | None) -> Result[str, ReleaseError]:
    if version is None or not version.strip():
        return Err(ReleaseError(kind="usage", message="Version is required"))
    return Ok(version)


def check_version(version: str) -> Result[None, ReleaseError]:
    if not is_valid_version(version):
        return Err(
            ReleaseError(
                kind="validation",
                message="Invalid version format. Use semantic versioning "
                "(e.g., v1.0.0, v1.2.3-beta)",
                hint=f"got: {version}",
            )
        )
    return Ok(None)


def check_repository(repo: Repository) -> Result[None, ReleaseError]:
    if not repo.is_work_tree():
        return Err(ReleaseError(kind="environment", message="Not in a git repository"))
    return Ok(None)


def check_branch(
    *,
    repo: Repository,
    main_branch: str,
    policy: BranchPolicy,
    console: ConsoleProtocol,
    confirm: ConfirmFn | None,
) -> Result[str | None, ReleaseError]:
    """Verify the current branch, applying the branch policy on mismatch.

    Returns the current branch (None on a detached HEAD).
    """
    result = repo.current_branch().map_err(
        lambda e: _env_error("failed to read the current branch", e)
    )
    if isinstance(result, Err):
        return result

    branch = result.value
    if branch == main_branch:
        return Ok(branch)

    shown = branch or "detached HEAD"
    console.warning(f"You're not on the {main_branch} branch (currently on: {shown})")

    match policy:
        case BranchPolicy.PROCEED:
            return Ok(branch)
        case BranchPolicy.ABORT:
            return Err(
                ReleaseError(
                    kind="aborted",
                    message="Aborted",
                    hint=f"releases must be cut from {main_branch} (branch policy: abort)",
                )
            )
        case BranchPolicy.PROMPT:
            if confirm is None:
                return Err(
                    ReleaseError(
                        kind="aborted",
                        message="Aborted",
                        hint="no terminal to confirm on; pass --yes or "
                        "--branch-policy proceed to release from this branch",
                    )
                )
            if not confirm("Continue anyway?"):
                return Err(ReleaseError(kind="aborted", message="Aborted"))
            return Ok(branch)


def check_tag_absent(repo: Repository, version: str) -> Result[None, ReleaseError]:
    result = repo.tag_exists(version).map_err(lambda e: _env_error("failed to list tags", e))
    if isinstance(result, Err):
        return result
    if result.value:
        return Err(ReleaseError(kind="conflict", message=f"Tag {version} already exists"))
    return Ok(None)


def check_clean(repo: Repository) -> Result[None, ReleaseError]:
    result = repo.status().map_err(lambda e: _env_error("failed to read git status", e))
    if isinstance(result, Err):
        return result

    status = result.value
    if status.is_clean:
        return Ok(None)
    return Err(
        ReleaseError(
            kind="dirty_state",
            message="You have uncommitted changes. Please commit or stash them first.",
            details=tuple(entry.short() for entry in status.entries),
        )
    )


def sync_with_remote(
    *,
    repo: Repository,
    remote: str,
    branch: str | None,
    policy: SyncPolicy,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[None, ReleaseError]:
    """Fetch and pull the current branch from `remote`, if configured."""
    console.info("Updating local repository...")

    has_remote = repo.has_remote(remote).map_err(
        lambda e: _env_error("failed to list remotes", e)
    )
    if isinstance(has_remote, Err):
        return has_remote
    if not has_remote.value:
        console.warning(f"No '{remote}' remote found, skipping pull")
        return Ok(None)

    def _fail(message: str, hint: str | None) -> Result[None, ReleaseError]:
        if policy == SyncPolicy.BEST_EFFORT:
            console.warning(f"{message}; continuing (sync policy: best-effort)")
            return Ok(None)
        return Err(ReleaseError(kind="sync", message=message, hint=hint))

    if branch is None:
        return _fail("Cannot pull on a detached HEAD", "check out a branch first")

    console.command(["git", "fetch", remote])
    console.command(["git", "pull", remote, branch])
    if dry_run:
        return Ok(None)

    fetched = repo.fetch(remote)
    if isinstance(fetched, Err):
        return _fail(f"Failed to fetch {remote}", fetched.error.message)

    pulled = repo.pull(remote, branch)
    if isinstance(pulled, Err):
        return _fail(f"Failed to pull {remote}/{branch}", pulled.error.message)

    return Ok(None)


def lookup_release_url(
    *,
    workspace_root: Path,
    version: str,
    policy: UrlPolicy,
) -> Result[str | None, ReleaseError]:
    result = gh.release_url(workspace_root=workspace_root, tag=version)
    if isinstance(result, Ok):
        return Ok(result.value)
    if policy == UrlPolicy.STRICT:
        return result
    return Ok(None)


def run_release(
    *,
    version: str | None,
    notes: str | None,
    workspace_root: Path,
    config: Config,
    options: ReleaseOptions,
    console: ConsoleProtocol,
    confirm: ConfirmFn | None,
) -> Result[ReleaseOutcome, ReleaseError]:
    """Validate, tag, push and publish a release.

    Args:
        version: Tag to release, e.g. "v1.2.0"
        notes: Path to a notes file, literal notes, or None to generate them
        workspace_root: Directory inside the git working tree
        config: Project configuration
        options: Effective policies for this run
        console: Output sink
        confirm: Interactive yes/no prompt, or None when there is no terminal

    Returns:
        Ok(ReleaseOutcome) once the release is published
        Err(ReleaseError) for the first failing step
    """
    checked = check_arguments(version)
    if isinstance(checked, Err):
        return checked
    tag = checked.value

    valid = check_version(tag)
    if isinstance(valid, Err):
        return valid

    tooling = gh.ensure_gh_available()
    if isinstance(tooling, Err):
        return tooling

    repo = Repository(workspace_root)
    in_repo = check_repository(repo)
    if isinstance(in_repo, Err):
        return in_repo

    branch = check_branch(
        repo=repo,
        main_branch=config.git.main_branch,
        policy=options.branch_policy,
        console=console,
        confirm=confirm,
    )
    if isinstance(branch, Err):
        return branch

    absent = check_tag_absent(repo, tag)
    if isinstance(absent, Err):
        return absent

    clean = check_clean(repo)
    if isinstance(clean, Err):
        return clean

    synced = sync_with_remote(
        repo=repo,
        remote=config.git.remote,
        branch=branch.value,
        policy=options.sync_policy,
        console=console,
        dry_run=options.dry_run,
    )
    if isinstance(synced, Err):
        return synced

    console.header(f"Creating release {tag}...")

    changelog = update_changelog(
        root=workspace_root,
        version=tag,
        config=config.changelog,
        console=console,
        dry_run=options.dry_run,
    )
    if isinstance(changelog, Err):
        return changelog
    if not changelog.value.updated and changelog.value.reason:
        console.print(f"changelog unchanged: {changelog.value.reason}", Style.DIM)

    pushed = create_and_push_tag(
        repo=repo,
        version=tag,
        git=config.git,
        product=config.product,
        console=console,
        dry_run=options.dry_run,
    )
    if isinstance(pushed, Err):
        return pushed

    with ExitStack() as cleanup:
        resolved = resolve_notes(
            notes,
            version=tag,
            product=config.product,
            cwd=workspace_root,
            cleanup=cleanup,
        )
        if isinstance(resolved, Err):
            return resolved
        release_notes = resolved.value
        console.info(describe_notes(release_notes, display=notes))

        console.info("Creating GitHub release...")
        title = release_title(tag, config.product)
        cmd = gh.release_create_cmd(tag=tag, title=title, notes=release_notes)
        console.command(cmd)
        if not options.dry_run:
            created = gh.create_release(
                workspace_root=workspace_root,
                tag=tag,
                title=title,
                notes=release_notes,
            )
            if isinstance(created, Err):
                return created

    url: str | None = None
    if not options.dry_run:
        looked_up = lookup_release_url(
            workspace_root=workspace_root,
            version=tag,
            policy=options.url_policy,
        )
        if isinstance(looked_up, Err):
            return looked_up
        url = looked_up.value

    if options.dry_run:
        console.success(f"Dry run complete: release {tag} was not created")
    else:
        print_summary(version=tag, product=config.product, url=url, console=console)

    return Ok(
        ReleaseOutcome(
            tag=tag,
            remote=pushed.value.remote,
            changelog_updated=changelog.value.updated,
            notes_source=release_notes.source,
            release_url=url,
            dry_run=options.dry_run,
        )
    )
