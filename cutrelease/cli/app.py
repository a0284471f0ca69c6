from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer

from cutrelease import __version__
from cutrelease.core.config import BranchPolicy, SyncPolicy, UrlPolicy, load_project_config
from cutrelease.core.errors import ErrorCode
from cutrelease.core.result import Err
from cutrelease.output.console import ConsoleProtocol, RichConsole, Style
from cutrelease.output.errors import (
    print_config_error,
    print_release_error,
    release_error_exit_code,
)
from cutrelease.release.service import ConfirmFn, ReleaseOptions, run_release

PROG = "cutrelease"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def print_usage(console: ConsoleProtocol) -> None:
    lines = [
        f"Usage: {PROG} <version> [release-notes]",
        "",
        "Arguments:",
        "  version         Version tag (e.g., v1.0.0, v1.2.3-beta)",
        "  release-notes   Optional release notes file or text",
        "",
        "Examples:",
        f"  {PROG} v1.0.1",
        f"  {PROG} v1.2.0 'Bug fixes and new features'",
        f"  {PROG} v1.3.0 CHANGELOG.md",
        "",
        "This will:",
        "  1. Validate the version format",
        "  2. Check if the tag already exists",
        "  3. Update version in README changelog",
        "  4. Create and push the git tag",
        "  5. Create a GitHub release",
    ]
    for line in lines:
        console.print(line)


def _interactive() -> bool:
    return sys.stdin.isatty()


def _confirm(question: str) -> bool:
    return typer.confirm(question, default=False)


def _exit(code: ErrorCode | int) -> NoReturn:
    raise typer.Exit(code=int(code))


@app.command()
def release(
    version: str | None = typer.Argument(
        None,
        metavar="VERSION",
        help="Version tag to release, e.g. v1.0.0 or v1.2.3-beta.",
        show_default=False,
    ),
    notes: str | None = typer.Argument(
        None,
        metavar="[RELEASE-NOTES]",
        help="Release notes file, or literal notes text. Generated when omitted.",
        show_default=False,
    ),
    branch_policy: BranchPolicy | None = typer.Option(
        None,
        "--branch-policy",
        help="When not on the main branch: prompt, proceed or abort.",
        show_default=False,
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Release from any branch without asking."
    ),
    sync_policy: SyncPolicy | None = typer.Option(
        None,
        "--sync-policy",
        help="Whether fetch/pull failures stop the release.",
        show_default=False,
    ),
    url_policy: UrlPolicy | None = typer.Option(
        None,
        "--url-policy",
        help="Whether a failed release URL lookup fails the run.",
        show_default=False,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Configuration file (default: cutrelease.toml or [tool.cutrelease]).",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Run all checks, print what would change."
    ),
    version_info: bool = typer.Option(
        False, "--version-info", help="Show cutrelease version and exit."
    ),
) -> None:
    """Create a version tag, push it, and publish a GitHub release."""
    if version_info:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    console = RichConsole()
    workspace_root = Path.cwd()

    config_result = load_project_config(workspace_root, config_path)
    if isinstance(config_result, Err):
        print_config_error(config_result.error, console)
        _exit(ErrorCode.CONFIG_ERROR)
    config = config_result.value

    options = ReleaseOptions.from_config(
        config,
        branch_policy=BranchPolicy.PROCEED if yes else branch_policy,
        sync_policy=sync_policy,
        url_policy=url_policy,
        dry_run=dry_run,
    )
    confirm: ConfirmFn | None = _confirm if _interactive() else None

    if dry_run:
        console.print("dry run: no tag, push, file change or release will be made", Style.DIM)

    result = run_release(
        version=version,
        notes=notes,
        workspace_root=workspace_root,
        config=config,
        options=options,
        console=console,
        confirm=confirm,
    )
    if isinstance(result, Err):
        error = result.error
        print_release_error(error, console)
        if error.kind == "usage":
            print_usage(console)
        _exit(release_error_exit_code(error))


def main() -> None:
    app(prog_name=PROG)
