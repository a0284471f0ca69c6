"""Subprocess execution for git and gh.

`run` captures output and reports non-zero exits, timeouts and missing
executables as a `ProcessError` value. Child processes get an environment
that keeps git and gh from prompting on the terminal: a release run must
either finish or fail, never sit waiting for credentials.

Usage:
    match run(["git", "tag", "-l"], cwd=Path(".")):
        case Ok(stdout):
            tags = stdout.splitlines()
        case Err(error):
            print(error, error.detail())
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cutrelease.core.result import Err, Ok, Result

__all__ = ["NON_INTERACTIVE_ENV", "ProcessError", "non_interactive_env", "run"]

NON_INTERACTIVE_ENV: Mapping[str, str] = {
    "GIT_TERMINAL_PROMPT": "0",
    "GH_PROMPT_DISABLED": "1",
}


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be run or exited non-zero.

    Attributes:
        command: argv as executed.
        returncode: Exit status; -1 when the process never started or timed out.
        stdout: Captured standard output.
        stderr: Captured standard error, or our own explanation for -1.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        shown = " ".join(self.command[:3])
        if len(self.command) > 3:
            shown += " ..."
        return f"{shown} failed (exit {self.returncode})"

    def detail(self) -> str | None:
        """Best single-line explanation of the failure, if any."""
        text = self.stderr.strip() or self.stdout.strip()
        return text or None


def non_interactive_env(env: Mapping[str, str] | None = None) -> dict[str, str]:
    """`env` (default: the current environment) with terminal prompts disabled."""
    merged = dict(os.environ if env is None else env)
    merged.update(NON_INTERACTIVE_ENV)
    return merged


def _failure(
    cmd: list[str], returncode: int, stdout: str, stderr: str
) -> Err[ProcessError]:
    return Err(
        ProcessError(command=tuple(cmd), returncode=returncode, stdout=stdout, stderr=stderr)
    )


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its stdout.

    Args:
        cmd: Command and arguments.
        cwd: Working directory.
        env: Base environment (current environment if None); prompt
            suppression is always added on top.
        timeout: Seconds before the process is killed (None: no limit).

    Returns:
        Ok(stdout) on exit status 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=non_interactive_env(env),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        partial = e.stdout if isinstance(e.stdout, str) else ""
        return _failure(cmd, -1, partial, f"Command timed out after {timeout}s")
    except OSError as e:
        return _failure(cmd, -1, "", str(e))

    if proc.returncode != 0:
        return _failure(cmd, proc.returncode, proc.stdout, proc.stderr)
    return Ok(proc.stdout)
