# ruff: noqa: TC003  # Path needed at runtime for Protocol method signatures
"""Boundary with the process that runs the tool.

Spawning processes is the facade's job. This module only defines what a
runner hands back, a protocol the facade implements, and the check that
turns a failed invocation into an error before any parser sees its output.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from gitparse.exceptions import GitCommandError

FATAL_PREFIX: Final = "fatal:"


@dataclass(frozen=True, slots=True)
class RawOutput:
    """Captured result of one tool invocation.

    Attributes:
        stdout: Standard output text.
        stderr: Standard error text.
        exit_code: Process exit status.
    """

    stdout: str
    stderr: str = ""
    exit_code: int = 0

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@runtime_checkable
class GitRunner(Protocol):
    """Runs the tool with an argument vector in a working directory.

    Example:
        >>> def current_status(runner: GitRunner, repo: Path) -> GitStatus:
        ...     args = ["status", "--porcelain", *StatusOptions().to_args()]
        ...     return parse_status(check_output(runner.run(args, repo), args))
    """

    def run(self, args: Sequence[str], cwd: Path) -> RawOutput:
        """Run the tool and capture its output.

        Args:
            args: Arguments after the executable name.
            cwd: Working directory for the invocation.

        Returns:
            The captured output, whatever the exit status.
        """
        ...


def check_output(raw: RawOutput, args: Sequence[str] = ()) -> str:
    """Return standard output, or raise if the invocation failed.

    Args:
        raw: Captured output of the invocation.
        args: The argument vector, recorded on the raised error.

    Returns:
        The captured standard output.

    Raises:
        GitCommandError: If the exit status is non-zero or standard error
            starts with ``fatal:``.
    """
    stderr = raw.stderr.strip()
    if raw.success and not stderr.startswith(FATAL_PREFIX):
        return raw.stdout

    first_line = stderr.splitlines()[0] if stderr else f"exit status {raw.exit_code}"
    command = " ".join(["git", *args])
    msg = f"{command} failed: {first_line}"
    raise GitCommandError(
        msg,
        command_args=tuple(args),
        stderr=raw.stderr,
        exit_code=raw.exit_code,
    )
