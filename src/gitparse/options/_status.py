"""Options for the status command."""

from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path  # noqa: TC003
from typing import Self

from gitparse.options._common import path_args, to_paths


class UntrackedMode(StrEnum):
    """How untracked files are listed."""

    ALL = "all"
    NORMAL = "normal"
    NO = "no"


@dataclass(frozen=True, slots=True)
class StatusOptions:
    """Arguments appended after ``status --porcelain``.

    Order: ``--untracked-files=<mode>``, ``--ignored``, ``--`` and paths.
    """

    untracked_files: UntrackedMode | None = None
    ignored: bool = False
    paths: tuple[Path, ...] = ()

    def with_untracked_files(self, mode: UntrackedMode) -> Self:
        return replace(self, untracked_files=mode)

    def with_ignored(self) -> Self:
        return replace(self, ignored=True)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.untracked_files is not None:
            args.append(f"--untracked-files={self.untracked_files}")
        if self.ignored:
            args.append("--ignored")
        args.extend(path_args(self.paths))
        return args
