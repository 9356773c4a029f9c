"""Options for stash push and stash apply/pop."""

from dataclasses import dataclass, replace
from pathlib import Path  # noqa: TC003
from typing import Self

from gitparse.exceptions import OptionsError
from gitparse.options._common import path_args, to_paths


@dataclass(frozen=True, slots=True)
class StashOptions:
    """Arguments appended after ``stash push``.

    Order: ``--all`` or ``--include-untracked``, ``--keep-index``,
    ``--patch``, ``--staged``, ``-m``, ``--`` and paths. ``--all`` already
    covers untracked files, so only one of the two is emitted.
    """

    include_untracked: bool = False
    include_all: bool = False
    keep_index: bool = False
    patch: bool = False
    staged_only: bool = False
    message: str | None = None
    paths: tuple[Path, ...] = ()

    def with_untracked(self) -> Self:
        return replace(self, include_untracked=True)

    def with_all(self) -> Self:
        return replace(self, include_all=True, include_untracked=True)

    def with_keep_index(self) -> Self:
        return replace(self, keep_index=True)

    def with_patch(self) -> Self:
        return replace(self, patch=True)

    def with_staged_only(self) -> Self:
        return replace(self, staged_only=True)

    def with_message(self, message: str) -> Self:
        return replace(self, message=message)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.include_all:
            args.append("--all")
        elif self.include_untracked:
            args.append("--include-untracked")
        if self.keep_index:
            args.append("--keep-index")
        if self.patch:
            args.append("--patch")
        if self.staged_only:
            args.append("--staged")
        if self.message is not None:
            args.extend(["-m", self.message])
        args.extend(path_args(self.paths))
        return args


@dataclass(frozen=True, slots=True)
class StashApplyOptions:
    """Arguments appended after ``stash apply`` or ``stash pop``.

    Order: ``--index``, ``--quiet``, then the ``stash@{N}`` selector. The
    index must come from a listing taken after the last stash mutation.
    """

    restore_index: bool = False
    quiet: bool = False
    stash_index: int | None = None

    def __post_init__(self) -> None:
        if self.stash_index is not None and self.stash_index < 0:
            msg = f"stash_index must be non-negative, got {self.stash_index}"
            raise OptionsError(msg, option="stash_index")

    def with_index(self) -> Self:
        """Also restore the staged state of the stash."""
        return replace(self, restore_index=True)

    def with_quiet(self) -> Self:
        return replace(self, quiet=True)

    def with_stash(self, index: int) -> Self:
        return replace(self, stash_index=index)

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.restore_index:
            args.append("--index")
        if self.quiet:
            args.append("--quiet")
        if self.stash_index is not None:
            args.append(f"stash@{{{self.stash_index}}}")
        return args
