"""Options for restore, rm and mv."""

from dataclasses import dataclass, replace
from pathlib import Path  # noqa: TC003
from typing import Self

from gitparse.options._common import path_args, to_paths


@dataclass(frozen=True, slots=True)
class RestoreOptions:
    """Arguments appended after ``restore``.

    Order: ``--source``, ``--staged``, ``--worktree``, ``--`` and paths.
    With neither ``staged`` nor ``worktree`` set, the working tree is
    restored, matching the tool's own default.
    """

    source: str | None = None
    staged: bool = False
    worktree: bool = False
    paths: tuple[Path, ...] = ()

    def with_source(self, source: str) -> Self:
        return replace(self, source=source)

    def with_staged(self) -> Self:
        return replace(self, staged=True)

    def with_worktree(self) -> Self:
        return replace(self, worktree=True)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.source is not None:
            args.extend(["--source", self.source])
        if self.staged:
            args.append("--staged")
        if self.worktree or not self.staged:
            args.append("--worktree")
        args.extend(path_args(self.paths))
        return args


@dataclass(frozen=True, slots=True)
class RemoveOptions:
    """Arguments appended after ``rm``.

    Order: ``--force``, ``-r``, ``--cached``, ``--ignore-unmatch``, ``--`` and paths.
    """

    force: bool = False
    recursive: bool = False
    cached: bool = False
    ignore_unmatch: bool = False
    paths: tuple[Path, ...] = ()

    def with_force(self) -> Self:
        return replace(self, force=True)

    def with_recursive(self) -> Self:
        return replace(self, recursive=True)

    def with_cached(self) -> Self:
        return replace(self, cached=True)

    def with_ignore_unmatch(self) -> Self:
        return replace(self, ignore_unmatch=True)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.force:
            args.append("--force")
        if self.recursive:
            args.append("-r")
        if self.cached:
            args.append("--cached")
        if self.ignore_unmatch:
            args.append("--ignore-unmatch")
        args.extend(path_args(self.paths))
        return args


@dataclass(frozen=True, slots=True)
class MoveOptions:
    """Arguments appended after ``mv``: ``-f``, ``-v``, ``-n``, source, destination."""

    force: bool = False
    verbose: bool = False
    dry_run: bool = False
    source: Path | None = None
    destination: Path | None = None

    def with_force(self) -> Self:
        return replace(self, force=True)

    def with_verbose(self) -> Self:
        return replace(self, verbose=True)

    def with_dry_run(self) -> Self:
        return replace(self, dry_run=True)

    def with_move(self, source: Path | str, destination: Path | str) -> Self:
        source_path, destination_path = to_paths((source, destination))
        return replace(self, source=source_path, destination=destination_path)

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.force:
            args.append("-f")
        if self.verbose:
            args.append("-v")
        if self.dry_run:
            args.append("-n")
        if self.source is not None:
            args.append(str(self.source))
        if self.destination is not None:
            args.append(str(self.destination))
        return args
