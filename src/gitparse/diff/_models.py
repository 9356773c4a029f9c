# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Diff models.

A ``DiffOutput`` is built from either the unified-diff state machine or
one of the flat formats. Its ``stats`` are always derived from the file
entries, so the aggregate can never drift from the per-file counts.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Self

from gitparse.utils import RecordSequence


class DiffStatus(StrEnum):
    """How a file changed between the two sides of a diff."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"

    @classmethod
    def from_char(cls, code: str) -> Self | None:
        """Map a name-status letter, returning None if unknown."""
        return _STATUS_CODES.get(code)  # pyright: ignore[reportReturnType]

    def to_char(self) -> str:
        """Return the name-status letter for this status."""
        return self.name[0]


_STATUS_CODES: dict[str, DiffStatus] = {s.name[0]: s for s in DiffStatus}


class DiffLineType(StrEnum):
    """Classification of a line inside a hunk."""

    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"

    def to_char(self) -> str:
        """Return the leading marker character for this line type."""
        return _LINE_MARKERS[self]


_LINE_MARKERS: dict[DiffLineType, str] = {
    DiffLineType.CONTEXT: " ",
    DiffLineType.ADDITION: "+",
    DiffLineType.DELETION: "-",
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One classified hunk line.

    Attributes:
        kind: Context, addition or deletion.
        text: Line content without its leading marker.
    """

    kind: DiffLineType
    text: str

    def __str__(self) -> str:
        return self.kind.to_char() + self.text


@dataclass(frozen=True, slots=True)
class DiffChunk:
    """A hunk: one ``@@`` range header and the lines under it.

    Attributes:
        old_start: First line of the range in the old file.
        old_count: Number of old-file lines the hunk covers.
        new_start: First line of the range in the new file.
        new_count: Number of new-file lines the hunk covers.
        lines: Classified lines in order.
        section: Text after the closing ``@@`` (usually a function heading).
    """

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: tuple[DiffLine, ...] = ()
    section: str = ""

    def additions(self) -> int:
        """Count added lines."""
        return sum(1 for line in self.lines if line.kind is DiffLineType.ADDITION)

    def deletions(self) -> int:
        """Count deleted lines."""
        return sum(1 for line in self.lines if line.kind is DiffLineType.DELETION)

    def header(self) -> str:
        """Render the ``@@`` range header."""
        suffix = f" {self.section}" if self.section else ""
        return (
            f"@@ -{self.old_start},{self.old_count} "
            f"+{self.new_start},{self.new_count} @@{suffix}"
        )


@dataclass(frozen=True, slots=True)
class FileDiff:
    """Changes to one file.

    ``old_path`` is set exactly when ``status`` is renamed or copied.

    Attributes:
        path: Path on the new side (old side for deletions).
        status: Change kind.
        old_path: Source path of a rename or copy.
        chunks: Hunks in order; empty for flat formats and binary files.
        additions: Added line count (0 for binary files).
        deletions: Removed line count (0 for binary files).
        binary: Whether the tool reported the file as binary.
    """

    path: Path
    status: DiffStatus = DiffStatus.MODIFIED
    old_path: Path | None = None
    chunks: tuple[DiffChunk, ...] = ()
    additions: int = 0
    deletions: int = 0
    binary: bool = False

    def __post_init__(self) -> None:
        has_source = self.status in (DiffStatus.RENAMED, DiffStatus.COPIED)
        if has_source != (self.old_path is not None):
            msg = f"old_path must be set exactly for renames and copies ({self.status})"
            raise ValueError(msg)

    def is_binary(self) -> bool:
        """Return True if the tool reported this file as binary."""
        return self.binary

    def __str__(self) -> str:
        if self.old_path is not None:
            return f"{self.status} {self.old_path} -> {self.path}"
        return f"{self.status} {self.path}"


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Aggregate counts across all files of a diff.

    Attributes:
        files_changed: Number of file entries.
        insertions: Sum of per-file additions.
        deletions: Sum of per-file deletions.
    """

    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    @classmethod
    def from_files(cls, files: Sequence[FileDiff]) -> Self:
        """Sum the per-file counts."""
        return cls(
            files_changed=len(files),
            insertions=sum(f.additions for f in files),
            deletions=sum(f.deletions for f in files),
        )

    def __str__(self) -> str:
        return (
            f"{self.files_changed} files changed, {self.insertions} insertions(+), "
            f"{self.deletions} deletions(-)"
        )


@dataclass(frozen=True, slots=True)
class DiffOutput(RecordSequence[FileDiff]):
    """Parsed diff: file entries in emission order plus derived totals.

    Attributes:
        files: Per-file diffs.
        stats: Totals, always equal to the sums over ``files``.
    """

    files: tuple[FileDiff, ...] = ()
    stats: DiffStats = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stats", DiffStats.from_files(self.files))

    def _records(self) -> tuple[FileDiff, ...]:
        return self.files

    def files_with_status(self, status: DiffStatus) -> Iterator[FileDiff]:
        """Yield file diffs with the given status."""
        return (f for f in self.files if f.status is status)

    def find(self, path: Path | str) -> FileDiff | None:
        """Return the entry for ``path`` (new-side path), if listed."""
        target = Path(path)
        return next((f for f in self.files if f.path == target), None)


class DiffFormat(StrEnum):
    """Output modes of the diff command; exactly one applies per invocation."""

    PATCH = "patch"
    NAME_ONLY = "name-only"
    STAT = "stat"
    NUMSTAT = "numstat"
