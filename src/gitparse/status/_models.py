# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Working tree status models.

This module defines the two status axes reported by short-form status
output, the per-file entry, and the ``GitStatus`` collection.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Self

from gitparse.utils import RecordSequence


class IndexStatus(StrEnum):
    """State of a path in the index (first status column)."""

    CLEAN = "clean"
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"

    @classmethod
    def from_char(cls, code: str) -> Self | None:
        """Map a status character, returning None if it is not in the table."""
        return _INDEX_CODES.get(code)  # pyright: ignore[reportReturnType]

    def to_char(self) -> str:
        """Return the status character for this state."""
        return _INDEX_CHARS[self]


class WorktreeStatus(StrEnum):
    """State of a path in the working tree (second status column)."""

    CLEAN = "clean"
    MODIFIED = "modified"
    DELETED = "deleted"
    UNTRACKED = "untracked"
    IGNORED = "ignored"

    @classmethod
    def from_char(cls, code: str) -> Self | None:
        """Map a status character, returning None if it is not in the table."""
        return _WORKTREE_CODES.get(code)  # pyright: ignore[reportReturnType]

    def to_char(self) -> str:
        """Return the status character for this state."""
        return _WORKTREE_CHARS[self]


_INDEX_CODES: dict[str, IndexStatus] = {
    " ": IndexStatus.CLEAN,
    "M": IndexStatus.MODIFIED,
    "A": IndexStatus.ADDED,
    "D": IndexStatus.DELETED,
    "R": IndexStatus.RENAMED,
    "C": IndexStatus.COPIED,
}
_INDEX_CHARS: dict[IndexStatus, str] = {v: k for k, v in _INDEX_CODES.items()}

_WORKTREE_CODES: dict[str, WorktreeStatus] = {
    " ": WorktreeStatus.CLEAN,
    "M": WorktreeStatus.MODIFIED,
    "D": WorktreeStatus.DELETED,
    "?": WorktreeStatus.UNTRACKED,
    "!": WorktreeStatus.IGNORED,
}
_WORKTREE_CHARS: dict[WorktreeStatus, str] = {v: k for k, v in _WORKTREE_CODES.items()}


@dataclass(frozen=True, slots=True)
class FileEntry:
    """One line of short-form status output.

    Attributes:
        path: Repository-relative path (destination path for renames/copies).
        index_status: State in the index.
        worktree_status: State in the working tree.
    """

    path: Path
    index_status: IndexStatus
    worktree_status: WorktreeStatus

    def to_code(self) -> str:
        """Return the two-character status code for this entry."""
        return self.index_status.to_char() + self.worktree_status.to_char()


@dataclass(frozen=True, slots=True)
class GitStatus(RecordSequence[FileEntry]):
    """Status entries in the order the tool listed them.

    Attributes:
        entries: Parsed file entries.
    """

    entries: tuple[FileEntry, ...] = ()

    def _records(self) -> tuple[FileEntry, ...]:
        return self.entries

    def is_clean(self) -> bool:
        """Return True if no file has any reported state."""
        return not self.entries

    def has_changes(self) -> bool:
        """Return True if at least one file is listed."""
        return bool(self.entries)

    def staged_files(self) -> Iterator[FileEntry]:
        """Yield entries with a change recorded in the index."""
        return (e for e in self.entries if e.index_status is not IndexStatus.CLEAN)

    def unstaged_files(self) -> Iterator[FileEntry]:
        """Yield entries with a change in the working tree."""
        return (e for e in self.entries if e.worktree_status is not WorktreeStatus.CLEAN)

    def untracked_entries(self) -> Iterator[FileEntry]:
        """Yield untracked entries."""
        return self.files_with_worktree_status(WorktreeStatus.UNTRACKED)

    def ignored_files(self) -> Iterator[FileEntry]:
        """Yield ignored entries."""
        return self.files_with_worktree_status(WorktreeStatus.IGNORED)

    def files_with_index_status(self, status: IndexStatus) -> Iterator[FileEntry]:
        """Yield entries whose index state equals ``status``."""
        return (e for e in self.entries if e.index_status is status)

    def files_with_worktree_status(self, status: WorktreeStatus) -> Iterator[FileEntry]:
        """Yield entries whose working tree state equals ``status``."""
        return (e for e in self.entries if e.worktree_status is status)
