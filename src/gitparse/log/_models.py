# ruff: noqa: TC003  # Path and datetime needed at runtime for dataclass fields
"""Commit history models."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Self

from gitparse.hash import Hash
from gitparse.utils import RecordSequence


@dataclass(frozen=True, slots=True)
class Author:
    """An identity line (author, committer or tagger).

    Attributes:
        name: Display name.
        email: Email address without angle brackets.
        timestamp: When the identity acted, as an aware UTC datetime.
    """

    name: str
    email: str
    timestamp: datetime

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True, slots=True)
class CommitMessage:
    """A commit message split at its first blank line.

    Attributes:
        subject: Text before the first blank line.
        body: Text after the first blank line, or None when there is none.
    """

    subject: str
    body: str | None = None

    @classmethod
    def from_raw(cls, raw: str) -> Self:
        """Split a raw message, dropping the trailing newlines the tool appends."""
        text = raw.rstrip("\n")
        subject, _, body = text.partition("\n\n")
        return cls(subject=subject, body=body or None)

    def full(self) -> str:
        """Return the message with subject and body rejoined."""
        if self.body is None:
            return self.subject
        return f"{self.subject}\n\n{self.body}"

    def is_empty(self) -> bool:
        """Return True if the subject is empty."""
        return not self.subject

    def __str__(self) -> str:
        return self.full()


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit decoded from one log record.

    Attributes:
        hash: Object name of the commit.
        author: Author identity and time.
        committer: Committer identity and time.
        message: Subject and optional body.
        timestamp: Author time, used for date filtering.
        parents: Parent hashes, first parent first; empty for a root commit.
    """

    hash: Hash
    author: Author
    committer: Author
    message: CommitMessage
    timestamp: datetime
    parents: tuple[Hash, ...] = ()

    def is_merge(self) -> bool:
        """Return True if the commit has more than one parent."""
        return len(self.parents) > 1

    def is_root(self) -> bool:
        """Return True if the commit has no parents."""
        return not self.parents

    def main_parent(self) -> Hash | None:
        """Return the first parent, or None for a root commit."""
        return self.parents[0] if self.parents else None

    def is_authored_by(self, author: str) -> bool:
        """Return True if ``author`` occurs in the author name or email."""
        return author in self.author.name or author in self.author.email

    def message_contains(self, text: str) -> bool:
        """Case-insensitive substring search over subject and body."""
        needle = text.lower()
        if needle in self.message.subject.lower():
            return True
        return self.message.body is not None and needle in self.message.body.lower()

    def __str__(self) -> str:
        when = self.timestamp.strftime("%Y-%m-%d %H:%M:%S UTC")
        return f"{self.hash.short()} {self.message.subject} by {self.author.name} at {when}"


@dataclass(frozen=True, slots=True)
class CommitLog(RecordSequence[Commit]):
    """Commits in the order the tool emitted them.

    Attributes:
        commits: Parsed commits.
    """

    commits: tuple[Commit, ...] = ()

    def _records(self) -> tuple[Commit, ...]:
        return self.commits

    def by_author(self, author: str) -> Iterator[Commit]:
        """Yield commits whose author name or email contains ``author``."""
        return (c for c in self.commits if c.is_authored_by(author))

    def since(self, date: datetime) -> Iterator[Commit]:
        """Yield commits authored at or after ``date``."""
        return (c for c in self.commits if c.timestamp >= date)

    def until(self, date: datetime) -> Iterator[Commit]:
        """Yield commits authored at or before ``date``."""
        return (c for c in self.commits if c.timestamp <= date)

    def with_message_containing(self, text: str) -> Iterator[Commit]:
        """Yield commits whose message contains ``text`` (case-insensitive)."""
        return (c for c in self.commits if c.message_contains(text))

    def merges_only(self) -> Iterator[Commit]:
        """Yield merge commits."""
        return (c for c in self.commits if c.is_merge())

    def no_merges(self) -> Iterator[Commit]:
        """Yield commits with at most one parent."""
        return (c for c in self.commits if not c.is_merge())

    def find_by_hash(self, hash_: Hash) -> Commit | None:
        """Return the commit with exactly this hash, if listed."""
        return next((c for c in self.commits if c.hash == hash_), None)

    def find_by_short_hash(self, short: str) -> Commit | None:
        """Return the first commit whose seven-character short hash is ``short``."""
        return next((c for c in self.commits if c.hash.short() == short), None)


@dataclass(frozen=True, slots=True)
class CommitDetails:
    """A commit together with its change statistics.

    Attributes:
        commit: The commit itself.
        files_changed: Paths touched by the commit, in listing order.
        insertions: Total added lines.
        deletions: Total removed lines.
    """

    commit: Commit
    files_changed: tuple[Path, ...]
    insertions: int
    deletions: int

    def total_changes(self) -> int:
        """Return insertions plus deletions."""
        return self.insertions + self.deletions

    def has_changes(self) -> bool:
        """Return True if any file was touched."""
        return bool(self.files_changed)
