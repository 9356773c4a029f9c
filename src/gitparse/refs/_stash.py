"""Stash listing models and parser.

Stash indices are positions in the stash stack at the moment of listing.
Any apply, pop or drop shifts the entries above the removed one, so an
index is only meaningful for the listing it came from.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.utils import RecordSequence, get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# selector, commit, commit time, subject
STASH_FORMAT: Final = "%gd%x1f%H%x1f%ct%x1f%gs"
STASH_LIST_ARGS: Final = ("stash", "list", f"--format={STASH_FORMAT}")
_STASH_FIELD_COUNT: Final = 4
_FIELD_SEPARATOR: Final = "\x1f"

_SELECTOR: Final = re.compile(r"^stash@\{(\d+)\}$")
_BRANCH_PREFIXES: Final = ("WIP on ", "On ")


@dataclass(frozen=True, slots=True)
class Stash:
    """One entry of the stash stack.

    Attributes:
        index: Position in the stack at listing time (0 is most recent).
        message: Stash description without its ``WIP on <branch>:`` prefix.
        branch: Branch the stash was made on; empty for custom messages
            that do not name one.
        hash: Stash commit, when listed with :data:`STASH_FORMAT`.
        timestamp: Stash commit time, when listed with :data:`STASH_FORMAT`.
    """

    index: int
    message: str
    branch: str = ""
    hash: Hash | None = None
    timestamp: datetime | None = None

    def selector(self) -> str:
        """Return the ``stash@{N}`` revision naming this entry."""
        return f"stash@{{{self.index}}}"

    def __str__(self) -> str:
        return f"{self.selector()}: {self.message}"


@dataclass(frozen=True, slots=True)
class StashList(RecordSequence[Stash]):
    """Stashes in listing order, most recent first."""

    stashes: tuple[Stash, ...] = ()

    def _records(self) -> tuple[Stash, ...]:
        return self.stashes

    def latest(self) -> Stash | None:
        return self.first()

    def get(self, index: int) -> Stash | None:
        """Return the entry at stack position ``index``, if listed."""
        return next((s for s in self.stashes if s.index == index), None)

    def find_containing(self, text: str) -> Iterator[Stash]:
        return (s for s in self.stashes if text in s.message)

    def for_branch(self, branch: str) -> Iterator[Stash]:
        return (s for s in self.stashes if s.branch == branch)


def _split_subject(subject: str) -> tuple[str, str]:
    """Split ``WIP on <branch>: <text>`` into (branch, text)."""
    head, sep, rest = subject.partition(":")
    if sep:
        for prefix in _BRANCH_PREFIXES:
            if head.startswith(prefix):
                return head[len(prefix) :], rest.strip()
    return "", subject.strip()


def _parse_index(selector: str, line_number: int, line: str) -> int:
    match = _SELECTOR.match(selector)
    if match is None:
        msg = f"Expected a stash@{{N}} selector, found {selector!r}"
        raise MalformedRecordError(msg, line_number=line_number, line=line)
    return int(match.group(1))


def _parse_line(line: str, line_number: int) -> Stash:
    if _FIELD_SEPARATOR not in line:
        selector, sep, subject = line.partition(": ")
        if not sep:
            msg = "Expected 'stash@{N}: message'"
            raise MalformedRecordError(msg, line_number=line_number, line=line)
        branch, message = _split_subject(subject)
        return Stash(
            index=_parse_index(selector, line_number, line),
            message=message,
            branch=branch,
        )

    fields = line.split(_FIELD_SEPARATOR)
    if len(fields) != _STASH_FIELD_COUNT:
        msg = f"Expected {_STASH_FIELD_COUNT} fields in stash line, found {len(fields)}"
        raise MalformedRecordError(
            msg,
            expected_fields=_STASH_FIELD_COUNT,
            actual_fields=len(fields),
            line_number=line_number,
            line=line,
        )
    selector, hash_raw, time_raw, subject = fields

    try:
        hash_ = Hash.parse(hash_raw)
    except InvalidHashError as e:
        raise InvalidHashError(
            str(e), value=e.value, line_number=line_number, line=line
        ) from e
    try:
        timestamp = datetime.fromtimestamp(int(time_raw), UTC)
    except (ValueError, OverflowError, OSError) as e:
        msg = f"Invalid stash timestamp {time_raw!r}"
        raise MalformedRecordError(msg, line_number=line_number, line=line) from e

    branch, message = _split_subject(subject)
    return Stash(
        index=_parse_index(selector, line_number, line),
        message=message,
        branch=branch,
        hash=hash_,
        timestamp=timestamp,
    )


def parse_stashes(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> StashList:
    """Parse ``stash list`` output.

    Accepts both the default ``stash@{N}: <subject>`` lines and lines
    rendered with :data:`STASH_FORMAT`, which add the hash and timestamp.

    Raises:
        MalformedRecordError: If the selector is not ``stash@{N}`` with a
            non-negative integer, or a line has the wrong shape.
    """
    log = logger if logger is not None else get_default_logger()
    stashes = [
        _parse_line(line, line_number)
        for line_number, line in enumerate(output.split("\n"), start=1)
        if line.strip()
    ]
    log.debug("Parsed stash listing", stashes=len(stashes))
    return StashList(tuple(stashes))
