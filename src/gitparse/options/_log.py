"""Options for the log command."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Final, Self

from gitparse.exceptions import OptionsError
from gitparse.options._common import path_args, to_paths

DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"


def format_date(value: datetime) -> str:
    """Render a date filter in UTC; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(DATE_FORMAT) + " +0000"


@dataclass(frozen=True, slots=True)
class LogOptions:
    """Arguments appended after ``log`` and the record format.

    Order: ``-n``, ``--since``, ``--until``, ``--author``, ``--committer``,
    ``--grep``, ``--follow``, ``--merges``, ``--no-merges``, ``--`` and paths.

    ``merges_only`` and ``no_merges`` contradict each other; setting both
    raises :class:`~gitparse.exceptions.OptionsError`.
    """

    max_count: int | None = None
    since: datetime | None = None
    until: datetime | None = None
    author: str | None = None
    committer: str | None = None
    grep: str | None = None
    follow_renames: bool = False
    merges_only: bool = False
    no_merges: bool = False
    paths: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        if self.merges_only and self.no_merges:
            msg = "merges_only and no_merges cannot both be set"
            raise OptionsError(msg, option="merges_only")
        if self.max_count is not None and self.max_count < 0:
            msg = f"max_count must be non-negative, got {self.max_count}"
            raise OptionsError(msg, option="max_count")

    def with_max_count(self, count: int) -> Self:
        return replace(self, max_count=count)

    def with_since(self, date: datetime) -> Self:
        return replace(self, since=date)

    def with_until(self, date: datetime) -> Self:
        return replace(self, until=date)

    def with_author(self, author: str) -> Self:
        return replace(self, author=author)

    def with_committer(self, committer: str) -> Self:
        return replace(self, committer=committer)

    def with_grep(self, pattern: str) -> Self:
        return replace(self, grep=pattern)

    def with_follow_renames(self) -> Self:
        return replace(self, follow_renames=True)

    def with_merges_only(self) -> Self:
        return replace(self, merges_only=True)

    def with_no_merges(self) -> Self:
        return replace(self, no_merges=True)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.max_count is not None:
            args.extend(["-n", str(self.max_count)])
        if self.since is not None:
            args.append(f"--since={format_date(self.since)}")
        if self.until is not None:
            args.append(f"--until={format_date(self.until)}")
        if self.author is not None:
            args.append(f"--author={self.author}")
        if self.committer is not None:
            args.append(f"--committer={self.committer}")
        if self.grep is not None:
            args.append(f"--grep={self.grep}")
        if self.follow_renames:
            args.append("--follow")
        if self.merges_only:
            args.append("--merges")
        if self.no_merges:
            args.append("--no-merges")
        args.extend(path_args(self.paths))
        return args
