"""Commit log parser.

The facade renders each commit with :data:`LOG_FORMAT`, which separates
fields with the ASCII unit separator and terminates records with the ASCII
record separator. Neither character is expected in commit metadata, so a
field-count mismatch means the stream cannot be trusted and the whole
call fails.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.log._models import Author, Commit, CommitDetails, CommitLog, CommitMessage
from gitparse.utils import get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitparse.diff import DiffOutput

FIELD_SEPARATOR: Final = "\x1f"
RECORD_TERMINATOR: Final = "\x1e"

# hash, author name/email/time, committer name/email/time, parents, raw body
LOG_FORMAT: Final = (
    "--pretty=format:%H%x1f%an%x1f%ae%x1f%at%x1f%cn%x1f%ce%x1f%ct%x1f%P%x1f%B%x1e"
)
LOG_FIELD_COUNT: Final = 9


def _parse_hash(raw: str, record_number: int, record: str) -> Hash:
    try:
        return Hash.parse(raw)
    except InvalidHashError as e:
        raise InvalidHashError(
            str(e), value=e.value, line_number=record_number, line=record
        ) from e


def _parse_timestamp(raw: str, record_number: int, record: str) -> datetime:
    try:
        return datetime.fromtimestamp(int(raw), UTC)
    except (ValueError, OverflowError, OSError) as e:
        msg = f"Invalid unix timestamp {raw!r}"
        raise MalformedRecordError(msg, line_number=record_number, line=record) from e


def _parse_record(record: str, record_number: int) -> Commit:
    fields = record.split(FIELD_SEPARATOR)
    if len(fields) != LOG_FIELD_COUNT:
        msg = f"Expected {LOG_FIELD_COUNT} fields in log record, found {len(fields)}"
        raise MalformedRecordError(
            msg,
            expected_fields=LOG_FIELD_COUNT,
            actual_fields=len(fields),
            line_number=record_number,
            line=record,
        )

    (
        hash_raw,
        author_name,
        author_email,
        author_time,
        committer_name,
        committer_email,
        committer_time,
        parents_raw,
        message_raw,
    ) = fields

    author = Author(
        name=author_name,
        email=author_email,
        timestamp=_parse_timestamp(author_time, record_number, record),
    )
    committer = Author(
        name=committer_name,
        email=committer_email,
        timestamp=_parse_timestamp(committer_time, record_number, record),
    )
    return Commit(
        hash=_parse_hash(hash_raw, record_number, record),
        author=author,
        committer=committer,
        message=CommitMessage.from_raw(message_raw),
        timestamp=author.timestamp,
        parents=tuple(_parse_hash(p, record_number, record) for p in parents_raw.split()),
    )


def parse_log(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> CommitLog:
    """Parse log output rendered with :data:`LOG_FORMAT`.

    Args:
        output: Captured standard output of the log command.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        Commits in emission order (empty for empty input).

    Raises:
        MalformedRecordError: If a record does not have exactly nine fields
            or carries a non-integer timestamp.
        InvalidHashError: If the commit or a parent hash is not hexadecimal.
    """
    log = logger if logger is not None else get_default_logger()
    commits: list[Commit] = []

    for record_number, chunk in enumerate(output.split(RECORD_TERMINATOR), start=1):
        # Records after the first are preceded by the newline between entries.
        record = chunk.lstrip("\n")
        if not record.strip():
            continue
        commits.append(_parse_record(record, record_number))

    log.debug("Parsed commit log", commits=len(commits))
    return CommitLog(tuple(commits))


def parse_commit_details(
    log_output: str,
    diff: "DiffOutput",
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> CommitDetails:
    """Combine a single-commit log parse with the commit's diff statistics.

    Args:
        log_output: Log output for exactly one commit, in :data:`LOG_FORMAT`.
        diff: The commit's changes, typically from ``parse_numstat`` or
            ``parse_stat``.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        The commit with its touched paths and line totals.

    Raises:
        MalformedRecordError: If the log output does not hold exactly one commit.
    """
    commits = parse_log(log_output, logger=logger)
    if len(commits) != 1:
        msg = f"Expected exactly one commit, found {len(commits)}"
        raise MalformedRecordError(msg, expected_fields=1, actual_fields=len(commits))

    return CommitDetails(
        commit=commits[0],
        files_changed=tuple(f.path for f in diff),
        insertions=diff.stats.insertions,
        deletions=diff.stats.deletions,
    )
