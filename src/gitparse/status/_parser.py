"""Short-form status parser.

Decodes ``status --porcelain`` output: one file per line, two status
characters, a space, then the path (quoted if it holds special characters).
"""

from pathlib import Path
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import MalformedRecordError, UnrecognizedStatusCodeError
from gitparse.status._models import FileEntry, GitStatus, IndexStatus, WorktreeStatus
from gitparse.utils import get_default_logger, unquote_path

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_PREFIX_WIDTH: Final = 3
_RENAME_ARROW: Final = " -> "


def _decode_path(raw: str, index_code: str, line_number: int, line: str) -> Path:
    # Renames and copies list "old -> new"; keep the destination.
    if index_code in "RC" and _RENAME_ARROW in raw:
        if raw.startswith('"'):
            end = raw.find('"' + _RENAME_ARROW)
            if end != -1:
                raw = raw[end + 1 + len(_RENAME_ARROW) :]
        else:
            raw = raw.split(_RENAME_ARROW, 1)[1]
    try:
        return Path(unquote_path(raw))
    except ValueError as e:
        msg = f"Cannot decode status path: {e}"
        raise MalformedRecordError(msg, line_number=line_number, line=line) from e


def _map_code[S: (IndexStatus, WorktreeStatus)](
    code: str,
    status_type: type[S],
    *,
    strict: bool,
    logger: "FilteringBoundLogger",
    line_number: int,
    line: str,
) -> S:
    status = status_type.from_char(code)
    if status is not None:
        return status
    if strict:
        msg = f"Unrecognized {status_type.__name__} code {code!r}"
        raise UnrecognizedStatusCodeError(
            msg, code=code, line_number=line_number, line=line
        )
    logger.warning(
        "Unrecognized status code mapped to clean",
        axis=status_type.__name__,
        code=code,
        line_number=line_number,
    )
    return status_type("clean")


def parse_status(
    output: str,
    *,
    strict: bool = False,
    logger: "FilteringBoundLogger | None" = None,
) -> GitStatus:
    """Parse short-form status output.

    Args:
        output: Captured standard output of ``status --porcelain``.
        strict: Raise on status characters outside the known tables instead
            of mapping them to clean.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        The parsed status collection (empty for empty input).

    Raises:
        MalformedRecordError: If a line is too short, lacks the separator
            space, or carries an undecodable path.
        UnrecognizedStatusCodeError: In strict mode, for an unknown code.
    """
    log = logger if logger is not None else get_default_logger()
    entries: list[FileEntry] = []

    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line:
            continue
        if line.startswith("## "):
            log.debug("Skipping branch header", line_number=line_number)
            continue
        if len(line) <= _PREFIX_WIDTH or line[2] != " ":
            msg = "Status line must be two status characters, a space, and a path"
            raise MalformedRecordError(msg, line_number=line_number, line=line)

        index_code, worktree_code = line[0], line[1]
        raw_path = line[_PREFIX_WIDTH:]

        if index_code == worktree_code == "?":
            index_status, worktree_status = IndexStatus.CLEAN, WorktreeStatus.UNTRACKED
        elif index_code == worktree_code == "!":
            index_status, worktree_status = IndexStatus.CLEAN, WorktreeStatus.IGNORED
        else:
            index_status = _map_code(
                index_code,
                IndexStatus,
                strict=strict,
                logger=log,
                line_number=line_number,
                line=line,
            )
            worktree_status = _map_code(
                worktree_code,
                WorktreeStatus,
                strict=strict,
                logger=log,
                line_number=line_number,
                line=line,
            )
            if worktree_status is WorktreeStatus.UNTRACKED:
                index_status = IndexStatus.CLEAN

        entries.append(
            FileEntry(
                path=_decode_path(raw_path, index_code, line_number, line),
                index_status=index_status,
                worktree_status=worktree_status,
            )
        )

    log.debug("Parsed status output", entries=len(entries))
    return GitStatus(tuple(entries))
