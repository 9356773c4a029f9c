# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Merge outcome decoding.

``merge`` reports its outcome only as prose on standard output and standard
error, so the decoder reads both streams of the captured result. Conflicted
paths are not listed reliably in that prose; the facade runs
``MERGE_CONFLICTS_ARGS`` after a conflicted merge and passes its output in.

Example:
    >>> from gitparse.merge import parse_merge
    >>> from gitparse.raw import RawOutput
    >>> parse_merge(RawOutput("Already up to date.\\n")).status
    <MergeStatus.UP_TO_DATE: 'up-to-date'>
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Final

from gitparse.diff import parse_name_only
from gitparse.exceptions import MalformedRecordError
from gitparse.hash import Hash
from gitparse.raw import RawOutput, check_output
from gitparse.utils import get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

MERGE_CONFLICTS_ARGS: Final = ("diff", "--name-only", "--diff-filter=U")

_UP_TO_DATE: Final = ("Already up to date", "Already up-to-date")
_FAST_FORWARD: Final = "Fast-forward"
_CONFLICT_MARKERS: Final = ("CONFLICT", "Automatic merge failed")
_UPDATING_LINE: Final = re.compile(r"^Updating (?P<old>[0-9a-f]+)\.\.(?P<new>[0-9a-f]+)\s*$")


class MergeStatus(StrEnum):
    SUCCESS = "success"
    FAST_FORWARD = "fast-forward"
    UP_TO_DATE = "up-to-date"
    CONFLICTS = "conflicts"


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Outcome of one merge invocation.

    Attributes:
        status: How the merge ended.
        commit: The new ``HEAD`` for fast-forwards, and for merge commits
            when the caller supplied it. None otherwise.
        conflicts: Paths left unmerged, in listing order.
    """

    status: MergeStatus
    commit: Hash | None = None
    conflicts: tuple[Path, ...] = ()

    def has_conflicts(self) -> bool:
        return self.status is MergeStatus.CONFLICTS

    def is_up_to_date(self) -> bool:
        return self.status is MergeStatus.UP_TO_DATE


def _has_conflict_marker(raw: RawOutput) -> bool:
    streams = (raw.stdout, raw.stderr)
    return any(marker in stream for stream in streams for marker in _CONFLICT_MARKERS)


def _fast_forward_target(stdout: str, head: Hash | None) -> Hash:
    for line in stdout.split("\n"):
        updating = _UPDATING_LINE.match(line)
        if updating is not None:
            return Hash.parse(updating["new"])
    if head is not None:
        return head
    msg = "Fast-forward output has no 'Updating old..new' line"
    raise MalformedRecordError(msg)


def parse_merge(
    raw: RawOutput,
    *,
    conflicts_output: str = "",
    head: Hash | None = None,
    args: Sequence[str] = ("merge",),
    logger: "FilteringBoundLogger | None" = None,
) -> MergeResult:
    """Decode the captured result of a merge.

    Args:
        raw: Captured output of the merge invocation.
        conflicts_output: Output of ``MERGE_CONFLICTS_ARGS``, read only when
            the merge stopped on conflicts.
        head: ``HEAD`` after the merge, if the caller resolved it. It becomes
            the commit of a merge commit, and of a fast-forward whose output
            lacks the ``Updating`` line.
        args: The merge argument vector, recorded on a raised error.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        The merge outcome.

    Raises:
        GitCommandError: If the merge failed for a reason other than
            conflicts.
        MalformedRecordError: If a fast-forward names no target and no
            ``head`` was given, or a conflicted path is badly quoted.
    """
    log = logger if logger is not None else get_default_logger()

    if not raw.success and _has_conflict_marker(raw):
        conflicts = tuple(file.path for file in parse_name_only(conflicts_output, logger=logger))
        log.debug(
            "Parsed merge output", status=str(MergeStatus.CONFLICTS), conflicts=len(conflicts)
        )
        return MergeResult(MergeStatus.CONFLICTS, conflicts=conflicts)

    stdout = check_output(raw, args)
    if any(marker in stdout for marker in _UP_TO_DATE):
        result = MergeResult(MergeStatus.UP_TO_DATE)
    elif _FAST_FORWARD in stdout:
        result = MergeResult(MergeStatus.FAST_FORWARD, commit=_fast_forward_target(stdout, head))
    else:
        result = MergeResult(MergeStatus.SUCCESS, commit=head)

    log.debug("Parsed merge output", status=str(result.status))
    return result
