"""Flat diff formats: name-only, stat and numstat.

These formats carry per-file paths and counts but no hunks, so each is
decoded by a single-purpose line splitter rather than the unified diff
state machine.
"""

import re
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Final

from gitparse.diff._models import DiffFormat, DiffOutput, DiffStatus, FileDiff
from gitparse.diff._parser import parse_diff
from gitparse.exceptions import MalformedRecordError
from gitparse.utils import get_default_logger, unquote_path

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_NUMSTAT_FIELDS: Final = 3
_BINARY_COUNT: Final = "-"
_RENAME_ARROW: Final = " => "

_BRACE_RENAME: Final = re.compile(r"^(?P<prefix>.*?)\{(?P<old>.*?) => (?P<new>.*?)\}(?P<suffix>.*)$")

_STAT_FILE_LINE: Final = re.compile(
    r"^\s*(?P<path>.+?)\s+\|\s+"
    r"(?:(?P<count>\d+)(?:\s+(?P<graph>[+-]*))?|Bin(?: \d+ -> \d+ bytes)?)\s*$"
)
_STAT_SUMMARY: Final = re.compile(
    r"^\s*(?P<files>\d+) files? changed"
    r"(?:, (?P<insertions>\d+) insertions?\(\+\))?"
    r"(?:, (?P<deletions>\d+) deletions?\(-\))?\s*$"
)


def _join(prefix: str, middle: str, suffix: str) -> str:
    # "{ => sub}/f" leaves a doubled or leading slash once a side is empty.
    path = f"{prefix}{middle}{suffix}".replace("//", "/")
    return path.removeprefix("/") if not prefix else path


def _file_entry(
    raw_path: str,
    *,
    additions: int,
    deletions: int,
    binary: bool,
    line_number: int,
    line: str,
) -> FileDiff:
    """Build a chunk-less entry, expanding ``old => new`` rename notation."""
    try:
        raw_path = unquote_path(raw_path)
    except ValueError as e:
        raise MalformedRecordError(str(e), line_number=line_number, line=line) from e

    brace = _BRACE_RENAME.match(raw_path)
    if brace is not None:
        old = _join(brace["prefix"], brace["old"], brace["suffix"])
        new = _join(brace["prefix"], brace["new"], brace["suffix"])
    elif _RENAME_ARROW in raw_path:
        old, _, new = raw_path.partition(_RENAME_ARROW)
    else:
        return FileDiff(
            path=Path(raw_path),
            additions=additions,
            deletions=deletions,
            binary=binary,
        )

    return FileDiff(
        path=Path(new),
        status=DiffStatus.RENAMED,
        old_path=Path(old),
        additions=additions,
        deletions=deletions,
        binary=binary,
    )


def _split_graph(total: int, graph: str) -> tuple[int, int] | None:
    """Recover (additions, deletions) from a stat count and its +/- graph.

    The graph is scaled down when the count exceeds the terminal width.
    None is returned then, since only the totals line can settle the split.
    """
    plus = graph.count("+")
    minus = graph.count("-")
    if plus + minus == total:
        return plus, minus
    return None


def _reconcile_totals(
    files: list[FileDiff],
    scaled: dict[int, int],
    totals: "re.Match[str]",
    *,
    line_number: int,
    line: str,
) -> None:
    """Check the file lines against the totals line.

    One scaled graph is resolved exactly from the totals and replaced in
    ``files``. Several cannot be, so that raises rather than guessing.
    """
    if int(totals["files"]) != len(files):
        msg = f"Totals line reports {totals['files']} files, listed {len(files)}"
        raise MalformedRecordError(msg, line_number=line_number, line=line)

    insertions = int(totals["insertions"] or 0)
    deletions = int(totals["deletions"] or 0)
    if len(scaled) > 1:
        msg = f"Cannot recover exact counts for {len(scaled)} scaled graphs; use --numstat"
        raise MalformedRecordError(msg, line_number=line_number, line=line)

    for index, count in scaled.items():
        others = files[:index] + files[index + 1 :]
        additions = insertions - sum(f.additions for f in others)
        removed = deletions - sum(f.deletions for f in others)
        if additions < 0 or removed < 0 or additions + removed != count:
            msg = f"Totals line cannot account for a scaled count of {count}"
            raise MalformedRecordError(msg, line_number=line_number, line=line)
        files[index] = replace(files[index], additions=additions, deletions=removed)
    scaled.clear()

    listed = (sum(f.additions for f in files), sum(f.deletions for f in files))
    if listed != (insertions, deletions):
        msg = (
            f"Totals line reports {insertions} insertions and {deletions} deletions, "
            f"file lines sum to {listed[0]} and {listed[1]}"
        )
        raise MalformedRecordError(msg, line_number=line_number, line=line)


def parse_name_only(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> DiffOutput:
    """Parse ``--name-only`` output: one path per line, counts all zero."""
    log = logger if logger is not None else get_default_logger()
    files: list[FileDiff] = []
    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line:
            continue
        try:
            path = unquote_path(line)
        except ValueError as e:
            raise MalformedRecordError(str(e), line_number=line_number, line=line) from e
        files.append(FileDiff(path=Path(path)))

    log.debug("Parsed name-only diff", files=len(files))
    return DiffOutput(tuple(files))


def parse_numstat(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> DiffOutput:
    """Parse ``--numstat`` output.

    Each line is ``added<TAB>deleted<TAB>path``; ``-`` in both count
    columns marks a binary file, whose counts are reported as 0.

    Raises:
        MalformedRecordError: If a line lacks three tab-separated fields or
            a count is neither a non-negative integer nor a paired ``-``.
    """
    log = logger if logger is not None else get_default_logger()
    files: list[FileDiff] = []
    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line:
            continue
        fields = line.split("\t", _NUMSTAT_FIELDS - 1)
        if len(fields) != _NUMSTAT_FIELDS:
            msg = f"Expected {_NUMSTAT_FIELDS} tab-separated fields, found {len(fields)}"
            raise MalformedRecordError(
                msg,
                expected_fields=_NUMSTAT_FIELDS,
                actual_fields=len(fields),
                line_number=line_number,
                line=line,
            )
        added, deleted, raw_path = fields

        binary = added == _BINARY_COUNT and deleted == _BINARY_COUNT
        if binary:
            additions = deletions = 0
        elif added.isdigit() and deleted.isdigit():
            additions, deletions = int(added), int(deleted)
        else:
            msg = f"Invalid numstat counts {added!r}/{deleted!r}"
            raise MalformedRecordError(msg, line_number=line_number, line=line)

        files.append(
            _file_entry(
                raw_path,
                additions=additions,
                deletions=deletions,
                binary=binary,
                line_number=line_number,
                line=line,
            )
        )

    log.debug("Parsed numstat diff", files=len(files))
    return DiffOutput(tuple(files))


def parse_stat(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> DiffOutput:
    """Parse ``--stat`` output: ``path | N +++--`` lines and a totals line.

    A graph scaled to fit the terminal no longer gives the exact split of
    its count. The totals line then supplies it, which works for at most
    one scaled file; ``--numstat`` output never needs this.

    Raises:
        MalformedRecordError: If a line is neither a file line nor the
            totals line, the totals disagree with the file lines, or a
            scaled graph cannot be resolved exactly.
    """
    log = logger if logger is not None else get_default_logger()
    files: list[FileDiff] = []
    scaled: dict[int, int] = {}
    scaled_line: tuple[int, str] | None = None
    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line.strip():
            continue

        summary = _STAT_SUMMARY.match(line)
        if summary is not None:
            _reconcile_totals(files, scaled, summary, line_number=line_number, line=line)
            scaled_line = None
            continue

        match = _STAT_FILE_LINE.match(line)
        if match is None:
            msg = "Expected 'path | count graph' or a totals line"
            raise MalformedRecordError(msg, line_number=line_number, line=line)

        binary = match["count"] is None
        split = (0, 0) if binary else _split_graph(int(match["count"]), match["graph"] or "")
        if split is None:
            scaled[len(files)] = int(match["count"])
            scaled_line = scaled_line or (line_number, line)
            split = (0, 0)
        additions, deletions = split
        files.append(
            _file_entry(
                match["path"],
                additions=additions,
                deletions=deletions,
                binary=binary,
                line_number=line_number,
                line=line,
            )
        )

    if scaled_line is not None:
        msg = "Scaled graph without a totals line to resolve its counts"
        raise MalformedRecordError(msg, line_number=scaled_line[0], line=scaled_line[1])

    log.debug("Parsed stat diff", files=len(files))
    return DiffOutput(tuple(files))


def parse_diff_output(
    output: str,
    output_format: DiffFormat = DiffFormat.PATCH,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> DiffOutput:
    """Parse diff output produced in the given format.

    Args:
        output: Captured standard output of the diff command.
        output_format: The format the command was asked to produce, as
            selected by ``DiffOptions.output_format``.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        The parsed diff.
    """
    match output_format:
        case DiffFormat.NAME_ONLY:
            return parse_name_only(output, logger=logger)
        case DiffFormat.STAT:
            return parse_stat(output, logger=logger)
        case DiffFormat.NUMSTAT:
            return parse_numstat(output, logger=logger)
        case DiffFormat.PATCH:
            return parse_diff(output, logger=logger)
