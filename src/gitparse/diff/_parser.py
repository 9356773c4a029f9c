"""Unified diff parser.

A line-driven state machine. In the header state, file-pair markers and
extended header lines describe the file being changed; an ``@@`` range
marker switches to the hunk state, where each line is classified by its
leading character until the next range marker or file header.
"""

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Final

from gitparse.diff._models import (
    DiffChunk,
    DiffLine,
    DiffLineType,
    DiffOutput,
    DiffStatus,
    FileDiff,
)
from gitparse.exceptions import MalformedHunkHeaderError, MalformedRecordError
from gitparse.utils import get_default_logger, split_quoted_pair, unquote_path

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_HUNK_HEADER: Final = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")

_DEV_NULL: Final = "/dev/null"

# Extended header lines that carry nothing the models keep.
_IGNORED_HEADERS: Final = (
    "index ",
    "similarity index ",
    "dissimilarity index ",
    "old mode ",
    "new mode ",
)


class _State(Enum):
    HEADER = auto()
    HUNK = auto()
    BINARY_PATCH = auto()


@dataclass(slots=True)
class _HunkBuilder:
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    section: str
    old_left: int
    new_left: int
    lines: list[DiffLine] = field(default_factory=list)

    def exhausted(self) -> bool:
        return self.old_left <= 0 and self.new_left <= 0

    def add(self, kind: DiffLineType, text: str) -> None:
        self.lines.append(DiffLine(kind=kind, text=text))
        if kind is not DiffLineType.ADDITION:
            self.old_left -= 1
        if kind is not DiffLineType.DELETION:
            self.new_left -= 1

    def build(self) -> DiffChunk:
        return DiffChunk(
            old_start=self.old_start,
            old_count=self.old_count,
            new_start=self.new_start,
            new_count=self.new_count,
            lines=tuple(self.lines),
            section=self.section,
        )


@dataclass(slots=True)
class _FileBuilder:
    header_old: str | None = None
    header_new: str | None = None
    minus_path: str | None = None
    plus_path: str | None = None
    source_path: str | None = None
    target_path: str | None = None
    status: DiffStatus = DiffStatus.MODIFIED
    binary: bool = False
    chunks: list[DiffChunk] = field(default_factory=list)
    hunk: _HunkBuilder | None = None

    def close_hunk(self) -> None:
        if self.hunk is not None:
            self.chunks.append(self.hunk.build())
            self.hunk = None

    def build(self, line_number: int) -> FileDiff:
        self.close_hunk()
        if self.status is DiffStatus.DELETED:
            path = self.minus_path or self.header_old
        else:
            path = self.target_path or self.plus_path or self.header_new
        if path is None:
            path = self.minus_path or self.header_old or ""

        old_path: Path | None = None
        if self.status in (DiffStatus.RENAMED, DiffStatus.COPIED):
            source = self.source_path or self.minus_path or self.header_old
            if source is None:
                msg = f"{self.status} file is missing its source path"
                raise MalformedRecordError(msg, line_number=line_number)
            old_path = Path(source)

        chunks = tuple(self.chunks)
        return FileDiff(
            path=Path(path),
            status=self.status,
            old_path=old_path,
            chunks=chunks,
            additions=sum(c.additions() for c in chunks),
            deletions=sum(c.deletions() for c in chunks),
            binary=self.binary,
        )


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix) :] if path.startswith(prefix) else path


def _side_path(raw: str, prefix: str, line_number: int, line: str) -> str | None:
    """Decode a ``---``/``+++`` path; None for /dev/null."""
    # Paths containing a space are followed by a tab.
    raw = raw.rstrip("\t")
    if raw == _DEV_NULL:
        return None
    try:
        return _strip_prefix(unquote_path(raw), prefix)
    except ValueError as e:
        raise MalformedRecordError(str(e), line_number=line_number, line=line) from e


def _git_header_paths(rest: str, line_number: int, line: str) -> tuple[str, str]:
    """Split the ``a/... b/...`` pair of a ``diff --git`` line."""
    try:
        quoted = split_quoted_pair(rest)
        if quoted is not None:
            old, new = (unquote_path(token) for token in quoted)
            return _strip_prefix(old, "a/"), _strip_prefix(new, "b/")
    except ValueError as e:
        raise MalformedRecordError(str(e), line_number=line_number, line=line) from e

    # Unquoted names may contain spaces; the pair is symmetric when unchanged.
    half = len(rest) // 2
    if len(rest) % 2 == 1 and rest[half] == " ":
        old, new = rest[:half], rest[half + 1 :]
        if old.startswith("a/") and new.startswith("b/") and old[2:] == new[2:]:
            return old[2:], new[2:]

    split_at = rest.find(" b/")
    if not rest.startswith("a/") or split_at == -1:
        msg = "Cannot split file pair in diff header"
        raise MalformedRecordError(msg, line_number=line_number, line=line)
    return rest[2:split_at], rest[split_at + 3 :]


def _parse_hunk_header(line: str, line_number: int) -> _HunkBuilder:
    match = _HUNK_HEADER.match(line)
    if match is None:
        msg = "Hunk marker must be '@@ -a[,b] +c[,d] @@'"
        raise MalformedHunkHeaderError(msg, line_number=line_number, line=line)
    old_start, old_count, new_start, new_count, section = match.groups()
    old_n = 1 if old_count is None else int(old_count)
    new_n = 1 if new_count is None else int(new_count)
    return _HunkBuilder(
        old_start=int(old_start),
        old_count=old_n,
        new_start=int(new_start),
        new_count=new_n,
        section=section,
        old_left=old_n,
        new_left=new_n,
    )


class _UnifiedDiffParser:
    """Consumes diff lines and accumulates ``FileDiff`` records."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._state = _State.HEADER
        self._current: _FileBuilder | None = None
        self._files: list[FileDiff] = []

    def run(self) -> list[FileDiff]:
        for index, line in enumerate(self._lines):
            line_number = index + 1
            if line.startswith("diff --git "):
                self._start_file(line_number)
                assert self._current is not None  # noqa: S101
                old, new = _git_header_paths(line[len("diff --git ") :], line_number, line)
                self._current.header_old, self._current.header_new = old, new
                continue

            if self._state is _State.BINARY_PATCH:
                continue
            if self._state is _State.HUNK:
                self._hunk_line(index, line)
            else:
                self._header_line(line_number, line)

        self._finish_file(len(self._lines))
        return self._files

    def _start_file(self, line_number: int) -> None:
        self._finish_file(line_number)
        self._current = _FileBuilder()
        self._state = _State.HEADER

    def _finish_file(self, line_number: int) -> None:
        if self._current is not None:
            self._files.append(self._current.build(line_number))
            self._current = None

    def _next_line(self, index: int) -> str:
        return self._lines[index + 1] if index + 1 < len(self._lines) else ""

    def _hunk_line(self, index: int, line: str) -> None:
        current = self._current
        assert current is not None  # noqa: S101
        hunk = current.hunk
        assert hunk is not None  # noqa: S101
        line_number = index + 1

        if line.startswith("@@"):
            current.close_hunk()
            current.hunk = _parse_hunk_header(line, line_number)
            return
        # A finished hunk followed by a ---/+++ pair starts a header-less file.
        if (
            hunk.exhausted()
            and line.startswith("--- ")
            and self._next_line(index).startswith("+++ ")
        ):
            self._start_file(line_number)
            self._header_line(line_number, line)
            return
        if line.startswith("\\"):
            return

        marker = line[:1]
        if marker == "+":
            hunk.add(DiffLineType.ADDITION, line[1:])
        elif marker == "-":
            hunk.add(DiffLineType.DELETION, line[1:])
        elif marker == " ":
            hunk.add(DiffLineType.CONTEXT, line[1:])
        else:
            hunk.add(DiffLineType.CONTEXT, line)

    def _header_line(self, line_number: int, line: str) -> None:  # noqa: C901, PLR0912
        if line.startswith("@@"):
            if self._current is None:
                self._current = _FileBuilder()
            self._current.hunk = _parse_hunk_header(line, line_number)
            self._state = _State.HUNK
            return

        if line.startswith("--- "):
            if self._current is None or self._current.minus_path is not None:
                self._start_file(line_number)
            assert self._current is not None  # noqa: S101
            path = _side_path(line[4:], "a/", line_number, line)
            self._current.minus_path = path
            if path is None and self._current.status is DiffStatus.MODIFIED:
                self._current.status = DiffStatus.ADDED
            return

        current = self._current
        if current is None:
            if not line:
                return
            msg = "Unexpected line before the first file header"
            raise MalformedRecordError(msg, line_number=line_number, line=line)

        if line.startswith("+++ "):
            path = _side_path(line[4:], "b/", line_number, line)
            current.plus_path = path
            if path is None and current.status is DiffStatus.MODIFIED:
                current.status = DiffStatus.DELETED
        elif line.startswith("new file mode "):
            current.status = DiffStatus.ADDED
        elif line.startswith("deleted file mode "):
            current.status = DiffStatus.DELETED
        elif line.startswith(("rename from ", "copy from ")):
            current.status = (
                DiffStatus.RENAMED if line.startswith("rename") else DiffStatus.COPIED
            )
            current.source_path = self._header_value(line, line_number)
        elif line.startswith(("rename to ", "copy to ")):
            current.target_path = self._header_value(line, line_number)
        elif line.startswith("Binary files ") and line.endswith(" differ"):
            current.binary = True
        elif line == "GIT binary patch":
            current.binary = True
            self._state = _State.BINARY_PATCH
        elif line.startswith(_IGNORED_HEADERS) or not line:
            return
        else:
            msg = "Unrecognized diff header line"
            raise MalformedRecordError(msg, line_number=line_number, line=line)

    @staticmethod
    def _header_value(line: str, line_number: int) -> str:
        raw = line.split(" ", 2)[2]
        try:
            return unquote_path(raw)
        except ValueError as e:
            raise MalformedRecordError(str(e), line_number=line_number, line=line) from e


def parse_diff(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> DiffOutput:
    """Parse unified diff text into per-file hunks.

    Args:
        output: Captured standard output of a patch-format diff.
        logger: Logger for diagnostics; the default stderr logger if None.

    Returns:
        The parsed diff (empty for empty input).

    Raises:
        MalformedHunkHeaderError: If an ``@@`` line lacks the four-number range.
        MalformedRecordError: If a header line cannot be decoded.
    """
    log = logger if logger is not None else get_default_logger()
    lines = output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    files = _UnifiedDiffParser(lines).run()
    log.debug(
        "Parsed unified diff",
        files=len(files),
        chunks=sum(len(f.chunks) for f in files),
    )
    return DiffOutput(tuple(files))
