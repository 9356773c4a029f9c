"""Diff decoding for patch, name-only, stat and numstat output.

Example:
    >>> from gitparse.diff import parse_diff
    >>> diff = parse_diff("@@ -1 +1,2 @@\\n-old\\n+new\\n+more\\n")
    >>> diff.stats.insertions, diff.stats.deletions
    (2, 1)
"""

from gitparse.diff._flat import parse_diff_output, parse_name_only, parse_numstat, parse_stat
from gitparse.diff._models import (
    DiffChunk,
    DiffFormat,
    DiffLine,
    DiffLineType,
    DiffOutput,
    DiffStats,
    DiffStatus,
    FileDiff,
)
from gitparse.diff._parser import parse_diff

__all__ = [
    "DiffChunk",
    "DiffFormat",
    "DiffLine",
    "DiffLineType",
    "DiffOutput",
    "DiffStats",
    "DiffStatus",
    "FileDiff",
    "parse_diff",
    "parse_diff_output",
    "parse_name_only",
    "parse_numstat",
    "parse_stat",
]
