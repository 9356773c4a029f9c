"""Typed decoding of git command output and typed encoding of git options.

Parsers turn captured standard output into immutable record collections;
option builders turn frozen option objects into argument vectors. Running
the tool itself is left to the caller (see :mod:`gitparse.raw`).

Example:
    >>> from gitparse import parse_status
    >>> [str(entry.path) for entry in parse_status("M  file.txt\\n?? new.txt\\n")]
    ['file.txt', 'new.txt']
"""

from gitparse.diff import DiffOutput, parse_diff, parse_diff_output
from gitparse.exceptions import GitParseError, ParseError
from gitparse.hash import Hash
from gitparse.log import CommitLog, parse_log
from gitparse.merge import MergeResult, MergeStatus, parse_merge
from gitparse.raw import GitRunner, RawOutput, check_output
from gitparse.refs import parse_branches, parse_remotes, parse_stashes, parse_tags
from gitparse.status import GitStatus, parse_status

__version__ = "0.1.0"

__all__ = [
    "CommitLog",
    "DiffOutput",
    "GitParseError",
    "GitRunner",
    "GitStatus",
    "Hash",
    "MergeResult",
    "MergeStatus",
    "ParseError",
    "RawOutput",
    "__version__",
    "check_output",
    "parse_branches",
    "parse_diff",
    "parse_diff_output",
    "parse_log",
    "parse_merge",
    "parse_remotes",
    "parse_stashes",
    "parse_status",
    "parse_tags",
]
