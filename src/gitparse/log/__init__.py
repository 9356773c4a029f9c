"""Commit history decoding.

Example:
    >>> from gitparse.log import LOG_FORMAT, parse_log
    >>> args = ["log", LOG_FORMAT]
    >>> record = "\\x1f".join(
    ...     ["abc123", "Ada", "ada@x", "0", "Ada", "ada@x", "0", "", "Initial commit\\n"]
    ... )
    >>> parse_log(record + "\\x1e")[0].message.subject
    'Initial commit'
"""

from gitparse.log._models import Author, Commit, CommitDetails, CommitLog, CommitMessage
from gitparse.log._parser import (
    FIELD_SEPARATOR,
    LOG_FIELD_COUNT,
    LOG_FORMAT,
    RECORD_TERMINATOR,
    parse_commit_details,
    parse_log,
)

__all__ = [
    "FIELD_SEPARATOR",
    "LOG_FIELD_COUNT",
    "LOG_FORMAT",
    "RECORD_TERMINATOR",
    "Author",
    "Commit",
    "CommitDetails",
    "CommitLog",
    "CommitMessage",
    "parse_commit_details",
    "parse_log",
]
