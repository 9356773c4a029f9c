"""Shared utilities for gitparse."""

from gitparse.utils._logging import LogFormatType, create_logger, get_default_logger
from gitparse.utils._sequence import RecordSequence
from gitparse.utils._text import split_quoted_pair, unquote_path

__all__ = [
    "LogFormatType",
    "RecordSequence",
    "create_logger",
    "get_default_logger",
    "split_quoted_pair",
    "unquote_path",
]
