"""Shared test fixtures for gitparse tests."""

import io
import json
import logging
from collections.abc import Callable
from typing import Any

import pytest
from rich.console import Console
from structlog.typing import FilteringBoundLogger

from gitparse.log import FIELD_SEPARATOR, RECORD_TERMINATOR

FULL_HASH = "a" * 40
PARENT_HASH = "b" * 40
OTHER_PARENT_HASH = "c" * 40


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> FilteringBoundLogger:
    """DEBUG-level JSON logger writing into ``log_stream``."""
    from gitparse.utils._logging import _create_logger

    return _create_logger(log_stream, log_level=logging.DEBUG, log_format="json")


@pytest.fixture
def log_events(log_stream: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    """Return a function decoding the JSON lines written so far."""

    def _events() -> list[dict[str, Any]]:
        return [json.loads(line) for line in log_stream.getvalue().splitlines() if line]

    return _events


def _render_log_record(  # noqa: PLR0913
    *,
    hash_: str = FULL_HASH,
    author_name: str = "Ada Lovelace",
    author_email: str = "ada@example.com",
    author_time: str = "1700000000",
    committer_name: str = "Grace Hopper",
    committer_email: str = "grace@example.com",
    committer_time: str = "1700000100",
    parents: str = PARENT_HASH,
    message: str = "Add parser\n\nLonger body text\n",
) -> str:
    """Render one log record the way the record format does."""
    fields = [
        hash_,
        author_name,
        author_email,
        author_time,
        committer_name,
        committer_email,
        committer_time,
        parents,
        message,
    ]
    return FIELD_SEPARATOR.join(fields) + RECORD_TERMINATOR


@pytest.fixture
def make_log_record() -> Callable[..., str]:
    """Return a factory rendering log records; override fields by keyword."""
    return _render_log_record


@pytest.fixture
def console() -> Console:
    return Console(
        width=120,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
