"""Unit tests for the commit log parser."""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

from gitparse.diff import parse_numstat
from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.log import (
    FIELD_SEPARATOR,
    LOG_FIELD_COUNT,
    LOG_FORMAT,
    RECORD_TERMINATOR,
    parse_commit_details,
    parse_log,
)

MakeRecord = Callable[..., str]


class TestLogFormat:
    def test_format_has_one_placeholder_per_field(self) -> None:
        body = LOG_FORMAT.removeprefix("--pretty=format:").removesuffix("%x1e")

        assert len(body.split("%x1f")) == LOG_FIELD_COUNT

    def test_separators_are_ascii_control_characters(self) -> None:
        assert FIELD_SEPARATOR == "\x1f"
        assert RECORD_TERMINATOR == "\x1e"


# =============================================================================
# Record Decoding
# =============================================================================


class TestParseLog:
    def test_decodes_all_fields(self, make_log_record: MakeRecord) -> None:
        (commit,) = parse_log(make_log_record())

        assert commit.hash == Hash("a" * 40)
        assert commit.author.name == "Ada Lovelace"
        assert commit.author.email == "ada@example.com"
        assert commit.author.timestamp == datetime.fromtimestamp(1700000000, UTC)
        assert commit.committer.name == "Grace Hopper"
        assert commit.committer.timestamp == datetime.fromtimestamp(1700000100, UTC)
        assert commit.timestamp == commit.author.timestamp
        assert commit.parents == (Hash("b" * 40),)

    def test_root_commit_with_body(self, make_log_record: MakeRecord) -> None:
        record = make_log_record(parents="", message="Initial commit\n\nLonger body text")

        (commit,) = parse_log(record)

        assert commit.parents == ()
        assert commit.is_root() is True
        assert commit.message.subject == "Initial commit"
        assert commit.message.body == "Longer body text"

    def test_merge_commit_keeps_parent_order(self, make_log_record: MakeRecord) -> None:
        (commit,) = parse_log(make_log_record(parents=f"{'c' * 40} {'b' * 40}"))

        assert commit.parents == (Hash("c" * 40), Hash("b" * 40))
        assert commit.is_merge() is True
        assert commit.main_parent() == Hash("c" * 40)

    def test_records_separated_by_newlines(self, make_log_record: MakeRecord) -> None:
        output = "\n".join(
            [make_log_record(hash_="1" * 40), make_log_record(hash_="2" * 40)]
        )

        commits = parse_log(output)

        assert [c.hash.value for c in commits] == ["1" * 40, "2" * 40]

    def test_empty_input_is_empty_log(self) -> None:
        assert parse_log("").is_empty() is True
        assert parse_log("\n").is_empty() is True

    def test_subject_only_message(self, make_log_record: MakeRecord) -> None:
        (commit,) = parse_log(make_log_record(message="Fix typo\n"))

        assert commit.message.subject == "Fix typo"
        assert commit.message.body is None

    def test_message_with_multiple_paragraphs(self, make_log_record: MakeRecord) -> None:
        message = "Subject\n\nFirst paragraph.\n\nSecond paragraph."
        (commit,) = parse_log(make_log_record(message=message + "\n"))

        assert commit.message.body == "First paragraph.\n\nSecond paragraph."
        assert commit.message.full() == message

    def test_empty_author_fields_are_kept(self, make_log_record: MakeRecord) -> None:
        (commit,) = parse_log(make_log_record(author_name="", author_email=""))

        assert commit.author.name == ""
        assert commit.author.email == ""


# =============================================================================
# Malformed Records
# =============================================================================


class TestParseLogMalformed:
    def test_missing_field_raises(self, make_log_record: MakeRecord) -> None:
        good = make_log_record()
        fields = make_log_record(hash_="d" * 40).split(FIELD_SEPARATOR)
        broken = FIELD_SEPARATOR.join(fields[:3] + fields[4:])

        with pytest.raises(MalformedRecordError) as exc_info:
            _ = parse_log(good + "\n" + broken)

        error = exc_info.value
        assert error.expected_fields == LOG_FIELD_COUNT
        assert error.actual_fields == LOG_FIELD_COUNT - 1
        assert error.line_number == 2

    def test_separator_in_message_raises(self, make_log_record: MakeRecord) -> None:
        with pytest.raises(MalformedRecordError):
            _ = parse_log(make_log_record(message=f"a{FIELD_SEPARATOR}b"))

    def test_bad_timestamp_raises(self, make_log_record: MakeRecord) -> None:
        with pytest.raises(MalformedRecordError, match="timestamp"):
            _ = parse_log(make_log_record(committer_time="yesterday"))

    def test_bad_hash_raises_with_record_number(self, make_log_record: MakeRecord) -> None:
        with pytest.raises(InvalidHashError) as exc_info:
            _ = parse_log(make_log_record(parents="not-a-hash"))

        assert exc_info.value.value == "not-a-hash"
        assert exc_info.value.line_number == 1


# =============================================================================
# Commit Details
# =============================================================================


class TestParseCommitDetails:
    def test_combines_commit_and_numstat(self, make_log_record: MakeRecord) -> None:
        diff = parse_numstat("3\t1\tsrc/a.py\n-\t-\tlogo.png\n")

        details = parse_commit_details(make_log_record(), diff)

        assert details.commit.hash == Hash("a" * 40)
        assert details.files_changed == (Path("src/a.py"), Path("logo.png"))
        assert (details.insertions, details.deletions) == (3, 1)
        assert details.total_changes() == 4
        assert details.has_changes() is True

    def test_rejects_multiple_commits(self, make_log_record: MakeRecord) -> None:
        diff = parse_numstat("")

        with pytest.raises(MalformedRecordError, match="exactly one commit"):
            _ = parse_commit_details(make_log_record() + make_log_record(), diff)

    def test_rejects_empty_log(self) -> None:
        with pytest.raises(MalformedRecordError):
            _ = parse_commit_details("", parse_numstat(""))
