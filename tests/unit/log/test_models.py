"""Unit tests for commit history models."""

from datetime import UTC, datetime

import pytest

from gitparse.hash import Hash
from gitparse.log import Author, Commit, CommitLog, CommitMessage

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


def _commit(
    hash_: str,
    *,
    author: str = "Ada",
    email: str = "ada@example.com",
    when: datetime = _EPOCH,
    subject: str = "Change",
    body: str | None = None,
    parents: tuple[str, ...] = ("f",),
) -> Commit:
    identity = Author(name=author, email=email, timestamp=when)
    return Commit(
        hash=Hash(hash_),
        author=identity,
        committer=identity,
        message=CommitMessage(subject, body),
        timestamp=when,
        parents=tuple(Hash(p) for p in parents),
    )


class TestCommitMessage:
    def test_from_raw_splits_on_first_blank_line(self) -> None:
        message = CommitMessage.from_raw("Subject\n\nBody\n\nMore\n")

        assert message == CommitMessage("Subject", "Body\n\nMore")

    def test_from_raw_without_body(self) -> None:
        assert CommitMessage.from_raw("Subject\n\n\n") == CommitMessage("Subject", None)

    def test_multiline_subject_is_first_paragraph(self) -> None:
        message = CommitMessage.from_raw("Line one\nline two\n\nBody")

        assert message.subject == "Line one\nline two"
        assert message.body == "Body"

    def test_full_and_str(self) -> None:
        message = CommitMessage("Subject", "Body")

        assert message.full() == "Subject\n\nBody"
        assert str(message) == message.full()

    def test_is_empty(self) -> None:
        assert CommitMessage.from_raw("").is_empty() is True
        assert CommitMessage("x").is_empty() is False


class TestCommit:
    def test_is_authored_by_matches_name_or_email(self) -> None:
        commit = _commit("a1")

        assert commit.is_authored_by("Ada") is True
        assert commit.is_authored_by("example.com") is True
        assert commit.is_authored_by("Grace") is False

    def test_message_contains_is_case_insensitive(self) -> None:
        commit = _commit("a1", subject="Fix Parser", body="Handles QUOTED paths")

        assert commit.message_contains("parser") is True
        assert commit.message_contains("quoted") is True
        assert commit.message_contains("missing") is False

    def test_str(self) -> None:
        commit = _commit("abcdef0123", subject="Fix")

        assert str(commit) == "abcdef0 Fix by Ada at 2024-01-01 00:00:00 UTC"

    def test_author_str(self) -> None:
        assert str(Author("Ada", "ada@x", _EPOCH)) == "Ada <ada@x>"


class TestCommitLog:
    @pytest.fixture
    def log(self) -> CommitLog:
        return CommitLog(
            (
                _commit("a1", when=datetime(2024, 3, 1, tzinfo=UTC), parents=("b1", "c1")),
                _commit("b1", author="Grace", when=datetime(2024, 2, 1, tzinfo=UTC)),
                _commit("c1", subject="Initial", when=_EPOCH, parents=()),
            )
        )

    def test_by_author(self, log: CommitLog) -> None:
        assert [c.hash.value for c in log.by_author("Grace")] == ["b1"]

    def test_since_and_until_are_inclusive(self, log: CommitLog) -> None:
        cutoff = datetime(2024, 2, 1, tzinfo=UTC)

        assert [c.hash.value for c in log.since(cutoff)] == ["a1", "b1"]
        assert [c.hash.value for c in log.until(cutoff)] == ["b1", "c1"]

    def test_with_message_containing(self, log: CommitLog) -> None:
        assert [c.hash.value for c in log.with_message_containing("initial")] == ["c1"]

    def test_merge_filters(self, log: CommitLog) -> None:
        assert [c.hash.value for c in log.merges_only()] == ["a1"]
        assert [c.hash.value for c in log.no_merges()] == ["b1", "c1"]

    def test_find_by_hash_requires_exact_match(self, log: CommitLog) -> None:
        assert log.find_by_hash(Hash("b1")) is log[1]
        assert log.find_by_hash(Hash("b")) is None

    def test_find_by_short_hash(self) -> None:
        log = CommitLog((_commit("abcdef0123"),))

        assert log.find_by_short_hash("abcdef0") is log[0]
        assert log.find_by_short_hash("abcdef") is None

    def test_first_and_last(self, log: CommitLog) -> None:
        assert log.first() is log[0]
        assert log.last() is log[2]
        assert CommitLog().first() is None
