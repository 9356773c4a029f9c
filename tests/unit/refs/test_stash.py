"""Unit tests for stash listing parsing."""

from datetime import UTC, datetime

import pytest

from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.refs import Stash, StashList, parse_stashes

STASH_HASH = "d" * 40


class TestParseStashesDefaultFormat:
    def test_wip_line(self) -> None:
        (stash,) = parse_stashes("stash@{0}: WIP on main: abc1234 message")

        assert stash.index == 0
        assert stash.branch == "main"
        assert stash.message == "abc1234 message"
        assert stash.hash is None

    def test_custom_message_names_branch(self) -> None:
        (stash,) = parse_stashes("stash@{3}: On feature/x: halfway there\n")

        assert stash.index == 3
        assert stash.branch == "feature/x"
        assert stash.message == "halfway there"

    def test_message_without_branch(self) -> None:
        (stash,) = parse_stashes("stash@{1}: autostash\n")

        assert stash.branch == ""
        assert stash.message == "autostash"

    def test_multiple_lines(self) -> None:
        stashes = parse_stashes(
            "stash@{0}: WIP on main: one\nstash@{1}: WIP on dev: two\n"
        )

        assert [s.index for s in stashes] == [0, 1]

    def test_empty_input(self) -> None:
        assert parse_stashes("").is_empty() is True

    @pytest.mark.parametrize(
        "line",
        ["stash@{x}: WIP on main: a", "stash@{-1}: WIP on main: a", "stash: oops", "nothing"],
    )
    def test_bad_selector(self, line: str) -> None:
        with pytest.raises(MalformedRecordError) as exc_info:
            _ = parse_stashes(line)

        assert exc_info.value.line_number == 1


class TestParseStashesRecordFormat:
    def test_hash_and_timestamp(self) -> None:
        line = f"stash@{{0}}\x1f{STASH_HASH}\x1f1700000000\x1fWIP on main: abc1234 msg"

        (stash,) = parse_stashes(line)

        assert stash.hash == Hash(STASH_HASH)
        assert stash.timestamp == datetime.fromtimestamp(1700000000, UTC)
        assert stash.branch == "main"

    def test_wrong_field_count(self) -> None:
        with pytest.raises(MalformedRecordError) as exc_info:
            _ = parse_stashes(f"stash@{{0}}\x1f{STASH_HASH}\x1fWIP on main: x")

        assert exc_info.value.actual_fields == 3

    def test_bad_timestamp(self) -> None:
        with pytest.raises(MalformedRecordError, match="timestamp"):
            _ = parse_stashes(f"stash@{{0}}\x1f{STASH_HASH}\x1fnow\x1fOn main: x")

    def test_bad_hash(self) -> None:
        with pytest.raises(InvalidHashError):
            _ = parse_stashes("stash@{0}\x1fnot-hex\x1f1\x1fOn main: x")


class TestStashList:
    @pytest.fixture
    def stashes(self) -> StashList:
        return StashList(
            (
                Stash(index=0, message="fix parser", branch="main"),
                Stash(index=1, message="try layout", branch="ui"),
                Stash(index=2, message="parser notes", branch="main"),
            )
        )

    def test_latest(self, stashes: StashList) -> None:
        assert stashes.latest() is stashes[0]
        assert StashList().latest() is None

    def test_get_by_index(self, stashes: StashList) -> None:
        assert stashes.get(2) is stashes[2]
        assert stashes.get(5) is None

    def test_find_containing(self, stashes: StashList) -> None:
        assert [s.index for s in stashes.find_containing("parser")] == [0, 2]

    def test_for_branch(self, stashes: StashList) -> None:
        assert [s.index for s in stashes.for_branch("ui")] == [1]

    def test_selector_and_str(self) -> None:
        stash = Stash(index=4, message="notes")

        assert stash.selector() == "stash@{4}"
        assert str(stash) == "stash@{4}: notes"
