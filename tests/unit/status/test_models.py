"""Unit tests for status models."""

from pathlib import Path

import pytest

from gitparse.status import FileEntry, GitStatus, IndexStatus, WorktreeStatus, parse_status


class TestStatusCodes:
    @pytest.mark.parametrize("code", [" ", "M", "A", "D", "R", "C"])
    def test_index_round_trip(self, code: str) -> None:
        status = IndexStatus.from_char(code)

        assert status is not None
        assert status.to_char() == code

    @pytest.mark.parametrize("code", [" ", "M", "D", "?", "!"])
    def test_worktree_round_trip(self, code: str) -> None:
        status = WorktreeStatus.from_char(code)

        assert status is not None
        assert status.to_char() == code

    def test_unknown_chars_are_none(self) -> None:
        assert IndexStatus.from_char("U") is None
        assert WorktreeStatus.from_char("A") is None

    def test_entry_to_code(self) -> None:
        entry = FileEntry(Path("a"), IndexStatus.RENAMED, WorktreeStatus.MODIFIED)

        assert entry.to_code() == "RM"


class TestGitStatusQueries:
    @pytest.fixture
    def status(self) -> GitStatus:
        return parse_status(
            "M  staged.txt\n M unstaged.txt\nMM both.txt\n?? new.txt\n!! ignored.log\n"
        )

    def test_has_changes(self, status: GitStatus) -> None:
        assert status.has_changes() is True
        assert status.is_clean() is False

    def test_staged_files(self, status: GitStatus) -> None:
        assert [str(e.path) for e in status.staged_files()] == ["staged.txt", "both.txt"]

    def test_unstaged_files_include_untracked_and_ignored(self, status: GitStatus) -> None:
        assert [str(e.path) for e in status.unstaged_files()] == [
            "unstaged.txt",
            "both.txt",
            "new.txt",
            "ignored.log",
        ]

    def test_untracked_and_ignored(self, status: GitStatus) -> None:
        assert [str(e.path) for e in status.untracked_entries()] == ["new.txt"]
        assert [str(e.path) for e in status.ignored_files()] == ["ignored.log"]

    def test_filter_by_status(self, status: GitStatus) -> None:
        modified = list(status.files_with_index_status(IndexStatus.MODIFIED))
        worktree_modified = list(
            status.files_with_worktree_status(WorktreeStatus.MODIFIED)
        )

        assert len(modified) == 2
        assert len(worktree_modified) == 2

    def test_sequence_access(self, status: GitStatus) -> None:
        assert len(status) == 5
        assert status[0].path == Path("staged.txt")
        assert status.first() == status[0]
        assert status.last() == status[-1]
        assert len(status[1:3]) == 2

    def test_is_immutable(self, status: GitStatus) -> None:
        with pytest.raises(AttributeError):
            status.entries = ()  # pyright: ignore[reportAttributeAccessIssue]
