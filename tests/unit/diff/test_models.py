"""Unit tests for diff models."""

from pathlib import Path

import pytest

from gitparse.diff import (
    DiffChunk,
    DiffLine,
    DiffLineType,
    DiffOutput,
    DiffStats,
    DiffStatus,
    FileDiff,
)


class TestDiffStatus:
    @pytest.mark.parametrize(
        ("char", "status"),
        [
            ("A", DiffStatus.ADDED),
            ("M", DiffStatus.MODIFIED),
            ("D", DiffStatus.DELETED),
            ("R", DiffStatus.RENAMED),
            ("C", DiffStatus.COPIED),
        ],
    )
    def test_char_mapping(self, char: str, status: DiffStatus) -> None:
        assert DiffStatus.from_char(char) is status
        assert status.to_char() == char

    def test_unknown_char(self) -> None:
        assert DiffStatus.from_char("X") is None


class TestDiffChunk:
    def test_counts_and_header(self) -> None:
        chunk = DiffChunk(
            old_start=3,
            old_count=2,
            new_start=3,
            new_count=3,
            lines=(
                DiffLine(DiffLineType.CONTEXT, "a"),
                DiffLine(DiffLineType.DELETION, "b"),
                DiffLine(DiffLineType.ADDITION, "c"),
                DiffLine(DiffLineType.ADDITION, "d"),
            ),
            section="def f():",
        )

        assert chunk.additions() == 2
        assert chunk.deletions() == 1
        assert chunk.header() == "@@ -3,2 +3,3 @@ def f():"
        assert [str(line) for line in chunk.lines] == [" a", "-b", "+c", "+d"]


class TestFileDiff:
    def test_rename_requires_old_path(self) -> None:
        with pytest.raises(ValueError, match="old_path"):
            _ = FileDiff(path=Path("b"), status=DiffStatus.RENAMED)

    def test_modified_rejects_old_path(self) -> None:
        with pytest.raises(ValueError, match="old_path"):
            _ = FileDiff(path=Path("b"), old_path=Path("a"))

    def test_str(self) -> None:
        renamed = FileDiff(path=Path("b"), status=DiffStatus.RENAMED, old_path=Path("a"))

        assert str(renamed) == "renamed a -> b"
        assert str(FileDiff(path=Path("x"))) == "modified x"


class TestDiffOutput:
    @pytest.fixture
    def diff(self) -> DiffOutput:
        return DiffOutput(
            (
                FileDiff(path=Path("a.py"), additions=3, deletions=1),
                FileDiff(path=Path("b.py"), status=DiffStatus.ADDED, additions=5),
                FileDiff(path=Path("c.py"), status=DiffStatus.DELETED, deletions=7),
            )
        )

    def test_stats_are_derived(self, diff: DiffOutput) -> None:
        assert diff.stats == DiffStats(files_changed=3, insertions=8, deletions=8)

    def test_find(self, diff: DiffOutput) -> None:
        assert diff.find("b.py") is diff[1]
        assert diff.find(Path("missing.py")) is None

    def test_files_with_status(self, diff: DiffOutput) -> None:
        assert [str(f.path) for f in diff.files_with_status(DiffStatus.DELETED)] == ["c.py"]

    def test_empty(self) -> None:
        empty = DiffOutput()

        assert empty.is_empty() is True
        assert empty.stats == DiffStats()
