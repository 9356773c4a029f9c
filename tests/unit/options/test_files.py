"""Unit tests for restore, rm and mv option builders."""

from gitparse.options import MoveOptions, RemoveOptions, RestoreOptions


class TestRestoreOptions:
    def test_defaults_restore_worktree(self) -> None:
        assert RestoreOptions().with_paths("a.txt").to_args() == [
            "--worktree",
            "--",
            "a.txt",
        ]

    def test_staged_only(self) -> None:
        assert RestoreOptions().with_staged().to_args() == ["--staged"]

    def test_staged_and_worktree_from_source(self) -> None:
        options = RestoreOptions().with_worktree().with_staged().with_source("HEAD~1")

        assert options.to_args() == ["--source", "HEAD~1", "--staged", "--worktree"]


class TestRemoveOptions:
    def test_defaults(self) -> None:
        assert RemoveOptions().with_paths("old.txt").to_args() == ["--", "old.txt"]

    def test_argument_order(self) -> None:
        options = (
            RemoveOptions()
            .with_ignore_unmatch()
            .with_cached()
            .with_recursive()
            .with_force()
            .with_paths("build")
        )

        assert options.to_args() == [
            "--force",
            "-r",
            "--cached",
            "--ignore-unmatch",
            "--",
            "build",
        ]


class TestMoveOptions:
    def test_source_and_destination(self) -> None:
        assert MoveOptions().with_move("a.txt", "b.txt").to_args() == ["a.txt", "b.txt"]

    def test_flags_precede_paths(self) -> None:
        options = MoveOptions().with_move("a", "b").with_dry_run().with_verbose().with_force()

        assert options.to_args() == ["-f", "-v", "-n", "a", "b"]
