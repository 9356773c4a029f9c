"""Unit tests for stash option builders."""

import pytest

from gitparse.exceptions import OptionsError
from gitparse.options import StashApplyOptions, StashOptions


class TestStashOptions:
    def test_defaults_render_nothing(self) -> None:
        assert StashOptions().to_args() == []

    def test_untracked(self) -> None:
        assert StashOptions().with_untracked().to_args() == ["--include-untracked"]

    def test_all_supersedes_untracked(self) -> None:
        options = StashOptions().with_all()

        assert options.include_untracked is True
        assert options.to_args() == ["--all"]

    def test_full_argument_order(self) -> None:
        options = (
            StashOptions()
            .with_paths("src")
            .with_message("wip parser")
            .with_staged_only()
            .with_patch()
            .with_keep_index()
            .with_untracked()
        )

        assert options.to_args() == [
            "--include-untracked",
            "--keep-index",
            "--patch",
            "--staged",
            "-m",
            "wip parser",
            "--",
            "src",
        ]


class TestStashApplyOptions:
    def test_selector(self) -> None:
        assert StashApplyOptions().with_stash(2).to_args() == ["stash@{2}"]

    def test_flags_precede_selector(self) -> None:
        options = StashApplyOptions().with_stash(0).with_quiet().with_index()

        assert options.to_args() == ["--index", "--quiet", "stash@{0}"]

    def test_negative_index(self) -> None:
        with pytest.raises(OptionsError) as exc_info:
            _ = StashApplyOptions().with_stash(-1)

        assert exc_info.value.option == "stash_index"
