"""Options for the diff command."""

from dataclasses import dataclass, replace
from pathlib import Path  # noqa: TC003
from typing import Final, Self

from gitparse.diff import DiffFormat
from gitparse.exceptions import OptionsError
from gitparse.options._common import path_args, to_paths

DEFAULT_CONTEXT_LINES: Final = 3

_FORMAT_FLAGS: Final = {
    DiffFormat.PATCH: None,
    DiffFormat.NAME_ONLY: "--name-only",
    DiffFormat.STAT: "--stat",
    DiffFormat.NUMSTAT: "--numstat",
}


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Arguments appended after ``diff``.

    Order: ``-U<n>`` (only when not the default of 3), whitespace flags,
    the output format flag, ``--cached``, ``--no-index``, revisions, then
    ``--`` and paths. Exactly one output format applies; pass the same
    ``output_format`` to ``parse_diff_output``.
    """

    context_lines: int = DEFAULT_CONTEXT_LINES
    ignore_all_space: bool = False
    ignore_space_change: bool = False
    ignore_blank_lines: bool = False
    output_format: DiffFormat = DiffFormat.PATCH
    cached: bool = False
    no_index: bool = False
    revisions: tuple[str, ...] = ()
    paths: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        if self.context_lines < 0:
            msg = f"context_lines must be non-negative, got {self.context_lines}"
            raise OptionsError(msg, option="context_lines")

    def with_context_lines(self, lines: int) -> Self:
        return replace(self, context_lines=lines)

    def with_ignore_all_space(self) -> Self:
        return replace(self, ignore_all_space=True)

    def with_ignore_space_change(self) -> Self:
        return replace(self, ignore_space_change=True)

    def with_ignore_blank_lines(self) -> Self:
        return replace(self, ignore_blank_lines=True)

    def with_output_format(self, output_format: DiffFormat) -> Self:
        """Select the output format, replacing any previous choice."""
        return replace(self, output_format=output_format)

    def with_name_only(self) -> Self:
        return self.with_output_format(DiffFormat.NAME_ONLY)

    def with_stat(self) -> Self:
        return self.with_output_format(DiffFormat.STAT)

    def with_numstat(self) -> Self:
        return self.with_output_format(DiffFormat.NUMSTAT)

    def with_cached(self) -> Self:
        return replace(self, cached=True)

    def with_no_index(self) -> Self:
        return replace(self, no_index=True)

    def with_revisions(self, *revisions: str) -> Self:
        return replace(self, revisions=revisions)

    def with_paths(self, *paths: Path | str) -> Self:
        return replace(self, paths=to_paths(paths))

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.context_lines != DEFAULT_CONTEXT_LINES:
            args.append(f"-U{self.context_lines}")
        if self.ignore_all_space:
            args.append("--ignore-all-space")
        if self.ignore_space_change:
            args.append("--ignore-space-change")
        if self.ignore_blank_lines:
            args.append("--ignore-blank-lines")
        format_flag = _FORMAT_FLAGS[self.output_format]
        if format_flag is not None:
            args.append(format_flag)
        if self.cached:
            args.append("--cached")
        if self.no_index:
            args.append("--no-index")
        args.extend(self.revisions)
        args.extend(path_args(self.paths))
        return args
