# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Commands that decode captured tool output.

Each command reads the output of one tool invocation from standard input
(or ``--input``) and prints the parsed records as a table or as JSON.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

from cyclopts import App, Parameter
from rich.table import Table
from rich.text import Text

from gitparse.diff import DiffFormat, DiffOutput, parse_diff_output
from gitparse.exceptions import ParseError
from gitparse.log import CommitLog, parse_log
from gitparse.refs import (
    BranchList,
    RemoteList,
    StashList,
    TagList,
    parse_branches,
    parse_remotes,
    parse_stashes,
    parse_tags,
)
from gitparse.status import GitStatus, parse_status

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error, format_json, read_input

JsonFlag = Annotated[
    bool, Parameter(name="--json", negative="", help="Print records as JSON")
]
InputPath = Annotated[
    Path | None,
    Parameter(name=["--input", "-i"], help="Read tool output from a file instead of stdin"),
]


def _parse[T](input_path: Path | None, parse: Callable[[str], T]) -> T:
    ctx = CLIContext.get_current()
    text = read_input(input_path, console=ctx.error_console)
    try:
        return parse(text)
    except ParseError as e:
        where = f" (line {e.line_number})" if e.line_number is not None else ""
        exit_with_error(f"{e}{where}", ExitCode.PARSE_ERROR, console=ctx.error_console)


def _print_json(data: Any) -> None:  # pyright: ignore[reportExplicitAny,reportAny]
    console = CLIContext.get_current().console
    console.print(format_json(data), markup=False, highlight=False, soft_wrap=True)


def _add_row(table: Table, *cells: str) -> None:
    # Paths and messages are literal text, never markup.
    table.add_row(*(Text(cell) for cell in cells))


def _print_table(table: Table, empty_message: str) -> None:
    console = CLIContext.get_current().console
    if table.row_count == 0:
        console.print(f"[dim]{empty_message}[/dim]")
        return
    console.print(table)


def register_commands(app: App) -> None:  # noqa: C901, PLR0915
    """Register the decoding commands on ``app``."""

    @app.command(name="status")
    def _status(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode ``status --porcelain`` output."""
        ctx = CLIContext.get_current()
        status: GitStatus = _parse(
            input_path,
            lambda text: parse_status(
                text,
                strict=ctx.config.parsing.strict_status_codes,
                logger=ctx.logger,
            ),
        )
        if as_json:
            _print_json(status)
            return

        table = Table("Path", "Index", "Worktree")
        for entry in status:
            _add_row(table, str(entry.path), entry.index_status, entry.worktree_status)
        _print_table(table, "Working tree clean")

    @app.command(name="log")
    def _log(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode log output rendered with the record format."""
        ctx = CLIContext.get_current()
        commits: CommitLog = _parse(
            input_path, lambda text: parse_log(text, logger=ctx.logger)
        )
        if as_json:
            _print_json(commits)
            return

        table = Table("Commit", "Author", "Date", "Subject")
        for commit in commits:
            _add_row(
                table,
                commit.hash.short(),
                commit.author.name,
                commit.timestamp.strftime("%Y-%m-%d %H:%M"),
                commit.message.subject,
            )
        _print_table(table, "No commits")

    @app.command(name="diff")
    def _diff(
        *,
        output_format: Annotated[
            DiffFormat,
            Parameter(name=["--format", "-f"], help="Format the diff was produced in"),
        ] = DiffFormat.PATCH,
        as_json: JsonFlag = False,
        input_path: InputPath = None,
    ) -> None:
        """Decode diff output in patch, name-only, stat or numstat format."""
        ctx = CLIContext.get_current()
        diff: DiffOutput = _parse(
            input_path,
            lambda text: parse_diff_output(text, output_format, logger=ctx.logger),
        )
        if as_json:
            _print_json(diff)
            return

        table = Table("Status", "Path", "+", "-", caption=str(diff.stats))
        for file in diff:
            path = str(file.path)
            if file.old_path is not None:
                path = f"{file.old_path} -> {path}"
            if file.is_binary():
                path += " (binary)"
            _add_row(table, file.status, path, str(file.additions), str(file.deletions))
        _print_table(table, "No changes")

    @app.command(name="branches")
    def _branches(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode branch listing output."""
        ctx = CLIContext.get_current()
        branches: BranchList = _parse(
            input_path, lambda text: parse_branches(text, logger=ctx.logger)
        )
        if as_json:
            _print_json(branches)
            return

        table = Table("", "Name", "Type", "Commit", "Upstream")
        for branch in branches:
            _add_row(
                table,
                "*" if branch.is_current else "",
                branch.name,
                branch.branch_type,
                branch.commit_hash.short(),
                branch.upstream or "",
            )
        _print_table(table, "No branches")

    @app.command(name="tags")
    def _tags(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode tag listing output."""
        ctx = CLIContext.get_current()
        tags: TagList = _parse(input_path, lambda text: parse_tags(text, logger=ctx.logger))
        if as_json:
            _print_json(tags)
            return

        table = Table("Name", "Type", "Commit", "Message")
        for tag in tags:
            _add_row(table, tag.name, tag.tag_type, tag.hash.short(), tag.message or "")
        _print_table(table, "No tags")

    @app.command(name="stashes")
    def _stashes(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode ``stash list`` output."""
        ctx = CLIContext.get_current()
        stashes: StashList = _parse(
            input_path, lambda text: parse_stashes(text, logger=ctx.logger)
        )
        if as_json:
            _print_json(stashes)
            return

        table = Table("Stash", "Branch", "Message")
        for stash in stashes:
            _add_row(table, stash.selector(), stash.branch, stash.message)
        _print_table(table, "No stashes")

    @app.command(name="remotes")
    def _remotes(*, as_json: JsonFlag = False, input_path: InputPath = None) -> None:
        """Decode ``remote -v`` output."""
        ctx = CLIContext.get_current()
        remotes: RemoteList = _parse(
            input_path, lambda text: parse_remotes(text, logger=ctx.logger)
        )
        if as_json:
            _print_json(remotes)
            return

        table = Table("Name", "Fetch", "Push")
        for remote in remotes:
            _add_row(table, remote.name, remote.fetch_url, remote.effective_push_url())
        _print_table(table, "No remotes")
