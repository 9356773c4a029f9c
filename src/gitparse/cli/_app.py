"""The command-line interface for gitparse."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from gitparse.config import load_config
from gitparse.exceptions import ConfigError
from gitparse.utils import create_logger

from ._commands import register_commands
from ._context import CLIContext
from ._shared import ExitCode, exit_with_error

_HELP = "Decode captured git output into typed records."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Build the CLI application.

    Call ``app.meta(tokens)`` to run it with global option handling.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitparse",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Decode captured git output with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            config: Explicit path to a TOML config file.
        """
        try:
            loaded_config = load_config(config)
        except ConfigError as e:
            exit_with_error(str(e), ExitCode.CONFIG_ERROR, console=error_console)

        logger = create_logger(
            level=loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
        )

        ctx = CLIContext(
            config=loaded_config,
            logger=logger,
            console=console,
            error_console=error_console,
        )
        token = CLIContext.set_current(ctx)
        try:
            app(tokens)
        finally:
            CLIContext.reset(token)

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `gitparse` CLI."""
    app = create_app()
    app.meta()
