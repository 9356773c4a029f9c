"""CLI context for global state management.

The meta command loads configuration and builds the logger once, then
publishes them through a context variable for the subcommands to read.
"""

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.console import Console

from gitparse.config import GitParseConfig

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = contextvars.ContextVar(
    "cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration.

    Attributes:
        config: Loaded configuration object.
        logger: Structured logger passed to parsers, or None for the default.
        console: Console commands print their output to.
        error_console: Console for error messages.
    """

    config: GitParseConfig = field(default_factory=GitParseConfig, repr=False)
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)
    console: Console = field(default_factory=Console, repr=False)
    error_console: Console = field(
        default_factory=lambda: Console(stderr=True), repr=False
    )

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Return the active context, or a default one if none is set."""
        ctx = _current_cli_context.get()
        return ctx if ctx is not None else cls()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> contextvars.Token["CLIContext | None"]:
        return _current_cli_context.set(ctx)

    @classmethod
    def reset(cls, token: contextvars.Token["CLIContext | None"]) -> None:
        _current_cli_context.reset(token)
