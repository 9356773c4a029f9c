"""Command-line interface for gitparse.

Example:
    $ git status --porcelain | gitparse status
    $ git diff --numstat | gitparse diff --format numstat --json
"""

from ._app import create_app, main
from ._commands import register_commands
from ._shared import ExitCode, format_json

__all__ = ["ExitCode", "create_app", "format_json", "main", "register_commands"]
