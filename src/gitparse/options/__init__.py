"""Option builders that render typed options into argument vectors.

Every builder is a frozen dataclass. ``with_*`` methods return a modified
copy, and ``to_args()`` renders the options in a fixed, documented order
for the facade to append after the subcommand name.

Example:
    >>> from gitparse.options import DiffOptions
    >>> DiffOptions().with_context_lines(5).with_stat().with_paths("src").to_args()
    ['-U5', '--stat', '--', 'src']
"""

from gitparse.options._diff import DEFAULT_CONTEXT_LINES, DiffOptions
from gitparse.options._files import MoveOptions, RemoveOptions, RestoreOptions
from gitparse.options._log import DATE_FORMAT, LogOptions, format_date
from gitparse.options._merge import FastForwardMode, MergeOptions, MergeStrategy
from gitparse.options._remote import FetchOptions, PushOptions
from gitparse.options._reset import ResetMode, ResetOptions
from gitparse.options._stash import StashApplyOptions, StashOptions
from gitparse.options._status import StatusOptions, UntrackedMode
from gitparse.options._tag import TagOptions

__all__ = [
    "DATE_FORMAT",
    "DEFAULT_CONTEXT_LINES",
    "DiffOptions",
    "FastForwardMode",
    "FetchOptions",
    "LogOptions",
    "MergeOptions",
    "MergeStrategy",
    "MoveOptions",
    "PushOptions",
    "RemoveOptions",
    "ResetMode",
    "ResetOptions",
    "RestoreOptions",
    "StashApplyOptions",
    "StashOptions",
    "StatusOptions",
    "TagOptions",
    "UntrackedMode",
    "format_date",
]
