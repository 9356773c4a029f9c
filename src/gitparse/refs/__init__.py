"""Branch, tag, stash and remote listings.

Each parser expects the output of the arguments in its ``*_LIST_ARGS``
constant, which the facade passes to the tool unchanged.

Example:
    >>> from gitparse.refs import parse_stashes
    >>> stash = parse_stashes("stash@{0}: WIP on main: abc1234 message\\n")[0]
    >>> stash.index, stash.branch, stash.message
    (0, 'main', 'abc1234 message')
"""

from gitparse.refs._branch import (
    BRANCH_FORMAT,
    BRANCH_LIST_ARGS,
    Branch,
    BranchList,
    BranchType,
    parse_branches,
)
from gitparse.refs._remote import REMOTE_LIST_ARGS, Remote, RemoteList, parse_remotes
from gitparse.refs._stash import (
    STASH_FORMAT,
    STASH_LIST_ARGS,
    Stash,
    StashList,
    parse_stashes,
)
from gitparse.refs._tag import TAG_FORMAT, TAG_LIST_ARGS, Tag, TagList, TagType, parse_tags

__all__ = [
    "BRANCH_FORMAT",
    "BRANCH_LIST_ARGS",
    "REMOTE_LIST_ARGS",
    "STASH_FORMAT",
    "STASH_LIST_ARGS",
    "TAG_FORMAT",
    "TAG_LIST_ARGS",
    "Branch",
    "BranchList",
    "BranchType",
    "Remote",
    "RemoteList",
    "Stash",
    "StashList",
    "Tag",
    "TagList",
    "TagType",
    "parse_branches",
    "parse_remotes",
    "parse_stashes",
    "parse_tags",
]
