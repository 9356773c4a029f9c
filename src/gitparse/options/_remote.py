"""Options for fetch and push."""

from dataclasses import dataclass, replace
from typing import Self


@dataclass(frozen=True, slots=True)
class FetchOptions:
    """Arguments appended after ``fetch``.

    Order: ``--prune``, ``--tags``, then ``--all`` or the remote name.
    """

    prune: bool = False
    tags: bool = False
    all_remotes: bool = False
    remote: str | None = None

    def with_prune(self) -> Self:
        return replace(self, prune=True)

    def with_tags(self) -> Self:
        return replace(self, tags=True)

    def with_all_remotes(self) -> Self:
        return replace(self, all_remotes=True)

    def with_remote(self, remote: str) -> Self:
        return replace(self, remote=remote)

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.prune:
            args.append("--prune")
        if self.tags:
            args.append("--tags")
        if self.all_remotes:
            args.append("--all")
        elif self.remote is not None:
            args.append(self.remote)
        return args


@dataclass(frozen=True, slots=True)
class PushOptions:
    """Arguments appended after ``push``.

    Order: ``--force``, ``--set-upstream``, ``--tags``, remote, refspec.
    """

    force: bool = False
    set_upstream: bool = False
    tags: bool = False
    remote: str | None = None
    refspec: str | None = None

    def with_force(self) -> Self:
        return replace(self, force=True)

    def with_set_upstream(self) -> Self:
        return replace(self, set_upstream=True)

    def with_tags(self) -> Self:
        return replace(self, tags=True)

    def with_remote(self, remote: str, refspec: str | None = None) -> Self:
        return replace(self, remote=remote, refspec=refspec)

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.force:
            args.append("--force")
        if self.set_upstream:
            args.append("--set-upstream")
        if self.tags:
            args.append("--tags")
        if self.remote is not None:
            args.append(self.remote)
            if self.refspec is not None:
                args.append(self.refspec)
        return args
