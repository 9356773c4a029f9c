"""Options for the merge command."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Final, Self


class FastForwardMode(StrEnum):
    AUTO = "auto"
    ONLY = "only"
    NEVER = "never"


class MergeStrategy(StrEnum):
    ORT = "ort"
    RECURSIVE = "recursive"
    RESOLVE = "resolve"
    OCTOPUS = "octopus"
    OURS = "ours"
    SUBTREE = "subtree"


_FAST_FORWARD_FLAGS: Final = {
    FastForwardMode.AUTO: None,
    FastForwardMode.ONLY: "--ff-only",
    FastForwardMode.NEVER: "--no-ff",
}


@dataclass(frozen=True, slots=True)
class MergeOptions:
    """Arguments appended after ``merge``.

    Order: fast-forward flag, ``-s``, ``--no-commit``, ``-m``, branch.
    """

    fast_forward: FastForwardMode = FastForwardMode.AUTO
    strategy: MergeStrategy | None = None
    message: str | None = None
    no_commit: bool = False
    branch: str | None = None

    def with_fast_forward(self, mode: FastForwardMode) -> Self:
        return replace(self, fast_forward=mode)

    def with_strategy(self, strategy: MergeStrategy) -> Self:
        return replace(self, strategy=strategy)

    def with_message(self, message: str) -> Self:
        return replace(self, message=message)

    def with_no_commit(self) -> Self:
        return replace(self, no_commit=True)

    def with_branch(self, branch: str) -> Self:
        return replace(self, branch=branch)

    def to_args(self) -> list[str]:
        args: list[str] = []
        ff_flag = _FAST_FORWARD_FLAGS[self.fast_forward]
        if ff_flag is not None:
            args.append(ff_flag)
        if self.strategy is not None:
            args.extend(["-s", str(self.strategy)])
        if self.no_commit:
            args.append("--no-commit")
        if self.message is not None:
            args.extend(["-m", self.message])
        if self.branch is not None:
            args.append(self.branch)
        return args
