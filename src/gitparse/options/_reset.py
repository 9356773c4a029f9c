"""Options for the reset command."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self

from gitparse.exceptions import OptionsError


class ResetMode(StrEnum):
    SOFT = "soft"
    MIXED = "mixed"
    HARD = "hard"


@dataclass(frozen=True, slots=True)
class ResetOptions:
    """Arguments appended after ``reset``.

    Order: ``--soft``, ``--mixed`` or ``--hard``, then the target commit.
    """

    mode: ResetMode = ResetMode.MIXED
    commit: str = "HEAD"

    def __post_init__(self) -> None:
        if not self.commit:
            msg = "commit must not be empty"
            raise OptionsError(msg, option="commit")

    def with_mode(self, mode: ResetMode) -> Self:
        return replace(self, mode=mode)

    def with_commit(self, commit: str) -> Self:
        return replace(self, commit=commit)

    def to_args(self) -> list[str]:
        return [f"--{self.mode}", self.commit]
