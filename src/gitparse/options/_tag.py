"""Options for creating tags."""

from dataclasses import dataclass, replace
from typing import Self


@dataclass(frozen=True, slots=True)
class TagOptions:
    """Arguments appended after ``tag``: ``-a``, ``-f``, ``-s``, ``-m``, name, target.

    A message makes the tag annotated; ``-s`` signs it.
    """

    name: str | None = None
    target: str | None = None
    annotated: bool = False
    force: bool = False
    message: str | None = None
    sign: bool = False

    def with_name(self, name: str, target: str | None = None) -> Self:
        return replace(self, name=name, target=target)

    def with_annotated(self) -> Self:
        return replace(self, annotated=True)

    def with_force(self) -> Self:
        return replace(self, force=True)

    def with_message(self, message: str) -> Self:
        return replace(self, message=message)

    def with_sign(self) -> Self:
        return replace(self, sign=True)

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.annotated or self.message is not None:
            args.append("-a")
        if self.force:
            args.append("-f")
        if self.sign:
            args.append("-s")
        if self.message is not None:
            args.extend(["-m", self.message])
        if self.name is not None:
            args.append(self.name)
            if self.target is not None:
                args.append(self.target)
        return args
