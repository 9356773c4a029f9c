"""Helpers shared by the option builders."""

from collections.abc import Iterable
from pathlib import Path
from typing import Final

PATH_SEPARATOR: Final = "--"


def to_paths(paths: Iterable[Path | str]) -> tuple[Path, ...]:
    """Normalize path filters to a tuple of ``Path``."""
    return tuple(Path(p) for p in paths)


def path_args(paths: tuple[Path, ...]) -> list[str]:
    """Render path filters after the ``--`` separator; empty if none."""
    if not paths:
        return []
    return [PATH_SEPARATOR, *(str(p) for p in paths)]
