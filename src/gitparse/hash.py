"""Object identifier value type.

The tool prints object names in both full and abbreviated form, so a
``Hash`` only guarantees a non-empty run of lowercase hexadecimal digits.
"""

import re
from dataclasses import dataclass
from typing import Final, Self

from gitparse.exceptions import InvalidHashError

SHORT_LENGTH: Final = 7

_HEX_PATTERN: Final = re.compile(r"[0-9a-f]+")


@dataclass(frozen=True, slots=True, order=True)
class Hash:
    """A validated object identifier.

    Equality and ordering compare the full string, so an abbreviated hash
    never equals the full hash it abbreviates.

    Attributes:
        value: The hexadecimal identifier as printed by the tool.
    """

    value: str

    def __post_init__(self) -> None:
        if not _HEX_PATTERN.fullmatch(self.value):
            msg = f"Invalid object hash: {self.value!r}"
            raise InvalidHashError(msg, value=self.value)

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse a raw identifier.

        Args:
            raw: Candidate identifier text.

        Returns:
            The validated hash.

        Raises:
            InvalidHashError: If ``raw`` is empty or contains non-hex characters.
        """
        return cls(raw)

    def short(self) -> str:
        """Return the first seven characters, or the whole value if shorter."""
        return self.value[:SHORT_LENGTH]

    def __str__(self) -> str:
        return self.value
