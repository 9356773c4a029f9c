"""Read-only sequence base for parsed record collections."""

from collections.abc import Iterator, Sequence
from typing import overload


class RecordSequence[T](Sequence[T]):
    """Immutable, order-preserving view over a tuple of parsed records.

    Subclasses are frozen slotted dataclasses whose single storage field is
    returned by ``_records()``. Element order is the tool's emission order.
    """

    __slots__ = ()

    def _records(self) -> tuple[T, ...]:
        raise NotImplementedError

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._records()[index]

    def __len__(self) -> int:
        return len(self._records())

    def __iter__(self) -> Iterator[T]:
        return iter(self._records())

    def is_empty(self) -> bool:
        """Return True if the collection holds no records."""
        return not self._records()

    def first(self) -> T | None:
        """Return the first record, or None if empty."""
        records = self._records()
        return records[0] if records else None

    def last(self) -> T | None:
        """Return the last record, or None if empty."""
        records = self._records()
        return records[-1] if records else None
