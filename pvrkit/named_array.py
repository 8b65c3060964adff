"""A fixed-size table of zeroed byte slots addressed by integer ids."""

from __future__ import annotations

from collections.abc import Iterator


class NamedArray:
    """Up to ``max_element_count`` slots of ``element_size`` bytes each.

    Slots are handed out by :meth:`alloc` (lowest free id first) or claimed
    by id with :meth:`reserve`. A freshly taken slot is always zero-filled.
    """

    def __init__(self, element_size: int, max_element_count: int) -> None:
        if element_size < 0 or max_element_count < 0:
            raise ValueError("sizes must not be negative")
        self.element_size = element_size
        self.max_element_count = max_element_count
        self._slots: list[bytearray | None] = [None] * max_element_count

    def _check(self, id: int) -> None:
        if not 0 <= id < self.max_element_count:
            raise IndexError(f"id {id} out of range for {self.max_element_count} slots")

    def _take(self, id: int) -> bytearray:
        slot = bytearray(self.element_size)
        self._slots[id] = slot
        return slot

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, int) and self.is_used(id)

    def __iter__(self) -> Iterator[int]:
        """Yield the ids that are in use, in ascending order."""
        return (i for i, slot in enumerate(self._slots) if slot is not None)

    def is_used(self, id: int) -> bool:
        """Whether slot *id* is taken."""
        return 0 <= id < self.max_element_count and self._slots[id] is not None

    def alloc(self) -> tuple[int, bytearray] | None:
        """Take the lowest free slot; return its id and data, or None if all are taken."""
        for id, slot in enumerate(self._slots):
            if slot is None:
                return id, self._take(id)
        return None

    def reserve(self, id: int) -> bytearray:
        """Take slot *id* if free (zero-filled) and return its data."""
        self._check(id)
        slot = self._slots[id]
        if slot is not None:
            return slot
        return self._take(id)

    def release(self, id: int) -> None:
        """Mark slot *id* as free."""
        self._check(id)
        self._slots[id] = None

    def get(self, id: int) -> bytearray | None:
        """Return the data of slot *id*, or None if it is not in use."""
        if not self.is_used(id):
            return None
        return self._slots[id]

    def cleanup(self) -> None:
        """Drop every slot; the array holds nothing afterwards."""
        self._slots = []
        self.element_size = 0
        self.max_element_count = 0