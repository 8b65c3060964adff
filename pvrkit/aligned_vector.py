"""A growable array of fixed-size binary elements, allocated in chunks."""

from __future__ import annotations

from collections.abc import Iterator

CHUNK_SIZE = 256


def round_to_chunk_size(value: int) -> int:
    """Round *value* up to the next multiple of the allocation chunk size."""
    if value < 0:
        raise ValueError("value must not be negative")
    return ((value + CHUNK_SIZE - 1) // CHUNK_SIZE) * CHUNK_SIZE


class AlignedVector:
    """A contiguous vector of elements of ``element_size`` bytes each.

    Capacity always grows in multiples of :data:`CHUNK_SIZE` elements so
    that repeated appends do not cause many small reallocations. Views
    returned by the accessors refer to the storage current at the time of
    the call; growing or shrinking the vector moves to new storage.
    """

    def __init__(self, element_size: int) -> None:
        if element_size <= 0:
            raise ValueError("element_size must be positive")
        self._element_size = element_size
        self._size = 0
        self._capacity = CHUNK_SIZE
        self._data = bytearray(CHUNK_SIZE * element_size)

    @property
    def element_size(self) -> int:
        return self._element_size

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bytes]:
        es = self._element_size
        for start in range(0, self._size * es, es):
            yield bytes(self._data[start:start + es])

    def _view(self, start: int, stop: int) -> memoryview | None:
        if start >= stop:
            return None
        es = self._element_size
        return memoryview(self._data)[start * es:stop * es]

    def reserve(self, element_count: int) -> None:
        """Make room for *element_count* elements; the size is unchanged."""
        if element_count < 0:
            raise ValueError("element_count must not be negative")
        if element_count < self._capacity:
            return
        element_count = round_to_chunk_size(element_count)
        used = self._size * self._element_size
        data = bytearray(element_count * self._element_size)
        data[:used] = self._data[:used]
        self._data = data
        self._capacity = element_count

    def resize(self, element_count: int) -> memoryview | None:
        """Set the size; return a view of the new elements, or None if none were added."""
        if element_count < 0:
            raise ValueError("element_count must not be negative")
        previous = self._size
        if self._capacity <= element_count:
            self.reserve(element_count)
        self._size = element_count
        return self._view(previous, element_count)

    def extend(self, additional_count: int) -> memoryview:
        """Grow by *additional_count* elements and return a view of them."""
        if additional_count <= 0:
            raise ValueError("additional_count must be positive")
        view = self.resize(self._size + additional_count)
        assert view is not None
        return view

    def push_back(self, data: bytes | bytearray | memoryview) -> memoryview:
        """Append one or more whole elements and return a view of them."""
        payload = bytes(data)
        if not payload:
            raise ValueError("nothing to push")
        count, remainder = divmod(len(payload), self._element_size)
        if remainder:
            raise ValueError(
                f"data length {len(payload)} is not a multiple of the element size "
                f"{self._element_size}"
            )
        view = self.extend(count)
        view[:] = payload
        return view

    def at(self, index: int) -> memoryview:
        """Return a writable view of the element at *index*."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        view = self._view(index, index + 1)
        assert view is not None
        return view

    def front(self) -> memoryview:
        """Return a view of the first element."""
        return self.at(0)

    def back(self) -> memoryview:
        """Return a view of the last element."""
        return self.at(self._size - 1 if self._size else 0)

    def clear(self) -> None:
        """Drop all elements, keeping the capacity."""
        self._size = 0

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        if self._size == 0:
            self._data = bytearray()
            self._capacity = 0
        else:
            self._data = bytearray(self._data[:self._size * self._element_size])
            self._capacity = self._size

    def cleanup(self) -> None:
        """Drop all elements and release the storage."""
        self.clear()
        self.shrink_to_fit()