"""Fixed-capacity destination buffers for buffer-writing mode.

A buffer reserves all of its storage up front and never grows. Writing
past the reserved capacity is a caller error: the elements that still fit
are written, then :class:`~padder.errors.BufferCapacityError` is raised.
Callers that prefer growth can pass a plain ``list`` or ``bytearray`` as
the destination instead.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, MutableSequence, Sequence, TypeVar

from .errors import E_BUFFER_CAPACITY, BufferCapacityError

__all__ = ["Buffer", "ByteBuffer", "TextBuffer"]

T = TypeVar("T")


class Buffer(Sequence[T]):
    """Preallocated sequence with an explicit length and capacity.

    Buffers are read-only :class:`~collections.abc.Sequence` objects as far
    as sources are concerned, so a filled buffer can itself be padded.
    """

    __slots__ = ("_data", "_len")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise BufferCapacityError(
                code=E_BUFFER_CAPACITY,
                message="capacity must be non-negative",
                context={"capacity": capacity},
            )
        self._data: MutableSequence[Any] = self._allocate(capacity)
        self._len = 0

    def _allocate(self, capacity: int) -> MutableSequence[Any]:
        return [None] * capacity

    @classmethod
    def with_capacity(cls, capacity: int):
        return cls(capacity)

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._len

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for i in range(self._len):
            yield data[i]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.to_list()[index]
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("buffer index out of range")
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Buffer):
            return self.to_list() == other.to_list()
        if isinstance(other, Sequence):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(len={self._len}, "
            f"capacity={self.capacity})"
        )

    def append(self, element: T) -> None:
        if self._len >= len(self._data):
            raise self._overflow(1)
        self._data[self._len] = element
        self._len += 1

    def extend(self, elements: Iterable[T]) -> None:
        data = self._data
        end = len(data)
        pos = self._len
        try:
            for element in elements:
                if pos >= end:
                    raise self._overflow(1)
                data[pos] = element
                pos += 1
        finally:
            self._len = pos

    def clear(self) -> None:
        """Forget the contents; the reserved storage is kept."""
        self._len = 0

    def to_list(self) -> List[T]:
        return list(self._data[: self._len])

    def _overflow(self, requested: int) -> BufferCapacityError:
        return BufferCapacityError(
            code=E_BUFFER_CAPACITY,
            message="write exceeds reserved buffer capacity",
            context={
                "capacity": self.capacity,
                "length": self._len,
                "requested": requested,
            },
        )


class ByteBuffer(Buffer[int]):
    __slots__ = ()

    def _allocate(self, capacity: int) -> MutableSequence[Any]:
        return bytearray(capacity)

    def extend(self, elements: Iterable[int]) -> None:
        if isinstance(elements, (bytes, bytearray, memoryview)):
            chunk = memoryview(elements).cast("B")
            fits = min(len(chunk), self.remaining)
            self._data[self._len : self._len + fits] = chunk[:fits]
            self._len += fits
            if fits < len(chunk):
                raise self._overflow(len(chunk) - fits)
            return
        super().extend(elements)

    def view(self) -> memoryview:
        """Zero-copy view of the written bytes."""
        return memoryview(self._data)[: self._len]

    def to_bytes(self) -> bytes:
        return bytes(self._data[: self._len])

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.to_bytes() == bytes(other)
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]


class TextBuffer(Buffer[str]):
    __slots__ = ()

    def getvalue(self) -> str:
        return "".join(self._data[: self._len])

    def __str__(self) -> str:
        return self.getvalue()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.getvalue() == other
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]
