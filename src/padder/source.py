"""Paddable sources.

Any value with a length and the two padding operations satisfies the
:class:`Source` protocol; no base class is involved. The adapters in this
module cover builtin sequences:

- :class:`TextSource` for ``str`` and :class:`~padder.buffer.TextBuffer`
  (fill element: ``symbol.char``),
- :class:`BytesSource` for bytes-likes and :class:`~padder.buffer.ByteBuffer`
  (fill element: ``symbol.byte``),
- :class:`SequenceSource` for any other sequence, with the fill element
  built through the element type's ``from_symbol``.

All of them compute fill counts with :func:`~padder.engine.compute_fill`
and write through :func:`~padder.engine.write_padded`.
"""

from __future__ import annotations

from typing import (
    Any,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    Type,
    TypeVar,
    Union,
    runtime_checkable,
)

from .alignment import Alignment
from .buffer import ByteBuffer, TextBuffer
from .elements import element_from_symbol, supports_symbols
from .engine import compute_fill, write_padded
from .errors import E_ELEMENT_TYPE, E_SOURCE, ElementTypeError, SourceError
from .symbol import SymbolLike

__all__ = [
    "Source",
    "TextSource",
    "BytesSource",
    "SequenceSource",
    "as_source",
]

T = TypeVar("T")

BytesLike = Union[bytes, bytearray, memoryview]


@runtime_checkable
class Source(Protocol):
    def __len__(self) -> int: ...

    def pad(
        self, width: int, alignment: Alignment, symbol: SymbolLike
    ) -> Any: ...

    def pad_and_push_to_buffer(
        self,
        width: int,
        alignment: Alignment,
        symbol: SymbolLike,
        destination: Any,
    ) -> None: ...


class TextSource:
    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"TextSource({self.text!r})"

    def pad(self, width: int, alignment: Alignment, symbol: SymbolLike) -> str:
        fill = compute_fill(len(self.text), width, alignment)
        if not fill.total:
            return self.text
        char = symbol.char
        return f"{char * fill.left}{self.text}{char * fill.right}"

    def pad_and_push_to_buffer(
        self,
        width: int,
        alignment: Alignment,
        symbol: SymbolLike,
        destination: Any,
    ) -> None:
        fill = compute_fill(len(self.text), width, alignment)
        write_padded(destination, self.text, symbol.char, fill)


class BytesSource:
    """Byte content padded with ``symbol.byte``.

    ``owner`` is the object the bytes live in when ``data`` is a view of
    it. Pushing into the owner copies the content first, since the write
    appends to the same storage the content is read from.
    """

    __slots__ = ("data", "_owner")

    def __init__(self, data: BytesLike, owner: Any = None):
        if isinstance(data, memoryview):
            data = data.cast("B")
        self.data = data
        self._owner = data if owner is None else owner

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"BytesSource({bytes(self.data)!r})"

    def pad(
        self, width: int, alignment: Alignment, symbol: SymbolLike
    ) -> bytes:
        fill = compute_fill(len(self.data), width, alignment)
        out = bytearray()
        write_padded(out, self.data, symbol.byte, fill)
        return bytes(out)

    def pad_and_push_to_buffer(
        self,
        width: int,
        alignment: Alignment,
        symbol: SymbolLike,
        destination: Any,
    ) -> None:
        fill = compute_fill(len(self.data), width, alignment)
        content = self.data
        if destination is self._owner or destination is self.data:
            content = bytes(self.data)
        write_padded(destination, content, symbol.byte, fill)


class SequenceSource(Generic[T]):
    """Generic element sequence padded with ``element_type`` fill elements.

    ``element_type`` defaults to the type of the first element. An empty
    sequence carries no type information, so it must be given explicitly.
    """

    __slots__ = ("items", "element_type")

    def __init__(
        self, items: Sequence[T], element_type: Optional[Type[T]] = None
    ):
        if element_type is None:
            if not len(items):
                raise ElementTypeError(
                    code=E_ELEMENT_TYPE,
                    message="cannot infer the element type of an empty sequence",
                )
            element_type = type(items[0])
        if not supports_symbols(element_type):
            raise ElementTypeError(
                code=E_ELEMENT_TYPE,
                message=(
                    f"{element_type.__name__} cannot be built from a symbol; "
                    "define a from_symbol classmethod"
                ),
                context={"element_type": element_type.__qualname__},
            )
        self.items = items
        self.element_type = element_type

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return (
            f"SequenceSource({self.items!r}, "
            f"element_type={self.element_type.__name__})"
        )

    def pad(
        self, width: int, alignment: Alignment, symbol: SymbolLike
    ) -> List[T]:
        out: List[T] = []
        self.pad_and_push_to_buffer(width, alignment, symbol, out)
        return out

    def pad_and_push_to_buffer(
        self,
        width: int,
        alignment: Alignment,
        symbol: SymbolLike,
        destination: Any,
    ) -> None:
        fill = compute_fill(len(self.items), width, alignment)
        element = (
            element_from_symbol(self.element_type, symbol)
            if fill.total
            else None
        )
        content = self.items
        if destination is self.items:
            content = list(self.items)
        write_padded(destination, content, element, fill)


def as_source(value: Any, element_type: Optional[type] = None) -> Source:
    """Adapt ``value`` to the :class:`Source` protocol.

    Values that already implement it are returned unchanged.
    """
    if isinstance(value, str):
        return TextSource(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesSource(value)
    if isinstance(value, ByteBuffer):
        return BytesSource(value.view(), owner=value)
    if isinstance(value, TextBuffer):
        return TextSource(value.getvalue())
    if isinstance(value, Source):
        return value
    if isinstance(value, Sequence):
        return SequenceSource(value, element_type)
    raise SourceError(
        code=E_SOURCE,
        message=f"{type(value).__name__} cannot be padded",
        context={"type": type(value).__qualname__},
    )
