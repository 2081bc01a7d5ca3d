"""Free-function entry points.

``pad`` and ``pad_and_push_to_buffer`` forward to the source's own
operations after adapting builtin values with :func:`as_source`; they add
no behavior of their own. The remaining helpers are conveniences on top.
"""

from __future__ import annotations

from typing import Any, Optional

from .alignment import Alignment
from .errors import width_error
from .source import as_source
from .symbol import Symbol, SymbolLike

__all__ = [
    "pad",
    "pad_and_push_to_buffer",
    "whitespace",
    "zeros",
    "pad_into_bytes",
    "try_pad",
    "try_pad_and_push_to_buffer",
]


def pad(
    source: Any,
    width: int,
    alignment: Alignment,
    symbol: SymbolLike,
    *,
    element_type: Optional[type] = None,
) -> Any:
    """Return ``source`` padded to ``width``.

    The result has ``max(width, len(source))`` elements: ``str`` for text,
    ``bytes`` for bytes-likes, ``list`` for other sequences. A source that
    is already long enough comes back unchanged (no truncation).
    """
    return as_source(source, element_type).pad(width, alignment, symbol)


def pad_and_push_to_buffer(
    source: Any,
    width: int,
    alignment: Alignment,
    symbol: SymbolLike,
    destination: Any,
    *,
    element_type: Optional[type] = None,
) -> None:
    """Append padded ``source`` to ``destination`` without an intermediate copy.

    The caller reserves room for ``max(width, len(source))`` more elements.
    A :class:`~padder.buffer.Buffer` that runs out of room raises
    :class:`~padder.errors.BufferCapacityError`; a ``list`` or
    ``bytearray`` grows instead.
    """
    as_source(source, element_type).pad_and_push_to_buffer(
        width, alignment, symbol, destination
    )


def whitespace(source: Any, width: int, alignment: Alignment) -> Any:
    return pad(source, width, alignment, Symbol.WHITESPACE)


def zeros(source: Any, width: int, alignment: Alignment) -> Any:
    return pad(source, width, alignment, Symbol.ZERO)


def pad_into_bytes(
    text: str,
    width: int,
    alignment: Alignment,
    symbol: SymbolLike,
    encoding: str = "utf-8",
) -> bytes:
    """Pad ``text`` by characters, then encode it."""
    return pad(text, width, alignment, symbol).encode(encoding)


def _check_fits(source: Any, width: int) -> None:
    if len(source) > width:
        raise width_error(
            "invalid target pad width for the provided source length",
            {"width": width, "source_length": len(source)},
        )


def try_pad(
    source: Any,
    width: int,
    alignment: Alignment,
    symbol: SymbolLike,
    *,
    element_type: Optional[type] = None,
) -> Any:
    """Like :func:`pad`, but raise ``WidthError`` if ``source`` is too long."""
    adapted = as_source(source, element_type)
    _check_fits(adapted, width)
    return adapted.pad(width, alignment, symbol)


def try_pad_and_push_to_buffer(
    source: Any,
    width: int,
    alignment: Alignment,
    symbol: SymbolLike,
    destination: Any,
    *,
    element_type: Optional[type] = None,
) -> None:
    """Like :func:`pad_and_push_to_buffer`, but refuse over-long sources.

    Nothing is written when ``WidthError`` is raised.
    """
    adapted = as_source(source, element_type)
    _check_fits(adapted, width)
    adapted.pad_and_push_to_buffer(width, alignment, symbol, destination)
