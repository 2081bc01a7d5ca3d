"""padder

Pads text, bytes and generic element sequences to a target width with a
fill :class:`Symbol` and an :class:`Alignment`. Every source supports two
modes: ``pad`` returns a new sequence, ``pad_and_push_to_buffer`` appends
into a destination the caller has already reserved.
"""

from ._version import __version__
from .alignment import Alignment, parse_alignment
from .api import (
    pad,
    pad_and_push_to_buffer,
    pad_into_bytes,
    try_pad,
    try_pad_and_push_to_buffer,
    whitespace,
    zeros,
)
from .buffer import Buffer, ByteBuffer, TextBuffer
from .elements import FromSymbol, element_from_symbol
from .engine import Fill, compute_fill
from .errors import (
    AlignmentError,
    BufferCapacityError,
    ElementTypeError,
    LayoutError,
    PadError,
    SourceError,
    SymbolError,
    WidthError,
)
from .source import BytesSource, SequenceSource, Source, TextSource, as_source
from .symbol import CustomSymbol, Symbol, SymbolLike, parse_symbol, symbol_to_value

__all__ = [
    "__version__",
    "Alignment",
    "Symbol",
    "CustomSymbol",
    "SymbolLike",
    "parse_alignment",
    "parse_symbol",
    "symbol_to_value",
    "FromSymbol",
    "element_from_symbol",
    "Fill",
    "compute_fill",
    "Source",
    "TextSource",
    "BytesSource",
    "SequenceSource",
    "as_source",
    "Buffer",
    "ByteBuffer",
    "TextBuffer",
    "pad",
    "pad_and_push_to_buffer",
    "pad_into_bytes",
    "try_pad",
    "try_pad_and_push_to_buffer",
    "whitespace",
    "zeros",
    "PadError",
    "WidthError",
    "SymbolError",
    "AlignmentError",
    "ElementTypeError",
    "SourceError",
    "BufferCapacityError",
    "LayoutError",
]
