"""Error definitions for padder."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_WIDTH = "E_WIDTH"
E_SYMBOL = "E_SYMBOL"
E_ALIGNMENT = "E_ALIGNMENT"
E_ELEMENT_TYPE = "E_ELEMENT_TYPE"
E_SOURCE = "E_SOURCE"
E_BUFFER_CAPACITY = "E_BUFFER_CAPACITY"
E_LAYOUT = "E_LAYOUT"


@dataclass
class PadError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class WidthError(PadError):
    pass


class SymbolError(PadError):
    pass


class AlignmentError(PadError):
    pass


class ElementTypeError(PadError):
    pass


class SourceError(PadError):
    pass


class BufferCapacityError(PadError):
    pass


class LayoutError(PadError):
    pass


def width_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> WidthError:
    return WidthError(code=E_WIDTH, message=message, context=context)


def layout_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> LayoutError:
    return LayoutError(code=E_LAYOUT, message=message, context=context)


__all__ = [
    "PadError",
    "WidthError",
    "SymbolError",
    "AlignmentError",
    "ElementTypeError",
    "SourceError",
    "BufferCapacityError",
    "LayoutError",
    "width_error",
    "layout_error",
    "E_WIDTH",
    "E_SYMBOL",
    "E_ALIGNMENT",
    "E_ELEMENT_TYPE",
    "E_SOURCE",
    "E_BUFFER_CAPACITY",
    "E_LAYOUT",
]
