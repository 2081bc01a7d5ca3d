"""Alignment policies."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import E_ALIGNMENT, AlignmentError

__all__ = ["Alignment", "parse_alignment"]


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    def __str__(self) -> str:
        return self.value


# format-spec style markers: "<" keeps content left, fill goes right
_MARKERS = {
    "<": Alignment.LEFT,
    ">": Alignment.RIGHT,
    "^": Alignment.CENTER,
}


def parse_alignment(value: Any) -> Alignment:
    if isinstance(value, Alignment):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text in _MARKERS:
            return _MARKERS[text]
        try:
            return Alignment(text.lower())
        except ValueError:
            pass
    raise AlignmentError(
        code=E_ALIGNMENT,
        message=f"unknown alignment: {value!r}",
        context={"choices": [a.value for a in Alignment] + list(_MARKERS)},
    )
