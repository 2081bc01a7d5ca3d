"""Fill arithmetic and the write path shared by every source type.

``compute_fill`` is the only place that decides how much fill goes on each
side of the content. A source that is already at least as long as the
target width is passed through untouched; it is never truncated.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import repeat
from typing import Any, Iterable

from .alignment import Alignment
from .errors import width_error
from .logging import get_logger

__all__ = ["Fill", "compute_fill", "write_padded"]


@dataclass(frozen=True, slots=True)
class Fill:
    left: int
    right: int

    @property
    def total(self) -> int:
        return self.left + self.right


_NO_FILL = Fill(0, 0)


def compute_fill(source_length: int, width: int, alignment: Alignment) -> Fill:
    """Return the left/right fill counts for ``source_length`` in ``width``.

    ``left + source_length + right == max(width, source_length)`` holds for
    every alignment. Center alignment rounds the left side down, so an odd
    remainder ends up on the right.
    """
    if width < 0:
        raise width_error(
            "target width must be non-negative", {"width": width}
        )
    if source_length < 0:
        raise width_error(
            "source length must be non-negative",
            {"source_length": source_length},
        )
    diff = width - source_length
    if diff <= 0:
        return _NO_FILL
    if alignment is Alignment.LEFT:
        return Fill(0, diff)
    if alignment is Alignment.RIGHT:
        return Fill(diff, 0)
    if alignment is Alignment.CENTER:
        left = diff // 2
        return Fill(left, diff - left)
    raise TypeError(f"not an Alignment: {alignment!r}")


def write_padded(
    destination: Any, content: Iterable[Any], fill_element: Any, fill: Fill
) -> None:
    """Append left fill, ``content`` and right fill to ``destination``.

    ``destination`` only needs an ``extend`` method. Reserving room for
    ``fill.total`` plus the content length is the caller's job: a
    :class:`~padder.buffer.Buffer` raises once it is full, growable
    containers such as ``list`` or ``bytearray`` reallocate as usual.
    """
    if fill.left:
        destination.extend(repeat(fill_element, fill.left))
    destination.extend(content)
    if fill.right:
        destination.extend(repeat(fill_element, fill.right))
    get_logger().debug(
        "wrote padded content left=%d right=%d", fill.left, fill.right
    )
