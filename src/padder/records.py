"""Fixed-width records.

A :class:`RecordLayout` describes a row as a list of columns, each padded
to its own width. Formatting a row reserves one :class:`ByteBuffer` of
``record_width`` bytes and pads every column straight into it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from .alignment import Alignment, parse_alignment
from .api import pad_and_push_to_buffer
from .buffer import ByteBuffer
from .errors import layout_error
from .logging import get_logger
from .reporting import job
from .symbol import Symbol, SymbolLike, parse_symbol, symbol_to_value

__all__ = ["Column", "RecordLayout", "Row"]

Row = Union[Mapping[str, Any], Sequence[Any]]


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    width: int
    alignment: Alignment = Alignment.LEFT
    symbol: SymbolLike = Symbol.WHITESPACE

    def __post_init__(self) -> None:
        if not self.name:
            raise layout_error("column name must not be empty")
        if not isinstance(self.width, int) or self.width < 0:
            raise layout_error(
                "column width must be a non-negative integer",
                {"column": self.name, "width": self.width},
            )
        object.__setattr__(self, "alignment", parse_alignment(self.alignment))
        object.__setattr__(self, "symbol", parse_symbol(self.symbol))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "width": self.width,
            "alignment": self.alignment.value,
            "symbol": symbol_to_value(self.symbol),
        }


@dataclass(slots=True)
class RecordLayout:
    columns: List[Column]
    encoding: str = "utf-8"
    separator: bytes = b""
    line_ending: bytes = b"\n"
    _names: List[str] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        if not self.columns:
            raise layout_error("layout needs at least one column")
        names = [c.name for c in self.columns]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise layout_error("duplicate column names", {"names": dupes})
        self._names = names

    @property
    def record_width(self) -> int:
        """Bytes per record when no value overflows its column."""
        return (
            sum(c.width for c in self.columns)
            + len(self.separator) * (len(self.columns) - 1)
            + len(self.line_ending)
        )

    def _values(self, row: Row) -> Iterator[str]:
        if isinstance(row, Mapping):
            values: Iterable[Any] = (row.get(n) for n in self._names)
        elif isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise layout_error(
                "row must be an object or a list of values",
                {"type": type(row).__name__},
            )
        else:
            if len(row) > len(self.columns):
                raise layout_error(
                    "row has more values than the layout has columns",
                    {"values": len(row), "columns": len(self.columns)},
                )
            values = list(row) + [None] * (len(self.columns) - len(row))
        for value in values:
            yield "" if value is None else str(value)

    def write_record(self, row: Row, buffer: Any) -> int:
        """Pad every column of ``row`` into ``buffer``.

        Returns the number of values longer than their column; those are
        written unmodified, which makes the record longer than
        ``record_width``.
        """
        overflows = 0
        for i, (column, value) in enumerate(zip(self.columns, self._values(row))):
            if i and self.separator:
                buffer.extend(self.separator)
            data = value.encode(self.encoding)
            if len(data) > column.width:
                overflows += 1
                get_logger().warning(
                    "value for column %r is %d bytes, wider than %d",
                    column.name,
                    len(data),
                    column.width,
                )
            pad_and_push_to_buffer(
                data, column.width, column.alignment, column.symbol, buffer
            )
        buffer.extend(self.line_ending)
        return overflows

    def format_record(self, row: Row) -> bytes:
        """Return one formatted record as bytes."""
        return bytes(self._render(row, ByteBuffer(self.record_width))[0])

    def format_records(self, rows: Iterable[Row]) -> List[bytes]:
        """Format ``rows`` one after another, reusing a single buffer."""
        rows = list(rows)
        buffer = ByteBuffer(self.record_width)
        out: List[bytes] = []
        written = 0
        overflows = 0
        with job("format records", total=len(rows)) as progress:
            for row in rows:
                dest, count = self._render(row, buffer)
                record = bytes(dest)
                out.append(record)
                written += len(record)
                overflows += count
                progress.advance(
                    records=len(out), bytes=written, overflows=overflows
                )
        get_logger().info(
            "records summary: records=%d bytes=%d overflows=%d",
            len(out),
            written,
            overflows,
        )
        return out

    def _render(self, row: Row, buffer: ByteBuffer) -> Tuple[Any, int]:
        # over-long values pass through, so such rows cannot use the
        # fixed-capacity buffer
        buffer.clear()
        dest: Any = buffer
        if self._overflows(row):
            dest = bytearray()
        return dest, self.write_record(row, dest)

    def _overflows(self, row: Row) -> bool:
        return any(
            len(v.encode(self.encoding)) > c.width
            for c, v in zip(self.columns, self._values(row))
        )

    def to_dict(self) -> dict:
        return {
            "columns": [c.to_dict() for c in self.columns],
            "encoding": self.encoding,
            "separator": self.separator.decode(self.encoding),
            "line_ending": self.line_ending.decode(self.encoding),
            "record_width": self.record_width,
        }
