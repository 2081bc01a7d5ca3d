"""Command line interface for padder."""

from __future__ import annotations

import argparse
import csv
import json
import re
import sys
from pathlib import Path
from typing import Any, List, Tuple

from ._version import __version__
from .alignment import Alignment, parse_alignment
from .api import pad, pad_into_bytes
from .errors import E_WIDTH, PadError, WidthError, layout_error
from .loader import load_layout
from .logging import configure_logging, get_logger, step
from .reporting import (
    REPORTERS,
    PlainReporter,
    get_reporter,
    set_reporter,
)
from .symbol import Symbol, SymbolLike, parse_symbol

_FILL_SPEC = re.compile(r"^(?:(?P<fill>.)?(?P<align>[<>^]))?(?P<width>\d+)$", re.S)


def parse_fill_spec(spec: str) -> Tuple[SymbolLike, Alignment, int]:
    """Parse ``[[fill]align]width`` as in ``-^10`` or ``0>8``.

    Fill defaults to whitespace and alignment to left.
    """
    m = _FILL_SPEC.match(spec)
    if m is None:
        raise WidthError(
            code=E_WIDTH,
            message=f"invalid fill spec: {spec!r}",
            context={"expected": "[[fill]align]width"},
        )
    fill = m.group("fill")
    align = m.group("align") or "<"
    symbol = parse_symbol(fill) if fill is not None else Symbol.WHITESPACE
    return symbol, parse_alignment(align), int(m.group("width"))


def _arg(parse):
    """Wrap a parser so argparse reports its errors as usage errors."""

    def convert(value: str):
        try:
            return parse(value)
        except PadError as e:
            raise argparse.ArgumentTypeError(e.message) from e

    convert.__name__ = parse.__name__
    return convert


def _pad_cmd(args: argparse.Namespace) -> int:
    if args.bytes:
        data = pad_into_bytes(args.text, args.width, args.align, args.symbol)
        sys.stdout.buffer.write(data + b"\n")
        sys.stdout.flush()
    else:
        print(pad(args.text, args.width, args.align, args.symbol))
    get_logger().debug(
        "pad summary: width=%d alignment=%s symbol=%s",
        args.width,
        args.align,
        args.symbol,
    )
    return 0


def _fill_cmd(args: argparse.Namespace) -> int:
    symbol, alignment, width = parse_fill_spec(args.spec)
    step(f"padding stdin to width={width} alignment={alignment} symbol={symbol}")
    for line in sys.stdin:
        print(pad(line.rstrip("\r\n"), width, alignment, symbol))
    return 0


def _read_rows(path: Path | None, use_csv: bool) -> List[Any]:
    stream = path.open(encoding="utf-8", newline="") if path else sys.stdin
    try:
        if use_csv:
            return list(csv.DictReader(stream))
        rows = []
        for lineno, line in enumerate(stream, 1):
            if not line.strip():
                continue
            try:
                rows.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise layout_error(
                    f"invalid row: {e.msg}", {"line": lineno, "column": e.colno}
                ) from e
        return rows
    finally:
        if path:
            stream.close()


def _records_cmd(args: argparse.Namespace) -> int:
    layout = load_layout(args.layout)
    step(
        f"loaded layout: columns={len(layout.columns)} "
        f"record_width={layout.record_width}"
    )
    rows = _read_rows(args.input, args.csv)
    records = layout.format_records(rows)
    if args.output:
        with args.output.open("wb") as f:
            for record in records:
                f.write(record)
    else:
        for record in records:
            sys.stdout.buffer.write(record)
        sys.stdout.flush()
    return 0


def _layout_cmd(args: argparse.Namespace) -> int:
    layout = load_layout(args.layout)
    data = layout.to_dict()
    if args.json:
        print(json.dumps(data, indent=2, sort_keys=True))
        return 0
    rep = get_reporter()
    rep.section("Layout")
    for column in data["columns"]:
        rep.status(
            f"{column['name']}: width={column['width']} "
            f"alignment={column['alignment']} symbol={column['symbol']}"
        )
    rep.status(
        f"Layout summary: columns={len(data['columns'])} "
        f"record_width={data['record_width']}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="padder", description="Pad and align text to fixed widths"
    )
    p.add_argument("--version", action="version", version=__version__)
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=sorted(REPORTERS),
        default="plain",
        help="Select reporter backend: plain (default), rich, json (JSONL events), silent",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    pd = sub.add_parser("pad", help="Pad a single value")
    pd.add_argument("text")
    pd.add_argument("-w", "--width", type=int, required=True)
    pd.add_argument(
        "-a",
        "--align",
        type=_arg(parse_alignment),
        default=Alignment.LEFT,
        help="left, right, center (or <, >, ^)",
    )
    pd.add_argument(
        "-s",
        "--symbol",
        type=_arg(parse_symbol),
        default=Symbol.WHITESPACE,
        help="Symbol name (zero, hyphen, ...) or a single character",
    )
    pd.add_argument(
        "--bytes",
        action="store_true",
        help="Write UTF-8 bytes instead of text",
    )
    pd.set_defaults(func=_pad_cmd)

    f = sub.add_parser("fill", help="Pad every line of stdin")
    f.add_argument("spec", help="[[fill]align]width, e.g. -^10 or 0>8")
    f.set_defaults(func=_fill_cmd)

    r = sub.add_parser("records", help="Write fixed-width records")
    r.add_argument("layout", type=Path, help="Layout file (JSON or YAML)")
    r.add_argument(
        "input", type=Path, nargs="?", help="Rows as JSON lines (default stdin)"
    )
    r.add_argument("--csv", action="store_true", help="Read rows as CSV")
    r.add_argument("-o", "--output", type=Path)
    r.set_defaults(func=_records_cmd)

    lo = sub.add_parser("layout", help="Show a resolved layout")
    lo.add_argument("layout", type=Path)
    lo.add_argument("--json", action="store_true", help="Emit JSON layout")
    lo.set_defaults(func=_layout_cmd)

    return p


def _make_reporter(name: str):
    if name == "rich" and not sys.stderr.isatty():
        # no TTY: fall back quietly to plain
        return PlainReporter()
    return REPORTERS[name]()


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    set_reporter(_make_reporter(args.reporter))
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except PadError as e:
        get_reporter().error(str(e), code=e.code, context=e.context or {})
        return 2
    except FileNotFoundError as e:
        get_reporter().error(f"file not found: {e.filename or e}")
        return 2
    finally:
        get_reporter().flush()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
