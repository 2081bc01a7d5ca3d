"""Record layout loading (JSON/YAML)."""

from __future__ import annotations
from pathlib import Path
from typing import Any
import json

import yaml

from .errors import PadError, layout_error
from .records import Column, RecordLayout

__all__ = ["load_layout", "parse_layout"]


def load_layout(path: str | Path) -> RecordLayout:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise layout_error(f"cannot parse layout: {e}", {"path": str(p)}) from e
    return parse_layout(data)


def _text_field(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise layout_error(f"'{key}' must be a string", {key: value})
    return value


def parse_layout(data: Any) -> RecordLayout:
    if not isinstance(data, dict):
        raise layout_error("root of a layout must be an object")
    raw_columns = data.get("columns")
    if not isinstance(raw_columns, list):
        raise layout_error("'columns' must be a list")
    encoding = _text_field(data, "encoding", "utf-8")
    columns = []
    for index, entry in enumerate(raw_columns):
        if not isinstance(entry, dict):
            raise layout_error("column must be an object", {"index": index})
        missing = [k for k in ("name", "width") if k not in entry]
        if missing:
            raise layout_error(
                "column is missing required fields",
                {"index": index, "missing": missing},
            )
        try:
            columns.append(
                Column(
                    name=str(entry["name"]),
                    width=entry["width"],
                    alignment=entry.get("alignment", "left"),
                    symbol=entry.get("symbol", "whitespace"),
                )
            )
        except PadError as e:
            raise layout_error(
                f"invalid column: {e.message}",
                {"index": index, "code": e.code, **(e.context or {})},
            ) from e
    try:
        return RecordLayout(
            columns=columns,
            encoding=encoding,
            separator=_text_field(data, "separator", "").encode(encoding),
            line_ending=_text_field(data, "line_ending", "\n").encode(encoding),
        )
    except LookupError as e:
        raise layout_error(f"unknown encoding: {encoding}") from e
