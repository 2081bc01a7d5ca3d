import json

import pytest
import yaml

from padder import Alignment, CustomSymbol, LayoutError, Symbol
from padder.loader import load_layout, parse_layout


def _layout_dict() -> dict:
    return {
        "encoding": "latin-1",
        "separator": "|",
        "columns": [
            {"name": "id", "width": 6, "alignment": "right", "symbol": "zero"},
            {"name": "name", "width": 10},
            {"name": "flag", "width": 3, "alignment": "^", "symbol": {"custom": "~"}},
        ],
    }


def test_load_yaml_layout(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(yaml.safe_dump(_layout_dict()), encoding="utf-8")
    layout = load_layout(path)
    assert [c.name for c in layout.columns] == ["id", "name", "flag"]
    assert layout.columns[0].alignment is Alignment.RIGHT
    assert layout.columns[0].symbol is Symbol.ZERO
    assert layout.columns[1].alignment is Alignment.LEFT
    assert layout.columns[1].symbol is Symbol.WHITESPACE
    assert layout.columns[2].symbol == CustomSymbol("~")
    assert layout.separator == b"|"
    assert layout.record_width == 6 + 10 + 3 + 2 + 1


def test_load_json_layout(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(_layout_dict()), encoding="utf-8")
    layout = load_layout(path)
    assert layout.encoding == "latin-1"
    assert layout.format_record({"id": 7, "name": "é", "flag": "x"}) == (
        b"000007|\xe9         |~x~\n"
    )


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_layout(tmp_path / "nope.yaml")


def test_unparseable_yaml(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("columns: [unclosed", encoding="utf-8")
    with pytest.raises(LayoutError):
        load_layout(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {},
        {"columns": "id"},
        {"columns": [{"name": "id"}]},
        {"columns": ["id"]},
        {"columns": [{"name": "id", "width": 2}], "separator": 5},
        {"columns": [{"name": "id", "width": 2}], "encoding": "no-such-codec"},
    ],
)
def test_invalid_layouts(data):
    with pytest.raises(LayoutError):
        parse_layout(data)


def test_invalid_column_symbol_keeps_details():
    data = {"columns": [{"name": "id", "width": 2, "symbol": "sparkles"}]}
    with pytest.raises(LayoutError) as exc:
        parse_layout(data)
    assert exc.value.context["index"] == 0
    assert exc.value.context["code"] == "E_SYMBOL"
