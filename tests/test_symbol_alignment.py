import pytest

from padder import (
    Alignment,
    AlignmentError,
    CustomSymbol,
    Symbol,
    SymbolError,
    parse_alignment,
    parse_symbol,
    symbol_to_value,
)


def test_builtin_symbols_map_to_one_unit():
    assert Symbol.WHITESPACE.char == " "
    assert Symbol.ZERO.char == "0"
    assert Symbol.HYPHEN.byte == ord("-")
    assert Symbol.NULL.byte == 0
    for symbol in Symbol:
        assert len(symbol.char) == 1
        assert 0 <= symbol.byte <= 0xFF


def test_custom_symbol_compares_by_value():
    assert CustomSymbol("x") == CustomSymbol("x")
    assert CustomSymbol("x") != CustomSymbol("y")
    assert CustomSymbol("é").byte == 0xE9


@pytest.mark.parametrize("bad", ["", "ab", "€", 5])
def test_custom_symbol_rejects_unrepresentable_fill(bad):
    with pytest.raises(SymbolError):
        CustomSymbol(bad)


def test_parse_symbol_forms():
    assert parse_symbol("zero") is Symbol.ZERO
    assert parse_symbol(" Whitespace ") is Symbol.WHITESPACE
    assert parse_symbol("-") is Symbol.HYPHEN
    assert parse_symbol("~") == CustomSymbol("~")
    assert parse_symbol({"custom": "~"}) == CustomSymbol("~")
    assert parse_symbol(Symbol.DOT) is Symbol.DOT


def test_parse_symbol_unknown_name():
    with pytest.raises(SymbolError) as exc:
        parse_symbol("sparkles")
    assert exc.value.code == "E_SYMBOL"
    with pytest.raises(SymbolError):
        parse_symbol({"custom": "x", "extra": 1})


def test_symbol_values_are_parseable():
    symbols = list(Symbol) + [CustomSymbol("~")]
    for symbol in symbols:
        assert parse_symbol(symbol_to_value(symbol)) == symbol
    assert symbol_to_value(Symbol.HASH) == "hash"


def test_parse_alignment_names_and_markers():
    assert parse_alignment("left") is Alignment.LEFT
    assert parse_alignment("RIGHT") is Alignment.RIGHT
    assert parse_alignment("^") is Alignment.CENTER
    assert parse_alignment("<") is Alignment.LEFT
    assert parse_alignment(">") is Alignment.RIGHT
    assert parse_alignment(Alignment.CENTER) is Alignment.CENTER


def test_parse_alignment_rejects_unknown():
    with pytest.raises(AlignmentError) as exc:
        parse_alignment("middle")
    assert exc.value.code == "E_ALIGNMENT"
