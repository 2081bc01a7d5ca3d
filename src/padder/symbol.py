"""Fill symbols.

A symbol names the unit used to fill the space around padded content. The
builtin set lives in :class:`Symbol`; anything else is expressed as a
:class:`CustomSymbol`. Both expose the same two views of the fill unit,
``char`` for text and ``byte`` for byte sequences, so every symbol converts
to either element type without failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from .errors import E_SYMBOL, SymbolError

__all__ = [
    "Symbol",
    "CustomSymbol",
    "SymbolLike",
    "parse_symbol",
    "symbol_to_value",
]


class Symbol(Enum):
    WHITESPACE = " "
    ZERO = "0"
    HYPHEN = "-"
    UNDERSCORE = "_"
    DOT = "."
    ASTERISK = "*"
    HASH = "#"
    NULL = "\x00"

    @property
    def char(self) -> str:
        return self.value

    @property
    def byte(self) -> int:
        return ord(self.value)

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class CustomSymbol:
    """User supplied fill character.

    Restricted to code points below 256 so the symbol has exactly one
    representation as a character and as a byte.
    """

    fill: str

    def __post_init__(self) -> None:
        if not isinstance(self.fill, str) or len(self.fill) != 1:
            raise SymbolError(
                code=E_SYMBOL,
                message="custom symbol must be a single character",
                context={"fill": repr(self.fill)},
            )
        if ord(self.fill) > 0xFF:
            raise SymbolError(
                code=E_SYMBOL,
                message="custom symbol must be representable as one byte",
                context={"fill": self.fill, "code_point": ord(self.fill)},
            )

    @property
    def char(self) -> str:
        return self.fill

    @property
    def byte(self) -> int:
        return ord(self.fill)

    def __str__(self) -> str:
        return f"custom({self.fill!r})"


SymbolLike = Union[Symbol, CustomSymbol]

_BY_CHAR = {s.value: s for s in Symbol}


def parse_symbol(value: Any) -> SymbolLike:
    """Resolve a symbol from a name, a single character or a mapping.

    Accepted forms: an existing symbol, a builtin name (``"zero"``,
    ``"Whitespace"``), a single character (``"#"``; builtins win over
    custom), or ``{"custom": "x"}`` as produced by :func:`symbol_to_value`.
    """
    if isinstance(value, (Symbol, CustomSymbol)):
        return value
    if isinstance(value, Mapping):
        if set(value.keys()) != {"custom"}:
            raise SymbolError(
                code=E_SYMBOL,
                message="symbol mapping must have exactly one 'custom' key",
                context={"keys": sorted(str(k) for k in value.keys())},
            )
        return CustomSymbol(value["custom"])
    if isinstance(value, str):
        if len(value) == 1:
            return _BY_CHAR.get(value) or CustomSymbol(value)
        key = value.strip().upper()
        try:
            return Symbol[key]
        except KeyError:
            raise SymbolError(
                code=E_SYMBOL,
                message=f"unknown symbol name: {value!r}",
                context={"choices": [str(s) for s in Symbol]},
            ) from None
    raise SymbolError(
        code=E_SYMBOL,
        message=f"cannot interpret {type(value).__name__} as a symbol",
    )


def symbol_to_value(symbol: SymbolLike) -> Union[str, dict]:
    if isinstance(symbol, Symbol):
        return symbol.name.lower()
    return {"custom": symbol.fill}
