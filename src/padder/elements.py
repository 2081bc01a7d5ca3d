"""Symbol to element conversion.

An element type takes part in padding by providing a classmethod
``from_symbol(symbol)`` returning one fill element. The conversion must be
total: a type that cannot represent every symbol should not implement it.
``str`` and ``int`` are wired to the ``char``/``byte`` views of a symbol.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Protocol, Type, TypeVar, runtime_checkable

from .errors import E_ELEMENT_TYPE, ElementTypeError
from .symbol import SymbolLike

__all__ = ["FromSymbol", "element_from_symbol", "supports_symbols"]

T = TypeVar("T")


@runtime_checkable
class FromSymbol(Protocol):
    @classmethod
    def from_symbol(cls, symbol: SymbolLike) -> Any: ...


_BUILTIN: Dict[type, Callable[[SymbolLike], Any]] = {
    str: lambda symbol: symbol.char,
    int: lambda symbol: symbol.byte,
}


def supports_symbols(element_type: type) -> bool:
    return element_type in _BUILTIN or callable(
        getattr(element_type, "from_symbol", None)
    )


def element_from_symbol(element_type: Type[T], symbol: SymbolLike) -> T:
    convert = _BUILTIN.get(element_type)
    if convert is not None:
        return convert(symbol)
    from_symbol = getattr(element_type, "from_symbol", None)
    if not callable(from_symbol):
        raise ElementTypeError(
            code=E_ELEMENT_TYPE,
            message=(
                f"{element_type.__name__} cannot be built from a symbol; "
                "define a from_symbol classmethod"
            ),
            context={"element_type": element_type.__qualname__},
        )
    return from_symbol(symbol)
