from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

from .constants import ScopeFlag
from .errors import InvalidSymbolType

ByteView = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True, slots=True)
class FunctionScope:
    """Decoded symbol attribute byte."""

    public: bool = False
    static: bool = False
    first: bool = False
    init: bool = False
    exit: bool = False
    message: bool = False
    memvar: bool = False

    def is_initexit(self) -> bool:
        return self.init and self.exit

    @classmethod
    def from_byte(cls, value: int) -> "FunctionScope":
        return cls(
            public=bool(value & ScopeFlag.PUBLIC),
            static=bool(value & ScopeFlag.STATIC),
            first=bool(value & ScopeFlag.FIRST),
            init=bool(value & ScopeFlag.INIT),
            exit=bool(value & ScopeFlag.EXIT),
            message=bool(value & ScopeFlag.MESSAGE),
            memvar=bool(value & ScopeFlag.MEMVAR),
        )

    def to_byte(self) -> int:
        value = ScopeFlag(0)
        if self.public:
            value |= ScopeFlag.PUBLIC
        if self.static:
            value |= ScopeFlag.STATIC
        if self.first:
            value |= ScopeFlag.FIRST
        if self.init:
            value |= ScopeFlag.INIT
        if self.exit:
            value |= ScopeFlag.EXIT
        if self.message:
            value |= ScopeFlag.MESSAGE
        if self.memvar:
            value |= ScopeFlag.MEMVAR
        return int(value)

    def flag_names(self) -> Tuple[str, ...]:
        return tuple(
            name
            for name in ("public", "static", "first", "init", "exit", "message", "memvar")
            if getattr(self, name)
        )


def decode_scope(value: int) -> FunctionScope:
    return FunctionScope.from_byte(value)


def encode_scope(scope: FunctionScope) -> int:
    return scope.to_byte()


class SymbolType(IntEnum):
    """Link kind of a symbol; the value is the on-disk tag."""

    NO_LINK = 0
    FUNCTION = 1
    EXTERNAL = 2
    DEFERRED = 3


def decode_symbol_type(value: int, offset: Optional[int] = None) -> SymbolType:
    try:
        return SymbolType(value)
    except ValueError:
        raise InvalidSymbolType(value, offset=offset) from None


def encode_symbol_type(symbol_type: SymbolType) -> int:
    return int(symbol_type)


@dataclass(frozen=True)
class Symbol:
    name: ByteView
    scope: FunctionScope
    symbol_type: SymbolType

    def is_startup(self) -> bool:
        return self.scope.first and self.scope.is_initexit()

    def name_text(self) -> str:
        return bytes(self.name).decode("latin-1")


@dataclass(frozen=True)
class Function:
    name: ByteView
    pcode: ByteView  # opaque, never interpreted here

    def name_text(self) -> str:
        return bytes(self.name).decode("latin-1")


@dataclass(frozen=True)
class HrbBody:
    """A decoded bundle.

    ``symbols`` and ``functions`` keep stream order; later linking refers to
    entries by index. Names and pcode are views into the buffer passed to
    :func:`hrb.load`, so that buffer must outlive the body.
    """

    symbols: Tuple[Symbol, ...]
    functions: Tuple[Function, ...] = ()
    startup_symbol: Optional[int] = None
    version: int = 0

    def __post_init__(self) -> None:
        idx = self.startup_symbol
        if idx is None:
            return
        if not 0 <= idx < len(self.symbols):
            raise ValueError(f"startup_symbol {idx} out of range")
        if not self.symbols[idx].is_startup():
            raise ValueError(f"Symbol {idx} is not a first+init+exit startup symbol")

    @property
    def startup(self) -> Optional[Symbol]:
        if self.startup_symbol is None:
            return None
        return self.symbols[self.startup_symbol]

    def function_named(self, name: ByteView) -> Optional[Function]:
        for function in self.functions:
            if function.name == name:
                return function
        return None


__all__ = [
    "ByteView",
    "FunctionScope",
    "decode_scope",
    "encode_scope",
    "SymbolType",
    "decode_symbol_type",
    "encode_symbol_type",
    "Symbol",
    "Function",
    "HrbBody",
]
