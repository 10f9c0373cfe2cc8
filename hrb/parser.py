from __future__ import annotations

from typing import List, Optional, Sequence

from .coding import BufferLike, Decoder
from .constants import MAGIC
from .errors import (
    BadMagic,
    EmptySymbolTable,
    TrailingBytes,
    UnexpectedEof,
)
from .model import Function, HrbBody, Symbol, decode_scope, decode_symbol_type


def read_header(decoder: Decoder) -> int:
    """Check the magic tag and return the (unvalidated) version word."""
    start = decoder.get_pos()
    available = min(decoder.remaining(), len(MAGIC))
    found = bytes(decoder.buf[start : start + available])
    if found != MAGIC[:available]:
        raise BadMagic(start, found)
    if available < len(MAGIC):
        raise UnexpectedEof(start, needed=len(MAGIC), available=available)
    decoder.read_exact(len(MAGIC))
    return decoder.read_u16()


def read_symbol(decoder: Decoder) -> Symbol:
    name = decoder.read_cstring()
    scope = decode_scope(decoder.read_u8())
    type_pos = decoder.get_pos()
    symbol_type = decode_symbol_type(decoder.read_u8(), offset=type_pos)
    return Symbol(name=name, scope=scope, symbol_type=symbol_type)


def read_function(decoder: Decoder) -> Function:
    name = decoder.read_cstring()
    size = decoder.read_u32_bounded()
    pcode = decoder.read_exact(size)
    return Function(name=name, pcode=pcode)


def find_startup_symbol(symbols: Sequence[Symbol]) -> Optional[int]:
    for idx, symbol in enumerate(symbols):
        if symbol.is_startup():
            return idx
    return None


def parse_hrb(data: BufferLike) -> HrbBody:
    """Decode a complete HRB image.

    The whole buffer must be consumed; any failure raises a
    :class:`~hrb.errors.DecodeError` and nothing partial is returned.
    """
    decoder = Decoder(data)

    # Head
    version = read_header(decoder)

    # Symbols
    count_pos = decoder.get_pos()
    num_symbols = decoder.read_u32_bounded()
    if num_symbols == 0:
        raise EmptySymbolTable(count_pos)
    symbols: List[Symbol] = [read_symbol(decoder) for _ in range(num_symbols)]

    startup_symbol = find_startup_symbol(symbols)

    # Functions
    num_functions = decoder.read_u32_bounded()
    functions: List[Function] = [read_function(decoder) for _ in range(num_functions)]

    if not decoder.at_end():
        raise TrailingBytes(decoder.get_pos(), remaining=decoder.remaining())

    return HrbBody(
        symbols=tuple(symbols),
        functions=tuple(functions),
        startup_symbol=startup_symbol,
        version=version,
    )


__all__ = [
    "read_header",
    "read_symbol",
    "read_function",
    "find_startup_symbol",
    "parse_hrb",
]
