"""
Decoder for HRB compiled bundles.

``load`` turns a byte buffer into an immutable :class:`HrbBody` holding the
symbol table, the function table and the startup symbol index. Symbol
linking is not performed; External and Deferred symbols are returned as
decoded.
"""

from __future__ import annotations

import logging

from .coding import BufferLike
from .errors import (  # noqa: F401
    BadMagic,
    DecodeError,
    EmptySymbolTable,
    InvalidSymbolType,
    TrailingBytes,
    UnexpectedEof,
    UnterminatedString,
    ValueOutOfRange,
)
from .model import (  # noqa: F401
    Function,
    FunctionScope,
    HrbBody,
    Symbol,
    SymbolType,
    decode_scope,
    decode_symbol_type,
    encode_scope,
    encode_symbol_type,
)
from .parser import parse_hrb
from .writer import serialize  # noqa: F401

logger = logging.getLogger(__name__)


def load(body: BufferLike) -> HrbBody:
    hrb_body = parse_hrb(body)

    # TODO: resolve External/Deferred symbols and rewrite pcode call targets
    # once a linking stage exists.

    logger.debug(
        "Loaded HRB: %d symbols, %d functions, startup=%s",
        len(hrb_body.symbols),
        len(hrb_body.functions),
        hrb_body.startup_symbol,
    )
    return hrb_body


__all__ = [
    "load",
    "serialize",
    "HrbBody",
    "Symbol",
    "Function",
    "FunctionScope",
    "SymbolType",
    "decode_scope",
    "encode_scope",
    "decode_symbol_type",
    "encode_symbol_type",
    "DecodeError",
    "BadMagic",
    "ValueOutOfRange",
    "UnexpectedEof",
    "UnterminatedString",
    "InvalidSymbolType",
    "EmptySymbolTable",
    "TrailingBytes",
]
