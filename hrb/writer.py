"""Serialize an :class:`~hrb.model.HrbBody` back into HRB bytes."""

from __future__ import annotations

from .coding import Encoder
from .constants import MAGIC
from .model import HrbBody, encode_scope, encode_symbol_type


def serialize(body: HrbBody) -> bytes:
    """Emit the exact layout :func:`hrb.parser.parse_hrb` accepts.

    ``startup_symbol`` is not stored on disk; it is derived again on load.
    """
    if not body.symbols:
        raise ValueError("An HRB bundle needs at least one symbol")
    if not 0 <= body.version <= 0xFFFF:
        raise ValueError(f"Version out of range: {body.version:#x}")

    enc = Encoder()
    enc.write_bytes(MAGIC)
    enc.write_u16(body.version)

    enc.write_u32_bounded(len(body.symbols))
    for symbol in body.symbols:
        enc.write_cstring(symbol.name)
        enc.write_u8(encode_scope(symbol.scope))
        enc.write_u8(encode_symbol_type(symbol.symbol_type))

    enc.write_u32_bounded(len(body.functions))
    for function in body.functions:
        enc.write_cstring(function.name)
        enc.write_u32_bounded(len(function.pcode))
        enc.write_bytes(function.pcode)

    return bytes(enc.buf)
