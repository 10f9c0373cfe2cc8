"""Exceptions raised while decoding an HRB bundle.

Every error records the byte offset where the offending field starts so a
host can point at the damage without re-parsing.
"""

from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """Base class for all HRB decode failures."""

    def __init__(self, offset: Optional[int], message: str) -> None:
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset:#x})"
        super().__init__(message)


class BadMagic(DecodeError):
    def __init__(self, offset: int, found: bytes) -> None:
        self.found = found
        super().__init__(offset, f"Bad magic: expected b'\\xc0HRB', found {found!r}")


class ValueOutOfRange(DecodeError):
    def __init__(self, offset: int, value: int, limit: int) -> None:
        self.value = value
        self.limit = limit
        super().__init__(offset, f"Field value {value:#x} exceeds limit {limit:#x}")


class UnexpectedEof(DecodeError):
    def __init__(self, offset: int, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            offset,
            f"Unexpected end of input: need {needed} bytes, have {available} remaining",
        )


class UnterminatedString(DecodeError):
    def __init__(self, offset: int) -> None:
        super().__init__(offset, "Name is missing its NUL terminator")


class InvalidSymbolType(DecodeError):
    def __init__(self, value: int, offset: Optional[int] = None) -> None:
        self.value = value
        super().__init__(offset, f"Invalid symbol type: {value:#04x}")


class EmptySymbolTable(DecodeError):
    def __init__(self, offset: int) -> None:
        super().__init__(offset, "Symbol table is empty")


class TrailingBytes(DecodeError):
    def __init__(self, offset: int, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(offset, f"{remaining} trailing bytes after function table")


__all__ = [
    "DecodeError",
    "BadMagic",
    "ValueOutOfRange",
    "UnexpectedEof",
    "UnterminatedString",
    "InvalidSymbolType",
    "EmptySymbolTable",
    "TrailingBytes",
]
