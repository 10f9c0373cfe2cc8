"""Bounds-checked field readers and writers for the HRB wire format."""

import struct
from typing import Union

from .constants import MAX_FIELD_VALUE
from .errors import UnexpectedEof, UnterminatedString, ValueOutOfRange

BufferLike = Union[bytes, bytearray, memoryview]

# Bytes examined per step when looking for a name terminator.
SCAN_WINDOW = 4096


class Decoder:
    """Forward-only cursor over a caller-owned buffer.

    Slices handed out by :meth:`read_exact` and :meth:`read_cstring` are
    read-only ``memoryview`` windows into the original buffer, not copies.
    """

    def __init__(self, buf: BufferLike) -> None:
        view = memoryview(buf).toreadonly()
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self.buf, self.pos = view, 0

    def get_pos(self) -> int:
        return self.pos

    def remaining(self) -> int:
        return len(self.buf) - self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.buf)

    def _require(self, count: int) -> None:
        if self.remaining() < count:
            raise UnexpectedEof(self.pos, needed=count, available=self.remaining())

    def _unpack(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        self._require(size)
        fmt = "<" + fmt if fmt[0] != ">" else fmt
        (value,) = struct.unpack_from(fmt, self.buf, self.pos)
        self.pos += size
        return value

    def read_u8(self) -> int:
        return self._unpack("B")

    def read_u16(self) -> int:
        return self._unpack("H")

    def read_u32(self) -> int:
        return self._unpack("I")

    def read_u32_bounded(self) -> int:
        """Read a size or count field, capped at 24 bits."""
        start = self.pos
        value = self.read_u32()
        if value > MAX_FIELD_VALUE:
            raise ValueOutOfRange(start, value=value, limit=MAX_FIELD_VALUE)
        return value

    def read_exact(self, count: int) -> memoryview:
        self._require(count)
        view = self.buf[self.pos : self.pos + count]
        self.pos += count
        return view

    def read_cstring(self) -> memoryview:
        """Read bytes up to a NUL terminator; the terminator is consumed, not returned."""
        start = self.pos
        size = len(self.buf)
        window = start
        while window < size:
            # Copies at most SCAN_WINDOW bytes per step.
            hit = self.buf[window : window + SCAN_WINDOW].tobytes().find(b"\x00")
            if hit >= 0:
                end = window + hit
                break
            window += SCAN_WINDOW
        else:
            raise UnterminatedString(start)
        self.pos = end + 1
        return self.buf[start:end]


class Encoder:
    def __init__(self) -> None:
        self.buf = bytearray()

    def _pack(self, fmt: str, item: int) -> None:
        offset = len(self.buf)
        self.buf += b"\x00" * struct.calcsize(fmt)
        fmt = "<" + fmt if fmt[0] != ">" else fmt
        struct.pack_into(fmt, self.buf, offset, item)

    def write_u8(self, value: int) -> None:
        self._pack("B", value)

    def write_u16(self, value: int) -> None:
        self._pack("H", value)

    def write_u32_bounded(self, value: int) -> None:
        if not 0 <= value <= MAX_FIELD_VALUE:
            raise ValueError(f"Field value out of range: {value:#x}")
        self._pack("I", value)

    def write_bytes(self, data: BufferLike) -> None:
        self.buf += data

    def write_cstring(self, data: BufferLike) -> None:
        raw = bytes(data)
        if b"\x00" in raw:
            raise ValueError(f"Name contains a NUL byte: {raw!r}")
        self.buf += raw
        self.buf.append(0)
