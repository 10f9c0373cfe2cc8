import struct

import pytest

from hrb.coding import SCAN_WINDOW, Decoder, Encoder
from hrb.constants import MAX_FIELD_VALUE
from hrb.errors import UnexpectedEof, UnterminatedString, ValueOutOfRange


def test_decoder() -> None:
    decoder = Decoder(bytes([0x01, 0x02, 0x03, 0x00]))
    assert decoder.read_u8() == 0x01
    assert decoder.read_u8() == 0x02
    assert decoder.read_u8() == 0x03
    assert decoder.read_u8() == 0x00
    assert decoder.at_end()

    decoder = Decoder(bytearray([0xAA, 0xBB, 0xCC, 0xDD]))
    assert decoder.read_u16() == 0xBBAA
    assert decoder.read_u16() == 0xDDCC


def test_read_u32_bounded_little_endian() -> None:
    decoder = Decoder(bytes([0x78, 0x56, 0x34, 0x00]))
    assert decoder.read_u32_bounded() == 0x345678
    assert decoder.get_pos() == 4


def test_read_u32_bounded_accepts_ceiling() -> None:
    decoder = Decoder(struct.pack("<I", MAX_FIELD_VALUE))
    assert decoder.read_u32_bounded() == MAX_FIELD_VALUE


def test_read_u32_bounded_rejects_above_ceiling() -> None:
    decoder = Decoder(b"\xaa" + struct.pack("<I", MAX_FIELD_VALUE + 1))
    decoder.read_u8()
    with pytest.raises(ValueOutOfRange) as excinfo:
        decoder.read_u32_bounded()
    assert excinfo.value.value == 0x01000000
    assert excinfo.value.offset == 1


def test_read_u32_bounded_short_input() -> None:
    decoder = Decoder(b"\x01\x02\x03")
    with pytest.raises(UnexpectedEof) as excinfo:
        decoder.read_u32_bounded()
    assert excinfo.value.needed == 4
    assert excinfo.value.available == 3


def test_read_u8_exhausted() -> None:
    decoder = Decoder(b"\x11")
    assert decoder.read_u8() == 0x11
    with pytest.raises(UnexpectedEof):
        decoder.read_u8()


def test_read_exact_returns_view_without_copy() -> None:
    data = bytearray(b"abcdef")
    decoder = Decoder(data)
    decoder.read_u8()
    view = decoder.read_exact(3)
    assert isinstance(view, memoryview)
    assert view == b"bcd"
    data[1] = ord("X")
    assert view == b"Xcd"
    assert decoder.remaining() == 2


def test_read_exact_past_end() -> None:
    decoder = Decoder(b"abc")
    with pytest.raises(UnexpectedEof):
        decoder.read_exact(4)
    assert decoder.get_pos() == 0


def test_read_exact_zero_bytes_at_end() -> None:
    decoder = Decoder(b"")
    assert decoder.read_exact(0) == b""


def test_read_cstring_drops_terminator() -> None:
    decoder = Decoder(b"MAIN\x00rest")
    assert decoder.read_cstring() == b"MAIN"
    assert decoder.get_pos() == 5


def test_read_cstring_empty_name() -> None:
    decoder = Decoder(b"\x00\x01")
    assert decoder.read_cstring() == b""
    assert decoder.read_u8() == 0x01


def test_read_cstring_unterminated() -> None:
    decoder = Decoder(b"\x00MAIN")
    decoder.read_u8()
    with pytest.raises(UnterminatedString) as excinfo:
        decoder.read_cstring()
    assert excinfo.value.offset == 1
    assert decoder.get_pos() == 1


def test_decoder_accepts_memoryview_slice() -> None:
    decoder = Decoder(memoryview(b"xxAB\x00")[2:])
    assert decoder.read_cstring() == b"AB"
    assert decoder.at_end()


def test_encoder() -> None:
    encoder = Encoder()
    encoder.write_u8(0x01)
    encoder.write_u16(0xBBAA)
    encoder.write_u32_bounded(0x123456)
    encoder.write_cstring(b"FN")
    encoder.write_bytes(b"\x99")
    assert encoder.buf == bytearray(
        [0x01, 0xAA, 0xBB, 0x56, 0x34, 0x12, 0x00, ord("F"), ord("N"), 0x00, 0x99]
    )


def test_encoder_value_too_large() -> None:
    encoder = Encoder()
    with pytest.raises(struct.error):
        encoder.write_u8(256)
    with pytest.raises(ValueError):
        encoder.write_u32_bounded(MAX_FIELD_VALUE + 1)


def test_encoder_rejects_embedded_nul() -> None:
    encoder = Encoder()
    with pytest.raises(ValueError):
        encoder.write_cstring(b"A\x00B")


def test_read_cstring_terminator_beyond_first_window() -> None:
    name = b"N" * (SCAN_WINDOW * 2 + 7)
    decoder = Decoder(name + b"\x00\x42")
    view = decoder.read_cstring()
    assert len(view) == len(name)
    assert view == name
    assert decoder.read_u8() == 0x42


def test_read_cstring_terminator_on_window_boundary() -> None:
    name = b"N" * SCAN_WINDOW
    decoder = Decoder(name + b"\x00")
    assert decoder.read_cstring() == name
    assert decoder.at_end()


def test_read_cstring_long_unterminated() -> None:
    decoder = Decoder(b"\x01" * (4 * 1024 * 1024))
    with pytest.raises(UnterminatedString) as excinfo:
        decoder.read_cstring()
    assert excinfo.value.offset == 0


def test_decoder_views_are_read_only() -> None:
    data = bytearray(b"AB\x00pc")
    decoder = Decoder(data)
    name = decoder.read_cstring()
    pcode = decoder.read_exact(2)
    assert name.readonly and pcode.readonly
    assert hash(name) == hash(b"AB")
    with pytest.raises(TypeError):
        pcode[0] = 0
    assert data == bytearray(b"AB\x00pc")
