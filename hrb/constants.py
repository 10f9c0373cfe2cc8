"""Wire-format constants for HRB bundles.

Layout (all integers little-endian)::

    magic           4 bytes   C0 'H' 'R' 'B'
    version         2 bytes   not validated
    symbol_count    4 bytes   1..MAX_FIELD_VALUE
    symbols         name\\0 scope:u8 type:u8      (symbol_count times)
    function_count  4 bytes   0..MAX_FIELD_VALUE
    functions       name\\0 size:u32 pcode[size]  (function_count times)
"""

from enum import IntFlag

MAGIC = b"\xc0HRB"

# Size and count fields are stored as u32 but anything above 24 bits is
# treated as corruption.
MAX_FIELD_VALUE = 0x00FFFFFF


class ScopeFlag(IntFlag):
    """Bit masks of the symbol attribute byte.

    Bit layout:
        7      6    5       4     3     2     1       0
      +------+----+-------+-----+-----+-----+-------+-------+
      |MEMVAR| -- |MESSAGE|EXIT |INIT |FIRST|STATIC |PUBLIC |
      +------+----+-------+-----+-----+-----+-------+-------+

    Bit 6 is reserved and never decoded.
    """

    PUBLIC = 0x01
    STATIC = 0x02
    FIRST = 0x04  # Startup candidate
    INIT = 0x08
    EXIT = 0x10
    MESSAGE = 0x20
    MEMVAR = 0x80


SCOPE_RESERVED_MASK = 0x40
