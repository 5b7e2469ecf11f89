"""Pack cursor positions into a single integer.

The encoded value keeps the line in the high bits, the column in the next 10
bits and the window number in the low 6 bits, so positions can be stored and
compared as plain ints.
"""

from __future__ import annotations

LINE_SHIFT = 16
COL_SHIFT = 6
COL_MASK = 0x3FF
WINNR_MASK = 0x3F


def encode_pos(line: int, col: int, winnr: int) -> int:
    """Encode ``(line, col, winnr)`` into one integer.

    Inputs are not validated: ``col`` must be below 1024 and ``winnr`` below
    64, larger values bleed into neighbouring fields.
    """
    return (line << LINE_SHIFT) | (col << COL_SHIFT) | winnr


def decode_pos(value: int) -> tuple[int, int, int]:
    """Decode a value produced by :func:`encode_pos` into ``(line, col, winnr)``."""
    return value >> LINE_SHIFT, (value >> COL_SHIFT) & COL_MASK, value & WINNR_MASK


__all__ = ["encode_pos", "decode_pos"]
