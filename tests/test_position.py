"""Tests for position packing.

Covers round-tripping in-range positions and the documented bit layout,
including silent truncation of out-of-range columns.
"""

from __future__ import annotations

import unittest

from lazystatus.position import decode_pos, encode_pos


class PositionCodecTests(unittest.TestCase):
    def test_round_trip_for_in_range_values(self) -> None:
        for line, col, winnr in [(0, 0, 0), (1, 2, 3), (5000, 1023, 63), (2**20, 512, 1)]:
            with self.subTest(line=line, col=col, winnr=winnr):
                self.assertEqual(decode_pos(encode_pos(line, col, winnr)), (line, col, winnr))

    def test_bit_layout(self) -> None:
        self.assertEqual(encode_pos(1, 0, 0), 1 << 16)
        self.assertEqual(encode_pos(0, 1, 0), 1 << 6)
        self.assertEqual(encode_pos(0, 0, 1), 1)
        self.assertEqual(decode_pos(0x10041), (1, 1, 1))

    def test_out_of_range_column_is_not_validated(self) -> None:
        line, col, winnr = decode_pos(encode_pos(0, 1024, 0))
        self.assertEqual((line, col, winnr), (1, 0, 0))


if __name__ == "__main__":
    unittest.main()
