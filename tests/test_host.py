"""Status bar width tests."""

from __future__ import annotations

import unittest

from lazystatus.host import HostCallbacks, MousePos, width


def _host(laststatus: int) -> HostCallbacks:
    return HostCallbacks(
        get_mouse_pos=lambda: MousePos(screenrow=1, screencol=1, winid=1000, line=1),
        screen_string=lambda row, col: " ",
        current_buffer=lambda: 1,
        buffer_sign_marks=lambda bufnr, row: [],
        namespaces=lambda: {},
        set_current_window=lambda winid: None,
        set_cursor=lambda line, col: None,
        laststatus=lambda: laststatus,
        columns=lambda: 200,
        window_width=lambda winid: 90,
    )


class WidthTests(unittest.TestCase):
    def test_global_statusline_spans_all_columns(self) -> None:
        self.assertEqual(width(_host(3)), 200)

    def test_winbar_and_local_statusline_use_window_width(self) -> None:
        self.assertEqual(width(_host(3), is_winbar=True), 90)
        self.assertEqual(width(_host(2)), 90)


if __name__ == "__main__":
    unittest.main()
