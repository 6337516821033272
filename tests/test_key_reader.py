"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and paging sequences, control-key tokens, and
multi-byte characters.
"""

import os
import time
import unittest

from lazyhop.input import reader


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        reader._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        reader._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _read(self, data: bytes) -> str:
        os.write(self.write_fd, data)
        return reader.read_key(self.read_fd, timeout_ms=20)

    def test_single_escape_returns_without_second_keypress(self) -> None:
        started = time.monotonic()
        key = self._read(b"\x1b")
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_keeps_following_printable_key(self) -> None:
        self.assertEqual(self._read(b"\x1bs"), "ESC")
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=20), "s")

    def test_arrow_and_page_sequences(self) -> None:
        self.assertEqual(self._read(b"\x1b[B"), "DOWN")
        self.assertEqual(self._read(b"\x1b[6~"), "PAGE_DOWN")
        self.assertEqual(self._read(b"\x1b[5~"), "PAGE_UP")

    def test_control_keys_map_to_names(self) -> None:
        self.assertEqual(self._read(b"\x04"), "CTRL_D")
        self.assertEqual(self._read(b"\x15"), "CTRL_U")
        self.assertEqual(self._read(b"\x03"), "CTRL_C")

    def test_multibyte_character_is_one_key(self) -> None:
        self.assertEqual(self._read("é".encode("utf-8")), "é")

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=10), "")


if __name__ == "__main__":
    unittest.main()
