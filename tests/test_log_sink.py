#!/usr/bin/env python3
"""
Unit tests for the log sinks.
"""

import unittest
import os
import tempfile
import shutil
import sys
from datetime import datetime, timezone, timedelta

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), 'src'))

from forvo_downloader.utils.log_sink import FileLogSink, MemoryLogSink, LogWriteError


FIXED_TIME = datetime(2026, 10, 19, 13, 54, 0, tzinfo=timezone.utc)


class TestFileLogSink(unittest.TestCase):
    """Test cases for the FileLogSink class."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.temp_dir = tempfile.mkdtemp()
        self.log_path = os.path.join(self.temp_dir, "forvo.log")
        self.sink = FileLogSink(self.log_path, clock=lambda: FIXED_TIME)

    def tearDown(self):
        """Clean up after each test method."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _read_log(self):
        with open(self.log_path, encoding='utf-8') as f:
            return f.read()

    def test_format_entry_uses_rfc1123_timestamp(self):
        self.assertEqual(
            self.sink.format_entry("downloading 'hej'"),
            "[Mon, 19 Oct 2026 13:54:00 GMT] downloading 'hej'\n",
        )

    def test_format_entry_converts_to_gmt(self):
        """Test that a non-UTC clock is rendered in GMT."""
        local = FIXED_TIME.astimezone(timezone(timedelta(hours=2)))
        sink = FileLogSink(self.log_path, clock=lambda: local)
        self.assertTrue(sink.format_entry("x").startswith("[Mon, 19 Oct 2026 13:54:00 GMT]"))

    def test_log_creates_and_appends(self):
        """Test that the log file is created and every call appends a line."""
        self.assertFalse(os.path.exists(self.log_path))

        self.sink.log("first")
        self.sink.log("second")

        lines = self._read_log().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith("] first"))
        self.assertTrue(lines[1].endswith("] second"))

    def test_log_keeps_existing_content(self):
        with open(self.log_path, 'w', encoding='utf-8') as f:
            f.write("earlier run\n")

        self.sink.log("next run")

        self.assertTrue(self._read_log().startswith("earlier run\n["))

    def test_log_writes_undecodable_word_bytes(self):
        word = b"\xe6ble".decode('utf-8', errors='surrogateescape')

        self.sink.log(f"downloading '{word}'")

        with open(self.log_path, 'rb') as f:
            self.assertTrue(f.read().endswith(b"] downloading '\xe6ble'\n"))

    def test_log_failure_raises(self):
        """Test that a log file which cannot be opened raises LogWriteError."""
        sink = FileLogSink(self.temp_dir)
        with self.assertRaises(LogWriteError):
            sink.log("message")


class TestMemoryLogSink(unittest.TestCase):

    def test_collects_messages(self):
        sink = MemoryLogSink()
        sink.log("a")
        sink.log("b")
        self.assertEqual(sink.messages, ["a", "b"])


if __name__ == '__main__':
    unittest.main(verbosity=2)
