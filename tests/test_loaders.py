#!/usr/bin/env python3
"""
Unit tests for the configuration and word list loaders.
"""

import unittest
import os
import tempfile
import shutil
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), 'src'))

from forvo_downloader.utils.config import ForvoConfig
from forvo_downloader.utils.loaders import load_config, load_word_list, parse_word_list


class TestParseWordList(unittest.TestCase):
    """Test cases for splitting word list text."""

    def test_crlf_and_whitespace_lines(self):
        """Test CRLF normalisation, trimming and the blank line being kept."""
        self.assertEqual(parse_word_list("alpha\r\nbeta\n \n"), ["alpha", "beta", ""])

    def test_no_trailing_newline(self):
        self.assertEqual(parse_word_list("hej\nkat"), ["hej", "kat"])

    def test_blank_lines_are_kept_in_order(self):
        self.assertEqual(parse_word_list("a\n\n  b  \n\n"), ["a", "", "b", ""])

    def test_duplicates_are_kept(self):
        self.assertEqual(parse_word_list("hund\nhund\n"), ["hund", "hund"])

    def test_empty_text(self):
        self.assertEqual(parse_word_list(""), [""])


class TestLoaders(unittest.TestCase):
    """Test cases for reading the configuration and word list files."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after each test method."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _write(self, name, content, mode='w'):
        path = os.path.join(self.temp_dir, name)
        with open(path, mode) as f:
            f.write(content)
        return path

    def test_load_config_success(self):
        path = self._write("forvo.json", '{"language": "da", "api_key": "secret"}')
        result = load_config(path)

        self.assertTrue(result['success'])
        self.assertEqual(result['config'], ForvoConfig(language="da", api_key="secret"))

    def test_load_config_missing_keys_decode_to_empty_strings(self):
        """Test that an empty key is not rejected at load time."""
        path = self._write("forvo.json", '{"language": "en"}')
        result = load_config(path)

        self.assertTrue(result['success'])
        self.assertEqual(result['config'].api_key, "")

    def test_load_config_missing_file(self):
        result = load_config(os.path.join(self.temp_dir, "missing.json"))

        self.assertFalse(result['success'])
        self.assertIn("couldn't read configuration file", result['error'])
        self.assertIn("Traceback", result['trace'])

    def test_load_config_malformed_json(self):
        path = self._write("forvo.json", '{"language": "da",')
        result = load_config(path)

        self.assertFalse(result['success'])
        self.assertIn("couldn't deserialize configuration file", result['error'])

    def test_load_config_wrong_type(self):
        path = self._write("forvo.json", '{"language": 5, "api_key": "x"}')
        result = load_config(path)

        self.assertFalse(result['success'])
        self.assertIn("'language' must be a string", result['error'])

    def test_load_config_not_an_object(self):
        path = self._write("forvo.json", '["da", "key"]')
        self.assertFalse(load_config(path)['success'])

    def test_load_word_list_success(self):
        path = self._write("forvo.txt", b"hej\r\nfarvel\r\n", mode='wb')
        result = load_word_list(path)

        self.assertTrue(result['success'])
        self.assertEqual(result['words'], ["hej", "farvel"])

    def test_load_word_list_utf8(self):
        path = self._write("forvo.txt", "smørrebrød\næble\n".encode('utf-8'), mode='wb')
        self.assertEqual(load_word_list(path)['words'], ["smørrebrød", "æble"])

    def test_load_word_list_non_utf8_bytes_survive(self):
        """Test that a cp1252 word list loads and keeps its original bytes."""
        path = self._write("forvo.txt", "æble\nkat\n".encode('cp1252'), mode='wb')
        result = load_word_list(path)

        self.assertTrue(result['success'])
        self.assertEqual(len(result['words']), 2)
        self.assertEqual(result['words'][0].encode('utf-8', errors='surrogateescape'), b"\xe6ble")
        self.assertEqual(result['words'][1], "kat")

    def test_load_word_list_missing_file(self):
        result = load_word_list(os.path.join(self.temp_dir, "missing.txt"))

        self.assertFalse(result['success'])
        self.assertIn("couldn't read word file", result['error'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
