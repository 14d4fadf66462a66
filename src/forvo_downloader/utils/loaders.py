"""
Loaders for the configuration file and the word list.
"""

import json
import traceback
from typing import Any, Dict, List

from .config import AppConfig, ForvoConfig


def load_config(path: str = AppConfig.CONFIG_FILENAME) -> Dict[str, Any]:
    """
    Read and decode the JSON configuration file.

    Missing keys decode to empty strings; their values are not validated
    here, so a bad key or language code surfaces later as an API error.

    Args:
        path: Path to the configuration file

    Returns:
        Dict with 'success' and either 'config' or 'error'/'trace'
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as e:
        return {
            'success': False,
            'error': f"couldn't read configuration file: {e}",
            'trace': traceback.format_exc(),
        }

    try:
        data = json.loads(raw)
        config = _decode_config(data)
    except ValueError as e:
        return {
            'success': False,
            'error': f"couldn't deserialize configuration file: {e}",
            'trace': traceback.format_exc(),
        }

    return {'success': True, 'config': config}


def _decode_config(data: Any) -> ForvoConfig:
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")

    values = {}
    for key in ('language', 'api_key'):
        value = data.get(key, "")
        if not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")
        values[key] = value

    return ForvoConfig(**values)


def parse_word_list(text: str) -> List[str]:
    """
    Split word list text into stripped lines.

    Blank lines are kept as empty strings; the newline ending the last
    line does not add an entry.
    """
    text = text.replace('\r\n', '\n')
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [line.strip() for line in lines]


def load_word_list(path: str = AppConfig.WORDS_FILENAME) -> Dict[str, Any]:
    """
    Read the word list file, one word per line.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so they
    reach the file name and the lookup URL unchanged.

    Args:
        path: Path to the word list file

    Returns:
        Dict with 'success' and either 'words' or 'error'/'trace'
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='surrogateescape') as f:
            text = f.read()
    except OSError as e:
        return {
            'success': False,
            'error': f"couldn't read word file: {e}",
            'trace': traceback.format_exc(),
        }

    return {'success': True, 'words': parse_word_list(text)}
