"""
Runner that downloads pronunciations for every word in the word list.
"""

import traceback
from typing import Any, Callable, Dict, Optional

import requests

from .audio_provider import ForvoAudioProvider
from .forvo_api import ForvoAPIClient
from ..utils.config import AppConfig
from ..utils.filesystem import LocalFileSystem
from ..utils.loaders import load_config, load_word_list
from ..utils.log_sink import LogWriteError


class Runner:
    """Processes the word list one word at a time, stopping at the first fatal condition."""

    def __init__(self, log_sink: Any,
                 config_path: str = AppConfig.CONFIG_FILENAME,
                 words_path: str = AppConfig.WORDS_FILENAME,
                 filesystem: Optional[LocalFileSystem] = None,
                 session: Optional[requests.Session] = None,
                 client_factory: Callable[..., ForvoAPIClient] = ForvoAPIClient) -> None:
        self.log_sink = log_sink
        self.config_path = config_path
        self.words_path = words_path
        self.filesystem = filesystem or LocalFileSystem()
        self.session = session
        self.client_factory = client_factory

    def log(self, message: str) -> None:
        """Log a message to the sink."""
        self.log_sink.log(message)

    def run(self) -> Dict[str, Any]:
        """
        Load the configuration and word list, then download every word.

        A fatal outcome from any step, or any unexpected exception while
        processing a word, is logged once with its stack trace and ends the
        run; words processed before it keep their files.

        Returns:
            Dict with 'success', 'processed' (words attempted) and 'error'

        Raises:
            LogWriteError: If the log sink cannot be written
        """
        config_result = load_config(self.config_path)
        if not config_result['success']:
            return self._abort(config_result, processed=0)
        config = config_result['config']

        words_result = load_word_list(self.words_path)
        if not words_result['success']:
            return self._abort(words_result, processed=0)

        client = self.client_factory(config.api_key, session=self.session)
        provider = ForvoAudioProvider(client, self.log_sink, self.filesystem)

        processed = 0
        try:
            for word in words_result['words']:
                self.log(f"downloading '{word}'")
                processed += 1
                result = provider.download_word(word, config.language)
                if result['fatal']:
                    return self._abort(result, processed)
        except LogWriteError:
            raise
        except Exception as e:
            return self._abort({'error': str(e), 'trace': traceback.format_exc()}, processed)

        return {'success': True, 'processed': processed, 'error': None}

    def _abort(self, result: Dict[str, Any], processed: int) -> Dict[str, Any]:
        self.log(f"ERROR! {result['error']}\n{result.get('trace') or ''}")
        return {'success': False, 'processed': processed, 'error': result['error']}
