"""
Audio provider that uses Forvo API for downloading pronunciations.
"""

import time
import traceback
from typing import Any, Dict, Optional

import requests

from .forvo_api import ForvoAPIClient
from .models import DownloadState
from ..utils.config import AppConfig, HTTPConfig
from ..utils.filesystem import LocalFileSystem


class ForvoAudioProvider:
    """Downloads the top rated Forvo pronunciation of a word to disk."""

    def __init__(self, forvo_client: ForvoAPIClient, log_sink: Any,
                 filesystem: Optional[LocalFileSystem] = None):
        """
        Initialize the Forvo audio provider.

        Args:
            forvo_client: Client used for lookup and fetch requests
            log_sink: Object with a log(message) method
            filesystem: Where audio files are checked for and written
        """
        self.forvo_client = forvo_client
        self.log_sink = log_sink
        self.filesystem = filesystem or LocalFileSystem()

    def log(self, message: str) -> None:
        """Log a message to the sink."""
        self.log_sink.log(message)

    def download_word(self, word: str, language: str) -> Dict[str, Any]:
        """
        Download the best pronunciation of a word unless it is already on disk.

        Per-word failures are logged here and reported with 'fatal' False.
        Conditions that must stop the run (quota exceeded, malformed lookup
        JSON, output file that cannot be opened) are returned with 'fatal'
        True and are not logged; the caller reports them.

        Args:
            word: The word to download
            language: Forvo language code

        Returns:
            Dict with 'word', 'state', 'success', 'fatal', 'error', 'trace'
            and 'file_path'
        """
        filename = f"{word}{AppConfig.AUDIO_FILE_EXTENSION}"

        if self.filesystem.exists(filename):
            self.log(f"'{filename}' already exists, skipping")
            return self._result(word, DownloadState.SKIPPED)

        try:
            response = self.forvo_client.search(word, language)
        except requests.RequestException as e:
            self.log(f"failed to search for '{word}': {e}")
            return self._result(word, DownloadState.SEARCH_FAILED, error=str(e))

        try:
            if self.forvo_client.is_quota_exceeded(response):
                return self._quota_exceeded(word, DownloadState.SEARCH_QUOTA_EXCEEDED)

            if not self.forvo_client.is_success(response):
                error = f"failed to search for '{word}', status code {response.status_code}"
                self.log(f"{error}\n{self.forvo_client.response_body(response)}")
                return self._result(word, DownloadState.SEARCH_FAILED, error=error)

            try:
                lookup = self.forvo_client.parse_lookup(response)
            except ValueError as e:
                return self._result(
                    word, DownloadState.SEARCH_MALFORMED,
                    error=f"failed to decode search results: {e}",
                    trace=traceback.format_exc(),
                )
        finally:
            response.close()

        if not lookup.items:
            self.log(f"no results for '{word}'")
            return self._result(word, DownloadState.SEARCH_EMPTY)

        return self._fetch_and_write(word, lookup.items[0].pathmp3, filename)

    def _fetch_and_write(self, word: str, audio_url: str, filename: str) -> Dict[str, Any]:
        deadline = time.monotonic() + HTTPConfig.DOWNLOAD_TIMEOUT
        try:
            response = self.forvo_client.fetch_audio(audio_url)
        except requests.RequestException as e:
            self.log(f"failed to download '{word}' audio: {e}")
            return self._result(word, DownloadState.FETCH_FAILED, error=str(e))

        try:
            if self.forvo_client.is_quota_exceeded(response):
                return self._quota_exceeded(word, DownloadState.FETCH_QUOTA_EXCEEDED)

            if not self.forvo_client.is_success(response):
                error = f"failed to download '{word}' audio, status code {response.status_code}"
                try:
                    body = self.forvo_client.response_body(response)
                except requests.RequestException as e:
                    body = f"couldn't read response body: {e}"
                self.log(f"{error}\n{body}")
                return self._result(word, DownloadState.FETCH_FAILED, error=error)

            try:
                output = self.filesystem.open_append(filename)
            except OSError as e:
                return self._result(
                    word, DownloadState.OPEN_FAILED,
                    error=f"couldn't open '{filename}': {e}",
                    trace=traceback.format_exc(),
                )

            # A partial file stays on disk and counts as downloaded next run.
            try:
                with output:
                    for chunk in response.iter_content(chunk_size=AppConfig.CHUNK_SIZE):
                        if time.monotonic() > deadline:
                            raise requests.Timeout(
                                f"download took longer than {HTTPConfig.DOWNLOAD_TIMEOUT} seconds"
                            )
                        if chunk:
                            output.write(chunk)
            except (requests.RequestException, OSError) as e:
                self.log(f"failed to write '{filename}'")
                return self._result(word, DownloadState.WRITE_FAILED, error=str(e))
        finally:
            response.close()

        return self._result(word, DownloadState.WRITTEN,
                            file_path=self.filesystem.path(filename))

    def _quota_exceeded(self, word: str, state: DownloadState) -> Dict[str, Any]:
        return self._result(
            word, state,
            error="Daily API limit reached",
            trace="".join(traceback.format_stack()),
        )

    @staticmethod
    def _result(word: str, state: DownloadState, error: Optional[str] = None,
                trace: Optional[str] = None, file_path: Optional[str] = None) -> Dict[str, Any]:
        return {
            'word': word,
            'state': state,
            'success': state in (DownloadState.WRITTEN, DownloadState.SKIPPED),
            'fatal': state.fatal,
            'error': error,
            'trace': trace,
            'file_path': file_path,
        }
