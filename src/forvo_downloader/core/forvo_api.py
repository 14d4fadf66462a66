"""
Forvo API client for looking up and fetching audio pronunciations.
"""

from typing import Optional
from urllib.parse import quote

import requests

from ..utils.config import AppConfig, HTTPConfig
from .models import LookupResult


class ForvoAPIClient:
    """Client for accessing the Forvo API to download pronunciations."""

    def __init__(self, api_key: str, session: Optional[requests.Session] = None,
                 base_url: str = AppConfig.FORVO_API_BASE_URL):
        """
        Initialize the Forvo API client.

        Args:
            api_key: Forvo API key
            session: Optional session to reuse for every request
            base_url: Root URL of the API
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = HTTPConfig.get_timeout()
        if session is None:
            session = requests.Session()
            session.headers.update(HTTPConfig.HEADERS)
        self.session = session

    def build_lookup_url(self, word: str, language: str) -> str:
        """
        Build the word-pronunciations URL for a word.

        Every parameter is a path segment, so each value is percent-encoded
        in full (slashes included).
        """
        segments = [
            ('key', self.api_key),
            ('format', 'json'),
            ('action', 'word-pronunciations'),
            ('word', word),
            ('language', language),
            ('order', AppConfig.LOOKUP_ORDER),
            ('limit', str(AppConfig.LOOKUP_LIMIT)),
        ]
        path = "".join(
            f"/{name}/{quote(value, safe='', errors='surrogateescape')}" for name, value in segments
        )
        return f"{self.base_url}{path}"

    def search(self, word: str, language: str) -> requests.Response:
        """
        Send the lookup request for a word.

        Returns:
            The response, whatever its status code

        Raises:
            requests.RequestException: On transport failures
        """
        url = self.build_lookup_url(word, language)
        return self.session.get(url, timeout=self.timeout)

    def fetch_audio(self, url: str) -> requests.Response:
        """
        Send the fetch request for an audio file; the body is streamed.

        Raises:
            requests.RequestException: On transport failures
        """
        return self.session.get(url, stream=True, timeout=self.timeout)

    @staticmethod
    def parse_lookup(response: requests.Response) -> LookupResult:
        """
        Decode a lookup response body.

        Raises:
            ValueError: If the body is not valid lookup JSON
        """
        return LookupResult.from_dict(response.json())

    @staticmethod
    def is_success(response: requests.Response) -> bool:
        return 200 <= response.status_code < 300

    @staticmethod
    def is_quota_exceeded(response: requests.Response) -> bool:
        return response.status_code == HTTPConfig.QUOTA_EXCEEDED_STATUS

    @staticmethod
    def response_body(response: requests.Response) -> str:
        """Get the stripped response text, or a placeholder when it is empty."""
        text = (response.text or "").strip()
        return text or AppConfig.NO_RESPONSE_BODY
