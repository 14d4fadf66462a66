"""
Forvo Downloader

Downloads the top rated pronunciation of every word in a word list from
the Forvo API, skipping words that are already on disk.
"""

__version__ = "1.0.0"

from .core.audio_provider import ForvoAudioProvider
from .core.forvo_api import ForvoAPIClient
from .core.models import DownloadState, Item, LookupResult
from .core.runner import Runner

__all__ = [
    "ForvoAudioProvider",
    "ForvoAPIClient",
    "DownloadState",
    "Item",
    "LookupResult",
    "Runner",
]
