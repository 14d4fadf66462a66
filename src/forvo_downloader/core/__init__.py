"""Core functionality for Forvo Downloader."""

from .audio_provider import ForvoAudioProvider
from .forvo_api import ForvoAPIClient
from .models import DownloadState, Item, LookupResult
from .runner import Runner

__all__ = [
    "ForvoAudioProvider",
    "ForvoAPIClient",
    "DownloadState",
    "Item",
    "LookupResult",
    "Runner",
]
