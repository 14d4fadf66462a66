"""Utility functions for Forvo Downloader."""

from .config import AppConfig, HTTPConfig, ForvoConfig
from .filesystem import LocalFileSystem
from .loaders import load_config, load_word_list, parse_word_list
from .log_sink import FileLogSink, MemoryLogSink, LogWriteError

__all__ = [
    "AppConfig",
    "HTTPConfig",
    "ForvoConfig",
    "LocalFileSystem",
    "load_config",
    "load_word_list",
    "parse_word_list",
    "FileLogSink",
    "MemoryLogSink",
    "LogWriteError",
]
