#!/usr/bin/env python3
"""
Forvo Downloader - Main Entry Point

Reads forvo.json and forvo.txt from the working directory and downloads the
top rated Forvo pronunciation of every listed word as <word>.mp3.
"""

import sys

from src.forvo_downloader.main import main

if __name__ == "__main__":
    sys.exit(main())
