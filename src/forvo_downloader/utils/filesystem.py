"""
Filesystem access for downloaded audio files.
"""

import os
from typing import BinaryIO


class LocalFileSystem:
    """Resolves file names against an output directory on local disk."""

    def __init__(self, root: str = "."):
        self.root = os.path.expanduser(root)

    def path(self, filename: str) -> str:
        """Get the full path for a file name."""
        return os.path.join(self.root, filename)

    def exists(self, filename: str) -> bool:
        """Check whether a file is already present in the output directory."""
        return os.path.exists(self.path(filename))

    def open_append(self, filename: str) -> BinaryIO:
        """
        Open a file for binary appending, creating it if needed.

        Raises:
            OSError: If the file cannot be opened
        """
        return open(self.path(filename), 'ab')
