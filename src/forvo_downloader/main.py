"""
Main entry point for the Forvo Downloader package.
"""

import argparse
import os
import sys

from .core.runner import Runner
from .utils.config import AppConfig
from .utils.filesystem import LocalFileSystem
from .utils.log_sink import FileLogSink, LogWriteError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Download the top rated Forvo pronunciation for every word in a word list"
    )
    parser.add_argument("--directory", default=".",
                        help="Directory holding the word list, configuration, log and audio files (default: current directory)")
    parser.add_argument("--config", default=None,
                        help=f"Configuration file (default: {AppConfig.CONFIG_FILENAME} in the directory)")
    parser.add_argument("--words", default=None,
                        help=f"Word list file, one word per line (default: {AppConfig.WORDS_FILENAME} in the directory)")
    parser.add_argument("--log", default=None,
                        help=f"Log file (default: {AppConfig.LOG_FILENAME} in the directory)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the downloader and return the process exit code."""
    args = parse_args(argv)
    directory = os.path.expanduser(args.directory)

    log_sink = FileLogSink(args.log or os.path.join(directory, AppConfig.LOG_FILENAME))
    runner = Runner(
        log_sink,
        config_path=args.config or os.path.join(directory, AppConfig.CONFIG_FILENAME),
        words_path=args.words or os.path.join(directory, AppConfig.WORDS_FILENAME),
        filesystem=LocalFileSystem(directory),
    )

    try:
        result = runner.run()
    except LogWriteError as e:
        print(f"ERROR! {e}", file=sys.stderr)
        return 1

    return 0 if result['success'] else 1


if __name__ == "__main__":
    sys.exit(main())
