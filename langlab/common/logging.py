"""Logging utilities for the downloader.

Messages are printed with a bracketed tag, e.g. ``[book] Downloading ...``.
Progress and "not found" outcomes always print; ``[debug]`` lines only print
when debugging is enabled.
"""

import sys


def log_info(tag: str, message: str) -> None:
    """Print a progress or outcome message."""
    print(f"[{tag}] {message}")


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"[error] {message}", file=sys.stderr)


def banner(title: str) -> None:
    """Print a section banner used by the entry point in verbose mode."""
    print(f"\n{'=' * 60}")
    print(title)
    print(f"{'=' * 60}")
