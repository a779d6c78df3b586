"""Error types raised by the downloader.

All of them are fatal to a run and propagate to the entry point.
"""


class LangLabError(Exception):
    """Base class for downloader errors."""


class TransportError(LangLabError):
    """An API endpoint could not be reached or answered with an error status."""


class DecodeError(LangLabError):
    """A response body is not the JSON shape the endpoint promises."""


class FilesystemError(LangLabError):
    """The output directory or file could not be created or written."""


__all__ = [
    "LangLabError",
    "TransportError",
    "DecodeError",
    "FilesystemError",
]
