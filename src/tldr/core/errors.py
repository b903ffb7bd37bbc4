"""Exception types raised by tldr."""


class TldrError(Exception):
    """Base class for errors raised by this package."""


class ResourceLoadError(TldrError):
    """A bundled or configured resource could not be read.

    Raised when the stop-word list is missing or unreadable; summarization
    cannot proceed without it.
    """
