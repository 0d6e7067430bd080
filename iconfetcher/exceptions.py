"""Iconfetcher specific exceptions."""


class IconFetcherError(Exception):
    """Base class for errors raised while resolving a site icon."""


class InvalidInputURL(IconFetcherError, ValueError):
    """Raised when the URL handed to the fetcher cannot be used."""


class InvalidScheme(InvalidInputURL):
    """Raised when the URL scheme is neither `http` nor `https`."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Cannot load non-http(s) URL with scheme {scheme!r}")
        self.scheme = scheme


class MissingHost(InvalidInputURL):
    """Raised when the URL has no resolvable host."""


class HeadFetchFailed(IconFetcherError):
    """Raised when the page whose head declares the icons could not be retrieved."""

    pass


class MarkupParseFailed(IconFetcherError):
    """Raised when the head markup could not be scanned."""

    pass


class ImageDecodeFailed(IconFetcherError):
    """Raised when a selected payload is not a decodable image."""

    pass
