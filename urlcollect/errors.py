# File: urlcollect/errors.py
"""urlcollect.errors: Exceptions raised or recorded by the fetcher and collector."""

from __future__ import annotations

__all__ = [
    "UrlCollectError",
    "InvalidURLError",
    "InvalidMethodError",
    "InvalidWorkerCountError",
    "CollectionCancelledError",
]


class UrlCollectError(Exception):
    """Base class for all urlcollect errors."""


class InvalidURLError(UrlCollectError, ValueError):
    """The URL could not be parsed or is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid url {url!r}: {reason}")
        self.url = url
        self.reason = reason


class InvalidMethodError(UrlCollectError, ValueError):
    """The HTTP method is not one of GET or HEAD."""

    def __init__(self, method: object) -> None:
        super().__init__(f"invalid method: {method}")
        self.method = method


class InvalidWorkerCountError(UrlCollectError, ValueError):
    """Worker count must be a positive integer."""

    def __init__(self, workers: object) -> None:
        super().__init__(f"workers must be a positive integer, got {workers!r}")
        self.workers = workers


class CollectionCancelledError(UrlCollectError):
    """Recorded for a URL that was skipped because the batch was cancelled."""

    def __init__(self, url: str) -> None:
        super().__init__(f"collection cancelled before fetching {url}")
        self.url = url
