# urlcollect/models.py
"""
Data models shared by the fetcher and the collector.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from aiohttp import ClientResponse
from multidict import CIMultiDictProxy


class HttpMethod(str, Enum):
    """The only request methods the fetcher will issue."""

    GET = "GET"
    HEAD = "HEAD"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ResponseMetadata:
    """Status line and headers of a received response (body excluded)."""

    status: int
    reason: Optional[str]
    headers: CIMultiDictProxy[str]
    url: str
    method: str
    content_length: Optional[int]

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def from_response(cls, resp: ClientResponse) -> ResponseMetadata:
        return cls(
            status=resp.status,
            reason=resp.reason,
            headers=resp.headers,
            url=str(resp.url),
            method=resp.method,
            content_length=resp.content_length,
        )


class FetchResult(NamedTuple):
    """Outcome of a single fetch; unpacks as ``body, response, error``."""

    body: bytes
    response: Optional[ResponseMetadata]
    error: Optional[BaseException]


@dataclass(frozen=True, slots=True)
class URLCollectionData:
    """Result record for one input URL of a batch.

    ``body`` is only meaningful when ``error`` is None. ``response`` is set
    whenever a response head was received, even if reading the body failed.
    """

    url: str
    body: bytes
    response: Optional[ResponseMetadata]
    error: Optional[BaseException]

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_result(cls, url: str, result: FetchResult) -> URLCollectionData:
        return cls(url, result.body, result.response, result.error)
