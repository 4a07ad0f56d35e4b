# urlcollect/fetcher.py
"""
Fetcher module: one GET or HEAD request per call, with timeout and relaxed TLS.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector
from yarl import URL

from urlcollect.errors import InvalidMethodError, InvalidURLError
from urlcollect.logger import get_logger
from urlcollect.models import FetchResult, HttpMethod, ResponseMetadata

__all__ = ("Fetcher", "fetch")

_ALLOWED_METHODS = tuple(m.value for m in HttpMethod)
_ALLOWED_SCHEMES = ("http", "https")
_TRANSPORT_ERRORS = (ClientError, asyncio.TimeoutError, OSError)

MethodT = Union[HttpMethod, str]


class Fetcher:
    """Issues single requests with a fixed timeout, method and TLS policy.

    Every call opens its own session over a connector that never reuses
    connections, so descriptors are released as soon as a fetch returns.
    """

    def __init__(
        self,
        timeout: Optional[float],
        method: MethodT = HttpMethod.GET,
        *,
        logger: Optional[logging.Logger] = None,
        verify_tls: bool = False,
    ) -> None:
        self.timeout = timeout
        self.method = method
        self.verify_tls = verify_tls
        self.logger = logger or get_logger()

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* and return ``(body, response, error)``.

        Expected failures are returned in ``error``, never raised.
        """
        try:
            target = self._parse_url(url)
        except InvalidURLError as exc:
            self.logger.error("fetch error parsing url: %s", exc)
            return FetchResult(b"", None, exc)

        # str-valued enum members compare equal to their value
        if not isinstance(self.method, str) or self.method not in _ALLOWED_METHODS:
            exc = InvalidMethodError(self.method)
            self.logger.error("%s", exc)
            return FetchResult(b"", None, exc)
        method = str(self.method)

        async with ClientSession(
            connector=self._connector(),
            timeout=self._client_timeout(),
            headers={"Connection": "close"},
        ) as session:
            try:
                async with session.request(method, target) as resp:
                    meta = ResponseMetadata.from_response(resp)
                    try:
                        body = await resp.read()
                    except _TRANSPORT_ERRORS as exc:
                        self.logger.warning("fetch read error for %s: %s", url, exc)
                        return FetchResult(b"", meta, exc)
            except _TRANSPORT_ERRORS as exc:
                # warning only: the host may simply be down or unknown
                self.logger.warning("fetch client error for %s: %s", url, exc)
                return FetchResult(b"", None, exc)

        return FetchResult(body, meta, None)

    def _client_timeout(self) -> ClientTimeout:
        if self.timeout is None or self.timeout <= 0:
            return ClientTimeout(total=None, connect=None)
        return ClientTimeout(total=self.timeout, connect=self.timeout)

    def _connector(self) -> TCPConnector:
        # ssl=False skips certificate verification entirely
        return TCPConnector(ssl=self.verify_tls, force_close=True)

    @staticmethod
    def _parse_url(url: str) -> URL:
        try:
            parsed = URL(url)
        except (TypeError, ValueError) as exc:
            raise InvalidURLError(str(url), str(exc)) from exc
        if not parsed.is_absolute() or not parsed.host:
            raise InvalidURLError(url, "not an absolute url")
        if parsed.scheme not in _ALLOWED_SCHEMES:
            raise InvalidURLError(url, f"unsupported scheme {parsed.scheme!r}")
        return parsed


async def fetch(
    url: str,
    timeout: Optional[float],
    method: MethodT = HttpMethod.GET,
    *,
    logger: Optional[logging.Logger] = None,
    verify_tls: bool = False,
) -> FetchResult:
    """Fetch one URL with GET or HEAD; see :meth:`Fetcher.fetch`."""
    return await Fetcher(timeout, method, logger=logger, verify_tls=verify_tls).fetch(url)
