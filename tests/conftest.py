# File: tests/conftest.py
from __future__ import annotations

import asyncio
import logging
import ssl
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import List

import pytest
import pytest_asyncio
import trustme
from aiohttp import web

from urlcollect.logger import get_logger, shutdown

#: body served by the default handler
RETURN_BODY: bytes = b'{"value":"test collect"}'
HOST: str = "127.0.0.1"
#: body served over HTTPS by the TLS server
TLS_BODY: bytes = b"tls"


@dataclass
class ServerStats:
    """Counters shared between a test server and the test body."""

    hits: int = 0
    in_flight: int = 0
    max_in_flight: int = 0
    methods: List[str] = field(default_factory=list)


async def _serve_app(
    app: web.Application, port: int, ssl_context: ssl.SSLContext | None = None
) -> AsyncIterator[str]:
    """Start *app* on *port* (HTTPS if *ssl_context*), yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, HOST, port, ssl_context=ssl_context)
    await site.start()
    scheme = "https" if ssl_context is not None else "http"
    try:
        yield f"{scheme}://{HOST}:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def stats() -> ServerStats:
    return ServerStats()


@pytest_asyncio.fixture
async def server(unused_tcp_port: int, stats: ServerStats) -> AsyncIterator[str]:
    """
    Test server:
      /            -> 200 RETURN_BODY
      /item/{n}    -> 200 "item-{n}", after a short delay
      /missing     -> 404 "missing"
      /slow        -> sleeps 2 s
    Every request is counted in *stats*.
    """
    app = web.Application()

    @web.middleware
    async def count(request: web.Request, handler):
        stats.hits += 1
        stats.methods.append(request.method)
        stats.in_flight += 1
        stats.max_in_flight = max(stats.max_in_flight, stats.in_flight)
        try:
            return await handler(request)
        finally:
            stats.in_flight -= 1

    app.middlewares.append(count)

    async def handle_root(_):
        return web.Response(body=RETURN_BODY, content_type="application/json")

    async def handle_item(request: web.Request):
        await asyncio.sleep(0.05)
        return web.Response(text=f"item-{request.match_info['n']}")

    async def handle_missing(_):
        return web.Response(status=404, text="missing")

    async def handle_slow(_):
        await asyncio.sleep(2)
        return web.Response(text="late")

    app.router.add_get("/", handle_root)
    app.router.add_get("/item/{n}", handle_item)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/slow", handle_slow)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest_asyncio.fixture
async def truncated_server(unused_tcp_port: int) -> AsyncIterator[str]:
    """Raw server announcing 100 body bytes, sending 7 and hanging up."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await reader.readuntil(b"\r\n\r\n")
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/plain\r\n"
            b"Content-Length: 100\r\n"
            b"Connection: close\r\n"
            b"\r\n"
            b"partial"
        )
        await writer.drain()
        writer.close()
        await writer.wait_closed()

    srv = await asyncio.start_server(handle, HOST, unused_tcp_port)
    try:
        yield f"http://{HOST}:{unused_tcp_port}"
    finally:
        srv.close()
        await srv.wait_closed()


@pytest.fixture(scope="session")
def tls_ca() -> trustme.CA:
    """A throwaway certificate authority no client trusts."""
    return trustme.CA()


@pytest_asyncio.fixture
async def tls_server(unused_tcp_port: int, tls_ca: trustme.CA) -> AsyncIterator[str]:
    """HTTPS server whose certificate is signed by the untrusted *tls_ca*."""
    ctx = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    tls_ca.issue_cert(HOST).configure_cert(ctx)

    async def handle(_):
        return web.Response(body=TLS_BODY)

    app = web.Application()
    app.router.add_get("/", handle)

    async for url in _serve_app(app, unused_tcp_port, ssl_context=ctx):
        yield url


@pytest.fixture()
def test_logger() -> logging.Logger:
    """A logger that propagates to the root so ``caplog`` sees it."""
    lg = logging.getLogger("tests.urlcollect")
    lg.setLevel(logging.DEBUG)
    return lg


@pytest.fixture()
def clean_app_logger():
    """Restore the application logger after a test reconfigures it."""
    lg = get_logger()
    level, propagate = lg.level, lg.propagate
    yield lg
    shutdown()
    lg.setLevel(level)
    lg.propagate = propagate
