# File: urlcollect/engine.py
"""urlcollect.engine: Synchronous entry points that run the async fetcher and collector."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from urlcollect.collector import collect_all
from urlcollect.config import CollectorConfig, load_config
from urlcollect.fetcher import MethodT, fetch
from urlcollect.logger import get_logger
from urlcollect.models import FetchResult, HttpMethod, URLCollectionData

__all__ = ["Engine", "collect_url", "collect_urls"]


def collect_url(
    url: str,
    timeout: Optional[float],
    method: MethodT = HttpMethod.GET,
    *,
    logger: Optional[logging.Logger] = None,
    verify_tls: bool = False,
) -> FetchResult:
    """Blocking variant of :func:`urlcollect.fetcher.fetch`.

    Runs its own event loop, so it cannot be called from a coroutine.
    """
    return asyncio.run(fetch(url, timeout, method, logger=logger, verify_tls=verify_tls))


def collect_urls(
    urls: Sequence[str],
    timeout: Optional[float],
    method: MethodT = HttpMethod.GET,
    workers: int = 10,
    *,
    logger: Optional[logging.Logger] = None,
    verify_tls: bool = False,
) -> List[URLCollectionData]:
    """Blocking variant of :func:`urlcollect.collector.collect_all`."""
    return asyncio.run(
        collect_all(urls, timeout, method, workers, logger=logger, verify_tls=verify_tls)
    )


class Engine:
    """Facade binding a :class:`CollectorConfig` to the blocking entry points."""

    @staticmethod
    def load_config(path: Union[str, None]) -> CollectorConfig:
        """Load a YAML/JSON config, see :func:`urlcollect.config.load_config`."""
        return load_config(path)

    def __init__(
        self, config: CollectorConfig, logger: Optional[logging.Logger] = None
    ) -> None:
        self.config = config
        self.logger = logger or get_logger()

    def fetch(self, url: str) -> FetchResult:
        return collect_url(
            url,
            self.config.timeout,
            self.config.method,
            logger=self.logger,
            verify_tls=self.config.verify_tls,
        )

    def collect(self, urls: Sequence[str]) -> List[URLCollectionData]:
        """Fetch all *urls* and log a one-line summary of the batch."""
        self.logger.info("Collecting %d urls with %d workers", len(urls), self.config.workers)
        results = collect_urls(
            urls,
            self.config.timeout,
            self.config.method,
            self.config.workers,
            logger=self.logger,
            verify_tls=self.config.verify_tls,
        )
        failed = sum(1 for r in results if not r.ok)
        if failed:
            self.logger.warning("%d of %d urls failed", failed, len(results))
        return results
