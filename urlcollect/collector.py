# === FILE: urlcollect/collector.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Final, List, Optional, Sequence, Union

from urlcollect.errors import CollectionCancelledError, InvalidWorkerCountError
from urlcollect.fetcher import Fetcher, MethodT
from urlcollect.models import FetchResult, HttpMethod, URLCollectionData

__all__ = ("ParallelCollector", "collect_all")

# one per worker, put on the work queue after the last URL
_STOP: Final = object()


class ParallelCollector:
    """Fans a list of URLs out over a fixed pool of worker tasks.

    Returns exactly one :class:`URLCollectionData` per input URL, in
    completion order. At most ``workers`` fetches are in flight at a time.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        workers: int,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise InvalidWorkerCountError(workers)
        self.fetcher = fetcher
        self.workers = workers
        self.logger = logger or fetcher.logger

    async def collect(
        self,
        urls: Sequence[str],
        cancel: Optional[asyncio.Event] = None,
    ) -> List[URLCollectionData]:
        start = time.monotonic()
        tasks: asyncio.Queue[Union[str, object]] = asyncio.Queue(maxsize=self.workers)
        results: asyncio.Queue[URLCollectionData] = asyncio.Queue(maxsize=len(urls))

        workers = [
            asyncio.create_task(self._worker(tasks, results, cancel))
            for _ in range(self.workers)
        ]
        try:
            for url in urls:
                await tasks.put(url)
            for _ in workers:
                await tasks.put(_STOP)
            await asyncio.gather(*workers)
        finally:
            for w in workers:
                if not w.done():
                    w.cancel()

        collected: List[URLCollectionData] = []
        while not results.empty():
            record = results.get_nowait()
            collected.append(record)
            self.logger.debug("collect url:%s, error:%s", record.url, record.error)

        self.logger.info(
            "collected %d urls with %d workers in %.2f s",
            len(collected),
            self.workers,
            time.monotonic() - start,
        )
        return collected

    async def _worker(
        self,
        tasks: asyncio.Queue[Union[str, object]],
        results: asyncio.Queue[URLCollectionData],
        cancel: Optional[asyncio.Event],
    ) -> None:
        while True:
            url = await tasks.get()
            if url is _STOP:
                return
            if cancel is not None and cancel.is_set():
                result = FetchResult(b"", None, CollectionCancelledError(url))
            else:
                result = await self._fetch_one(url)
            await results.put(URLCollectionData.from_result(url, result))

    async def _fetch_one(self, url: str) -> FetchResult:
        try:
            return await self.fetcher.fetch(url)
        except Exception as exc:
            # one bad URL must not take the batch down with it
            self.logger.exception("unexpected error fetching %s", url)
            return FetchResult(b"", None, exc)


async def collect_all(
    urls: Sequence[str],
    timeout: Optional[float],
    method: MethodT = HttpMethod.GET,
    workers: int = 10,
    *,
    logger: Optional[logging.Logger] = None,
    verify_tls: bool = False,
    cancel: Optional[asyncio.Event] = None,
) -> List[URLCollectionData]:
    """
    Fetch every URL in *urls* using *workers* concurrent workers.

    The returned list has one record per input URL (duplicates included),
    in no particular order. Failures are recorded per URL, never raised;
    only a non-positive *workers* raises :class:`InvalidWorkerCountError`.
    """
    fetcher = Fetcher(timeout, method, logger=logger, verify_tls=verify_tls)
    collector = ParallelCollector(fetcher, workers, logger=logger)
    return await collector.collect(urls, cancel=cancel)
