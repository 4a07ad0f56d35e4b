"""
urlcollect package initializer.
Defines package version and exposes the public API.
"""
__version__ = "0.1.0"

from urlcollect.collector import ParallelCollector, collect_all
from urlcollect.config import CollectorConfig, load_config
from urlcollect.engine import Engine, collect_url, collect_urls
from urlcollect.errors import (
    CollectionCancelledError,
    InvalidMethodError,
    InvalidURLError,
    InvalidWorkerCountError,
    UrlCollectError,
)
from urlcollect.fetcher import Fetcher, fetch
from urlcollect.models import FetchResult, HttpMethod, ResponseMetadata, URLCollectionData

__all__ = [
    "__version__",
    "CollectionCancelledError",
    "CollectorConfig",
    "Engine",
    "FetchResult",
    "Fetcher",
    "HttpMethod",
    "InvalidMethodError",
    "InvalidURLError",
    "InvalidWorkerCountError",
    "ParallelCollector",
    "ResponseMetadata",
    "URLCollectionData",
    "UrlCollectError",
    "collect_all",
    "collect_url",
    "collect_urls",
    "fetch",
    "load_config",
]
