# Importing the fetcher modules registers them
from . import http_fetcher  # noqa: F401
from . import playwright_fetcher  # noqa: F401
from .base import PageVisitError, fetch_with_retries
from .registry import available_fetchers, get_fetcher, register

__all__ = [
    "PageVisitError",
    "fetch_with_retries",
    "available_fetchers",
    "get_fetcher",
    "register",
]
