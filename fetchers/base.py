from __future__ import annotations

import logging
import time
from typing import Callable

from ports.fetcher import PageFetcherPort


logger = logging.getLogger(__name__)


class PageVisitError(RuntimeError):
    """A page could not be fetched or rendered."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def fetch_with_retries(
    fetcher: PageFetcherPort,
    url: str,
    max_retries: int,
    backoff_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """Fetch `url`, retrying PageVisitError with exponential backoff."""
    last_error: PageVisitError | None = None
    for attempt in range(max_retries):
        try:
            return fetcher.fetch(url)
        except PageVisitError as e:
            last_error = e
            logger.warning(
                f"Page visit attempt {attempt + 1}/{max_retries} failed",
                extra={"step": "fetch", "status": "retry", "url": url, "error": e.reason},
            )
            if attempt < max_retries - 1:
                sleep(backoff_seconds * (2 ** attempt))
    raise last_error or PageVisitError(url, "no attempts made")
