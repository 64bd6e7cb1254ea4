from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from queue import Empty, Queue
from typing import Any, Callable, Optional

from fetchers.base import PageVisitError, fetch_with_retries
from models import InputRow
from pipelines.runner import RunContext
from ports.fetcher import PageFetcherPort
from ports.sink import ResultSinkPort
from services.extraction import extract_company_from_html


logger = logging.getLogger(__name__)


class CrawlCompanies:
    """Visit every loaded row once and append one CompanyRecord per page to the sink.

    Each worker thread owns one fetcher for its whole lifetime and pulls rows
    from a shared queue. A failing page is logged and skipped; it never
    discards records already in the sink. Setting `stop_event` stops new
    visits while in-flight ones finish.
    """

    def __init__(
        self,
        fetcher_factory: Callable[[], PageFetcherPort],
        sink: ResultSinkPort,
        concurrency: int = 4,
        max_retries: int = 1,
        backoff_seconds: float = 1.0,
        stop_event: Optional[threading.Event] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.fetcher_factory = fetcher_factory
        self.sink = sink
        self.concurrency = max(1, concurrency)
        self.max_retries = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self.stop_event = stop_event or threading.Event()
        self.sleep = sleep
        self._lock = threading.Lock()
        self._attempted = 0
        self._succeeded = 0
        self._failed_urls: list[str] = []

    def _record_failure(self, url: str) -> None:
        with self._lock:
            self._failed_urls.append(url)

    def _visit(self, fetcher: PageFetcherPort, row: InputRow) -> None:
        with self._lock:
            self._attempted += 1
        started = time.monotonic()
        try:
            html = fetch_with_retries(fetcher, row.url, self.max_retries, self.backoff_seconds, sleep=self.sleep)
            record = extract_company_from_html(html)
        except PageVisitError as e:
            logger.error(
                f"Giving up on {row.name}",
                extra={"step": "crawl", "status": "failed", "url": row.url, "error": e.reason},
            )
            self._record_failure(row.url)
            return
        except Exception as e:
            logger.exception(
                f"Unexpected error while extracting {row.name}",
                extra={"step": "crawl", "status": "failed", "url": row.url, "error": repr(e)},
            )
            self._record_failure(row.url)
            return
        self.sink.append(record)
        with self._lock:
            self._succeeded += 1
        logger.info(
            f"Scraped {record.name or row.name}",
            extra={
                "step": "crawl",
                "status": "ok",
                "url": row.url,
                "duration_ms": int((time.monotonic() - started) * 1000),
            },
        )

    def _worker(self, work: "Queue[InputRow]") -> None:
        fetcher: Any = None
        try:
            while not self.stop_event.is_set():
                try:
                    row = work.get_nowait()
                except Empty:
                    return
                if fetcher is None:
                    fetcher = self.fetcher_factory()
                self._visit(fetcher, row)
        finally:
            if fetcher is not None:
                fetcher.close()

    def run(self, ctx: RunContext) -> RunContext:
        rows = list(ctx.rows or [])
        # Only a run that has rows to visit may discard the previous dataset
        self.sink.reset_dataset()
        work: "Queue[InputRow]" = Queue()
        for row in rows:
            work.put(row)

        workers = min(self.concurrency, len(rows)) or 1
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="crawl")
        try:
            futures = [executor.submit(self._worker, work) for _ in range(workers)]
            try:
                wait(futures)
            except KeyboardInterrupt:
                logger.warning("Interrupted; waiting for in-flight pages", extra={"step": "crawl", "status": "cancelled"})
                self.stop_event.set()
                wait(futures)
                raise
            for fut in futures:
                # Surface errors from fetcher construction/close
                fut.result()
        finally:
            executor.shutdown(wait=True)
            ctx.records = self.sink.snapshot()
            ctx.meta["pages_attempted"] = self._attempted
            ctx.meta["pages_succeeded"] = self._succeeded
            ctx.meta["failed_pages"] = len(self._failed_urls)
            ctx.meta["failed_urls"] = list(self._failed_urls)
            ctx.meta["cancelled"] = self.stop_event.is_set()
        return ctx
