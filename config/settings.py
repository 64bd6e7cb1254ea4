from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Input/output
    csv_path: str
    output_path: str
    dataset_path: str

    # Page visits
    fetcher: str  # playwright | http
    crawl_concurrency: int
    page_timeout_ms: int
    headless: bool
    user_agent: str

    # Retry
    max_retries: int
    retry_backoff_seconds: float
    request_timeout_seconds: int

    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    concurrency = int(os.getenv("CRAWL_CONCURRENCY", "4"))
    max_retries = int(os.getenv("MAX_RETRIES", "3"))
    if concurrency < 1:
        raise RuntimeError("CRAWL_CONCURRENCY must be at least 1")
    if max_retries < 1:
        raise RuntimeError("MAX_RETRIES must be at least 1")
    return Settings(
        csv_path=os.getenv("CSV_PATH", "./inputs/companies.csv"),
        output_path=os.getenv("OUTPUT_PATH", "./out/scraped.json"),
        dataset_path=os.getenv("DATASET_PATH", "./storage/datasets/default.jsonl"),
        fetcher=os.getenv("FETCHER", "playwright"),
        crawl_concurrency=concurrency,
        page_timeout_ms=int(os.getenv("PAGE_TIMEOUT_MS", "30000")),
        headless=_as_bool(os.getenv("HEADLESS"), default=True),
        user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
        max_retries=max_retries,
        retry_backoff_seconds=float(os.getenv("RETRY_BACKOFF_SECONDS", "1.0")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
