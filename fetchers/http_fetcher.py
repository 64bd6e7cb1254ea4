from __future__ import annotations

from typing import Optional

import requests

from config.settings import Settings, get_settings
from fetchers.base import PageVisitError
from fetchers.registry import register


class HttpFetcher:
    """Plain HTTP GET; no JavaScript rendering. Useful for static or saved pages."""

    fetcher_name = "http"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def fetch(self, url: str) -> str:
        try:
            resp = self.session.get(url, timeout=self.settings.request_timeout_seconds)
        except requests.exceptions.RequestException as e:
            raise PageVisitError(url, f"request error: {e}") from e
        if resp.status_code != 200:
            raise PageVisitError(url, f"HTTP {resp.status_code}")
        return resp.text

    def close(self) -> None:
        self.session.close()


def _register():
    register(HttpFetcher.fetcher_name, HttpFetcher)


_register()
