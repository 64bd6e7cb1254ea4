from __future__ import annotations

from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from config.settings import Settings, get_settings
from fetchers.base import PageVisitError
from fetchers.registry import register


class PlaywrightFetcher:
    """Headless Chromium page visits.

    Sync Playwright objects are bound to the thread that started them, so one
    instance must be created, used and closed by a single worker thread.
    """

    fetcher_name = "playwright"
    wait_selector = "h1"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._playwright = None
        self._browser = None

    def _ensure_browser(self):
        # A failed launch keeps the driver; the next attempt reuses it
        if self._playwright is None:
            self._playwright = sync_playwright().start()
        if self._browser is None:
            self._browser = self._playwright.chromium.launch(headless=self.settings.headless)
        return self._browser

    def fetch(self, url: str) -> str:
        timeout = self.settings.page_timeout_ms
        try:
            browser = self._ensure_browser()
            context = browser.new_context(
                ignore_https_errors=True,
                user_agent=self.settings.user_agent,
            )
        except PlaywrightError as e:
            raise PageVisitError(url, f"browser unavailable: {e}") from e
        try:
            page = context.new_page()
            page.goto(url, wait_until="domcontentloaded", timeout=timeout)
            # Content is read only once the company heading has rendered
            page.wait_for_selector(self.wait_selector, timeout=timeout)
            return page.content()
        except PlaywrightError as e:
            raise PageVisitError(url, str(e).splitlines()[0] if str(e) else type(e).__name__) from e
        finally:
            context.close()

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None


def _register():
    register(PlaywrightFetcher.fetcher_name, PlaywrightFetcher)


_register()
