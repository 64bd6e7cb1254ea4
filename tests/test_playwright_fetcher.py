from __future__ import annotations

from typing import Any, List, Tuple

import pytest
from playwright.sync_api import Error as PlaywrightError

import fetchers.playwright_fetcher as pf
from config.settings import get_settings
from fetchers.base import PageVisitError


class _FakePage:
    def __init__(self, calls: List[Tuple], fail_wait: bool) -> None:
        self.calls = calls
        self.fail_wait = fail_wait

    def goto(self, url: str, wait_until: str, timeout: int) -> None:
        self.calls.append(("goto", url, wait_until, timeout))

    def wait_for_selector(self, selector: str, timeout: int) -> None:
        self.calls.append(("wait_for_selector", selector, timeout))
        if self.fail_wait:
            raise PlaywrightError("Timeout 1234ms exceeded.\nwaiting for locator('h1')")

    def content(self) -> str:
        self.calls.append(("content",))
        return "<html><h1>Acme</h1></html>"


class _FakeContext:
    def __init__(self, calls: List[Tuple], fail_wait: bool) -> None:
        self.calls = calls
        self.fail_wait = fail_wait

    def new_page(self) -> _FakePage:
        return _FakePage(self.calls, self.fail_wait)

    def close(self) -> None:
        self.calls.append(("context.close",))


class _FakeDriver:
    """Stands in for sync_playwright(): start() -> playwright, .chromium.launch() -> browser."""

    def __init__(self, fail_wait: bool = False, launch_failures: int = 0) -> None:
        self.calls: List[Tuple] = []
        self.fail_wait = fail_wait
        self.launch_failures = launch_failures
        self.starts = 0
        self.chromium = self

    # sync_playwright() factory
    def __call__(self) -> "_FakeDriver":
        return self

    def start(self) -> "_FakeDriver":
        self.starts += 1
        return self

    def stop(self) -> None:
        self.calls.append(("playwright.stop",))

    def launch(self, headless: bool) -> "_FakeDriver":
        self.calls.append(("launch", headless))
        if self.launch_failures:
            self.launch_failures -= 1
            raise PlaywrightError("Executable doesn't exist")
        return self

    def new_context(self, **kwargs: Any) -> _FakeContext:
        self.calls.append(("new_context", kwargs.get("user_agent")))
        return _FakeContext(self.calls, self.fail_wait)

    def close(self) -> None:
        self.calls.append(("browser.close",))


@pytest.fixture
def fast_settings(monkeypatch):
    monkeypatch.setenv("PAGE_TIMEOUT_MS", "1234")
    monkeypatch.setenv("USER_AGENT", "test-agent")
    get_settings.cache_clear()
    return get_settings()


def test_waits_for_heading_before_reading_content(monkeypatch, fast_settings):
    driver = _FakeDriver()
    monkeypatch.setattr(pf, "sync_playwright", driver)
    fetcher = pf.PlaywrightFetcher(settings=fast_settings)

    html = fetcher.fetch("https://www.ycombinator.com/companies/acme")

    assert html == "<html><h1>Acme</h1></html>"
    assert driver.calls == [
        ("launch", True),
        ("new_context", "test-agent"),
        ("goto", "https://www.ycombinator.com/companies/acme", "domcontentloaded", 1234),
        ("wait_for_selector", "h1", 1234),
        ("content",),
        ("context.close",),
    ]
    fetcher.close()
    assert driver.calls[-2:] == [("browser.close",), ("playwright.stop",)]


def test_heading_timeout_becomes_page_visit_error_and_closes_context(monkeypatch, fast_settings):
    driver = _FakeDriver(fail_wait=True)
    monkeypatch.setattr(pf, "sync_playwright", driver)
    fetcher = pf.PlaywrightFetcher(settings=fast_settings)

    with pytest.raises(PageVisitError) as exc:
        fetcher.fetch("https://www.ycombinator.com/companies/slow")

    assert exc.value.url == "https://www.ycombinator.com/companies/slow"
    assert exc.value.reason == "Timeout 1234ms exceeded."
    assert ("content",) not in driver.calls
    assert driver.calls[-1] == ("context.close",)


def test_failed_launch_reuses_started_driver(monkeypatch, fast_settings):
    driver = _FakeDriver(launch_failures=1)
    monkeypatch.setattr(pf, "sync_playwright", driver)
    fetcher = pf.PlaywrightFetcher(settings=fast_settings)

    with pytest.raises(PageVisitError) as exc:
        fetcher.fetch("https://a.example")
    assert "browser unavailable" in exc.value.reason

    assert fetcher.fetch("https://a.example") == "<html><h1>Acme</h1></html>"
    assert driver.starts == 1
    assert [c for c in driver.calls if c[0] == "launch"] == [("launch", True), ("launch", True)]
