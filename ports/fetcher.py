from __future__ import annotations

from typing import Protocol


class PageFetcherPort(Protocol):
    fetcher_name: str

    def fetch(self, url: str) -> str:
        """Return the rendered HTML of `url`, raising on navigation failure."""
        ...

    def close(self) -> None:
        ...
