from __future__ import annotations

from typing import Any, List, Optional

from bs4 import BeautifulSoup, Tag


class SoupDocument:
    """PageDocument over a parsed HTML snapshot of a rendered page."""

    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html or "", "html.parser")

    def _root(self, scope: Optional[Any]) -> Tag:
        return scope if scope is not None else self.soup

    def query_one(self, selector: str, scope: Optional[Any] = None) -> Optional[Tag]:
        return self._root(scope).select_one(selector)

    def query_all(self, selector: str, scope: Optional[Any] = None) -> List[Tag]:
        return list(self._root(scope).select(selector))

    def get_text(self, element: Any) -> str:
        if element is None:
            return ""
        return (element.get_text() or "").strip()
