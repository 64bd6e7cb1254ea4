from __future__ import annotations

from typing import Any, List, Optional, Protocol


class PageDocument(Protocol):
    """Read-only query capability over a rendered page.

    Selectors are CSS selectors; `scope` restricts a query to the descendants
    of an element previously returned by this document.
    """

    def query_one(self, selector: str, scope: Optional[Any] = None) -> Optional[Any]:
        ...

    def query_all(self, selector: str, scope: Optional[Any] = None) -> List[Any]:
        ...

    def get_text(self, element: Any) -> str:
        ...
