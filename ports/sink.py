from __future__ import annotations

from typing import List, Protocol

from models import CompanyRecord


class ResultSinkPort(Protocol):
    def reset_dataset(self) -> None:
        ...

    def append(self, record: CompanyRecord) -> None:
        ...

    def snapshot(self) -> List[CompanyRecord]:
        ...

    def __len__(self) -> int:
        ...
