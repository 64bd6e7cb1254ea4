from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional

from models import CompanyRecord


logger = logging.getLogger(__name__)


class ResultSink:
    """Append-only, thread-safe collection of CompanyRecords.

    When `dataset_path` is set, every append is also written as one JSON line
    so records collected before a crash can be exported later.
    """

    def __init__(self, dataset_path: Optional[str | Path] = None) -> None:
        self._records: List[CompanyRecord] = []
        self._lock = threading.Lock()
        self.dataset_path = Path(dataset_path) if dataset_path else None

    def reset_dataset(self) -> None:
        """Start a fresh dataset file for a new run."""
        if not self.dataset_path:
            return
        self.dataset_path.parent.mkdir(parents=True, exist_ok=True)
        self.dataset_path.write_text("", encoding="utf-8")

    def append(self, record: CompanyRecord) -> None:
        with self._lock:
            self._records.append(record)
            if self.dataset_path:
                self.dataset_path.parent.mkdir(parents=True, exist_ok=True)
                with self.dataset_path.open("a", encoding="utf-8") as f:
                    f.write(json.dumps(record.to_json_dict(), ensure_ascii=False) + "\n")

    def snapshot(self) -> List[CompanyRecord]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def load_dataset(path: str | Path) -> List[CompanyRecord]:
    """Read records back from a JSON-lines dataset, skipping a torn last line."""
    records: List[CompanyRecord] = []
    with Path(path).open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(CompanyRecord.model_validate(json.loads(line)))
            except ValueError as e:
                logger.warning(
                    "Skipping unreadable dataset line %s", lineno,
                    extra={"step": "load_dataset", "status": "skip", "error": str(e)},
                )
    return records
