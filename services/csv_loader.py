from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from models import InputRow


NAME_COLUMN = "Company Name"
URL_COLUMN = "YC URL"


def load_company_rows(path: str | Path) -> List[InputRow]:
    """Read (name, url) pairs from a CSV with a header row.

    Rows missing either column value are skipped. File order and duplicates
    are preserved. OSError / csv.Error propagate to the caller.
    """
    rows: List[InputRow] = []
    with Path(path).open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for raw in reader:
            name = (raw.get(NAME_COLUMN) or "").strip()
            url = (raw.get(URL_COLUMN) or "").strip()
            if not (name and url):
                continue
            rows.append(InputRow(name=name, url=url))
    return rows
