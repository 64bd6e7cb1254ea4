from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from models import CompanyRecord


def write_results(records: Iterable[CompanyRecord], path: str | Path) -> Path:
    """Write records as a pretty-printed JSON array, replacing `path` atomically.

    The parent directory is created if missing. On failure the temporary file
    is removed and the error propagates; an existing output is left intact.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.to_json_dict() for r in records]

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return target


def read_results(path: str | Path) -> List[CompanyRecord]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}")
    return [CompanyRecord.model_validate(item) for item in data]
