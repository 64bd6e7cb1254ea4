from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.csv_loader import load_company_rows


logger = logging.getLogger(__name__)


class NoValidInputError(RuntimeError):
    """The input file yielded no rows with both a company name and a URL."""


class LoadCompanyRows:
    def __init__(self, path: str | None = None) -> None:
        self.path = path

    def run(self, ctx: RunContext) -> RunContext:
        path = self.path or ctx.input_path
        if not path:
            raise NoValidInputError("No input CSV path given")
        rows = load_company_rows(path)
        if not rows:
            raise NoValidInputError(f"No valid companies with URLs found in {path}")
        ctx.input_path = str(path)
        ctx.rows = rows
        ctx.meta["rows_loaded"] = len(rows)
        logger.info(f"Loaded {len(rows)} companies from {path}", extra={"step": "load", "status": "ok"})
        return ctx
