from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.results_writer import write_results


logger = logging.getLogger(__name__)


class WriteResults:
    def __init__(self, output_path: str) -> None:
        self.output_path = output_path

    def run(self, ctx: RunContext) -> RunContext:
        records = ctx.records or []
        target = write_results(records, self.output_path)
        ctx.meta["output_path"] = str(target)
        ctx.meta["records_written"] = len(records)
        logger.info(f"Data scraped and saved to {target}", extra={"step": "write", "status": "ok"})
        return ctx
