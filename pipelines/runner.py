from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    input_path: Optional[str] = None
    rows: list = field(default_factory=list)
    records: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            started = time.monotonic()
            try:
                ctx = step.run(ctx)
            except Exception as e:
                logger.error(
                    "Pipeline step failed",
                    extra={
                        "step": name,
                        "status": "error",
                        "duration_ms": int((time.monotonic() - started) * 1000),
                        "error": str(e),
                    },
                )
                raise
            logger.info(
                "Pipeline step finished",
                extra={"step": name, "status": "ok", "duration_ms": int((time.monotonic() - started) * 1000)},
            )
        return ctx
