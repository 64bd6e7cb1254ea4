from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.crawl_companies'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    # Keep runs out of the working tree and pick up per-test env changes
    monkeypatch.setenv("DATASET_PATH", str(tmp_path / "storage" / "default.jsonl"))
    monkeypatch.setenv("RETRY_BACKOFF_SECONDS", "0")
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def company_page(
    name: str = "Acme",
    team_size: str | None = None,
    jobs: str | None = None,
    founders: list[tuple[str, str | None]] | None = None,
) -> str:
    """Minimal HTML shaped like a YC company page."""
    parts = [f"<html><body><div class='wrapper'><h1> {name} </h1>"]
    if team_size is not None:
        parts.append(f"<div class='flex'><span>Team Size:</span><span>{team_size}</span></div>")
    if jobs is not None:
        parts.append(
            "<div class='nav'><a href='/jobs'>Jobs</a>"
            f"<span class='ycdc-badge'> {jobs} </span></div>"
        )
    for title, desc in founders or []:
        block = f"<div class='flex-grow'><h3>{title}</h3>"
        if desc is not None:
            block += f"<p> {desc} </p>"
        parts.append(block + "</div>")
    parts.append("</div></body></html>")
    return "".join(parts)
