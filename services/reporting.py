from __future__ import annotations

from pathlib import Path
from typing import Optional


def print_summary(meta: dict, output_path: Optional[Path] = None) -> None:
    """Print summary of a scrape run from the pipeline meta counters."""
    print("\n" + "="*60)
    print("YC COMPANY SCRAPE - SUMMARY")
    print("="*60)
    print(f"Input Rows: {meta.get('rows_loaded', 0)}")
    print(f"Pages Attempted: {meta.get('pages_attempted', 0)}")
    print(f"Pages Succeeded: {meta.get('pages_succeeded', 0)}")
    print(f"Pages Failed: {meta.get('failed_pages', 0)}")
    failed_urls = meta.get('failed_urls') or []
    for url in failed_urls[:5]:
        print(f"  - {url}")
    if len(failed_urls) > 5:
        print(f"  ... and {len(failed_urls) - 5} more")
    if meta.get('cancelled'):
        print("Run was cancelled before all pages were visited")
    print(f"Records Written: {meta.get('records_written', 0)}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
