import argparse
import json
import logging
import os
import sys
import uuid as _uuid
from pathlib import Path

from config.settings import get_settings
from fetchers import available_fetchers, get_fetcher
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.crawl_companies import CrawlCompanies
from pipelines.steps.load_companies import LoadCompanyRows
from pipelines.steps.write_results import WriteResults
from services.extraction import extract_company_from_html
from services.reporting import print_summary
from services.result_sink import ResultSink, load_dataset
from services.results_writer import write_results
from utils.logging_setup import init_logging


def cmd_run(args):
    settings = get_settings()
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    fetcher_name = args.fetcher or settings.fetcher
    if fetcher_name not in available_fetchers():
        known = ", ".join(sorted(available_fetchers()))
        raise ValueError(f"Unknown fetcher '{fetcher_name}' (available: {known})")

    output_path = args.output or settings.output_path
    sink = ResultSink(args.dataset or settings.dataset_path)

    ctx = RunContext(input_path=args.input or settings.csv_path)
    pipeline = Pipeline([
        LoadCompanyRows(),
        CrawlCompanies(
            lambda: get_fetcher(fetcher_name, settings=settings),
            sink,
            concurrency=args.concurrency or settings.crawl_concurrency,
            max_retries=args.retries or settings.max_retries,
            backoff_seconds=settings.retry_backoff_seconds,
        ),
        WriteResults(output_path),
    ])
    ctx = pipeline.run(ctx)
    print_summary(ctx.meta, Path(ctx.meta.get("output_path") or output_path))


def cmd_extract(args):
    html = Path(args.html).read_text(encoding="utf-8")
    record = extract_company_from_html(html)
    print(json.dumps(record.to_json_dict(), indent=2, ensure_ascii=False))


def cmd_export(args):
    settings = get_settings()
    dataset = args.dataset or settings.dataset_path
    records = load_dataset(dataset)
    target = write_results(records, args.output or settings.output_path)
    print(f"Exported {len(records)} records from {dataset} to {target}")


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="YC company page scraper")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Scrape every company in the input CSV and write a JSON array")
    p_run.add_argument("--input", "-i", default=None, help=f"Input CSV (default: {settings.csv_path})")
    p_run.add_argument("--output", "-o", default=None, help=f"Output JSON (default: {settings.output_path})")
    p_run.add_argument("--fetcher", choices=sorted(available_fetchers().keys()), default=None, help=f"Page-visit backend (default: {settings.fetcher})")
    p_run.add_argument("--concurrency", "-c", type=int, default=None, help=f"Parallel page visits (default: {settings.crawl_concurrency})")
    p_run.add_argument("--retries", type=int, default=None, help=f"Attempts per page (default: {settings.max_retries})")
    p_run.add_argument("--dataset", default=None, help=f"Per-record JSONL dataset (default: {settings.dataset_path})")
    p_run.set_defaults(func=cmd_run)

    p_ext = sub.add_parser("extract", help="Run the field extractors on a saved HTML page")
    p_ext.add_argument("--html", required=True, help="Path to an HTML file")
    p_ext.set_defaults(func=cmd_extract)

    p_exp = sub.add_parser("export", help="Write the JSON output from a (possibly partial) dataset")
    p_exp.add_argument("--dataset", default=None, help=f"JSONL dataset (default: {settings.dataset_path})")
    p_exp.add_argument("--output", "-o", default=None, help=f"Output JSON (default: {settings.output_path})")
    p_exp.set_defaults(func=cmd_export)

    args = parser.parse_args()
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("Process interrupted by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error processing company list: {e}", extra={"status": "error", "error": type(e).__name__})
        logging.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
