"""Generate an album title from a CSV of photo timestamps and coordinates."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping

from nomenclator.common.config_loader import Settings, load_settings
from nomenclator.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS
from nomenclator.common.errors import EmptyResultError, NomenclatorError
from nomenclator.common.fs import read_csv_rows
from nomenclator.common.http import HttpClient, TimeoutConfig
from nomenclator.common.ids import generate_run_id
from nomenclator.common.logging import build_logger, log_event
from nomenclator.pipeline.processor import Processor
from nomenclator.pipeline.reports import write_outcome_report
from nomenclator.resolvers.locator import PositionstackLocator
from nomenclator.resolvers.weatherman import VisualCrossingWeatherman


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="nomenclator", description=__doc__)
    parser.add_argument("file_path", help="CSV file with timestamp,latitude,longitude rows")
    parser.add_argument("--config", default=None, help="optional YAML overlay for resolver settings")
    parser.add_argument("--data-dir", default=None, help="write the JSON log and outcome report here")
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="WARN", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def build_processor(settings: Settings, http_client: HttpClient, logger: logging.Logger, run_id: str) -> Processor:
    locator = PositionstackLocator(
        settings.locator_api_key,
        endpoint=settings.locator.endpoint,
        limit=settings.locator.limit,
        http_client=http_client,
    )
    weatherman = VisualCrossingWeatherman(
        settings.weather_api_key,
        endpoint=settings.weather.endpoint,
        elements=settings.weather.elements,
        unit_group=settings.weather.unit_group,
        http_client=http_client,
    )
    return Processor(locator, weatherman, logger=logger, run_id=run_id)


def run_command(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    run_id = args.run_id or generate_run_id()
    data_dir = Path(args.data_dir) if args.data_dir else None
    source = Path(args.file_path)
    log_path = data_dir / "run_meta" / f"{run_id}.log.jsonl" if data_dir is not None else None

    logger = build_logger(run_id, level=args.log_level, log_path=log_path)
    settings = load_settings(
        os.environ if environ is None else environ,
        Path(args.config) if args.config else None,
    )
    rows = read_csv_rows(source)
    log_event(
        logger,
        f"read {len(rows)} rows from {source}",
        run_id=run_id,
        stage="read",
        event="READ_END",
        status="ok",
        rows_out=len(rows),
    )

    timeout = TimeoutConfig(connect=settings.http.connect_timeout, read=settings.http.read_timeout)
    with HttpClient(timeout=timeout, rate_per_sec=settings.http.rate_per_sec) as http_client:
        processor = build_processor(settings, http_client, logger, run_id)
        outcome = processor.process(rows)

    for error in outcome.errors:
        print(error, file=sys.stderr)
    if data_dir is not None:
        write_outcome_report(data_dir, run_id=run_id, source=source, outcome=outcome)

    try:
        title = outcome.require_title()
    except EmptyResultError as exc:
        log_event(
            logger,
            str(exc),
            run_id=run_id,
            stage="title",
            event="TITLE_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        print(exc, file=sys.stderr)
        return EXIT_HARD_FAIL

    print(f"Album title: {title}")
    if outcome.errors:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except NomenclatorError as exc:
        print(exc, file=sys.stderr)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
