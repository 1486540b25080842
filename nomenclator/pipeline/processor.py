"""Batch driver: enrich every row, then title the album."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from nomenclator.common.errors import NomenclatorError
from nomenclator.common.logging import log_event
from nomenclator.common.models import EnrichedRecord, ProcessingOutcome, RawRecord, RowError
from nomenclator.pipeline.classify import classify_mood, classify_place, classify_span
from nomenclator.pipeline.enrich import enrich_record
from nomenclator.pipeline.title import compose_title
from nomenclator.resolvers.base import PlaceResolver, WeatherResolver


class Processor:
    """Titles an album from its photos' metadata rows.

    Rows are handled one at a time in input order. A row that fails to parse
    or to resolve is recorded as a ``RowError`` and the batch carries on; the
    title is built from the rows that succeeded.
    """

    def __init__(
        self,
        locator: PlaceResolver,
        weatherman: WeatherResolver,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ) -> None:
        self.locator = locator
        self.weatherman = weatherman
        self.logger = logger or logging.getLogger("nomenclator")
        self.run_id = run_id

    def process(self, rows: Sequence[RawRecord]) -> ProcessingOutcome:
        started = time.monotonic()
        errors: list[RowError] = []
        album: list[EnrichedRecord] = []
        log_event(
            self.logger,
            "process start",
            run_id=self.run_id,
            stage="enrich",
            event="PROCESS_START",
            status="ok",
            rows_in=len(rows),
        )

        for index, row in enumerate(rows, start=1):
            try:
                album.append(enrich_record(row, self.locator, self.weatherman))
            except NomenclatorError as exc:
                errors.append(RowError(row_index=index, row=tuple(row), error=exc))
                log_event(
                    self.logger,
                    f"invalid photo: {exc}",
                    level=logging.WARNING,
                    run_id=self.run_id,
                    stage="enrich",
                    row=index,
                    resolver=getattr(exc, "resolver", None),
                    event="ROW_FAIL",
                    status="error",
                    error_code=exc.error_code,
                )
                continue
            log_event(
                self.logger,
                "photo enriched",
                level=logging.DEBUG,
                run_id=self.run_id,
                stage="enrich",
                row=index,
                event="ROW_OK",
                status="ok",
            )

        title = ""
        if album:
            title = compose_title(classify_mood(album), classify_span(album), classify_place(album))

        log_event(
            self.logger,
            "process end",
            run_id=self.run_id,
            stage="title",
            event="PROCESS_END",
            status="ok" if title else "error",
            duration_ms=int((time.monotonic() - started) * 1000),
            rows_in=len(rows),
            rows_out=len(album),
        )
        return ProcessingOutcome(
            title=title,
            errors=tuple(errors),
            rows_in=len(rows),
            rows_enriched=len(album),
        )
