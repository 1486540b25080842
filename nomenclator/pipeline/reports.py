"""Run report generation."""

from __future__ import annotations

from pathlib import Path

from nomenclator.common.fs import write_json
from nomenclator.common.models import ProcessingOutcome
from nomenclator.common.time_utils import utc_timestamp_iso


def write_outcome_report(data_dir: Path, *, run_id: str, source: Path, outcome: ProcessingOutcome) -> Path:
    path = data_dir / "out" / "reports" / f"{run_id}.json"
    payload = {
        "run_id": run_id,
        "generated_at": utc_timestamp_iso(),
        "source": str(source),
        **outcome.to_dict(),
    }
    write_json(path, payload)
    return path
