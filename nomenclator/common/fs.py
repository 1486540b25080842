"""Filesystem helpers."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from nomenclator.common.errors import InputError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
        f.write("\n")


def read_csv_rows(path: Path) -> list[list[str]]:
    """Read every row of a delimited file; there is no header row."""
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return [row for row in csv.reader(f)]
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read photo metadata from {path}: {exc}") from exc
