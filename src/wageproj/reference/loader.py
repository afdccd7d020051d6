"""Load the three reference-data JSON documents into a ReferenceDataStore."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from wageproj.core.exceptions import ReferenceDataError
from wageproj.core.types import JsonDict
from wageproj.models.reference import CapRow, JobTitle
from wageproj.reference.store import ReferenceDataStore

logger = logging.getLogger(__name__)


def read_document(path: Path) -> list[JsonDict]:
    """Read a JSON array of objects, parsing floats as Decimal."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=Decimal)
    except (OSError, json.JSONDecodeError) as exc:
        raise ReferenceDataError(str(path), str(exc)) from exc
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ReferenceDataError(str(path), "expected a JSON array of objects")
    return data


def parse_job_titles(rows: list[JsonDict], source: str = "<memory>") -> list[JobTitle]:
    try:
        return [JobTitle.model_validate(row) for row in rows]
    except ValidationError as exc:
        raise ReferenceDataError(source, str(exc)) from exc


def parse_caps(rows: list[JsonDict], source: str = "<memory>") -> list[CapRow]:
    try:
        return [CapRow.from_document(row) for row in rows]
    except (KeyError, ValidationError) as exc:
        raise ReferenceDataError(source, f"bad cap row: {exc}") from exc


def load_reference_data(
    current_path: Path,
    caps_path: Path,
    baseline_path: Path | None = None,
) -> ReferenceDataStore:
    """Build a store from the current, cap and (optional) baseline documents.

    Without a baseline document the current table doubles as the baseline.
    """
    current = parse_job_titles(read_document(current_path), str(current_path))
    caps = parse_caps(read_document(caps_path), str(caps_path))
    baseline = None
    if baseline_path is not None:
        baseline = parse_job_titles(read_document(baseline_path), str(baseline_path))

    logger.info(
        "Loaded reference data: %d job titles, %d cap rows, baseline=%s",
        len(current), len(caps), baseline_path or "current",
    )
    return ReferenceDataStore(current=current, caps=caps, baseline=baseline)
