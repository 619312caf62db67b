"""Loading and normalization of listing CSVs for import review."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Dict, IO, List, Union

import pandas as pd

from config import LISTING_COLUMNS, REQUIRED_LISTING_COLUMNS
from utils.helpers import normalize_text, parse_number

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    "INCOMPLETE": "🔴 INCOMPLETE",
    "READY": "🟢 READY",
}

NUMERIC_COLUMNS = ["monthly_rent", "bedrooms", "bathrooms", "max_guests", "square_meters"]


def missing_required_fields(row: Union[pd.Series, Dict[str, object]]) -> List[str]:
    """Return required listing fields that are blank in ``row``."""
    return [column for column in REQUIRED_LISTING_COLUMNS if not normalize_text(row.get(column, ""))]


def compute_status_label(row: Union[pd.Series, Dict[str, object]]) -> str:
    """Return the display label for a row's import readiness."""
    if missing_required_fields(row):
        return STATUS_LABELS["INCOMPLETE"]
    return STATUS_LABELS["READY"]


def normalize_listings(dataframe: pd.DataFrame) -> pd.DataFrame:
    """Align raw CSV rows to the listing schema and tag them for review."""
    dataframe = dataframe.copy()
    dataframe.columns = [normalize_text(column).lower() for column in dataframe.columns]
    duplicated = sorted(set(dataframe.columns[dataframe.columns.duplicated()]))
    if duplicated:
        raise ValueError(f"Duplicate column(s) after normalizing headers: {', '.join(duplicated)}.")
    for column in LISTING_COLUMNS:
        if column not in dataframe.columns:
            dataframe[column] = ""

    normalized = dataframe[LISTING_COLUMNS].copy()
    for column in LISTING_COLUMNS:
        normalized[column] = normalized[column].apply(normalize_text)

    # Source row numbers survive filtering so reviewers can find rows in the file.
    normalized.insert(0, "row_number", range(1, len(normalized) + 1))
    normalized.insert(1, "status", normalized.apply(compute_status_label, axis=1) if len(normalized) else "")
    return normalized.reset_index(drop=True)


def _read_listing_csv(source: Union[Path, IO]) -> pd.DataFrame:
    try:
        return pd.read_csv(source, dtype=str).fillna("")
    except pd.errors.EmptyDataError as exc:
        raise ValueError("The listings CSV is empty.") from exc


def load_listings(listings_file: Path) -> pd.DataFrame:
    """Load and normalize a listings CSV from disk."""
    if not listings_file.exists():
        raise FileNotFoundError(f"Missing listings file: {listings_file}")

    dataframe = _read_listing_csv(listings_file)
    logger.info("Loaded %s listing rows from %s", len(dataframe), listings_file)
    return normalize_listings(dataframe)


def load_uploaded_listings(uploaded_file: IO) -> pd.DataFrame:
    """Load and normalize a listings CSV from an uploaded file object."""
    dataframe = _read_listing_csv(uploaded_file)
    logger.info("Loaded %s listing rows from upload", len(dataframe))
    return normalize_listings(dataframe)


def summarize_listings(dataframe: pd.DataFrame) -> Dict[str, int]:
    """Count ready and incomplete rows."""
    if dataframe.empty:
        return {"total": 0, "ready": 0, "incomplete": 0}
    ready = int((dataframe["status"] == STATUS_LABELS["READY"]).sum())
    return {"total": len(dataframe), "ready": ready, "incomplete": len(dataframe) - ready}


def numeric_view(dataframe: pd.DataFrame) -> pd.DataFrame:
    """Return a display copy with numeric listing columns parsed to numbers."""
    display_df = dataframe.copy()
    for column in NUMERIC_COLUMNS:
        if column in display_df.columns:
            display_df[column] = pd.to_numeric(display_df[column].apply(parse_number), errors="coerce")
    return display_df


def content_fingerprint(file_bytes: bytes) -> str:
    """Identify an uploaded file by content so a re-upload under the same name counts as new."""
    return hashlib.sha256(file_bytes).hexdigest()[:16]
