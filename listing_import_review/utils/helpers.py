"""Helper utilities for text normalization and user context."""

from __future__ import annotations

import getpass
import os
import re
from typing import Optional

import pandas as pd

THOUSANDS_PATTERN = re.compile(r"^-?\d{1,3}(,\d{3})+(\.\d+)?$")


def get_current_username() -> str:
    """Return the current system username with a safe fallback."""
    try:
        return os.getlogin()
    except OSError:
        return getpass.getuser() or "unknown"


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def parse_number(value: object) -> Optional[float]:
    """Parse numeric CSV cells such as ``"1.250,50"`` or ``"$900"``; None when blank or invalid."""
    raw_value = normalize_text(value)
    if not raw_value:
        return None

    cleaned = "".join(char for char in raw_value if char.isdigit() or char in ",.-")
    if "," in cleaned and "." in cleaned:
        # Whichever separator comes last is the decimal point.
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif THOUSANDS_PATTERN.match(cleaned):
        cleaned = cleaned.replace(",", "")
    elif cleaned.count(",") == 1:
        # A lone comma not grouping thousands is a decimal comma.
        cleaned = cleaned.replace(",", ".")

    try:
        return float(cleaned)
    except ValueError:
        return None
