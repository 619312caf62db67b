"""Filtering and search for listing review."""

from __future__ import annotations

from typing import Dict, List

import pandas as pd


def get_filter_options(dataframe: pd.DataFrame, columns: List[str]) -> Dict[str, List[str]]:
    """Build sorted non-empty options for each filterable column."""
    options: Dict[str, List[str]] = {}
    for column in columns:
        if column not in dataframe.columns:
            options[column] = []
            continue
        values = {value for value in dataframe[column].astype(str).tolist() if value.strip()}
        options[column] = sorted(values)
    return options


def apply_filters(dataframe: pd.DataFrame, selected_filters: Dict[str, List[str]]) -> pd.DataFrame:
    """Apply AND logic across filter dimensions with OR inside each dimension."""
    filtered = dataframe
    for column, values in selected_filters.items():
        if not values or column not in filtered.columns:
            continue
        filtered = filtered[filtered[column].isin(values)]
    return filtered


def search_listings(dataframe: pd.DataFrame, term: str, columns: List[str]) -> pd.DataFrame:
    """Keep rows where any of ``columns`` contains ``term``, ignoring case."""
    term = (term or "").strip()
    search_columns = [column for column in columns if column in dataframe.columns]
    if not term or not search_columns or dataframe.empty:
        return dataframe

    mask = pd.Series(False, index=dataframe.index)
    for column in search_columns:
        mask |= dataframe[column].astype(str).str.contains(term, case=False, regex=False)
    return dataframe[mask]


def filters_signature(selected_filters: Dict[str, List[str]], search_term: str = "") -> tuple:
    """Build a hashable signature used to detect filter changes."""
    filter_part = tuple((key, tuple(sorted(values))) for key, values in sorted(selected_filters.items()))
    return filter_part + (("search", (search_term or "").strip().lower()),)
