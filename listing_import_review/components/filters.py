"""Filter and search panel component."""

from __future__ import annotations

from typing import Dict, List, Tuple

import streamlit as st

FILTER_LABELS = {
    "status": "Status",
    "category": "Category",
    "apartment_type": "Apartment type",
    "city": "City",
    "region": "Region",
    "country": "Country",
}


def render_filters(options: Dict[str, List[str]], columns: List[str]) -> Tuple[Dict[str, List[str]], str]:
    """Render a search box and multi-select filters; return selections and search term."""
    st.markdown("#### Filters")
    search_term = st.text_input(
        "Search",
        key="listing_search",
        placeholder="Search title, description, street, city, or ZIP",
    )

    slots = st.columns(3)
    selected_filters: Dict[str, List[str]] = {}
    for index, column in enumerate(columns):
        label = FILTER_LABELS.get(column, column)
        with slots[index % len(slots)]:
            selected_filters[column] = st.multiselect(
                label,
                options=options.get(column, []),
                key=f"filter_{column}",
                placeholder=f"Filter {label}",
            )

    return selected_filters, search_term
