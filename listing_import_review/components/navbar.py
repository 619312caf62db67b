"""Review header with source details and import readiness counters."""

from __future__ import annotations

import html
from datetime import datetime
from typing import Dict, List, Tuple

import streamlit as st

COUNTER_LABELS = [
    ("total", "Rows", "counter-total"),
    ("ready", "Ready", "counter-ready"),
    ("incomplete", "Incomplete", "counter-incomplete"),
]


def navbar_counters(summary: Dict[str, int]) -> List[Tuple[str, int, str]]:
    """Return (label, count, css class) for each readiness counter; missing counts read as 0."""
    return [(label, int(summary.get(key, 0)), css_class) for key, label, css_class in COUNTER_LABELS]


def render_navbar(user_name: str, source_label: str, summary: Dict[str, int]) -> None:
    """Render the header: file under review, readiness counters, user and load time."""
    loaded_at = datetime.now().strftime("%Y-%m-%d %H:%M")
    counters = "".join(
        f'<span class="counter {css_class}">{label}: {count}</span>'
        for label, count, css_class in navbar_counters(summary)
    )
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Listing Import Review · {html.escape(source_label)}</div>
            <div class="navbar-counters">{counters}</div>
            <div class="navbar-meta">{html.escape(user_name)} · loaded {loaded_at}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
