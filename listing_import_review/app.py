"""Streamlit app entrypoint for the Listing Import Review screen."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from components.filters import render_filters
from components.navbar import render_navbar
from components.pagination_controls import render_pagination_controls, use_csv_pagination
from components.table import render_listing_table
from config import (
    ASSETS_DIR,
    DEFAULT_PAGE_SIZE,
    FILTER_COLUMNS,
    LISTINGS_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
    PAGE_SIZE_OPTIONS,
    SEARCH_COLUMNS,
)
from services import data_loader, filter_service
from utils.helpers import get_current_username

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Listing Import Review", layout="wide")

PAGINATION_KEY = "listing_review"


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("user_name", get_current_username())
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    with st.container(border=True):
        st.markdown("### Status")
        for level, message in notifications:
            if level == "success":
                st.success(message)
            elif level == "warning":
                st.warning(message)
            else:
                st.info(message)

    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_listings(listings_path: str, file_mtime: float) -> pd.DataFrame:
    """Load listings from disk with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_listings(Path(listings_path))


@st.cache_data(show_spinner=False)
def get_uploaded_listings(file_bytes: bytes, file_name: str) -> pd.DataFrame:
    """Load listings from an uploaded CSV; cached per file content."""
    del file_name
    return data_loader.load_uploaded_listings(io.BytesIO(file_bytes))


def render_sidebar() -> Tuple[Optional[object], int]:
    """Render the upload and page size controls."""
    st.sidebar.markdown("## Import")
    uploaded_file = st.sidebar.file_uploader("Listings CSV", type=["csv"], key="listings_upload")
    page_size = st.sidebar.selectbox(
        "Rows per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
        key="page_size",
    )
    return uploaded_file, int(page_size)


def load_source(uploaded_file) -> Tuple[pd.DataFrame, str, str]:
    """Return listings, a display label, and a content token for whichever source is active."""
    if uploaded_file is not None:
        file_bytes = uploaded_file.getvalue()
        listings_df = get_uploaded_listings(file_bytes, uploaded_file.name)
        return listings_df, uploaded_file.name, data_loader.content_fingerprint(file_bytes)
    file_mtime = LISTINGS_FILE.stat().st_mtime
    return get_listings(str(LISTINGS_FILE), file_mtime), LISTINGS_FILE.name, str(file_mtime)


def main() -> None:
    """Render and run the Listing Import Review screen."""
    load_css()
    init_session_state()
    uploaded_file, page_size = render_sidebar()

    if uploaded_file is None and not LISTINGS_FILE.exists():
        st.info(f"Upload a listings CSV or place one at {LISTINGS_FILE} to begin.")
        st.stop()

    try:
        listings_df, source_label, source_token = load_source(uploaded_file)
    except (FileNotFoundError, ValueError, pd.errors.ParserError) as exc:
        logger.warning("Could not load listings: %s", exc)
        st.error(str(exc))
        st.stop()

    summary = data_loader.summarize_listings(listings_df)
    render_navbar(st.session_state["user_name"], source_label, summary)

    if summary["incomplete"]:
        queue_notification(
            "warning",
            f"{summary['incomplete']} row(s) are missing required fields and will be skipped on import.",
        )

    filter_options = filter_service.get_filter_options(listings_df, FILTER_COLUMNS)
    selected_filters, search_term = render_filters(filter_options, FILTER_COLUMNS)
    filtered_df = filter_service.apply_filters(listings_df, selected_filters)
    filtered_df = filter_service.search_listings(filtered_df, search_term, SEARCH_COLUMNS)

    # A different source or filter set is a different dataset, so paging restarts.
    reset_token = (source_token, filter_service.filters_signature(selected_filters, search_term))
    pagination = use_csv_pagination(
        filtered_df,
        key=PAGINATION_KEY,
        page_size=page_size,
        reset_token=reset_token,
    )

    st.markdown("### Listings")
    st.caption(f"Total Rows: {len(filtered_df)}/{len(listings_df)}")

    view = pagination.view()
    render_listing_table(data_loader.numeric_view(view.current_data))
    render_pagination_controls(pagination, key=PAGINATION_KEY)

    show_notifications()


if __name__ == "__main__":
    main()
