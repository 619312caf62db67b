"""Session-bound pagination and page navigation controls."""

from __future__ import annotations

import logging
from typing import Hashable, MutableMapping, Optional

import streamlit as st

from config import DEFAULT_INITIAL_PAGE, DEFAULT_PAGE_SIZE
from utils.pagination import (
    CsvPagination,
    Dataset,
    PageView,
    PaginationState,
    create_pagination_state,
)

logger = logging.getLogger(__name__)


def get_pagination_state(
    key: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    initial_page: int = DEFAULT_INITIAL_PAGE,
    reset_token: Optional[Hashable] = None,
    session_state: Optional[MutableMapping] = None,
) -> PaginationState:
    """Return the stored pagination state for ``key``, starting a new session when needed.

    A new session replaces the stored one when the page size or the reset
    token differs from what the stored session was created with.
    """
    store = st.session_state if session_state is None else session_state
    state_key = f"{key}_pagination"
    token_key = f"{key}_pagination_token"

    state = store.get(state_key)
    if state is None or state.page_size != page_size or store.get(token_key) != reset_token:
        state = create_pagination_state(page_size, initial_page)
        store[state_key] = state
        store[token_key] = reset_token
        logger.debug("Started pagination session %s with page size %s", key, page_size)
    return state


def use_csv_pagination(
    data: Dataset,
    key: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    initial_page: int = DEFAULT_INITIAL_PAGE,
    reset_token: Optional[Hashable] = None,
    session_state: Optional[MutableMapping] = None,
) -> CsvPagination:
    """Bind ``data`` to the session's pagination state for ``key``."""
    state = get_pagination_state(key, page_size, initial_page, reset_token, session_state)
    return CsvPagination(data, state=state)


def format_range_caption(view: PageView) -> str:
    if view.total_items == 0:
        return "No rows to display."
    return (
        f"Rows {view.start_index + 1}-{view.end_index} of {view.total_items} "
        f"(page {view.current_page} of {view.total_pages})"
    )


def render_pagination_controls(pagination: CsvPagination, key: str) -> None:
    """Render previous/next buttons, a page jump input, and the row range caption."""
    view = pagination.view()
    if view.total_pages == 0:
        st.caption(format_range_caption(view))
        return

    input_key = f"{key}_page_input"
    # Widget value must follow button navigation, so it is set before the widget renders.
    st.session_state[input_key] = view.current_page

    def on_prev() -> None:
        st.session_state[input_key] = pagination.prev_page()

    def on_next() -> None:
        st.session_state[input_key] = pagination.next_page()

    def on_jump() -> None:
        st.session_state[input_key] = pagination.go_to_page(st.session_state[input_key])

    prev_col, page_col, next_col, caption_col = st.columns([1, 1, 1, 3], vertical_alignment="bottom")
    with prev_col:
        st.button("◀ Previous", key=f"{key}_prev", disabled=not view.can_go_prev, on_click=on_prev)
    with page_col:
        st.number_input(
            "Page",
            min_value=1,
            max_value=view.total_pages,
            step=1,
            key=input_key,
            on_change=on_jump,
        )
    with next_col:
        st.button("Next ▶", key=f"{key}_next", disabled=not view.can_go_next, on_click=on_next)
    with caption_col:
        st.caption(format_range_caption(view))
