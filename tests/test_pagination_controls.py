"""
Tests for session-bound pagination.

A plain dict stands in for st.session_state so the binding can be exercised
without a running Streamlit server.
"""

import pandas as pd
import pytest

from components.pagination_controls import (
    format_range_caption,
    get_pagination_state,
    use_csv_pagination,
)
from utils.pagination import InvalidPaginationConfig, create_pagination_state, paginate


@pytest.fixture
def session():
    return {}


@pytest.fixture
def listings_df():
    return pd.DataFrame({"title": [f"Listing {i}" for i in range(120)]})


class TestSessionState:
    """Tests for creating, keeping, and resetting stored sessions."""

    def test_state_created_on_first_use(self, session):
        state = get_pagination_state("review", page_size=25, session_state=session)

        assert session["review_pagination"] is state
        assert state.page_size == 25
        assert state.current_page == 1

    def test_state_kept_across_reruns(self, session, listings_df):
        first = use_csv_pagination(listings_df, "review", session_state=session, reset_token="a")
        first.next_page()
        second = use_csv_pagination(listings_df, "review", session_state=session, reset_token="a")

        assert second.current_page == 2
        assert second.state is first.state

    def test_new_token_starts_new_session(self, session, listings_df):
        first = use_csv_pagination(listings_df, "review", session_state=session, reset_token="a")
        first.go_to_page(3)
        second = use_csv_pagination(listings_df, "review", session_state=session, reset_token="b")

        assert second.current_page == 1
        assert session["review_pagination_token"] == "b"

    def test_new_page_size_starts_new_session(self, session, listings_df):
        first = use_csv_pagination(listings_df, "review", page_size=50, session_state=session)
        first.go_to_page(3)
        second = use_csv_pagination(listings_df, "review", page_size=25, session_state=session)

        assert second.current_page == 1
        assert second.total_pages == 5

    def test_keys_are_independent(self, session, listings_df):
        imports = use_csv_pagination(listings_df, "imports", session_state=session)
        duplicates = use_csv_pagination(listings_df, "duplicates", session_state=session)
        imports.next_page()

        assert imports.current_page == 2
        assert duplicates.current_page == 1

    def test_initial_page_applies_to_new_session(self, session, listings_df):
        pagination = use_csv_pagination(listings_df, "review", initial_page=2, session_state=session)

        assert pagination.current_page == 2
        assert pagination.current_data["title"].iloc[0] == "Listing 50"

    def test_invalid_page_size_rejected(self, session):
        with pytest.raises(InvalidPaginationConfig):
            get_pagination_state("review", page_size=0, session_state=session)


class TestRangeCaption:
    """Tests for the row range caption."""

    def test_empty_dataset(self):
        view = paginate([], create_pagination_state())

        assert format_range_caption(view) == "No rows to display."

    def test_last_page(self):
        state = create_pagination_state(page_size=50, initial_page=3)
        view = paginate(list(range(120)), state)

        assert format_range_caption(view) == "Rows 101-120 of 120 (page 3 of 3)"
