"""Read-only listing table for one page of import rows."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from config import TABLE_COLUMNS


def render_listing_table(page_df: pd.DataFrame) -> None:
    """Render the current page of listings with the status legend."""
    if page_df.empty:
        st.info("No listings match the current filters.")
        return

    display_columns = [column for column in TABLE_COLUMNS if column in page_df.columns]

    st.markdown(
        """
        <div class="status-legend">
            <span class="badge badge-incomplete">🔴 INCOMPLETE</span>
            <span class="badge badge-ready">🟢 READY</span>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.dataframe(
        page_df[display_columns],
        hide_index=True,
        width="stretch",
        column_order=display_columns,
        column_config={
            "row_number": st.column_config.NumberColumn("Row", width="small", format="%d"),
            "status": st.column_config.TextColumn("Status"),
            "title": st.column_config.TextColumn("Title", width="large"),
            "monthly_rent": st.column_config.NumberColumn("Monthly rent", format="%.2f"),
            "bedrooms": st.column_config.NumberColumn("Bedrooms", format="%d"),
            "bathrooms": st.column_config.NumberColumn("Bathrooms", format="%d"),
            "square_meters": st.column_config.NumberColumn("m²", format="%.0f"),
        },
    )
