"""Read-only table showing the rows of the current page."""

from __future__ import annotations

from typing import Tuple

import pandas as pd
import streamlit as st

from config import ITEM_COLUMNS


def showing_range(page: int, page_size: int, total_rows: int) -> Tuple[int, int]:
    """Return the 1-based first/last row numbers visible on ``page``."""
    if total_rows <= 0 or page_size <= 0:
        return 0, 0
    first_row = (page - 1) * page_size + 1
    last_row = min(page * page_size, total_rows)
    return first_row, last_row


def render_table(page_df: pd.DataFrame, page: int, page_size: int, total_rows: int) -> None:
    """Render the page rows with a caption of the visible range."""
    if page_df.empty:
        st.info("No rows available.")
        return

    first_row, last_row = showing_range(page, page_size, total_rows)
    st.caption(f"Showing {first_row}-{last_row} of {total_rows} items")

    display_columns = [column for column in ITEM_COLUMNS if column in page_df.columns]
    st.dataframe(
        page_df[display_columns],
        hide_index=True,
        width="stretch",
    )
