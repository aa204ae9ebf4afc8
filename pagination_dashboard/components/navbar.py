"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st


def render_navbar(page: int, page_count: int) -> None:
    """Render dashboard header with the current page position."""
    position = f"Page {page} of {page_count}" if page_count else "No pages"
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Pagination Dashboard</div>
            <div class="navbar-meta">{position}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
