"""Sidebar settings panel for the pagination options."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from config import (
    DEFAULT_BOUNDARY_LINKS,
    DEFAULT_DIRECTION_LINKS,
    DEFAULT_ELLIPSES,
    DEFAULT_MAX_SIZE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ROTATE,
    MAX_SIZE_OPTIONS,
    PAGE_SIZE_OPTIONS,
    SIZE_OPTIONS,
)

SIZE_LABELS = {None: "default", "sm": "small", "lg": "large"}


def render_settings() -> Dict[str, object]:
    """Render pagination settings in the sidebar and return the selected values."""
    st.sidebar.markdown("## Pagination")

    page_size = st.sidebar.selectbox(
        "Page size",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
        key="setting_page_size",
    )
    max_size = st.sidebar.selectbox(
        "Max visible pages",
        options=MAX_SIZE_OPTIONS,
        index=MAX_SIZE_OPTIONS.index(DEFAULT_MAX_SIZE),
        format_func=lambda value: "All" if value == 0 else str(value),
        key="setting_max_size",
    )
    size = st.sidebar.radio(
        "Size",
        options=[None, *SIZE_OPTIONS],
        format_func=lambda value: SIZE_LABELS[value],
        horizontal=True,
        key="setting_size",
    )
    rotate = st.sidebar.checkbox("Rotate around current page", value=DEFAULT_ROTATE, key="setting_rotate")
    ellipses = st.sidebar.checkbox("Ellipses", value=DEFAULT_ELLIPSES, key="setting_ellipses")
    boundary_links = st.sidebar.checkbox(
        "First/Last links",
        value=DEFAULT_BOUNDARY_LINKS,
        key="setting_boundary_links",
    )
    direction_links = st.sidebar.checkbox(
        "Previous/Next links",
        value=DEFAULT_DIRECTION_LINKS,
        key="setting_direction_links",
    )

    return {
        "page_size": page_size,
        "max_size": max_size,
        "size": size,
        "rotate": rotate,
        "ellipses": ellipses,
        "boundary_links": boundary_links,
        "direction_links": direction_links,
    }
