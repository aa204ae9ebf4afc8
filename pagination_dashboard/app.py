"""Streamlit app entrypoint for the Pagination Dashboard."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import streamlit as st

from components.navbar import render_navbar
from components.page_jump import render_page_jump
from components.pagination_bar import render_pagination_bar
from components.settings import render_settings
from components.table import render_table
from config import ASSETS_DIR, DEMO_ITEM_COUNT, ITEMS_FILE, LOG_LEVEL
from services import data_loader
from services.pagination_service import Paginator
from utils.helpers import configure_logging

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Pagination Dashboard", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def on_page_change(page: int) -> None:
    """Queue a notice when the paginator moves to another page."""
    queue_notification("info", f"Moved to page {page}.")


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("notifications", [])
    st.session_state.setdefault("last_jump", None)
    if "paginator" not in st.session_state:
        paginator = Paginator(collection_size=0)
        paginator.subscribe(on_page_change)
        st.session_state["paginator"] = paginator


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
def get_items(items_path: str, file_mtime: float):
    """Load items with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_items(Path(items_path))


def resolve_jump(jump_target) -> int | None:
    """Return a jump-box selection only when it is new since the last pass."""
    if jump_target is None or jump_target == st.session_state["last_jump"]:
        return None
    st.session_state["last_jump"] = jump_target
    return jump_target


def main() -> None:
    """Render and run the Pagination Dashboard."""
    configure_logging(LOG_LEVEL)
    load_css()
    init_session_state()

    try:
        data_loader.ensure_items_file(ITEMS_FILE, DEMO_ITEM_COUNT)
        items_df = get_items(str(ITEMS_FILE), ITEMS_FILE.stat().st_mtime)
    except FileNotFoundError as exc:
        st.error(str(exc))
        st.stop()
    except OSError as exc:
        logger.exception("Could not prepare the items file.")
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    paginator: Paginator = st.session_state["paginator"]
    paginator.update(collection_size=len(items_df), **render_settings())
    for error in paginator.errors:
        queue_notification("warning", error)

    render_navbar(paginator.page, paginator.page_count)
    page_df = data_loader.page_rows(items_df, paginator.page, paginator.page_size)
    render_table(page_df, paginator.page, paginator.page_size, len(items_df))

    bar_target = render_pagination_bar(paginator)
    jump_target = resolve_jump(render_page_jump(paginator.page_count))

    target = bar_target if bar_target is not None else jump_target
    if target is not None:
        previous_page = paginator.page
        paginator.select_page(target)
        if paginator.page != previous_page:
            st.rerun()

    show_notifications()


if __name__ == "__main__":
    main()
