"""Pagination bar component drawn with Streamlit buttons."""

from __future__ import annotations

from typing import List, Optional

import streamlit as st

from config import ELLIPSIS_LABEL, LINK_LABELS
from services.pagination_service import Paginator
from utils.helpers import is_ellipsis


def size_class(size: Optional[str]) -> str:
    """Return the CSS class list for the bar at the given display size."""
    return "pagination" + (f" pagination-{size}" if size else "")


def _link_item(name: str, target: int, disabled: bool) -> dict:
    label, aria_label = LINK_LABELS[name]
    return {
        "key": name,
        "label": label,
        "target": target,
        "disabled": disabled,
        "active": False,
        "aria_label": aria_label,
    }


def build_bar_items(paginator: Paginator, boundary_links: bool, direction_links: bool) -> List[dict]:
    """Build the ordered items of the bar: links around the display sequence."""
    items: List[dict] = []
    if boundary_links:
        items.append(_link_item("first", 1, not paginator.has_previous()))
    if direction_links:
        items.append(_link_item("previous", paginator.page - 1, not paginator.has_previous()))

    for index, page_number in enumerate(paginator.pages):
        if is_ellipsis(page_number):
            items.append(
                {
                    "key": f"ellipsis_{index}",
                    "label": ELLIPSIS_LABEL,
                    "target": None,
                    "disabled": True,
                    "active": False,
                    "aria_label": "More pages",
                }
            )
            continue
        items.append(
            {
                "key": f"page_{page_number}",
                "label": str(page_number),
                "target": page_number,
                "disabled": False,
                "active": page_number == paginator.page,
                "aria_label": f"Page {page_number}",
            }
        )

    if direction_links:
        items.append(_link_item("next", paginator.page + 1, not paginator.has_next()))
    if boundary_links:
        items.append(_link_item("last", paginator.page_count, not paginator.has_next()))
    return items


def render_pagination_bar(paginator: Paginator, key: str = "pager") -> Optional[int]:
    """Render the bar and return the page target of a clicked item, if any."""
    items = build_bar_items(paginator, paginator.boundary_links, paginator.direction_links)
    if not items:
        return None

    st.markdown(f'<div class="{size_class(paginator.display_size)}"></div>', unsafe_allow_html=True)
    clicked_target: Optional[int] = None
    for column, item in zip(st.columns(len(items)), items):
        with column:
            clicked = st.button(
                item["label"],
                key=f"{key}_{item['key']}",
                help=item["aria_label"],
                disabled=item["disabled"],
                type="primary" if item["active"] else "secondary",
                width="stretch",
            )
            if clicked and item["target"] is not None:
                clicked_target = item["target"]
    return clicked_target
