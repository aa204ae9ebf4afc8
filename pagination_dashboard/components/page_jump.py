"""Jump-to-page search box."""

from __future__ import annotations

from typing import List, Optional

from streamlit_searchbox import st_searchbox

from utils.helpers import normalize_text


def search_pages(term: str, page_count: int, limit: int = 20) -> List[int]:
    """Return pages whose number starts with the typed digits."""
    digits = normalize_text(term)
    if not digits.isdigit() or page_count <= 0:
        return []
    matches = [page for page in range(1, page_count + 1) if str(page).startswith(digits)]
    return matches[:limit]


def render_page_jump(page_count: int, key: str = "page_jump") -> Optional[int]:
    """Render the search box and return the chosen page, if any."""
    return st_searchbox(
        lambda term: [(f"Page {page}", page) for page in search_pages(term, page_count)],
        placeholder=f"Jump to page (1-{page_count})" if page_count else "No pages",
        key=f"{key}_{page_count}",
        default=None,
        debounce=200,
    )
