"""Pagination arithmetic shared by the paginator and the table slicing."""

from __future__ import annotations

from typing import Tuple


def clamp(requested: int, page_count: int, min_page: int = 1) -> int:
    """Bound a requested page number into ``[min_page, page_count]``."""
    if page_count <= 0 or requested < min_page:
        return min_page
    if requested > page_count:
        return page_count
    return requested


def compute_page_count(collection_size: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size.

    Raises ``ValueError`` for a non-positive page size or a negative collection
    size; callers that need a degenerate state catch it.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be greater than 0, got {page_size}.")
    if collection_size < 0:
        raise ValueError(f"collection_size cannot be negative, got {collection_size}.")
    return -(-collection_size // page_size)


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end
