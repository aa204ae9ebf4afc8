"""Boundary page and ellipsis annotation for a windowed page list."""

from __future__ import annotations

from typing import List

from config import ELLIPSIS


def annotate(window_pages: List[int], start: int, end: int, page_count: int, ellipses: bool) -> List[int]:
    """Add ``1, ...`` and ``..., page_count`` around a window that misses a boundary."""
    if not ellipses:
        return list(window_pages)

    annotated = list(window_pages)
    if start > 0:
        annotated = [1, ELLIPSIS] + annotated
    if end < page_count:
        annotated = annotated + [ELLIPSIS, page_count]
    return annotated
