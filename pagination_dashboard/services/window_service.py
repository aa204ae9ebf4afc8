"""Visible page window selection for constrained pagination bars."""

from __future__ import annotations

import math
from typing import Tuple

Window = Tuple[int, int]


def apply_pagination(page: int, max_size: int) -> Window:
    """Return the block of ``max_size`` pages that contains ``page``.

    The window jumps a whole block at a time: with ``max_size=3``, pages 4-6
    all show ``[4, 5, 6]``.
    """
    block = math.ceil(page / max_size) - 1
    start = block * max_size
    end = start + max_size
    return start, end


def apply_rotation(page: int, page_count: int, max_size: int) -> Window:
    """Return a window keeping ``page`` in the middle where the edges allow it.

    For an even ``max_size`` the extra slot goes to the left of the current
    page, e.g. page 6 with ``max_size=4`` shows ``[4, 5, 6, 7]``.
    """
    left_offset = max_size // 2
    right_offset = left_offset - 1 if max_size % 2 == 0 else left_offset

    if page <= left_offset:
        # Pinned to the first pages.
        return 0, max_size
    if page_count - page < left_offset:
        # Pinned to the last pages.
        return page_count - max_size, page_count
    return page - left_offset - 1, page + right_offset


def select_window(page: int, page_count: int, max_size: int, rotate: bool) -> Window:
    """Pick the 0-based half-open window into ``1..page_count``.

    Only meaningful when ``0 < max_size < page_count``.
    """
    if rotate:
        return apply_rotation(page, page_count, max_size)
    return apply_pagination(page, max_size)
