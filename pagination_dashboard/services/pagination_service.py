"""Paginator state: page count, current page, and the display sequence."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from config import (
    DEFAULT_BOUNDARY_LINKS,
    DEFAULT_DIRECTION_LINKS,
    DEFAULT_ELLIPSES,
    DEFAULT_MAX_SIZE,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ROTATE,
    DEFAULT_SIZE,
    PAGINATION_OPTIONS,
)
from services import ellipsis_service, validation_service, window_service
from utils.helpers import to_integer
from utils.pagination import clamp, compute_page_count

logger = logging.getLogger(__name__)

PageListener = Callable[[int], None]


class Paginator:
    """Compute which page markers a pagination bar shows.

    Inputs are plain attributes. After changing any of them call
    ``recompute()``, or use ``update(**changes)`` which does both. Invalid
    inputs never raise here: they leave an empty bar and are listed in
    ``errors``.
    """

    def __init__(
        self,
        collection_size: int,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
        max_size: int = DEFAULT_MAX_SIZE,
        rotate: bool = DEFAULT_ROTATE,
        ellipses: bool = DEFAULT_ELLIPSES,
        boundary_links: bool = DEFAULT_BOUNDARY_LINKS,
        direction_links: bool = DEFAULT_DIRECTION_LINKS,
        size: Optional[str] = DEFAULT_SIZE,
    ) -> None:
        self.collection_size = collection_size
        self.page_size = page_size
        self.page = page
        self.max_size = max_size
        self.rotate = rotate
        self.ellipses = ellipses
        self.boundary_links = boundary_links
        self.direction_links = direction_links
        self.size = size

        self.page_count = 0
        self.pages: List[int] = []
        self.errors: List[str] = []
        self._effective: dict = {}
        self._listeners: List[PageListener] = []
        self.recompute()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def display_size(self) -> Optional[str]:
        """Validated display size, with aliases resolved."""
        return self._effective.get("size")

    def options(self) -> dict:
        """Return the current input values keyed by option name."""
        return {name: getattr(self, name) for name in PAGINATION_OPTIONS}

    def subscribe(self, listener: PageListener) -> Callable[[], None]:
        """Register a page-change listener and return a function removing it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: object) -> None:
        """Set one or more inputs and recompute."""
        unknown = sorted(set(changes) - set(PAGINATION_OPTIONS))
        if unknown:
            raise TypeError(f"Unknown pagination option(s): {', '.join(unknown)}")
        for name, value in changes.items():
            setattr(self, name, value)
        self.recompute()

    def has_previous(self) -> bool:
        return self.page > 1

    def has_next(self) -> bool:
        return self.page < self.page_count

    def select_page(self, target: object) -> None:
        """Navigate to ``target``, clamped into the valid range.

        Listeners are called with the new page only when it actually changes.
        """
        requested = to_integer(target)
        if requested is None:
            logger.warning("Ignoring navigation to non-numeric page %r.", target)
            requested = self.page

        previous_page = self.page
        self.page = clamp(requested, self.page_count)

        if self.page != previous_page:
            logger.info("Page changed from %s to %s.", previous_page, self.page)
            self._notify(self.page)

        self.recompute()

    def recompute(self) -> None:
        """Rebuild page count, current page, and display sequence from the inputs.

        Inputs are validated on every pass and left as the caller set them;
        only ``page`` is written back, clamped. The values actually used live
        in ``_effective`` so an invalid input keeps being reported.
        """
        _, errors, normalized = validation_service.validate_pagination_options(self.options())
        self._effective = normalized

        self.errors = errors
        for error in errors:
            logger.warning("Invalid pagination configuration: %s", error)

        collection_size = normalized["collection_size"]
        page_size = normalized["page_size"]
        max_size = normalized["max_size"]
        try:
            self.page_count = compute_page_count(collection_size, page_size)
        except ValueError:
            self.page_count = 0

        self.page = clamp(normalized["page"], self.page_count)
        pages = list(range(1, self.page_count + 1))

        if max_size > 0 and self.page_count > max_size:
            start, end = window_service.select_window(self.page, self.page_count, max_size, normalized["rotate"])
            pages = ellipsis_service.annotate(pages[start:end], start, end, self.page_count, normalized["ellipses"])
            logger.debug("Window [%s, %s) of %s pages around page %s.", start, end, self.page_count, self.page)

        self.pages = pages
        logger.debug("Recomputed %s pages, current page %s: %s", self.page_count, self.page, pages)

    def _notify(self, page: int) -> None:
        for listener in list(self._listeners):
            listener(page)
