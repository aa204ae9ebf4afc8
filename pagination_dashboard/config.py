"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("PAGINATION_DATA_DIR", str(ROOT_DIR / "data")))
ASSETS_DIR = ROOT_DIR / "assets"

ITEMS_FILE = DATA_DIR / "items.csv"
DEMO_ITEM_COUNT = 237

LOG_LEVEL = os.getenv("PAGINATION_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Marker stored in the display sequence in place of omitted pages.
ELLIPSIS = -1
ELLIPSIS_LABEL = "..."

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
DEFAULT_MAX_SIZE = 0
DEFAULT_ROTATE = False
DEFAULT_ELLIPSES = True
DEFAULT_BOUNDARY_LINKS = False
DEFAULT_DIRECTION_LINKS = True
DEFAULT_SIZE = None

SIZE_OPTIONS = ("sm", "lg")
PAGE_SIZE_OPTIONS = [5, 10, 25, 50]
MAX_SIZE_OPTIONS = [0, 3, 4, 5, 7, 10]

PAGINATION_OPTIONS = [
    "collection_size",
    "page_size",
    "page",
    "max_size",
    "rotate",
    "ellipses",
    "boundary_links",
    "direction_links",
    "size",
]

LINK_LABELS = {
    "first": ("««", "First"),
    "previous": ("«", "Previous"),
    "next": ("»", "Next"),
    "last": ("»»", "Last"),
}

ITEM_COLUMNS = ["item_id", "name", "category", "price"]
