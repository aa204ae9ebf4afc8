"""Dataset loading and page slicing for the dashboard."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from config import ITEM_COLUMNS
from utils.helpers import atomic_write_dataframe, read_csv_or_empty
from utils.pagination import page_slice

logger = logging.getLogger(__name__)

CATEGORIES = ["Books", "Games", "Music", "Tools", "Garden"]


def build_demo_items(row_count: int) -> pd.DataFrame:
    """Build a deterministic demo dataset with ``row_count`` rows."""
    item_ids = range(1, row_count + 1)
    return pd.DataFrame(
        {
            "item_id": [f"ITEM-{item_id:04d}" for item_id in item_ids],
            "name": [f"Item {item_id}" for item_id in item_ids],
            "category": [CATEGORIES[item_id % len(CATEGORIES)] for item_id in item_ids],
            "price": [f"{(item_id * 37) % 500 + 0.99:.2f}" for item_id in item_ids],
        },
        columns=ITEM_COLUMNS,
    )


def ensure_items_file(items_file: Path, row_count: int) -> None:
    """Create the items CSV with demo rows if missing."""
    if items_file.exists():
        return
    logger.info("Writing %s demo items to %s.", row_count, items_file)
    atomic_write_dataframe(build_demo_items(row_count), items_file)


def load_items(items_file: Path) -> pd.DataFrame:
    """Load the items CSV with the expected columns."""
    if not items_file.exists():
        raise FileNotFoundError(f"Missing required file: {items_file}")
    return read_csv_or_empty(items_file, ITEM_COLUMNS)


def page_rows(dataframe: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """Return the rows of one 1-based page, or an empty frame for a bad page size."""
    if page_size <= 0 or dataframe.empty:
        return dataframe.iloc[0:0]
    start, end = page_slice(page, page_size)
    return dataframe.iloc[start:end]
