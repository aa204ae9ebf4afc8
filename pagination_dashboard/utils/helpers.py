"""Helper utilities for IO, value coercion, and logging setup."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import pandas as pd

from config import ELLIPSIS, LOG_FORMAT


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the app process."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def to_integer(value: object) -> Optional[int]:
    """Coerce ints, integral floats, and numeric strings to int, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        pass
    try:
        parsed = float(raw_value)
    except ValueError:
        return None
    return int(parsed) if parsed.is_integer() else None


def is_ellipsis(page_number: int) -> bool:
    """Return True for the placeholder marking omitted pages."""
    return page_number == ELLIPSIS


def atomic_write_dataframe(dataframe: pd.DataFrame, target_path: Path) -> None:
    """Write a dataframe atomically to CSV by replacing a temporary file."""
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        newline="",
        delete=False,
        dir=target_path.parent,
        suffix=".tmp",
    ) as tmp_file:
        dataframe.to_csv(tmp_file.name, index=False)
        temp_name = tmp_file.name

    os.replace(temp_name, target_path)


def read_csv_or_empty(file_path: Path, columns: list[str]) -> pd.DataFrame:
    """Read a CSV if it exists; otherwise return an empty dataframe with columns."""
    if not file_path.exists():
        return pd.DataFrame(columns=columns)

    dataframe = pd.read_csv(file_path, dtype=str).fillna("")
    for column in columns:
        if column not in dataframe.columns:
            dataframe[column] = ""
    return dataframe[columns]
