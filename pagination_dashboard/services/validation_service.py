"""Validation logic for pagination options."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from config import DEFAULT_PAGE, SIZE_OPTIONS
from utils.helpers import normalize_text, to_integer

SIZE_ALIASES = {"small": "sm", "large": "lg", "default": None}
BOOLEAN_OPTIONS = ("rotate", "ellipses", "boundary_links", "direction_links")


def validate_non_negative_int(value: object, field_name: str) -> Tuple[bool, str, int]:
    """Validate an integer that may be zero; invalid values normalize to 0."""
    parsed_value = to_integer(value)
    if parsed_value is None:
        return False, f"{field_name} must be a whole number.", 0
    if parsed_value < 0:
        return False, f"{field_name} cannot be negative.", 0
    return True, "", parsed_value


def validate_positive_int(value: object, field_name: str) -> Tuple[bool, str, int]:
    """Validate an integer that must be above zero; invalid values normalize to 0."""
    parsed_value = to_integer(value)
    if parsed_value is None:
        return False, f"{field_name} must be a whole number.", 0
    if parsed_value <= 0:
        return False, f"{field_name} must be greater than 0.", 0
    return True, "", parsed_value


def validate_page(value: object) -> Tuple[bool, str, int]:
    """Validate the requested page; range is not checked here, only the type."""
    parsed_value = to_integer(value)
    if parsed_value is None:
        return False, "page must be a whole number.", DEFAULT_PAGE
    return True, "", parsed_value


def validate_size(value: object) -> Tuple[bool, str, Optional[str]]:
    """Validate the display size, accepting ``small``/``large``/``default`` aliases."""
    raw_value = normalize_text(value).lower()
    if not raw_value:
        return True, "", None
    if raw_value in SIZE_ALIASES:
        return True, "", SIZE_ALIASES[raw_value]
    if raw_value in SIZE_OPTIONS:
        return True, "", raw_value
    allowed = ", ".join(SIZE_OPTIONS)
    return False, f"size must be one of: {allowed}.", None


def validate_pagination_options(options: Dict[str, object]) -> Tuple[bool, List[str], dict]:
    """Validate a full option set and return normalized values plus every error."""
    errors: List[str] = []
    normalized: dict = {}

    if options.get("collection_size") is None:
        errors.append("collection_size is required.")
        normalized["collection_size"] = 0
    else:
        valid, error, value = validate_non_negative_int(options["collection_size"], "collection_size")
        if not valid:
            errors.append(error)
        normalized["collection_size"] = value

    checks = [
        ("page_size", lambda value: validate_positive_int(value, "page_size")),
        ("page", validate_page),
        ("max_size", lambda value: validate_non_negative_int(value, "max_size")),
        ("size", validate_size),
    ]
    for field_name, check in checks:
        if field_name not in options:
            continue
        valid, error, value = check(options[field_name])
        if not valid:
            errors.append(error)
        normalized[field_name] = value

    for field_name in BOOLEAN_OPTIONS:
        if field_name in options:
            normalized[field_name] = bool(options[field_name])

    return not errors, errors, normalized
