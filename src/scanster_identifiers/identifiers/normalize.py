"""Normalization of raw ISBN/EAN/UPC and LCCN strings."""

from typing import Optional

import pandas as pd

from ..models import CODE_PREFIX_PATTERN, SEPARATOR_PATTERN


def normalize_isbn(raw: Optional[str]) -> str:
    """
    Remove hyphens and whitespace from an ISBN, EAN or UPC.

    The check character keeps its case ("080442957x" stays lowercase);
    validators accept both.

    Args:
        raw: Raw identifier, e.g. "978-0-306-40615-7" or "978 0 306 40615 7"

    Returns:
        Normalized identifier ("" for empty input)
    """
    if not raw:
        return ""
    return SEPARATOR_PATTERN.sub("", str(raw)).strip()


def normalize_lccn(raw: Optional[str]) -> str:
    """Normalize an LCCN: strip hyphens/whitespace and lowercase the alpha prefix."""
    return normalize_isbn(raw).lower()


def strip_code_prefix(raw: Optional[str]) -> str:
    """
    Remove a leading "ISBN"/"LCCN" label from user or scanner input.

    "ISBN: 978-0-306-40615-7" -> "978-0-306-40615-7"
    """
    if not raw:
        return ""
    return CODE_PREFIX_PATTERN.sub("", str(raw).strip()).strip()


def normalize_isbn_series(series: pd.Series) -> pd.Series:
    """
    Normalize a pandas Series of ISBN/EAN/UPC codes using vectorized operations.

    Args:
        series: Pandas Series containing raw codes

    Returns:
        Series with normalized codes (None for empty)
    """
    # Handle NaN and convert to string
    result = series.fillna("").astype(str)
    # Same separators as normalize_isbn
    result = result.str.replace(SEPARATOR_PATTERN.pattern, "", regex=True).str.strip()
    # Replace empty strings with None
    return result.replace("", None)
