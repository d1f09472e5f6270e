"""Resolve a scanned or typed code into every identifier a catalog lookup needs."""

import logging
from typing import Optional

from . import config
from .identifiers import (
    classify_code,
    ean13_to_upc,
    format_isbn,
    isbn13_to_isbn10,
    isbn10_to_isbn13,
    isbn_variants,
    normalize_isbn,
    normalize_lccn,
    strip_code_prefix,
    upc_to_isbn13,
)
from .metrics import get_metrics
from .models import BOOKLAND_PREFIXES, EAN13_PATTERN, ISBN10_PATTERN, CodeType, IdentifierDict

logger = logging.getLogger(__name__)

_ISBN_TYPES = (CodeType.ISBN10, CodeType.ISBN13)


def _has_isbn_shape(code: str) -> bool:
    """ISBN-10 or Bookland ISBN-13 layout, check digit ignored."""
    return bool(ISBN10_PATTERN.match(code) or (EAN13_PATTERN.match(code) and code.startswith(BOOKLAND_PREFIXES)))


def resolve_code(raw: Optional[str], track_metrics: bool = False) -> IdentifierDict:
    """
    Resolve one code into its ISBN-13, ISBN-10, UPC and LCCN forms.

    Resolution strategy:
    1. Strip an "ISBN:"/"LCCN:" label and normalize
    2. Classify (ISBN, UPC, LCCN, EAN-13, unknown)
    3. With SKIP_CHECKSUM_VALIDATION, accept ISBN shapes with a bad check digit
    4. Fill in equivalents: ISBN-10 <-> ISBN-13, UPC -> ISBN-13, EAN-13 -> UPC
    5. Build the ordered lookup keys (code first, then its equivalents)

    Args:
        raw: Raw code from a scanner, a form or a CSV cell
        track_metrics: If True, record the result in the global metrics

    Returns:
        IdentifierDict describing the code
    """
    text = "" if raw is None else str(raw)
    stripped = strip_code_prefix(text)
    code = normalize_isbn(stripped)
    code_type = classify_code(code)

    checksum_skipped = False
    if code_type not in _ISBN_TYPES and config.SKIP_CHECKSUM_VALIDATION and _has_isbn_shape(code):
        code_type = CodeType.ISBN10 if len(code) == 10 else CodeType.ISBN13
        checksum_skipped = True
        logger.debug(f"Accepting {code} as {code_type.value} without checksum validation")

    isbn13 = isbn10 = upc = lccn = None
    upc_converted = False

    if code_type is CodeType.ISBN10:
        code = code.upper()
        isbn10 = code
        isbn13 = isbn10_to_isbn13(code)
    elif code_type is CodeType.ISBN13:
        isbn13 = code
        isbn10 = isbn13_to_isbn10(code)
    elif code_type is CodeType.UPC:
        upc = code
        isbn13 = upc_to_isbn13(code)
        if isbn13:
            upc_converted = True
            isbn10 = isbn13_to_isbn10(isbn13)
            logger.debug(f"Converted UPC {code} to ISBN-13 {isbn13}")
    elif code_type is CodeType.EAN13:
        upc = ean13_to_upc(code)
        if upc:
            logger.debug(f"EAN-13 with leading 0 detected, extracted UPC: {upc}")
    elif code_type is CodeType.LCCN:
        code = lccn = normalize_lccn(stripped)

    keys = isbn_variants(code) if code_type in _ISBN_TYPES else ([code] if code else [])
    for extra in (isbn13, isbn10, upc, lccn):
        if extra and extra not in keys:
            keys.append(extra)

    primary_isbn = isbn13 or isbn10
    record: IdentifierDict = {
        "input": text,
        "code": code,
        "code_type": code_type,
        "isbn13": isbn13,
        "isbn10": isbn10,
        "upc": upc,
        "lccn": lccn,
        "display": format_isbn(primary_isbn) if primary_isbn else code,
        "converted_from_upc": upc_converted,
        "lookup_keys": keys,
    }

    if track_metrics:
        get_metrics().record_code(
            code_type,
            code=code,
            upc_converted=upc_converted,
            ean_converted=upc is not None and code_type is CodeType.EAN13,
            checksum_skipped=checksum_skipped,
        )

    return record
