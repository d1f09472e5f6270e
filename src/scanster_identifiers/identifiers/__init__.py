"""Identifier normalization, validation, classification and conversion for book barcodes."""

from .checksums import ean13_check_digit, is_valid_ean, is_valid_isbn, is_valid_upc, isbn10_check_char, upc_check_digit
from .classify import classify_code, is_lccn, is_upc
from .convert import ean13_to_upc, extract_isbn, isbn10_to_isbn13, isbn13_to_isbn10, isbn_variants, upc_to_isbn13
from .formatting import format_isbn
from .normalize import normalize_isbn, normalize_isbn_series, normalize_lccn, strip_code_prefix

__all__ = [
    # Normalization
    "normalize_isbn",
    "normalize_lccn",
    "strip_code_prefix",
    "normalize_isbn_series",
    # Checksums
    "isbn10_check_char",
    "ean13_check_digit",
    "upc_check_digit",
    "is_valid_isbn",
    "is_valid_ean",
    "is_valid_upc",
    # Classification
    "is_upc",
    "is_lccn",
    "classify_code",
    # Conversion
    "isbn10_to_isbn13",
    "isbn13_to_isbn10",
    "upc_to_isbn13",
    "ean13_to_upc",
    "extract_isbn",
    "isbn_variants",
    # Formatting
    "format_isbn",
]
