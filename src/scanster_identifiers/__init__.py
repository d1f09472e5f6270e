"""
Book Identifiers

Normalization, validation, classification and conversion of book barcodes:
ISBN-10, ISBN-13, EAN-13, UPC-A and LCCN.

Public API:
- Identifiers: normalize_*, is_valid_*, is_upc, is_lccn, conversions, format_isbn
- Models: CodeType, IdentifierDict, ExtractedIsbn, serialize_identifier
- Resolver: resolve_code()
- Batch: load_codes(), resolve_codes()
- Stats: print_stats()
"""

__version__ = "0.1.0"

# Export batch helpers
from .batch import load_codes, resolve_codes

# Export config constants
from .config import DEFAULT_CODE_COLUMN, DEFAULT_OUTPUT_DIR

# Export exporters
from .exporters import export_csv, export_summary_json

# Export identifier functions
from .identifiers import (
    classify_code,
    ean13_check_digit,
    ean13_to_upc,
    extract_isbn,
    format_isbn,
    is_lccn,
    is_upc,
    is_valid_ean,
    is_valid_isbn,
    is_valid_upc,
    isbn10_check_char,
    isbn10_to_isbn13,
    isbn13_to_isbn10,
    isbn_variants,
    normalize_isbn,
    normalize_isbn_series,
    normalize_lccn,
    strip_code_prefix,
    upc_check_digit,
    upc_to_isbn13,
)

# Export metrics
from .metrics import QualityMetrics, get_metrics, reset_metrics

# Export models and constants
from .models import CodeType, ExtractedIsbn, IdentifierDict, serialize_identifier

# Export resolver
from .resolve import resolve_code

# Export stats
from .stats import print_stats

__all__ = [
    # Version
    "__version__",
    # Models and constants
    "CodeType",
    "ExtractedIsbn",
    "IdentifierDict",
    "serialize_identifier",
    "DEFAULT_CODE_COLUMN",
    "DEFAULT_OUTPUT_DIR",
    # Normalization
    "normalize_isbn",
    "normalize_lccn",
    "strip_code_prefix",
    "normalize_isbn_series",
    # Validation
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
    "format_isbn",
    # Resolver
    "resolve_code",
    # Batch
    "load_codes",
    "resolve_codes",
    # Metrics
    "QualityMetrics",
    "get_metrics",
    "reset_metrics",
    # Stats and exporters
    "print_stats",
    "export_csv",
    "export_summary_json",
]
