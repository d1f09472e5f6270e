"""Conversions between ISBN-10, ISBN-13, UPC-A and EAN-13."""

from typing import Optional

from ..models import EAN13_PATTERN, ISBN10_COMPATIBLE_PREFIX, ISBN10_PATTERN, ExtractedIsbn
from .checksums import ean13_check_digit, is_valid_isbn, isbn10_check_char
from .classify import is_upc
from .normalize import normalize_isbn


def isbn10_to_isbn13(raw: str) -> Optional[str]:
    """
    Convert an ISBN-10 to its 978-prefixed ISBN-13.

    The ISBN-10 check digit is not validated; the conversion is structural.

    Args:
        raw: ISBN-10, e.g. "0-306-40615-2"

    Returns:
        ISBN-13 ("9780306406157") or None if the input is not ISBN-10 shaped
    """
    isbn = normalize_isbn(raw)
    if not ISBN10_PATTERN.match(isbn):
        return None
    body = ISBN10_COMPATIBLE_PREFIX + isbn[:9]
    return body + ean13_check_digit(body)


def isbn13_to_isbn10(raw: str) -> Optional[str]:
    """
    Convert a 978-prefixed ISBN-13 to ISBN-10.

    979-prefixed ISBN-13s have no ISBN-10 equivalent and return None,
    as does any other prefix or length.
    """
    isbn = normalize_isbn(raw)
    if not EAN13_PATTERN.match(isbn) or not isbn.startswith(ISBN10_COMPATIBLE_PREFIX):
        return None
    body = isbn[3:12]
    return body + isbn10_check_char(body)


def upc_to_isbn13(raw: str) -> Optional[str]:
    """
    Convert a UPC-A to an ISBN-13 when the UPC's EAN-13 form is a Bookland code.

    The EAN-13 form of a UPC-A is the UPC with a leading "0". No ISBN is
    invented: if that EAN-13 is not a valid ISBN-13 the result is None and
    callers should fall back to a UPC lookup.
    """
    if not is_upc(raw):
        return None
    candidate = "0" + normalize_isbn(raw)
    return candidate if is_valid_isbn(candidate) else None


def ean13_to_upc(raw: str) -> Optional[str]:
    """
    Recover a UPC-A from an EAN-13 read with an implicit leading zero.

    EAN scanners report a UPC-A as "0" + UPC. Codes starting with "097"
    are left alone (Bookland-adjacent prefixes are not UPCs).
    """
    ean = normalize_isbn(raw)
    if not EAN13_PATTERN.match(ean) or not ean.startswith("0") or ean.startswith("097"):
        return None
    return ean[1:]


def extract_isbn(raw: str) -> Optional[ExtractedIsbn]:
    """Return the normalized and trimmed original forms of a valid ISBN, or None."""
    isbn = normalize_isbn(raw)
    if not is_valid_isbn(isbn):
        return None
    return ExtractedIsbn(normalized=isbn, original=raw.strip())


def isbn_variants(raw: str) -> list[str]:
    """
    List the ISBN forms a catalog might store a code under.

    The normalized code comes first, followed by its ISBN-13 (for an ISBN-10)
    or its ISBN-10 (for a 978-prefixed ISBN-13).
    """
    code = normalize_isbn(raw)
    if not code:
        return []

    variants = [code]
    if len(code) == 10:
        other = isbn10_to_isbn13(code)
    elif len(code) == 13:
        other = isbn13_to_isbn10(code)
    else:
        other = None

    if other and other not in variants:
        variants.append(other)
    return variants
