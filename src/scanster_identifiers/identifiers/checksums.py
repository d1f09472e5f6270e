"""Check digit computation and validation for ISBN-10, EAN-13/ISBN-13 and UPC-A."""

from ..models import (
    BOOKLAND_PREFIXES,
    EAN13_PATTERN,
    EAN13_WEIGHTS,
    ISBN10_PATTERN,
    ISBN10_WEIGHTS,
    UPC_PATTERN,
    UPC_WEIGHTS,
)
from .normalize import normalize_isbn


def _weighted_sum(digits: str, weights: tuple[int, ...]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))


def isbn10_check_char(body: str) -> str:
    """
    Compute the ISBN-10 check character for a 9-digit body.

    The check value is (11 - (sum of digit * weight) mod 11) mod 11
    with weights 10..2, and 10 is written as 'X'.
    """
    check = (11 - _weighted_sum(body, ISBN10_WEIGHTS) % 11) % 11
    return "X" if check == 10 else str(check)


def ean13_check_digit(body: str) -> str:
    """Compute the EAN-13 check digit for a 12-digit body (weights 1,3,1,3,...)."""
    return str((10 - _weighted_sum(body, EAN13_WEIGHTS) % 10) % 10)


def upc_check_digit(body: str) -> str:
    """
    Compute the UPC-A check digit for an 11-digit body (weights 3,1,3,1,...).

    Same algorithm as EAN-13 with the parity shifted by one position, so a
    UPC with a "0" prepended has the same check digit as an EAN-13.
    """
    return str((10 - _weighted_sum(body, UPC_WEIGHTS) % 10) % 10)


def is_valid_isbn(raw: str) -> bool:
    """
    Check if a code is a valid ISBN-10 or ISBN-13.

    - ISBN-10: 9 digits + digit or X/x, (weighted sum + check value) mod 11 == 0
    - ISBN-13: 13 digits with a 978/979 prefix and a valid EAN-13 check digit

    Args:
        raw: Raw ISBN (hyphens and spaces allowed)

    Returns:
        True if valid ISBN, False otherwise
    """
    isbn = normalize_isbn(raw)

    if ISBN10_PATTERN.match(isbn):
        last_char = isbn[9].upper()
        check_value = 10 if last_char == "X" else int(last_char)
        return (_weighted_sum(isbn, ISBN10_WEIGHTS) + check_value) % 11 == 0

    if EAN13_PATTERN.match(isbn) and isbn.startswith(BOOKLAND_PREFIXES):
        return is_valid_ean(isbn)

    return False


def is_valid_ean(raw: str) -> bool:
    """Check if a code is a valid EAN-13 (any prefix)."""
    ean = normalize_isbn(raw)
    if not EAN13_PATTERN.match(ean):
        return False
    return ean13_check_digit(ean[:12]) == ean[12]


def is_valid_upc(raw: str) -> bool:
    """Check if a code is a valid UPC-A (12 digits, valid check digit)."""
    upc = normalize_isbn(raw)
    if not UPC_PATTERN.match(upc):
        return False
    return upc_check_digit(upc[:11]) == upc[11]
