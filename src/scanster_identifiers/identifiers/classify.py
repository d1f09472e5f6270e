"""Classification of scanned codes as ISBN, UPC, EAN-13 or LCCN."""

from ..models import LCCN_ALPHA_PATTERN, LCCN_NUMERIC_PATTERN, UPC_PATTERN, CodeType
from .checksums import is_valid_ean, is_valid_isbn, is_valid_upc
from .normalize import normalize_isbn, normalize_lccn


def is_upc(raw: str) -> bool:
    """Check if a code has the UPC-A shape (12 digits). The check digit is not verified."""
    return bool(UPC_PATTERN.match(normalize_isbn(raw)))


def is_lccn(raw: str) -> bool:
    """
    Check if a code is a Library of Congress Control Number.

    Accepted forms (after LCCN normalization):
    - alpha prefix + 8 or more digits: n78890351, agr64000200
    - 8-12 bare digits that are neither a valid ISBN-10 nor a valid UPC-A

    Valid ISBN/UPC codes take precedence over the numeric LCCN form, so a
    10-digit ISBN or a 12-digit UPC is never reported as an LCCN.
    """
    lccn = normalize_lccn(raw)

    if LCCN_ALPHA_PATTERN.match(lccn):
        return True

    if LCCN_NUMERIC_PATTERN.match(lccn):
        if len(lccn) == 10 and is_valid_isbn(lccn):
            return False
        if len(lccn) == 12 and is_valid_upc(lccn):
            return False
        return True

    return False


def classify_code(raw: str) -> CodeType:
    """
    Decide which kind of identifier a raw code is.

    Order: valid ISBN, valid UPC-A, LCCN, valid (non-Bookland) EAN-13.
    Anything else is UNKNOWN.
    """
    code = normalize_isbn(raw)

    if is_valid_isbn(code):
        return CodeType.ISBN10 if len(code) == 10 else CodeType.ISBN13
    if is_valid_upc(code):
        return CodeType.UPC
    if is_lccn(code):
        return CodeType.LCCN
    if is_valid_ean(code):
        return CodeType.EAN13
    return CodeType.UNKNOWN
