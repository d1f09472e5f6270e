"""Data models and constants for book identifiers."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import TypedDict, get_origin, get_type_hints

# Characters stripped by the normalizers (hyphens and any whitespace)
SEPARATOR_PATTERN = re.compile(r"[-\s]")

# ISBN-10: 9 digits followed by a digit or X/x check character
ISBN10_PATTERN = re.compile(r"^[0-9]{9}[0-9Xx]$")

# Fixed-length digit strings (ASCII 0-9 only)
EAN13_PATTERN = re.compile(r"^[0-9]{13}$")
UPC_PATTERN = re.compile(r"^[0-9]{12}$")

# LCCN: alpha prefix + 8 or more digits (e.g. n78890351, agr64000200)
LCCN_ALPHA_PATTERN = re.compile(r"^[a-z]+[0-9]{8,}$")
LCCN_NUMERIC_PATTERN = re.compile(r"^[0-9]{8,12}$")

# Leading "isbn:" / "lccn " labels typed or scanned in front of a code
CODE_PREFIX_PATTERN = re.compile(r"^(isbn|lccn)[:\s]*", re.IGNORECASE)

# Bookland EAN prefixes (ISBN-13)
BOOKLAND_PREFIXES = ("978", "979")
ISBN10_COMPATIBLE_PREFIX = "978"

# Check digit weights
ISBN10_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)  # positions 0-8
EAN13_WEIGHTS = (1, 3) * 6  # positions 0-11, even=1, odd=3
UPC_WEIGHTS = (3, 1) * 5 + (3,)  # positions 0-10, even=3, odd=1


class CodeType(str, Enum):
    """Kinds of codes a scanner or a user can hand us."""

    ISBN10 = "isbn10"
    ISBN13 = "isbn13"
    UPC = "upc"  # UPC-A, 12 digits
    EAN13 = "ean13"  # non-Bookland EAN-13
    LCCN = "lccn"  # Library of Congress Control Number
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ExtractedIsbn:
    """A valid ISBN found in user input."""

    normalized: str
    original: str


class IdentifierDict(TypedDict, total=False):
    """
    Typed dictionary describing one resolved code.

    Produced by resolve_code(); every key a lookup layer might need is
    filled in when an equivalent exists and left as None otherwise.
    """

    input: str  # raw value as received
    code: str  # prefix stripped, normalized
    code_type: CodeType

    isbn13: str | None
    isbn10: str | None
    upc: str | None  # 12-digit UPC-A (scanned, or recovered from an EAN-13)
    lccn: str | None  # normalized (lowercase) LCCN

    display: str  # hyphenated ISBN, or the code itself
    converted_from_upc: bool  # isbn13 was derived from a UPC

    # Ordered keys to try against a catalog: ISBN variants, then UPC, then LCCN
    lookup_keys: list[str]


# List fields derived from IdentifierDict type hints (joined with "|" for CSV export)
LIST_FIELDS = [field for field, type_hint in get_type_hints(IdentifierDict).items() if get_origin(type_hint) is list]


def serialize_identifier(record: IdentifierDict) -> dict:
    """
    Serialize an IdentifierDict for DataFrame/CSV export.

    Converts list fields to pipe-separated strings and enums to their values.
    """
    result = {}

    for key, value in record.items():
        if key in LIST_FIELDS and isinstance(value, list):
            result[key] = "|".join(str(v) for v in value) if value else None
        elif isinstance(value, CodeType):
            result[key] = value.value
        else:
            result[key] = value

    return result
