"""Display formatting for ISBNs."""

from .normalize import normalize_isbn


def format_isbn(raw: str) -> str:
    """
    Hyphenate an ISBN for display.

    Uses fixed positional groups, not registrant-range-aware hyphenation:
    - ISBN-10: D-DDDD-DDDD-D
    - ISBN-13: DDD-D-DDDDD-DDD-D

    Any other length is returned unchanged (the original input, not normalized).
    """
    isbn = normalize_isbn(raw)

    if len(isbn) == 10:
        return f"{isbn[:1]}-{isbn[1:5]}-{isbn[5:9]}-{isbn[9:]}"

    if len(isbn) == 13:
        return f"{isbn[:3]}-{isbn[3:4]}-{isbn[4:9]}-{isbn[9:12]}-{isbn[12:]}"

    return raw
