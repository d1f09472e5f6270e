import pytest

from scanster_identifiers.identifiers import (
    ean13_to_upc,
    extract_isbn,
    is_valid_isbn,
    isbn10_to_isbn13,
    isbn13_to_isbn10,
    isbn_variants,
    normalize_isbn,
    upc_to_isbn13,
)
from scanster_identifiers.models import ExtractedIsbn

VALID_ISBN10 = ["0306406152", "080442957X", "0140449132", "0-306-40615-2"]
VALID_ISBN13_978 = ["9780306406157", "9780804429573", "9780140449136", "978-0-306-40615-7"]


@pytest.mark.parametrize(
    "isbn10, expected",
    [
        ("0306406152", "9780306406157"),
        ("080442957X", "9780804429573"),
        ("0-306-40615-2", "9780306406157"),
    ],
)
def test_isbn10_to_isbn13(isbn10, expected):
    assert isbn10_to_isbn13(isbn10) == expected


@pytest.mark.parametrize("code", ["12345", "12345678901", "X306406152", ""])
def test_isbn10_to_isbn13_rejects_non_isbn10(code):
    assert isbn10_to_isbn13(code) is None


def test_isbn10_to_isbn13_does_not_validate_checksum():
    assert isbn10_to_isbn13("0306406151") == "9780306406157"


@pytest.mark.parametrize("isbn10", VALID_ISBN10)
def test_isbn10_to_isbn13_preserves_validity(isbn10):
    assert is_valid_isbn(isbn10_to_isbn13(isbn10))


@pytest.mark.parametrize(
    "isbn13, expected",
    [
        ("9780306406157", "0306406152"),
        ("9780804429573", "080442957X"),
        ("978-0-14-044913-6", "0140449132"),
    ],
)
def test_isbn13_to_isbn10(isbn13, expected):
    assert isbn13_to_isbn10(isbn13) == expected


@pytest.mark.parametrize("code", ["9791090636071", "9790000000001", "1234567890123", "12345", ""])
def test_isbn13_to_isbn10_rejects_non_978(code):
    assert isbn13_to_isbn10(code) is None


@pytest.mark.parametrize("isbn13", VALID_ISBN13_978)
def test_isbn13_round_trip(isbn13):
    assert isbn10_to_isbn13(isbn13_to_isbn10(isbn13)) == normalize_isbn(isbn13)


@pytest.mark.parametrize("upc", ["012345678905", "978030640615", "036000291452"])
def test_upc_to_isbn13_never_invents_an_isbn(upc):
    assert upc_to_isbn13(upc) is None


def test_upc_to_isbn13_rejects_non_upc():
    assert upc_to_isbn13("12345") is None


@pytest.mark.parametrize(
    "ean, expected",
    [
        ("0036000291452", "036000291452"),
        ("0-036000-291452", "036000291452"),
        ("0970000000003", None),  # 097 is not a UPC-A
        ("4006381333931", None),
        ("036000291452", None),
    ],
)
def test_ean13_to_upc(ean, expected):
    assert ean13_to_upc(ean) == expected


def test_extract_isbn():
    assert extract_isbn(" 978-0-306-40615-7 ") == ExtractedIsbn(normalized="9780306406157", original="978-0-306-40615-7")
    assert extract_isbn("0306406151") is None
    assert extract_isbn("") is None


@pytest.mark.parametrize(
    "code, expected",
    [
        ("0306406152", ["0306406152", "9780306406157"]),
        ("978-0-306-40615-7", ["9780306406157", "0306406152"]),
        ("9791090636071", ["9791090636071"]),
        ("012345678905", ["012345678905"]),
        ("", []),
    ],
)
def test_isbn_variants(code, expected):
    assert isbn_variants(code) == expected


def test_conversions_reject_non_ascii_digits():
    assert isbn10_to_isbn13("０３０６４０６１５２") is None
    assert isbn13_to_isbn10("９７８０３０６４０６１５７") is None
    assert upc_to_isbn13("٠١٢٣٤٥٦٧٨٩٠٥") is None
    assert ean13_to_upc("٠٠٣٦٠٠٠٢٩١٤٥٢") is None
