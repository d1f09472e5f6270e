import pytest

from scanster_identifiers.identifiers import format_isbn


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0306406152", "0-3064-0615-2"),
        ("0-306-40615-2", "0-3064-0615-2"),
        ("080442957X", "0-8044-2957-X"),
        ("9780306406157", "978-0-30640-615-7"),
        ("978 0 306 40615 7", "978-0-30640-615-7"),
    ],
)
def test_format_isbn(raw, expected):
    assert format_isbn(raw) == expected


@pytest.mark.parametrize("raw", ["12345", " 12-345 ", "012345678905", ""])
def test_format_isbn_passes_other_lengths_through(raw):
    assert format_isbn(raw) == raw
