import pytest

from scanster_identifiers import config
from scanster_identifiers.metrics import get_metrics
from scanster_identifiers.models import CodeType, serialize_identifier
from scanster_identifiers.resolve import resolve_code


def test_resolve_isbn13_with_label():
    record = resolve_code("ISBN: 978-0-306-40615-7")

    assert record["input"] == "ISBN: 978-0-306-40615-7"
    assert record["code"] == "9780306406157"
    assert record["code_type"] is CodeType.ISBN13
    assert record["isbn13"] == "9780306406157"
    assert record["isbn10"] == "0306406152"
    assert record["upc"] is None
    assert record["display"] == "978-0-30640-615-7"
    assert record["lookup_keys"] == ["9780306406157", "0306406152"]


def test_resolve_isbn10_uppercases_check_character():
    record = resolve_code("080442957x")

    assert record["code_type"] is CodeType.ISBN10
    assert record["code"] == "080442957X"
    assert record["isbn13"] == "9780804429573"
    assert record["lookup_keys"] == ["080442957X", "9780804429573"]
    assert record["display"] == "978-0-80442-957-3"


def test_resolve_979_isbn_has_no_isbn10():
    record = resolve_code("9791090636071")

    assert record["code_type"] is CodeType.ISBN13
    assert record["isbn10"] is None
    assert record["lookup_keys"] == ["9791090636071"]


def test_resolve_upc_without_isbn_equivalent():
    record = resolve_code("012345678905")

    assert record["code_type"] is CodeType.UPC
    assert record["upc"] == "012345678905"
    assert record["isbn13"] is None
    assert record["converted_from_upc"] is False
    assert record["lookup_keys"] == ["012345678905"]
    assert record["display"] == "012345678905"


def test_resolve_ean13_with_implicit_leading_zero():
    record = resolve_code("0036000291452")

    assert record["code_type"] is CodeType.EAN13
    assert record["upc"] == "036000291452"
    assert record["lookup_keys"] == ["0036000291452", "036000291452"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("LCCN: N78-890351", "n78890351"),
        ("78-308782", "78308782"),
    ],
)
def test_resolve_lccn(raw, expected):
    record = resolve_code(raw)

    assert record["code_type"] is CodeType.LCCN
    assert record["code"] == expected
    assert record["lccn"] == expected
    assert record["lookup_keys"] == [expected]


def test_resolve_unknown_and_empty():
    assert resolve_code("hello")["code_type"] is CodeType.UNKNOWN

    record = resolve_code(None)
    assert record["code_type"] is CodeType.UNKNOWN
    assert record["code"] == ""
    assert record["lookup_keys"] == []


def test_resolve_bad_checksum_is_not_an_isbn_by_default():
    assert resolve_code("0306406151")["code_type"] is CodeType.LCCN
    assert resolve_code("9780306406158")["code_type"] is CodeType.UNKNOWN


def test_resolve_skip_checksum_accepts_isbn_shapes(monkeypatch):
    monkeypatch.setattr(config, "SKIP_CHECKSUM_VALIDATION", True)

    isbn10 = resolve_code("0306406151", track_metrics=True)
    assert isbn10["code_type"] is CodeType.ISBN10
    assert isbn10["isbn13"] == "9780306406157"

    isbn13 = resolve_code("9780306406158", track_metrics=True)
    assert isbn13["code_type"] is CodeType.ISBN13
    assert isbn13["isbn10"] == "0306406152"

    assert get_metrics().checksum_skipped == 2


def test_resolve_tracks_metrics_only_when_asked():
    resolve_code("9780306406157")
    assert get_metrics().codes_total == 0

    resolve_code("9780306406157", track_metrics=True)
    resolve_code("0036000291452", track_metrics=True)
    resolve_code("garbage", track_metrics=True)

    metrics = get_metrics()
    assert metrics.codes_total == 3
    assert metrics.code_types["isbn13"] == 1
    assert metrics.ean_converted_to_upc == 1
    assert metrics.unknown_samples == ["garbage"]


def test_serialize_identifier():
    row = serialize_identifier(resolve_code("0306406152"))

    assert row["code_type"] == "isbn10"
    assert row["lookup_keys"] == "0306406152|9780306406157"

    empty = serialize_identifier(resolve_code(""))
    assert empty["lookup_keys"] is None
