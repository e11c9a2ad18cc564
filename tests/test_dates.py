"""
Unit tests for XMLTV date handling.
"""
from datetime import datetime, timedelta, timezone

import pytest

from xmltv_reader.utils.dates import (
    MIN_DATE,
    DateFormatError,
    InvalidDateError,
    ensure_utc,
    match_xmltv_date,
    parse_date,
    parse_iso8601_to_utc,
    standardise_date,
)


UTC = timezone.utc


# ---------------------------------------------------------------------------
# parse_date
# ---------------------------------------------------------------------------


def test_full_date_without_offset_is_utc():
    assert parse_date("20000728173300") == datetime(2000, 7, 28, 17, 33, tzinfo=UTC)


def test_partial_date_is_padded_with_minutes():
    assert parse_date("200007281733") == datetime(2000, 7, 28, 17, 33, tzinfo=UTC)


def test_year_and_month_only():
    assert parse_date("200209") == datetime(2002, 9, 1, tzinfo=UTC)


def test_year_only():
    assert parse_date("1999") == datetime(1999, 1, 1, tzinfo=UTC)


def test_positive_offset():
    parsed = parse_date("19880523083000 +0300")
    assert parsed == datetime(1988, 5, 23, 8, 30, tzinfo=timezone(timedelta(hours=3)))
    assert parsed == datetime(1988, 5, 23, 5, 30, tzinfo=UTC)


def test_negative_offset():
    assert parse_date("20080715003000 -0600") == datetime(2008, 7, 15, 6, 30, tzinfo=UTC)


def test_result_is_timezone_aware():
    assert parse_date("200209").tzinfo is not None


@pytest.mark.parametrize("value", ["", None])
def test_empty_value_is_absent(value):
    assert parse_date(value) is None


@pytest.mark.parametrize("value", [
    "200007281733 BST",   # textual zones are not supported
    "abc",
    "200",                # fewer than 4 digits
    "200007281733000000",  # more than 14 digits
    "2000-07-28",
])
def test_non_matching_value_is_absent(value):
    assert parse_date(value) is None


def test_out_of_range_value_is_absent():
    assert parse_date("20001332000000") is None


def test_short_offset_is_ignored_and_parsed_as_utc():
    assert parse_date("20000101120000 +3") == datetime(2000, 1, 1, 12, tzinfo=UTC)


def test_strict_match_raises_invalid_date():
    with pytest.raises(InvalidDateError):
        match_xmltv_date("not a date")


def test_strict_match_pads_and_returns_offset():
    assert match_xmltv_date("2016061509 +0100") == ("20160615090000", "+0100")


# ---------------------------------------------------------------------------
# standardise_date
# ---------------------------------------------------------------------------


def test_standardise_defaults_offset():
    assert standardise_date("2016061509") == "20160615090000 +0000"


def test_standardise_keeps_offset():
    assert standardise_date("20160615093000 -0500") == "20160615093000 -0500"


@pytest.mark.parametrize("value", ["garbage", "", None])
def test_standardise_never_raises(value):
    assert standardise_date(value) == "20000101000000 +0000"


# ---------------------------------------------------------------------------
# window helpers
# ---------------------------------------------------------------------------


def test_min_date_is_aware():
    assert MIN_DATE.tzinfo is UTC
    assert MIN_DATE < datetime(1900, 1, 1, tzinfo=UTC)


def test_ensure_utc_treats_naive_as_utc():
    assert ensure_utc(datetime(2020, 1, 1)) == datetime(2020, 1, 1, tzinfo=UTC)


def test_ensure_utc_converts_aware():
    value = datetime(2020, 1, 1, 3, tzinfo=timezone(timedelta(hours=3)))
    assert ensure_utc(value).hour == 0


def test_iso8601_with_z_suffix():
    assert parse_iso8601_to_utc("2025-10-09T00:00:00Z") == datetime(2025, 10, 9, tzinfo=UTC)


def test_iso8601_invalid_raises():
    with pytest.raises(DateFormatError):
        parse_iso8601_to_utc("yesterday")
