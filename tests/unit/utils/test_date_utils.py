"""Unit tests for timestamp formatting and parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from awsmodels.utils.date_utils import (
    as_utc,
    format_iso8601,
    format_rfc822,
    parse_timestamp,
    to_epoch_seconds,
)


def test_format_iso8601_truncates_to_milliseconds() -> None:
    value = datetime(2020, 2, 29, 23, 59, 59, 999999, tzinfo=timezone.utc)

    assert format_iso8601(value) == "2020-02-29T23:59:59.999Z"


def test_naive_datetimes_are_utc() -> None:
    assert format_iso8601(datetime(2020, 1, 1)) == "2020-01-01T00:00:00.000Z"
    assert to_epoch_seconds(datetime(1970, 1, 2)) == 86400


def test_format_rfc822() -> None:
    value = datetime(1994, 11, 6, 8, 49, 37, tzinfo=timezone.utc)

    assert format_rfc822(value) == "Sun, 06 Nov 1994 08:49:37 GMT"


def test_to_epoch_seconds_keeps_milliseconds() -> None:
    value = datetime(2015, 1, 1, 0, 0, 0, 250000, tzinfo=timezone.utc)

    assert to_epoch_seconds(value) == 1420070400.25
    assert to_epoch_seconds(value.replace(microsecond=0)) == 1420070400


@pytest.mark.parametrize(
    "raw",
    [1420070400, 1420070400.0, "2015-01-01T00:00:00Z", "2015-01-01T00:00:00.000Z", "Thu, 01 Jan 2015 00:00:00 GMT"],
)
def test_parse_timestamp_formats(raw) -> None:
    assert parse_timestamp(raw) == datetime(2015, 1, 1, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("not a date")


@pytest.mark.parametrize("raw", [1420070400, "2015-01-01T02:00:00+02:00", "Thu, 01 Jan 2015 00:00:00 GMT"])
def test_parsed_timestamps_are_in_utc(raw) -> None:
    assert parse_timestamp(raw).tzinfo is timezone.utc


def test_as_utc() -> None:
    plus_two = timezone(timedelta(hours=2))

    assert as_utc(datetime(2015, 1, 1)) == datetime(2015, 1, 1, tzinfo=timezone.utc)
    assert as_utc(datetime(2015, 1, 1, 2, tzinfo=plus_two)).hour == 0
