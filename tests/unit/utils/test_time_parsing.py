from __future__ import annotations

from datetime import date, datetime

import pytest

from timealign.domain.timeline import Timeline
from timealign.errors import InvalidDateFormatError
from timealign.utils.time import parse_date, parse_date_bands, parse_dates


def test_parse_date_accepts_common_inputs():
    assert parse_date(date(2013, 9, 14)) == date(2013, 9, 14)
    assert parse_date(datetime(2013, 9, 14, 23, 59)) == date(2013, 9, 14)
    assert parse_date(" 2013-09-14 ") == date(2013, 9, 14)
    assert parse_date("2013-09-14T10:00:00Z") == date(2013, 9, 14)
    assert parse_dates(["2013-09-14", date(2013, 9, 30)]) == [date(2013, 9, 14), date(2013, 9, 30)]


@pytest.mark.parametrize("value", ["14/09/2013", "", None, 20130914, "2013-13-01"])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(InvalidDateFormatError):
        parse_date(value)


@pytest.mark.parametrize(
    "value",
    ["2013-09-14garbage", "2013-09-1412", "2013-09-14 not a date", "2013-09-14x12:00"],
)
def test_parse_date_rejects_trailing_text(value):
    with pytest.raises(InvalidDateFormatError):
        parse_date(value)


def test_timeline_row_with_trailing_digits_is_rejected():
    with pytest.raises(InvalidDateFormatError):
        Timeline(["2013-09-1412", "2013-09-30"])


def test_parse_date_accepts_space_separated_timestamp():
    assert parse_date("2013-09-14 10:30:00") == date(2013, 9, 14)


def test_parse_date_bands():
    rows = parse_date_bands([{"date": "2013-09-14", "band": "ndvi"}, {"date": "2013-09-30", "band": "ndvi"}])
    assert rows[0] == {"date": date(2013, 9, 14), "band": "ndvi"}


def test_parse_date_bands_rejects_bad_rows():
    with pytest.raises(InvalidDateFormatError):
        parse_date_bands([])
    with pytest.raises(InvalidDateFormatError, match="tile"):
        parse_date_bands([{"date": "2013-09-14", "band": "ndvi", "tile": "h12v10"}])
    with pytest.raises(InvalidDateFormatError):
        parse_date_bands([{"date": "not a date", "band": "ndvi"}])
