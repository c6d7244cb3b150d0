"""Tests for converting date/time values to aware datetimes."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from dateutil.relativedelta import relativedelta

from easytime import EasyTime, convert, is_time_like
from easytime.convert import from_components
from easytime.errors import (
    ConversionError,
    InvalidComponentsError,
    UnknownTypeError,
    UnparseableTextError,
)

CDT = timezone(timedelta(hours=-5))


def _seconds_from_now(value: datetime) -> float:
    return abs((value - datetime.now(timezone.utc)).total_seconds())


class TestConvertText:
    def test_httpdate_equals_zulu(self):
        assert convert("Thu, 06 Oct 2011 02:26:12 GMT") == convert(
            "2011-10-06T02:26:12Z"
        )

    def test_unparseable(self):
        with pytest.raises(UnparseableTextError) as exc_info:
            convert("no such luck")
        assert exc_info.value.value == "no such luck"
        assert isinstance(exc_info.value, ConversionError)

    def test_out_of_range_offset_is_unparseable(self):
        with pytest.raises(UnparseableTextError) as exc_info:
            convert("2020-01-01 00:00:00 +9999")
        assert exc_info.value.value == "2020-01-01 00:00:00 +9999"


class TestConvertComponents:
    def test_full_components(self):
        result = convert([2014, 5, 15, 9, 12, 19, "-05:00"])
        assert result == datetime(2014, 5, 15, 9, 12, 19, tzinfo=CDT)
        assert result.isoformat() == "2014-05-15T09:12:19-05:00"

    def test_tuple(self):
        assert convert((2014, 5, 15, 9, 12, 19, "Z")) == datetime(
            2014, 5, 15, 9, 12, 19, tzinfo=timezone.utc
        )

    def test_year_only_is_local_midnight(self):
        result = convert([2014])
        assert result.tzinfo is not None
        assert result == datetime(2014, 1, 1).astimezone()

    def test_fractional_second(self):
        result = convert([2014, 5, 15, 9, 12, 19.5, "Z"])
        assert result.second == 19
        assert result.microsecond == 500000

    @pytest.mark.parametrize(
        "offset, expected",
        [
            ("+0130", timedelta(hours=1, minutes=30)),
            ("UTC", timedelta(0)),
            (3600, timedelta(hours=1)),
            (timedelta(hours=-3), timedelta(hours=-3)),
            (timezone(timedelta(hours=9)), timedelta(hours=9)),
        ],
    )
    def test_offsets(self, offset, expected):
        assert from_components([2014, 5, 15, 0, 0, 0, offset]).utcoffset() == expected

    @pytest.mark.parametrize(
        "components",
        [
            [],
            [2014, 13],
            [2014, 2, 30],
            [2014, 5, 15, 9, 12, 19, "bogus"],
            [2014, 5, 15, 9, 12, 19, "+00:00", "extra"],
        ],
    )
    def test_invalid_components(self, components):
        with pytest.raises(InvalidComponentsError):
            convert(components)


class TestConvertNativeValues:
    def test_aware_datetime_unchanged(self):
        value = datetime(2013, 3, 15, 9, 12, 19, tzinfo=CDT)
        assert convert(value) is value

    def test_naive_datetime_is_local(self):
        value = datetime(2013, 3, 15, 9, 12, 19)
        result = convert(value)
        assert result.tzinfo is not None
        assert result == value.astimezone()

    def test_easy_time_extracts_time(self):
        eztime = EasyTime("2010-04-15T09:13:19-05:00")
        assert convert(eztime) is eztime.time

    def test_date_is_utc_midnight(self):
        assert convert(date(2010, 9, 8)) == datetime(2010, 9, 8, tzinfo=timezone.utc)

    def test_none_is_now(self):
        assert _seconds_from_now(convert(None)) < 5
        assert _seconds_from_now(convert()) < 5


class TestConvertDurationsAndNumbers:
    def test_duration_coerced_relative_to_now(self):
        result = convert(timedelta(hours=2))
        expected = datetime.now(timezone.utc) + timedelta(hours=2)
        assert abs((result - expected).total_seconds()) < 5

    def test_relativedelta_coerced(self):
        result = convert(relativedelta(months=1))
        assert result > datetime.now(timezone.utc) + timedelta(days=27)

    def test_duration_not_coerced(self):
        duration = timedelta(minutes=5)
        assert convert(duration, coerce=False) is duration
        months = relativedelta(months=2)
        assert convert(months, coerce=False) is months

    def test_number_is_epoch_seconds(self):
        assert convert(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert convert(1.5) == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)

    def test_number_not_coerced(self):
        assert convert(42, coerce=False) == 42
        assert convert(1.5, coerce=False) == 1.5

    def test_strings_ignore_coerce(self):
        assert isinstance(convert("2011-10-06T02:26:12Z", coerce=False), datetime)


class TestUnknownTypes:
    @pytest.mark.parametrize("value", [True, object(), {"year": 2020}, b"2020-01-01"])
    def test_unknown(self, value):
        with pytest.raises(UnknownTypeError) as exc_info:
            convert(value)
        assert repr(value) in str(exc_info.value)

    def test_unknown_is_type_error(self):
        with pytest.raises(TypeError):
            convert(object())


class TestIsTimeLike:
    @pytest.mark.parametrize(
        "value",
        [datetime.now(), date.today(), EasyTime("2011-10-06T02:26:12Z")],
    )
    def test_time_like(self, value):
        assert is_time_like(value)

    @pytest.mark.parametrize(
        "value", [1, 2.5, timedelta(seconds=1), relativedelta(days=1), "2011-10-06"]
    )
    def test_not_time_like(self, value):
        assert not is_time_like(value)
