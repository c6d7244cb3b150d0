"""Shared test fixtures and data for EasyTime tests."""

from __future__ import annotations

import pytest

from easytime.config import reset_comparison_tolerance

# time1, time2, expected compare() under the default one-minute tolerance
EASY_TIME_DATA = [
    ("2010-04-15T09:13:19-05:00", "2010-04-15T09:13:19-05:00", 0),
    ("2011-04-15T09:13:20-05:00", "2011-04-15T09:13:25-05:00", 0),
    ("2012-04-15T09:13:20-05:00", "2012-04-15T09:14:22-05:00", -1),
    ("2013-04-14T09:13:20-05:00", "2013-04-15T09:13:20-05:00", -1),
    ("2014-04-15T09:13:20-05:00", "2014-04-14T09:13:20-05:00", 1),
    ("2015-04-15T09:13:20-07:00", "2015-04-15T09:13:20-05:00", 1),
    ("2016-04-15T09:13:20-00:00", "2016-04-15T09:13:20-05:00", -1),
    ("2017-04-15T09:13:20-00:00", "2017-04-15T09:13:21-00:00", 0),
    ("2018-04-15T09:13:20-00:00", "2018-04-15T09:14:20-00:00", 0),
    ("2019-04-15T09:13:20-00:00", "2019-04-15T09:14:21-00:00", -1),
    ("2020-04-15T09:13:20-00:00", "2020-04-15T09:13:24-00:00", 0),
    ("2021-04-15T09:13:20-00:00", "2021-04-15T09:14:21-00:00", -1),
]

# Reference time for range checks: 11:06:05 GMT
BETWEEN_TIME = "2010-09-08 07:06:05 -04:00"

# t_min, t_max, expected between() with a one-second tolerance
BETWEEN_DATA = [
    ("2010-09-08 07:06:05 -05:00", "2010-09-08 15:06:05 GMT", False),  # min 12:06:05
    ("2010-09-08 07:06:05 -04:00", "2010-09-08 15:06:05 GMT", True),  # min 11:06:05
    ("2010-09-08 07:06:05 -03:00", "2010-09-08 15:06:05 GMT", True),  # min 10:06:05
    ("2010-09-08 07:06:05 -02:00", "2010-09-08 15:06:05 GMT", True),  # min 09:06:05
    ("2010-09-08 07:06:06 -04:00", "2010-09-08 15:06:05 GMT", True),  # min 11:06:06
    ("2010-09-08 07:06:07 -04:00", "2010-09-08 15:06:05 GMT", False),  # min 11:06:07
    ("2010-09-08 07:06:05 -04:00", "2010-09-08 11:06:05 GMT", True),  # max 11:06:05
    ("2010-09-08 07:06:05 -04:00", "2010-09-08 11:06:04 GMT", True),  # max 11:06:04
    ("2010-09-08 07:06:05 -04:00", "2010-09-08 11:06:03 GMT", False),  # max 11:06:03
]


@pytest.fixture(autouse=True)
def _default_tolerance():
    """Every test starts and ends with the built-in default tolerance."""
    reset_comparison_tolerance()
    yield
    reset_comparison_tolerance()


@pytest.fixture
def eztime():
    """An EasyTime at 2020-10-09 08:07:06 -05:00."""
    from easytime import EasyTime

    return EasyTime("2020-10-09T08:07:06-05:00")
