from datetime import date

import pytest

from datetimescan.date_range import DateRange, get_missing_dates, parse_partial_date_str


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2023", date(2023, 1, 1)),
        ("2023-03", date(2023, 3, 1)),
        ("2023-03-03", date(2023, 3, 3)),
        ("9999", date(9999, 1, 1)),
        ("9999-01", date(9999, 1, 1)),
        ("9999-12-31", date(9999, 12, 31)),
        ("0001-12", date(1, 12, 1)),
        ("0001-01-01", date(1, 1, 1)),
    ],
)
def test_parse_partial_date_str_valid(text, expected):
    assert parse_partial_date_str(text) == expected


@pytest.mark.parametrize(
    "text", ["invalid", "", "2023-02-30", "2023-00", "2023-13", "202300", "2023x03"]
)
def test_parse_partial_date_str_invalid(text):
    assert parse_partial_date_str(text) is None


def test_date_range_from_strings():
    dr = DateRange.from_strings("2023", "2023-03-03")
    assert dr.start == date(2023, 1, 1)
    assert dr.end == date(2023, 3, 3)

    dr = DateRange.from_strings("2023-02", "2023-03")
    assert dr.start == date(2023, 2, 1)
    assert dr.end == date(2023, 3, 1)


def test_date_range_from_strings_invalid():
    with pytest.raises(ValueError, match="invalid date start"):
        DateRange.from_strings("2023-02-30", "2023-03-03")
    with pytest.raises(ValueError, match="invalid date end"):
        DateRange.from_strings("2023-02-01", "bad")


def test_date_range_from_str_range():
    dr = DateRange.from_str_range(["2023", "2023-03-03"])
    assert dr.start == date(2023, 1, 1)
    assert dr.end == date(2023, 3, 3)

    dr = DateRange.from_str_range(["2023-02", "2023-03", "2023"])
    assert dr.start == date(2023, 1, 1)
    assert dr.end == date(2023, 3, 1)


def test_date_range_from_str_range_invalid():
    with pytest.raises(ValueError):
        DateRange.from_str_range(["2023-02-30", "2023-03-03"])


def test_date_range_from_str_range_empty():
    with pytest.raises(ValueError):
        DateRange.from_str_range([])


@pytest.mark.parametrize(
    "start, end, length",
    [
        ("2020-01-01", "2022-01-01", 732),
        ("2020-01-01", "2020-01-02", 2),
        ("2021-01-01", "2021-12-31", 365),
        ("2021-01-01", "2021-01-01", 1),
    ],
)
def test_days_range_lengths(start, end, length):
    result = DateRange.from_strings(start, end).get_dates("d")
    assert len(result) == length
    assert result[0].isoformat() == start
    assert result[-1].isoformat() == end


def test_days_range_values():
    result = DateRange.from_strings("2020-01-01", "2020-01-05").get_dates("d")
    assert result == [date(2020, 1, day) for day in range(1, 6)]


@pytest.mark.parametrize(
    "start, end, length",
    [
        ("2020-01-01", "2020-12-31", 12),
        ("2020-01-01", "2020-01-01", 1),
        ("2020-03", "2020-09", 7),
        ("2020-03", "2020-09-30", 7),
        ("2020-03-01", "2020-05-15", 3),
    ],
)
def test_months_range_lengths(start, end, length):
    result = DateRange.from_strings(start, end).get_dates("m")
    assert len(result) == length
    assert result[0].isoformat()[:7] == start[:7]
    assert result[-1].isoformat()[:7] == end[:7]


def test_months_range_values():
    result = DateRange.from_strings("2020-01-01", "2020-05-01").get_dates("M")
    assert result == [date(2020, month, 1) for month in range(1, 6)]


@pytest.mark.parametrize(
    "start, end, length",
    [
        ("2020-01-01", "2020-12-31", 1),
        ("2020-01-01", "2020-01-01", 1),
        ("2020-01-01", "2023-04-05", 4),
        ("2020", "2022-01-01", 3),
        ("1982", "2043", 62),
        ("2019-08", "2023-04"),
    ][:-1]
    + [("2019-08", "2023-04", 5)],
)
def test_years_range_lengths(start, end, length):
    result = DateRange.from_strings(start, end).get_dates("y")
    assert len(result) == length
    assert f"{result[0].year:04d}" == start[:4]
    assert f"{result[-1].year:04d}" == end[:4]


def test_years_range_values():
    result = DateRange.from_strings("2020-01-01", "2023-01-01").get_dates("Y")
    assert result == [date(year, 1, 1) for year in range(2020, 2024)]


def test_get_dates_invalid_type():
    with pytest.raises(ValueError, match="must be y/m/d"):
        DateRange.from_strings("2020", "2021").get_dates("w")


@pytest.mark.parametrize(
    "start, end, mid, expected",
    [
        ("2020-01-01", "2021-01-01", "2020-01-01", True),
        ("2020-01-01", "2021-01-01", "2020-02-01", True),
        ("2020-01-01", "2021-01-01", "2020-12-31", True),
        ("2020-01-01", "2021-01-01", "2021-01-01", True),
        ("2020-01-01", "2021-01-01", "2019-12-31", False),
        ("2020-01-01", "2021-01-01", "2021-01-02", False),
        ("2020-01", "2020-03", "2020-02", True),
        ("2020-01", "2020-02", "2020-01", True),
        ("2020-01", "2020-02", "2020-02", True),
        ("2020-01", "2020-02", "2020-03", False),
        ("2020", "2022", "2021", True),
        ("2020", "2020", "2020", True),
    ],
)
def test_is_date_in_range(start, end, mid, expected):
    assert DateRange.from_strings(start, end).is_date_in_range(mid) is expected


def test_is_date_in_range_invalid():
    with pytest.raises(ValueError):
        DateRange.from_strings("2020", "2021").is_date_in_range("nope")


@pytest.mark.parametrize(
    "dates, expected",
    [
        (
            ["2020-01-01", "2020-01-02", "2020-01-05", "2020-02-01"],
            ["2020-01-03", "2020-01-04", "2020-01-06"]
            + [f"2020-01-{day:02d}" for day in range(7, 32)],
        ),
        (["2020-01-01", "2020-01-02"], []),
        (["2020-01-01"], []),
    ],
)
def test_get_missing_dates_days(dates, expected):
    assert get_missing_dates(dates, "d") == expected


@pytest.mark.parametrize(
    "dates, expected",
    [
        (["2020-01", "2020-03", "2020-04-01", "2020-05"], ["2020-02"]),
        (["2020-01", "2020-02"], []),
        (["2020-01"], []),
    ],
)
def test_get_missing_dates_months(dates, expected):
    assert get_missing_dates(dates, "m") == expected


@pytest.mark.parametrize(
    "dates, expected",
    [
        (["2011", "2012", "2013", "2015", "2017"], ["2014", "2016"]),
        (["2022", "2022"], []),
        (["2021"], []),
    ],
)
def test_get_missing_dates_years(dates, expected):
    assert get_missing_dates(dates, "y") == expected


def test_get_missing_dates_invalid_type():
    with pytest.raises(ValueError):
        get_missing_dates(["2020", "2021"], "q")