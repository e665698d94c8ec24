import pandas as pd

from clean.dates import parse_begin_date, parse_begin_dates


def test_time_suffix_is_ignored():
    assert parse_begin_date("4/18/1950 0:00:00") == pd.Timestamp("1950-04-18")


def test_zero_padded_date():
    assert parse_begin_date("11/08/2011") == pd.Timestamp("2011-11-08")


def test_invalid_tokens_are_missing():
    assert pd.isna(parse_begin_date("garbage"))
    assert pd.isna(parse_begin_date("13/45/2000 0:00:00"))
    assert pd.isna(parse_begin_date(""))
    assert pd.isna(parse_begin_date(None))


def test_series_parse_keeps_going_past_bad_rows():
    texts = pd.Series(["4/18/1950 0:00:00", "", None, "not-a-date", "12/31/2010 23:59:00"])

    result = parse_begin_dates(texts)

    assert result.iloc[0] == pd.Timestamp("1950-04-18")
    assert result.iloc[1:4].isna().all()
    assert result.iloc[4] == pd.Timestamp("2010-12-31")
