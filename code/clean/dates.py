"""Begin-date parsing for Storm Data ``BGN_DATE`` values like ``4/18/1950 0:00:00``."""

from __future__ import annotations

import pandas as pd

DATE_FORMAT = "%m/%d/%Y"


def parse_begin_date(text) -> pd.Timestamp:
    """Parse the leading month/day/year token; anything after it is ignored.

    Returns ``pd.NaT`` when the text is missing or the token is not a date.
    """
    if not isinstance(text, str) or not text.strip():
        return pd.NaT
    token = text.split()[0]
    return pd.to_datetime(token, format=DATE_FORMAT, errors="coerce")


def parse_begin_dates(texts: pd.Series) -> pd.Series:
    """Vectorised :func:`parse_begin_date`."""
    tokens = texts.fillna("").astype(str).str.split().str[0]
    return pd.to_datetime(tokens, format=DATE_FORMAT, errors="coerce")
