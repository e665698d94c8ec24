"""Shared fixtures: a handful of Storm Data rows in the raw column layout."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest

CODE_DIR = Path(__file__).resolve().parent.parent / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

RAW_HEADER = [
    "STATE__", "BGN_DATE", "STATE", "EVTYPE", "FATALITIES", "INJURIES",
    "PROPDMG", "PROPDMGEXP", "CROPDMG", "CROPDMGEXP", "REFNUM",
]

RAW_ROWS = [
    [48, "4/18/1950 0:00:00", "TX", "TSTM WIND", 0, 2, 10, "K", 0, "", 1],
    [48, "4/18/1950 0:00:00", "TX", "HAIL", 1, 0, 5, "M", 0, "", 2],
    [6, "8/29/2005 0:00:00", "CA", "Flash Flood", 0, 0, 2.5, "b", 100, "k", 3],
    [72, "9/20/2017 0:00:00", "PR", "HURRICANE", 5, 10, 1, "B", 0, "", 4],
    [66, "garbage", "GU", "Unknown Disaster", 0, 1, 3, "?", 7, "0", 5],
    [11, "", "DC", "EXCESSIVE HEAT", 3, 4, 0, "", 0, "", 6],
]


@pytest.fixture
def raw_storm_frame() -> pd.DataFrame:
    return pd.DataFrame(RAW_ROWS, columns=RAW_HEADER)


@pytest.fixture
def raw_storm_file(tmp_path, raw_storm_frame) -> Path:
    path = tmp_path / "StormData.csv.bz2"
    raw_storm_frame.to_csv(path, index=False)
    return path


@pytest.fixture
def enriched_frame() -> pd.DataFrame:
    """Already-enriched rows for aggregation tests."""
    return pd.DataFrame({
        "weather_category": ["heat", "heat", "heat", "wind", "wind", "hail"],
        "in_scope": [True, True, True, True, False, True],
        "fatalities": [0, 0, 0, 1, 50, 0],
        "injuries": [1, 2, 3, 4, 50, 0],
        "prop_damage_usd": [0.0, 100.0, 0.0, 1_000.0, 1e9, 5e6],
        "crop_damage_usd": [10.0, 0.0, 0.0, 0.0, 0.0, 2e6],
    })
