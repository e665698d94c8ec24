"""
Clean NOAA Storm Data
=====================

Loads the raw Storm Data archive (downloading it first if absent), keeps the
columns the analysis needs and attaches the derived fields:

    prop_damage_usd / crop_damage_usd   magnitude x exponent multiplier
    begin_date                          parsed BGN_DATE (NaT when invalid)
    weather_category                    EVTYPE mapped to a fixed taxonomy
    in_scope                            state is one of the 50 states or DC

The enriched frame is pickled to data/processed/ and reused on later runs
without any staleness check.  Delete the cache or pass --refresh to rebuild.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from config_paths import REPORTS_DIR, STORM_CACHE_FILE, STORM_DATA_FILE
from logging_config import setup_logger
from clean.clean_utils import (
    coerce_numeric,
    generate_cleaning_report,
    require_columns,
    standardize_column_names,
    strip_text,
)
from clean.categorize import UNCATEGORIZED, classify_event_types
from clean.damage import normalize_damage_columns, unrecognized_exponent_codes
from clean.dates import parse_begin_dates
from clean.regions import flag_in_scope
from fetch.fetch_noaa_storm_events import main as fetch_storm_data

logger = setup_logger("clean.storm_data")

RAW_COLUMNS = [
    "EVTYPE", "PROPDMG", "PROPDMGEXP", "CROPDMG", "CROPDMGEXP",
    "BGN_DATE", "STATE", "FATALITIES", "INJURIES",
]
NUMERIC_COLUMNS = ["propdmg", "cropdmg", "fatalities", "injuries"]
TEXT_COLUMNS = ["evtype", "propdmgexp", "cropdmgexp", "bgn_date", "state"]
ENRICHED_COLUMNS = [
    "prop_damage_usd", "crop_damage_usd", "begin_date", "weather_category", "in_scope",
]

CLEANING_REPORT_FILE = REPORTS_DIR / "cleaning_report.json"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def read_raw_storm_data(path: Path) -> pd.DataFrame:
    """Read only the needed columns from the (bz2) CSV; compression is inferred."""
    wanted = set(RAW_COLUMNS)
    return pd.read_csv(
        path,
        usecols=lambda c: str(c).strip().upper() in wanted,
        dtype=str,
        low_memory=False,
    )


def prepare_raw_storm_data(df: pd.DataFrame) -> pd.DataFrame:
    """Standardise names and types of the raw columns."""
    df = standardize_column_names(df)
    require_columns(df, [c.lower() for c in RAW_COLUMNS], "Storm Data")
    df = df[[c.lower() for c in RAW_COLUMNS]]
    df = coerce_numeric(df, NUMERIC_COLUMNS)
    df = df.astype({"fatalities": "int64", "injuries": "int64"})
    df = strip_text(df, TEXT_COLUMNS)
    return df.reset_index(drop=True)


def enrich_storm_data(df: pd.DataFrame) -> pd.DataFrame:
    """Return a new frame with the derived columns attached."""
    return df.assign(
        prop_damage_usd=normalize_damage_columns(df["propdmg"], df["propdmgexp"]),
        crop_damage_usd=normalize_damage_columns(df["cropdmg"], df["cropdmgexp"]),
        begin_date=parse_begin_dates(df["bgn_date"]),
        weather_category=classify_event_types(df["evtype"]),
        in_scope=flag_in_scope(df["state"]),
    )


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

def read_cache(cache_path: Path) -> pd.DataFrame | None:
    """Return the cached enriched frame, or None if absent or unusable."""
    if not cache_path.exists():
        return None
    try:
        df = pd.read_pickle(cache_path)
    except Exception as exc:
        logger.warning("Cache %s unreadable (%s); re-parsing raw data", cache_path.name, exc)
        return None
    if not isinstance(df, pd.DataFrame) or any(c not in df.columns for c in ENRICHED_COLUMNS):
        logger.warning("Cache %s is not an enriched storm frame; re-parsing raw data",
                       cache_path.name)
        return None
    logger.info("Loaded cached storm data: %s (%d rows)", cache_path.name, len(df))
    return df


def write_cache(df: pd.DataFrame, cache_path: Path) -> None:
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_pickle(cache_path)
    logger.info("Saved → %s  (%d rows, %d cols)", cache_path.name, len(df), len(df.columns))


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load_storm_data(
    raw_path: Path | None = None,
    cache_path: Path | None = None,
    refresh: bool = False,
) -> pd.DataFrame:
    """
    Return the enriched storm events frame.

    Uses the cache unless *refresh* is set.  Otherwise downloads the raw
    archive if it is missing, parses and enriches it, and rewrites the cache.
    Raises RuntimeError when the download fails.
    """
    raw_path = raw_path or STORM_DATA_FILE
    cache_path = cache_path or STORM_CACHE_FILE

    if not refresh:
        cached = read_cache(cache_path)
        if cached is not None:
            return cached

    if not raw_path.exists():
        logger.info("Raw storm data not found at %s; downloading", raw_path)
        if fetch_storm_data(dest_path=raw_path) is None:
            raise RuntimeError(f"Could not download storm data to {raw_path}")

    logger.info("Reading %s", raw_path.name)
    df = prepare_raw_storm_data(read_raw_storm_data(raw_path))
    logger.info("Parsed %d records from %s", len(df), raw_path.name)

    df = enrich_storm_data(df)
    write_cache(df, cache_path)
    return df


# ---------------------------------------------------------------------------
# Cleaning report
# ---------------------------------------------------------------------------

def build_cleaning_report(df: pd.DataFrame, top_n: int = 15) -> dict:
    """Summarise defaults and exclusions applied while enriching *df*."""
    uncategorized = df[df["weather_category"] == UNCATEGORIZED]
    years = df["begin_date"].dropna().dt.year

    extra = {
        "in_scope_rows": int(df["in_scope"].sum()),
        "invalid_begin_dates": int(df["begin_date"].isna().sum()),
        "out_of_scope_rows": int((~df["in_scope"]).sum()),
        "out_of_scope_states": {
            str(k): int(v)
            for k, v in df.loc[~df["in_scope"], "state"].value_counts().head(top_n).items()
        },
        "unrecognized_prop_exponent_codes": unrecognized_exponent_codes(df["propdmgexp"]),
        "unrecognized_crop_exponent_codes": unrecognized_exponent_codes(df["cropdmgexp"]),
        "uncategorized_rows": len(uncategorized),
        "top_uncategorized_event_types": {
            str(k): int(v)
            for k, v in uncategorized["evtype"].str.upper().value_counts().head(top_n).items()
        },
        "category_counts": {
            str(k): int(v) for k, v in df["weather_category"].value_counts().items()
        },
        "year_span": [int(years.min()), int(years.max())] if not years.empty else None,
    }
    return generate_cleaning_report(df, "NOAA Storm Data", extra=extra)


def main(refresh: bool = False) -> None:
    logger.info("=" * 60)
    logger.info("CLEAN STORM DATA")
    logger.info("=" * 60)

    df = load_storm_data(refresh=refresh)

    report = build_cleaning_report(df)
    CLEANING_REPORT_FILE.write_text(json.dumps(report, indent=2), encoding="utf-8")
    logger.info("Saved → %s", CLEANING_REPORT_FILE.name)
    logger.info("  %d in-scope of %d records; %d uncategorized; %d invalid dates",
                report["in_scope_rows"], report["total_rows"],
                report["uncategorized_rows"], report["invalid_begin_dates"])

    logger.info("Storm data cleaning complete.")


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Load, clean and categorize NOAA storm data")
    ap.add_argument("--refresh", action="store_true",
                    help="Ignore the cached snapshot and re-parse the raw archive")
    args = ap.parse_args()
    main(refresh=args.refresh)
