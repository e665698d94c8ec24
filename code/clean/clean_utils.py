"""
Shared Cleaning Utilities
=========================

Reusable helpers for the storm data cleaning step.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from logging_config import setup_logger

logger = setup_logger("clean.utils")


# ---------------------------------------------------------------------------
# check_missing_values
# ---------------------------------------------------------------------------

def check_missing_values(df: pd.DataFrame) -> dict:
    """Return a dict {col_name: {count, pct}} for columns with any nulls."""
    missing: dict = {}
    for col in df.columns:
        n_null = int(df[col].isna().sum())
        if n_null > 0:
            missing[col] = {
                "count": n_null,
                "pct": round(n_null / len(df) * 100, 2) if len(df) > 0 else 0.0,
            }
    return missing


# ---------------------------------------------------------------------------
# standardize_column_names
# ---------------------------------------------------------------------------

def standardize_column_names(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase, strip whitespace, replace spaces with underscores."""
    df = df.copy()
    df.columns = [
        str(c).strip().lower().replace(" ", "_") for c in df.columns
    ]
    return df


# ---------------------------------------------------------------------------
# require_columns
# ---------------------------------------------------------------------------

def require_columns(df: pd.DataFrame, columns: list[str], dataset_name: str) -> None:
    """Raise KeyError listing any of *columns* absent from *df*."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(
            f"{dataset_name} is missing required columns {missing}. "
            f"Available={list(df.columns)}"
        )


# ---------------------------------------------------------------------------
# coerce_numeric / strip_text
# ---------------------------------------------------------------------------

def coerce_numeric(df: pd.DataFrame, columns: list[str], fill: float = 0) -> pd.DataFrame:
    """Convert *columns* to numbers; unparseable or missing values become *fill*."""
    df = df.copy()
    for col in columns:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(fill)
    return df


def strip_text(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Replace missing text with '' and strip surrounding whitespace."""
    df = df.copy()
    for col in columns:
        df[col] = df[col].fillna("").astype(str).str.strip()
    return df


# ---------------------------------------------------------------------------
# generate_cleaning_report
# ---------------------------------------------------------------------------

def generate_cleaning_report(
    df: pd.DataFrame,
    dataset_name: str,
    extra: dict | None = None,
) -> dict:
    """Return a summary dict describing the cleaned frame.

    No rows are removed during cleaning, so only the final row count is reported.
    """
    report = {
        "dataset_name": dataset_name,
        "total_rows": len(df),
        "columns_cleaned": list(df.columns),
        "null_summary": check_missing_values(df),
    }
    if extra:
        report.update(extra)
    return report
