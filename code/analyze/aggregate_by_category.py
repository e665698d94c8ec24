"""
Aggregate Storm Impacts by Weather Category
===========================================

Reads:  the enriched storm frame (cache, or raw archive on first run)
Writes: results/tables/category_aggregates.csv
        results/tables/health_impact.csv
        results/tables/economic_impact.csv

Only in-scope records (50 states + DC) are aggregated.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.table import Table

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from config_paths import TABLES_DIR
from logging_config import setup_logger
from clean.clean_storm_data import load_storm_data

logger = setup_logger("analyze.aggregate")

AGGREGATES_CSV = TABLES_DIR / "category_aggregates.csv"
HEALTH_CSV = TABLES_DIR / "health_impact.csv"
ECONOMIC_CSV = TABLES_DIR / "economic_impact.csv"

HEALTH_COLUMNS = ["record_count", "total_fatalities", "total_injuries", "casualties_per_100_events"]
ECONOMIC_COLUMNS = ["record_count", "total_prop_damage_usd", "total_crop_damage_usd", "total_cost"]


def aggregate_by_category(df: pd.DataFrame) -> pd.DataFrame:
    """
    Group in-scope records by weather category.

    casualties_per_100_events is (fatalities + injuries) / record_count * 100.
    It is only a relative measure across categories, not a bounded percentage.
    Categories with no in-scope records do not appear.
    """
    scoped = df[df["in_scope"]]
    agg = scoped.groupby("weather_category").agg(
        record_count=("fatalities", "size"),
        total_fatalities=("fatalities", "sum"),
        total_injuries=("injuries", "sum"),
        total_prop_damage_usd=("prop_damage_usd", "sum"),
        total_crop_damage_usd=("crop_damage_usd", "sum"),
    )
    agg["total_cost"] = agg["total_prop_damage_usd"] + agg["total_crop_damage_usd"]
    agg["casualties_per_100_events"] = (
        (agg["total_fatalities"] + agg["total_injuries"]) / agg["record_count"] * 100
    )
    return agg


def health_summary(agg: pd.DataFrame) -> pd.DataFrame:
    """Casualty columns, most harmful category first."""
    casualties = agg["total_fatalities"] + agg["total_injuries"]
    order = casualties.sort_values(ascending=False, kind="stable").index
    return agg.loc[order, HEALTH_COLUMNS]


def economic_summary(agg: pd.DataFrame) -> pd.DataFrame:
    """Damage columns, most costly category first."""
    return agg[ECONOMIC_COLUMNS].sort_values("total_cost", ascending=False, kind="stable")


def _rich_table(df: pd.DataFrame, title: str) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("category", style="cyan", no_wrap=True)
    for col in df.columns:
        table.add_column(col, justify="right")
    int_cols = [pd.api.types.is_integer_dtype(df[c]) for c in df.columns]
    for category, *values in df.itertuples(index=True, name=None):
        table.add_row(str(category), *(
            f"{int(v):,}" if is_int else f"{v:,.2f}" for v, is_int in zip(values, int_cols)
        ))
    return table


def print_summaries(agg: pd.DataFrame, console: Console | None = None) -> None:
    console = console or Console()
    console.print(_rich_table(health_summary(agg), "Population health impact"))
    console.print(_rich_table(economic_summary(agg), "Economic impact (USD)"))


def main() -> None:
    logger.info("=" * 60)
    logger.info("AGGREGATE BY WEATHER CATEGORY")
    logger.info("=" * 60)

    df = load_storm_data()
    agg = aggregate_by_category(df)
    logger.info("Aggregated %d in-scope records into %d categories",
                int(agg["record_count"].sum()), len(agg))

    for frame, path in (
        (agg, AGGREGATES_CSV),
        (health_summary(agg), HEALTH_CSV),
        (economic_summary(agg), ECONOMIC_CSV),
    ):
        frame.to_csv(path, index_label="weather_category")
        logger.info("Saved → %s  (%d rows)", path.name, len(frame))

    print_summaries(agg)


if __name__ == "__main__":
    main()
