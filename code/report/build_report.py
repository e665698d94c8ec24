"""
Build the Storm Impact Report
=============================

Reads:  results/tables/category_aggregates.csv (recomputed if missing)
Writes: results/figures/health_impact.html
        results/figures/economic_impact.html
        results/reports/storm_report.md
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from config_paths import FIGURES_DIR, REPORTS_DIR
from logging_config import setup_logger
from analyze.aggregate_by_category import (
    AGGREGATES_CSV,
    aggregate_by_category,
    economic_summary,
    health_summary,
)
from clean.clean_storm_data import load_storm_data

logger = setup_logger("report.build")

HEALTH_HTML = FIGURES_DIR / "health_impact.html"
ECONOMIC_HTML = FIGURES_DIR / "economic_impact.html"
REPORT_MD = REPORTS_DIR / "storm_report.md"

_LAYOUT = dict(
    template="plotly_white",
    font=dict(family="Inter, sans-serif"),
    margin=dict(t=70, b=60, l=60, r=30),
)


# ---------------------------------------------------------------------------
# Figures
# ---------------------------------------------------------------------------

def health_figure(agg: pd.DataFrame) -> go.Figure:
    """Fatality/injury totals beside casualties per 100 events."""
    health = health_summary(agg)
    categories = list(health.index)

    fig = make_subplots(
        rows=1, cols=2,
        subplot_titles=("Total casualties", "Casualties per 100 events"),
    )
    fig.add_trace(go.Bar(x=categories, y=health["total_fatalities"], name="Fatalities"),
                  row=1, col=1)
    fig.add_trace(go.Bar(x=categories, y=health["total_injuries"], name="Injuries"),
                  row=1, col=1)
    fig.add_trace(go.Bar(x=categories, y=health["casualties_per_100_events"],
                         name="Casualties / 100 events", showlegend=False),
                  row=1, col=2)
    fig.update_layout(title="Population health impact by weather category",
                      barmode="group", **_LAYOUT)
    return fig


def economic_figure(agg: pd.DataFrame) -> go.Figure:
    """Stacked property and crop damage per category (billions USD)."""
    econ = economic_summary(agg)
    categories = list(econ.index)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=categories, y=econ["total_prop_damage_usd"] / 1e9, name="Property"))
    fig.add_trace(go.Bar(x=categories, y=econ["total_crop_damage_usd"] / 1e9, name="Crop"))
    fig.update_layout(title="Economic impact by weather category",
                      yaxis_title="Damage (billion USD)",
                      barmode="stack", **_LAYOUT)
    return fig


# ---------------------------------------------------------------------------
# Narrative
# ---------------------------------------------------------------------------

def narrative_lines(agg: pd.DataFrame) -> list[str]:
    """Short plain-text findings drawn from the aggregates."""
    if agg.empty:
        return ["No in-scope storm events were found."]

    casualties = agg["total_fatalities"] + agg["total_injuries"]
    most_harmful = casualties.idxmax()
    highest_rate = agg["casualties_per_100_events"].idxmax()
    most_costly = agg["total_cost"].idxmax()
    total_cost = agg["total_cost"].sum()
    share = agg.loc[most_costly, "total_cost"] / total_cost * 100 if total_cost else 0.0

    return [
        f"'{most_harmful}' events caused the most casualties: "
        f"{int(agg.loc[most_harmful, 'total_fatalities']):,} fatalities and "
        f"{int(agg.loc[most_harmful, 'total_injuries']):,} injuries "
        f"across {int(agg.loc[most_harmful, 'record_count']):,} events.",
        f"'{highest_rate}' events were the most dangerous per incident, with "
        f"{agg.loc[highest_rate, 'casualties_per_100_events']:.1f} casualties per 100 events.",
        f"'{most_costly}' events were the most costly at "
        f"${agg.loc[most_costly, 'total_cost'] / 1e9:,.1f} billion, "
        f"{share:.1f}% of all recorded property and crop damage.",
    ]


def _markdown_table(df: pd.DataFrame) -> str:
    header = ["weather_category"] + list(df.columns)
    lines = ["| " + " | ".join(header) + " |",
             "|" + "---|" * len(header)]
    # integer columns print without decimals
    int_cols = [pd.api.types.is_integer_dtype(df[c]) for c in df.columns]
    for category, *values in df.itertuples(index=True, name=None):
        cells = [f"{int(v):,}" if is_int else f"{v:,.2f}" for v, is_int in zip(values, int_cols)]
        lines.append("| " + " | ".join([str(category)] + cells) + " |")
    return "\n".join(lines)


def render_markdown(agg: pd.DataFrame, health_path: Path, economic_path: Path) -> str:
    parts = [
        "# Storm Events: Health and Economic Impact",
        "",
        "NOAA Storm Database, 1950 - 2011, 50 US states and DC.",
        "",
        "## Findings",
        "",
        *[f"- {line}" for line in narrative_lines(agg)],
        "",
        "## Population health",
        "",
        _markdown_table(health_summary(agg)),
        "",
        f"Figure: [{health_path.name}](../figures/{health_path.name})",
        "",
        "## Economic consequences",
        "",
        _markdown_table(economic_summary(agg)),
        "",
        f"Figure: [{economic_path.name}](../figures/{economic_path.name})",
        "",
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def load_aggregates() -> pd.DataFrame:
    if AGGREGATES_CSV.exists():
        logger.info("Reading %s", AGGREGATES_CSV.name)
        return pd.read_csv(AGGREGATES_CSV, index_col="weather_category")
    logger.info("%s not found; aggregating from storm data", AGGREGATES_CSV.name)
    return aggregate_by_category(load_storm_data())


def main() -> None:
    logger.info("=" * 60)
    logger.info("BUILD STORM IMPACT REPORT")
    logger.info("=" * 60)

    agg = load_aggregates()

    health_figure(agg).write_html(HEALTH_HTML, include_plotlyjs="cdn")
    logger.info("Saved → %s", HEALTH_HTML.name)
    economic_figure(agg).write_html(ECONOMIC_HTML, include_plotlyjs="cdn")
    logger.info("Saved → %s", ECONOMIC_HTML.name)

    REPORT_MD.write_text(render_markdown(agg, HEALTH_HTML, ECONOMIC_HTML), encoding="utf-8")
    logger.info("Saved → %s", REPORT_MD.name)

    for line in narrative_lines(agg):
        logger.info("  %s", line)


if __name__ == "__main__":
    main()
