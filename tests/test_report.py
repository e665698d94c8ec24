import pandas as pd
from pathlib import Path

from analyze.aggregate_by_category import aggregate_by_category
from report.build_report import (
    economic_figure,
    health_figure,
    narrative_lines,
    render_markdown,
)


def test_narrative_names_leading_categories(enriched_frame):
    lines = narrative_lines(aggregate_by_category(enriched_frame))

    assert len(lines) == 3
    assert lines[0].startswith("'heat' events caused the most casualties")
    assert "'wind' events were the most dangerous per incident" in lines[1]
    assert "500.0 casualties per 100 events" in lines[1]
    assert lines[2].startswith("'hail' events were the most costly")


def test_narrative_for_empty_aggregate(enriched_frame):
    empty = aggregate_by_category(enriched_frame.assign(in_scope=False))
    assert narrative_lines(empty) == ["No in-scope storm events were found."]


def test_health_figure_has_totals_and_rates(enriched_frame):
    fig = health_figure(aggregate_by_category(enriched_frame))

    assert [t.name for t in fig.data] == ["Fatalities", "Injuries", "Casualties / 100 events"]
    assert list(fig.data[0].x) == ["heat", "wind", "hail"]


def test_economic_figure_is_stacked(enriched_frame):
    fig = economic_figure(aggregate_by_category(enriched_frame))

    assert fig.layout.barmode == "stack"
    assert [t.name for t in fig.data] == ["Property", "Crop"]
    assert list(fig.data[0].x) == ["hail", "wind", "heat"]


def test_markdown_report_sections(enriched_frame):
    agg = aggregate_by_category(enriched_frame)

    text = render_markdown(agg, Path("health_impact.html"), Path("economic_impact.html"))

    assert "## Findings" in text
    assert "## Population health" in text
    assert "## Economic consequences" in text
    assert "(../figures/health_impact.html)" in text
    assert "| hail |" in text


def test_markdown_counts_render_as_integers(enriched_frame):
    agg = aggregate_by_category(enriched_frame)

    text = render_markdown(agg, Path("health_impact.html"), Path("economic_impact.html"))

    assert "| heat | 3 | 0 | 6 | 200.00 |" in text
    assert "| hail | 1 | 5,000,000.00 | 2,000,000.00 | 7,000,000.00 |" in text
