"""
Weather Category Classification
===============================

``EVTYPE`` is free text with hundreds of spellings ("TSTM WIND",
"THUNDERSTORM WINDS/HAIL", "FLASH FLOOD/FLOOD", ...).  Each label is mapped
to one of a small, fixed set of weather categories by testing the rules
below in order against the lower-cased text.  The first rule that matches
wins, so "flash flood and wind" is ``rain`` because the rain rule is tested
before the wind rule.
"""

from __future__ import annotations

import re

import numpy as np
import pandas as pd

UNCATEGORIZED = "uncategorized"

# (pattern, category) in priority order
CATEGORY_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"lightning"), "lightning"),
    (re.compile(r"hail"), "hail"),
    (re.compile(r"rain|flood|wet|fld"), "rain"),
    (re.compile(r"snow|winter|wintry|blizzard|sleet|cold|ice|freeze|avalanche|icy"), "winter"),
    (re.compile(r"thunder|tstm|tornado|wind|hurricane|funnel|tropical\s*storm"), "wind"),
    (re.compile(r"fire"), "fire"),
    (re.compile(r"fog|visibility|dark|dust"), "low-visibility"),
    (re.compile(r"surf|surge|tide|tsunami|current"), "ocean-surge"),
    (re.compile(r"heat|high\s*temp|record\s*temp|warm|dry"), "heat"),
    (re.compile(r"volcan"), "volcanic"),
]

WEATHER_CATEGORIES: list[str] = [name for _, name in CATEGORY_RULES] + [UNCATEGORIZED]


def classify_event_type(text) -> str:
    """Return the weather category for a single event-type label."""
    if not isinstance(text, str):
        return UNCATEGORIZED
    lowered = text.lower()
    for pattern, category in CATEGORY_RULES:
        if pattern.search(lowered):
            return category
    return UNCATEGORIZED


def classify_event_types(texts: pd.Series) -> pd.Series:
    """Vectorised :func:`classify_event_type`.

    ``np.select`` picks the first true condition per row, which gives the
    same first-match-wins result as the scalar loop.
    """
    lowered = texts.fillna("").astype(str).str.lower()
    conditions = [lowered.str.contains(pattern, regex=True) for pattern, _ in CATEGORY_RULES]
    choices = [category for _, category in CATEGORY_RULES]
    categories = np.select(conditions, choices, default=UNCATEGORIZED)
    return pd.Series(categories, index=texts.index, name="weather_category")
