"""
Damage Normalization
====================

Storm Data records property and crop damage as a magnitude plus a
single-character exponent code (``PROPDMG`` / ``PROPDMGEXP``).  This module
turns each pair into a plain US dollar figure.

Recognised codes (case-insensitive): H = hundreds, K = thousands,
M = millions, B = billions.  Anything else, including blanks, digits and
stray symbols such as ``?``, ``-`` or ``+``, leaves the magnitude unscaled.
"""

from __future__ import annotations

import pandas as pd

EXPONENT_MULTIPLIERS = {
    "H": 100,
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}


def damage_multiplier(code) -> int:
    """Return the multiplier for an exponent code (1 when unrecognised)."""
    if not isinstance(code, str):
        return 1
    return EXPONENT_MULTIPLIERS.get(code.strip().upper(), 1)


def normalize_damage(magnitude: float, code) -> float:
    """Convert a (magnitude, exponent code) pair to US dollars."""
    return magnitude * damage_multiplier(code)


def normalize_damage_columns(magnitudes: pd.Series, codes: pd.Series) -> pd.Series:
    """Vectorised :func:`normalize_damage` over two aligned columns.

    Missing or non-numeric magnitudes count as 0.
    """
    values = pd.to_numeric(magnitudes, errors="coerce").fillna(0).astype(float)
    multipliers = (
        codes.fillna("").astype(str).str.strip().str.upper()
        .map(EXPONENT_MULTIPLIERS)
        .fillna(1)
    )
    return values * multipliers


def unrecognized_exponent_codes(codes: pd.Series) -> dict[str, int]:
    """Count the non-blank codes that fall back to the unit multiplier."""
    cleaned = codes.fillna("").astype(str).str.strip()
    mask = (cleaned != "") & ~cleaned.str.upper().isin(EXPONENT_MULTIPLIERS.keys())
    return {str(k): int(v) for k, v in cleaned[mask].value_counts().items()}
