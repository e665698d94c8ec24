"""
Region scope filter.

The study covers the 50 states plus the District of Columbia.  Hawaii and
Alaska are regular members of the state list.  Territories (PR, GU, VI, AS,
MP), marine zone codes and blanks are out of scope.
"""

from __future__ import annotations

import pandas as pd

US_STATE_CODES = frozenset({
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
})

IN_SCOPE_CODES = US_STATE_CODES | {"DC"}


def is_in_scope(state_code) -> bool:
    """True if *state_code* is a US state or DC."""
    if not isinstance(state_code, str):
        return False
    return state_code.strip().upper() in IN_SCOPE_CODES


def flag_in_scope(state_codes: pd.Series) -> pd.Series:
    """Vectorised :func:`is_in_scope`."""
    cleaned = state_codes.fillna("").astype(str).str.strip().str.upper()
    return cleaned.isin(IN_SCOPE_CODES).rename("in_scope")
