"""Regional construction cost multipliers by state.

Multipliers are relative to the Texas baseline (1.00). Codes not listed
here are treated as baseline.
"""

from __future__ import annotations

# Maps upper-case two-letter state code -> cost multiplier.
STATE_COST_MULTIPLIERS: dict[str, float] = {
    "CA": 1.35,
    "NY": 1.30,
    "HI": 1.25,
    "MA": 1.20,
    "CT": 1.18,
    "NJ": 1.15,
    "WA": 1.12,
    "MD": 1.10,
    "IL": 1.08,
    "FL": 1.05,
    "TX": 1.00,
    "NC": 0.95,
    "GA": 0.92,
    "TN": 0.90,
    "OH": 0.88,
    "MI": 0.87,
    "IN": 0.85,
    "KY": 0.83,
    "AL": 0.80,
    "MS": 0.78,
}

# Default multiplier when the state is missing or not in the table
DEFAULT_REGIONAL_MULTIPLIER: float = 1.00

US_STATE_CODES: tuple[str, ...] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)
