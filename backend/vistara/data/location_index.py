"""City multipliers for location-based cost adjustment.

Multipliers are relative to a nominal national rate of 1.00. Cities not
listed fall back to ``DEFAULT_LOCATION_MULTIPLIER``, which sits below
1.00 because unlisted towns are typically cheaper than the metros.
"""

from __future__ import annotations

# Maps city_lower -> multiplier.
CITY_LOCATION_MULTIPLIERS: dict[str, float] = {
    # Tier 1
    "mumbai": 1.30,
    "delhi": 1.25,
    "bengaluru": 1.22,
    "gurugram": 1.20,
    "hyderabad": 1.18,
    "chennai": 1.18,
    "pune": 1.15,
    "kolkata": 1.15,
    "noida": 1.15,
    # Tier 2
    "chandigarh": 1.10,
    "ahmedabad": 1.08,
    "kochi": 1.08,
    "surat": 1.06,
    "jaipur": 1.05,
    "coimbatore": 1.05,
    "visakhapatnam": 1.04,
    "indore": 1.03,
    "lucknow": 1.02,
    "nagpur": 1.02,
    "bhopal": 1.00,
    # Explicit fallback key used by some callers
    "default": 0.95,
}

# Alternate spellings -> canonical key in CITY_LOCATION_MULTIPLIERS.
CITY_ALIASES: dict[str, str] = {
    "bangalore": "bengaluru",
    "gurgaon": "gurugram",
    "new delhi": "delhi",
    "bombay": "mumbai",
    "madras": "chennai",
    "calcutta": "kolkata",
    "cochin": "kochi",
    "vizag": "visakhapatnam",
}

DEFAULT_LOCATION_MULTIPLIER: float = 0.95
