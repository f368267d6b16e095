"""
Healthspan Survey — Score Table
Fixed point values per questionnaire answer. Configuration data, not a model.
"""

from types import MappingProxyType
from typing import Mapping, Optional


# ══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ══════════════════════════════════════════════════════════════════════════════

SCORING: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "smoking": MappingProxyType({
        "never":  20,
        "rare":   10,
        "often": -10,
        "past":    5,
    }),
    "alcohol": MappingProxyType({
        "none":    15,
        "week1":    5,
        "week2_3": -5,
        "daily":  -15,
    }),
    "exercise": MappingProxyType({
        "none":   -10,
        "week1_2":  5,
        "week3_5": 15,
        "daily":   20,
    }),
    "sleep": MappingProxyType({
        "<5":   -10,
        "5_6":    0,
        "7_8":   15,
        "9plus":  5,
    }),
    "meds": MappingProxyType({
        "yes": -5,
        "no":   5,
    }),
    "stress": MappingProxyType({
        "low":  10,
        "mid":   0,
        "high": -10,
    }),
})

# Chronic conditions are banded by count: 0 / exactly 1 / 2 or more
CHRONIC_BANDS: Mapping[str, int] = MappingProxyType({
    "none":  20,
    "one":    5,
    "multi": -10,
})

# Categories summed by direct lookup, in scoring order
LOOKUP_CATEGORIES = ("smoking", "alcohol", "exercise", "sleep", "meds", "stress")


# ══════════════════════════════════════════════════════════════════════════════
# LOOKUP
# ══════════════════════════════════════════════════════════════════════════════

class ScoreTable:

    def __init__(self, scoring: Mapping[str, Mapping[str, int]] = SCORING,
                 chronic_bands: Mapping[str, int] = CHRONIC_BANDS):
        self._scoring = scoring
        self._chronic = chronic_bands

    def lookup(self, category: str, value: Optional[str]) -> int:
        """Point delta for an answer. Unknown categories or values score 0."""
        return self._scoring.get(category, {}).get(value, 0)

    def chronic_band(self, count: Optional[int]) -> str:
        count = count or 0
        if count == 0:
            return "none"
        if count == 1:
            return "one"
        return "multi"

    def chronic_points(self, count: Optional[int]) -> int:
        return self._chronic[self.chronic_band(count)]

    def categories(self) -> dict[str, list[str]]:
        """Recognized answer values per category, in table order."""
        return {category: list(values) for category, values in self._scoring.items()}

    def as_dict(self) -> dict[str, dict[str, int]]:
        table = {category: dict(values) for category, values in self._scoring.items()}
        table["chronic"] = dict(self._chronic)
        return table


# Module-level singleton
score_table = ScoreTable()
