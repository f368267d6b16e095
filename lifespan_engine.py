"""
Healthspan Survey — Lifespan Estimator
Questionnaire score → predicted healthy lifespan and remaining healthy years.
Entertainment estimate only. Not an actuarial or medical model.
"""

import logging
import math
from dataclasses import dataclass

from answer_record import AnswerRecord
from score_table import ScoreTable, LOOKUP_CATEGORIES, score_table

log = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ══════════════════════════════════════════════════════════════════════════════

# Baseline life expectancy by sex; anything else uses the average
BASE_LIFE = {
    "male":   76,
    "female": 82,
}
DEFAULT_BASE_LIFE = 79

POINTS_PER_YEAR = 5
MAX_YEARS_LOST = 10


def round_half_up(x: float) -> int:
    """Nearest integer, ties toward +inf (builtin round() ties to even)."""
    return int(math.floor(x + 0.5))


# ══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURES
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LifespanResult:
    predicted_health_span: int      # years, never below base_life - 10
    years_remaining: int            # >= 0
    score: int                      # signed questionnaire score
    base_life: int                  # 76 / 79 / 82


# ══════════════════════════════════════════════════════════════════════════════
# ESTIMATOR
# ══════════════════════════════════════════════════════════════════════════════

class LifespanEstimator:

    def __init__(self, table: ScoreTable = score_table):
        self._table = table

    def base_life(self, sex: str) -> int:
        return BASE_LIFE.get(sex, DEFAULT_BASE_LIFE)

    def score(self, record: AnswerRecord) -> int:
        """
        Sum of per-category points plus the chronic-condition band.
        Unrecognized answers contribute 0.
        """
        total = sum(
            self._table.lookup(category, getattr(record, category))
            for category in LOOKUP_CATEGORIES
        )
        return total + self._table.chronic_points(record.chronic_count)

    def estimate(self, record: AnswerRecord) -> LifespanResult:
        base = self.base_life(record.sex)
        score = self.score(record)

        predicted = max(
            base - MAX_YEARS_LOST,
            base + round_half_up(score / POINTS_PER_YEAR),
        )
        remaining = max(0, predicted - record.age)

        log.debug(f"Lifespan estimate: score={score} base={base} predicted={predicted}")

        return LifespanResult(
            predicted_health_span=predicted,
            years_remaining=remaining,
            score=score,
            base_life=base,
        )


# Module-level singleton
lifespan_estimator = LifespanEstimator()
