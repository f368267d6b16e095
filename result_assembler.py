"""
Healthspan Survey — Result Assembler
Runs the lifespan, improvement and status calculators over one answer record
and composes a single result for presentation.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from answer_record import AnswerRecord
from improvement_engine import ImprovementAdvisor, ImprovementSuggestion, improvement_advisor
from lifespan_engine import (
    LifespanEstimator, LifespanResult, POINTS_PER_YEAR, lifespan_estimator, round_half_up,
)
from status_classifier import StatusClassifier, StatusInfo, status_classifier

log = logging.getLogger(__name__)

# Upper end of the "additional years" range sits this far above the lower end
ADDITIONAL_YEARS_SPREAD = 2


# ══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURE
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AssembledResult:
    lifespan: LifespanResult
    improvements: tuple[ImprovementSuggestion, ...]
    status: StatusInfo
    improvement_total: int
    additional_years: Optional[tuple[int, int]]     # None when nothing to improve
    risk_points: int                                # |min(0, score)|


# ══════════════════════════════════════════════════════════════════════════════
# ASSEMBLER
# ══════════════════════════════════════════════════════════════════════════════

class ResultAssembler:

    def __init__(
        self,
        estimator: LifespanEstimator = lifespan_estimator,
        advisor: ImprovementAdvisor = improvement_advisor,
        classifier: StatusClassifier = status_classifier,
    ):
        self._estimator = estimator
        self._advisor = advisor
        self._classifier = classifier

    def assemble(self, record: AnswerRecord, locale: Optional[str] = None) -> AssembledResult:
        lifespan = self._estimator.estimate(record)
        improvements = tuple(self._advisor.suggest(record, locale))
        status = self._classifier.classify(lifespan.score, locale)

        total = sum(s.points for s in improvements)
        additional_years = None
        if total > 0:
            low = round_half_up(total / POINTS_PER_YEAR)
            additional_years = (low, low + ADDITIONAL_YEARS_SPREAD)

        log.debug(
            f"Assembled result: score={lifespan.score} status={status.type} "
            f"improvement_total={total}"
        )

        return AssembledResult(
            lifespan=lifespan,
            improvements=improvements,
            status=status,
            improvement_total=total,
            additional_years=additional_years,
            risk_points=abs(min(0, lifespan.score)),
        )


# Module-level singleton
result_assembler = ResultAssembler()


def assemble(record: AnswerRecord, locale: Optional[str] = None) -> AssembledResult:
    """Single entry point for the presentation layer."""
    return result_assembler.assemble(record, locale)
