"""
Healthspan Survey — Status Classifier
Three-way lifestyle status from the questionnaire score.
"""

from dataclasses import dataclass
from typing import Optional

from messages import message


BALANCED = "balanced"
NEEDS_RECOVERY = "needs-recovery"
HIGH_RISK = "high-risk"

BALANCED_MIN_SCORE = 30
RECOVERY_MIN_SCORE = 0


@dataclass(frozen=True)
class StatusInfo:
    type: str       # balanced / needs-recovery / high-risk
    label: str      # localized type name
    summary: str


def _status_type(score: int) -> str:
    if score >= BALANCED_MIN_SCORE: return BALANCED
    if score >= RECOVERY_MIN_SCORE: return NEEDS_RECOVERY
    return HIGH_RISK


class StatusClassifier:

    def classify(self, score: int, locale: Optional[str] = None) -> StatusInfo:
        kind = _status_type(score)
        return StatusInfo(
            type=kind,
            label=message(f"status.{kind}.label", locale),
            summary=message(f"status.{kind}.summary", locale),
        )


# Module-level singleton
status_classifier = StatusClassifier()
