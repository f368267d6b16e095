"""
Healthspan Survey — Improvement Advisor
Rule-based lifestyle change suggestions, each with the point gain it would bring.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from answer_record import AnswerRecord
from messages import message
from score_table import ScoreTable, score_table

log = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
# DATA STRUCTURES
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ImprovementSuggestion:
    text: str
    points: int         # gain if the change is made
    current: int        # points the current answer scores
    category: str


# ══════════════════════════════════════════════════════════════════════════════
# ADVISOR
# ══════════════════════════════════════════════════════════════════════════════

class ImprovementAdvisor:
    """
    At most one suggestion per category, emitted in priority order:
        exercise, sleep, alcohol, stress
    """

    def __init__(self, table: ScoreTable = score_table):
        self._table = table

    def suggest(self, record: AnswerRecord, locale: Optional[str] = None) -> list[ImprovementSuggestion]:
        suggestions = []

        def add(category: str, key: str, points: int, value: str) -> None:
            suggestions.append(ImprovementSuggestion(
                text=message(key, locale),
                points=points,
                current=self._table.lookup(category, value),
                category=category,
            ))

        if record.exercise == "none":
            add("exercise", "exercise.start", 25, "none")
        elif record.exercise == "week1_2":
            add("exercise", "exercise.more", 10, "week1_2")

        if record.sleep in ("<5", "5_6"):
            add("sleep", "sleep.adjust", 15, record.sleep)

        if record.alcohol in ("daily", "week2_3"):
            add("alcohol", "alcohol.reduce", 10, record.alcohol)
        elif record.alcohol == "week1":
            add("alcohol", "alcohol.quit", 10, "week1")

        if record.stress == "high":
            add("stress", "stress.manage", 10, "high")
        elif record.stress == "mid":
            add("stress", "stress.reduce", 10, "mid")

        log.debug(f"{len(suggestions)} improvement suggestion(s)")
        return suggestions


# Module-level singleton
improvement_advisor = ImprovementAdvisor()
