"""
Healthspan Survey — Presentation Helpers
Form-side glue around the scoring core: raw form parsing, chronic-condition
checkbox handling, the input/result panel state machine and display strings.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Union

from answer_record import AnswerRecord
from messages import message
from result_assembler import AssembledResult

log = logging.getLogger(__name__)

CHRONIC_NONE = "none"

# Leading integer, as a browser parseInt reads it: "30세" and "30.5" give 30
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ══════════════════════════════════════════════════════════════════════════════
# FORM PARSING
# ══════════════════════════════════════════════════════════════════════════════

def count_chronic(selected: Iterable[str]) -> int:
    """Number of checked conditions, ignoring the "none" sentinel."""
    return sum(1 for value in selected if value != CHRONIC_NONE)


def toggle_chronic(selected: Iterable[str], changed: str, checked: bool) -> list[str]:
    """
    Apply one checkbox change and return the new selection.

    Checking "none" clears every condition; checking a condition clears "none".
    """
    current = list(dict.fromkeys(selected))

    if not checked:
        return [value for value in current if value != changed]

    if changed == CHRONIC_NONE:
        return [CHRONIC_NONE]

    current = [value for value in current if value != CHRONIC_NONE]
    if changed not in current:
        current.append(changed)
    return current


def parse_age(raw: Union[str, int, None]) -> int:
    if isinstance(raw, bool):
        raise ValueError("Age must be a whole number.")
    if isinstance(raw, int):
        return raw
    match = LEADING_INT.match(raw) if isinstance(raw, str) else None
    if not match:
        raise ValueError(f"Age must start with a whole number, got '{raw}'.")
    return int(match.group(1))


def build_record(form: Mapping) -> AnswerRecord:
    """
    Build an AnswerRecord from raw form fields.
    `chronic` holds the list of checked condition values.
    """
    return AnswerRecord(
        age=parse_age(form.get("age")),
        sex=form.get("sex") or "",
        smoking=form.get("smoking") or "",
        alcohol=form.get("alcohol") or "",
        exercise=form.get("exercise") or "",
        sleep=form.get("sleep") or "",
        chronic_count=count_chronic(form.get("chronic") or []),
        meds=form.get("meds") or "",
        stress=form.get("stress") or "",
    )


# ══════════════════════════════════════════════════════════════════════════════
# PANEL STATE MACHINE
# ══════════════════════════════════════════════════════════════════════════════

class Panel(str, Enum):
    input = "input"
    result = "result"


class InvalidTransition(RuntimeError):
    pass


class SurveyPanels:
    """Input panel is visible until a submit; reset returns to it."""

    def __init__(self):
        self.visible = Panel.input

    def submit(self) -> Panel:
        if self.visible is not Panel.input:
            raise InvalidTransition("Survey already submitted; reset first.")
        self.visible = Panel.result
        return self.visible

    def reset(self) -> Panel:
        if self.visible is not Panel.result:
            raise InvalidTransition("Nothing to reset; the input panel is already shown.")
        self.visible = Panel.input
        return self.visible


# ══════════════════════════════════════════════════════════════════════════════
# RENDERING
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RenderedResult:
    predicted_age: str
    years_remaining: str
    status_headline: str
    status_summary: str
    score: str
    risk: str
    improvement_score: str
    improvement_items: list[tuple[str, str]]    # (suggestion text, "+N points")
    empty_message: Optional[str]                # shown when there are no suggestions
    improvement_summary: str


def signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def render(result: AssembledResult, locale: Optional[str] = None) -> RenderedResult:
    lifespan = result.lifespan

    items = [
        (s.text, message("render.improvement_item", locale, points=s.points))
        for s in result.improvements
    ]

    if result.additional_years:
        low, high = result.additional_years
        summary = message("render.improvement_summary", locale, low=low, high=high)
    else:
        summary = message("render.maintain", locale)

    return RenderedResult(
        predicted_age=str(lifespan.predicted_health_span),
        years_remaining=message("render.years_remaining", locale, years=lifespan.years_remaining),
        status_headline=message("render.status_headline", locale, label=result.status.label),
        status_summary=result.status.summary,
        score=signed(lifespan.score),
        risk=f"-{result.risk_points}" if result.risk_points > 0 else "0",
        improvement_score=f"+{result.improvement_total}",
        improvement_items=items,
        empty_message=None if items else message("render.no_improvements", locale),
        improvement_summary=summary,
    )
