"""
Healthspan Survey — API Routes
All endpoint implementations.
"""

from fastapi import APIRouter, HTTPException, Query
from typing import Optional
import logging

from schemas import (
    SurveySubmissionSchema, SurveyResultSchema, SurveyOptionsSchema,
    LifespanSchema, ImprovementSchema, StatusSchema, DisplaySchema,
    ChronicCondition, Sex,
)
from messages import message, resolve_locale
from presentation import build_record, render
from result_assembler import assemble
from score_table import score_table

log = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
# SURVEY ROUTER
# ══════════════════════════════════════════════════════════════════════════════

survey_router = APIRouter()


@survey_router.get("/options", response_model=SurveyOptionsSchema)
async def get_options():
    """Recognized answer values per category, for form rendering."""
    return SurveyOptionsSchema(
        categories={"sex": [s.value for s in Sex], **score_table.categories()},
        chronic_conditions=[c.value for c in ChronicCondition],
        score_table=score_table.as_dict(),
    )


@survey_router.post("/evaluate", response_model=SurveyResultSchema)
async def evaluate(
    data: SurveySubmissionSchema,
    locale: Optional[str] = Query(None, description="ko or en; defaults to the configured locale"),
):
    """
    Score a questionnaire submission.
    Returns the lifespan estimate, improvement points, status and display copy.
    """
    try:
        record = build_record(data.model_dump())
    except ValueError as e:
        log.warning(f"Rejected survey submission: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    lang = resolve_locale(locale)
    result = assemble(record, lang)
    shown = render(result, lang)

    log.info(
        f"Survey evaluated: score={result.lifespan.score} "
        f"status={result.status.type} predicted={result.lifespan.predicted_health_span}"
    )

    return SurveyResultSchema(
        lifespan=LifespanSchema(
            predicted_health_span=result.lifespan.predicted_health_span,
            years_remaining=result.lifespan.years_remaining,
            score=result.lifespan.score,
            base_life=result.lifespan.base_life,
        ),
        improvements=[
            ImprovementSchema(text=s.text, points=s.points, current=s.current, category=s.category)
            for s in result.improvements
        ],
        status=StatusSchema(
            type=result.status.type,
            label=result.status.label,
            summary=result.status.summary,
        ),
        improvement_total=result.improvement_total,
        additional_years=result.additional_years,
        risk_points=result.risk_points,
        display=DisplaySchema(
            predicted_age=shown.predicted_age,
            years_remaining=shown.years_remaining,
            status_headline=shown.status_headline,
            status_summary=shown.status_summary,
            score=shown.score,
            risk=shown.risk,
            improvement_score=shown.improvement_score,
            improvement_items=shown.improvement_items,
            empty_message=shown.empty_message,
            improvement_summary=shown.improvement_summary,
        ),
        locale=lang,
        disclaimer=message("disclaimer", lang),
    )
