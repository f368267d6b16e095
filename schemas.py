"""
Healthspan Survey — Pydantic Schemas
Request/response models for all API endpoints.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Tuple, Union
from enum import Enum


# ══════════════════════════════════════════════════════════════════════════════
# ANSWER VALUES
# Recognized values only. Submissions may carry anything else; those score 0.
# ══════════════════════════════════════════════════════════════════════════════

class Sex(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class Smoking(str, Enum):
    never = "never"
    rare = "rare"
    often = "often"
    past = "past"               # quit


class Alcohol(str, Enum):
    none = "none"
    week1 = "week1"             # about once a week
    week2_3 = "week2_3"
    daily = "daily"


class Exercise(str, Enum):
    none = "none"
    week1_2 = "week1_2"
    week3_5 = "week3_5"
    daily = "daily"


class Sleep(str, Enum):
    under_5 = "<5"
    h5_6 = "5_6"
    h7_8 = "7_8"
    over_9 = "9plus"


class Meds(str, Enum):
    yes = "yes"
    no = "no"


class Stress(str, Enum):
    low = "low"
    mid = "mid"
    high = "high"


class ChronicCondition(str, Enum):
    none = "none"               # exclusive with every other option
    hypertension = "hypertension"
    diabetes = "diabetes"
    hyperlipidemia = "hyperlipidemia"
    heart = "heart"
    other = "other"


# ══════════════════════════════════════════════════════════════════════════════
# SURVEY INPUT
# ══════════════════════════════════════════════════════════════════════════════

class SurveySubmissionSchema(BaseModel):
    """Raw questionnaire form, as submitted."""
    age: Union[int, str] = Field(..., description="Age in years; numeric strings accepted")
    # Unanswered questions arrive as null and score 0
    sex: Optional[str] = None
    smoking: Optional[str] = None
    alcohol: Optional[str] = None
    exercise: Optional[str] = None
    sleep: Optional[str] = None
    chronic: Optional[List[str]] = Field(None, description="Checked chronic condition values")
    meds: Optional[str] = None
    stress: Optional[str] = None

    @field_validator("chronic")
    @classmethod
    def dedupe_chronic(cls, v: Optional[List[str]]) -> List[str]:
        return list(dict.fromkeys(v or []))


# ══════════════════════════════════════════════════════════════════════════════
# SURVEY RESULT
# ══════════════════════════════════════════════════════════════════════════════

class LifespanSchema(BaseModel):
    predicted_health_span: int = Field(..., description="Predicted healthy lifespan in years")
    years_remaining: int = Field(..., ge=0)
    score: int
    base_life: int


class ImprovementSchema(BaseModel):
    text: str
    points: int = Field(..., gt=0)
    current: int
    category: str


class StatusSchema(BaseModel):
    type: str   # balanced / needs-recovery / high-risk
    label: str
    summary: str


class DisplaySchema(BaseModel):
    """Ready-to-show strings for the result panel."""
    predicted_age: str
    years_remaining: str
    status_headline: str
    status_summary: str
    score: str
    risk: str
    improvement_score: str
    improvement_items: List[Tuple[str, str]]
    empty_message: Optional[str] = None
    improvement_summary: str


class SurveyResultSchema(BaseModel):
    lifespan: LifespanSchema
    improvements: List[ImprovementSchema]
    status: StatusSchema
    improvement_total: int
    additional_years: Optional[Tuple[int, int]] = None
    risk_points: int = Field(..., ge=0)
    display: DisplaySchema
    locale: str
    disclaimer: str


class SurveyOptionsSchema(BaseModel):
    categories: Dict[str, List[str]]
    chronic_conditions: List[str]
    score_table: Dict[str, Dict[str, int]]
