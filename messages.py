"""
Healthspan Survey — Message Catalog
User-facing copy for suggestions, status summaries and result rendering.
Korean copy is authoritative; English is a translation.
"""

import logging
from typing import Optional

from config import settings

log = logging.getLogger(__name__)


MESSAGES: dict[str, dict[str, str]] = {
    "ko": {
        # Improvement suggestions
        "exercise.start":       "운동 주 3회만 해도",
        "exercise.more":        "운동 주 3~5회로 늘리면",
        "sleep.adjust":         "수면 7~8시간 맞추면",
        "alcohol.reduce":       "음주 줄이면",
        "alcohol.quit":         "음주 완전히 끊으면",
        "stress.manage":        "스트레스 관리하면",
        "stress.reduce":        "스트레스 더 줄이면",

        # Status
        "status.balanced.label":       "균형형",
        "status.balanced.summary":     "현재 생활습관이 양호합니다. 꾸준히 유지하시면 건강한 노후를 보낼 수 있을 것 같습니다.",
        "status.needs-recovery.label":   "회복필요형",
        "status.needs-recovery.summary": "몇 가지 개선하면 더 건강한 노후를 준비할 수 있습니다. 아래 개선 포인트를 참고해보세요.",
        "status.high-risk.label":      "리스크높음형",
        "status.high-risk.summary":    "생활습관 개선이 필요합니다. 지금부터 바꾸면 건강수명을 늘릴 수 있는 여지가 충분합니다.",

        # Result rendering
        "render.years_remaining":      "남은 건강 연식: {years}년",
        "render.status_headline":      "생활습관: {label}",
        "render.improvement_item":     "+{points}포인트",
        "render.no_improvements":      "이미 좋은 생활습관을 유지하고 계시네요!",
        "render.improvement_summary":  "지금부터 바꾸면 건강수명 + {low}~{high}년 가능 (재미용)",
        "render.maintain":             "현재 생활습관을 유지하시면 됩니다!",

        "disclaimer":                  "재미로 보는 추정치입니다. 의학적 또는 보험계리적 예측이 아닙니다.",
    },
    "en": {
        "exercise.start":       "Increase exercise to 3x/week",
        "exercise.more":        "Increase exercise to 3-5x/week",
        "sleep.adjust":         "Adjust sleep to 7-8 hours",
        "alcohol.reduce":       "Reduce drinking",
        "alcohol.quit":         "Quit drinking entirely",
        "stress.manage":        "Manage stress",
        "stress.reduce":        "Reduce stress further",

        "status.balanced.label":       "Balanced",
        "status.balanced.summary":     "Your current habits are in good shape. Keep them up for a healthy later life.",
        "status.needs-recovery.label":   "Needs recovery",
        "status.needs-recovery.summary": "A few changes will prepare you for a healthier later life. See the improvement points below.",
        "status.high-risk.label":      "High risk",
        "status.high-risk.summary":    "Your habits need work. Changing them now leaves plenty of room to extend your healthy lifespan.",

        "render.years_remaining":      "Healthy years remaining: {years}",
        "render.status_headline":      "Lifestyle: {label}",
        "render.improvement_item":     "+{points} points",
        "render.no_improvements":      "You already keep good habits!",
        "render.improvement_summary":  "Change now for +{low}~{high} healthy years (just for fun)",
        "render.maintain":             "Just keep up your current habits!",

        "disclaimer":                  "This estimate is for entertainment only. It is not a medical or actuarial prediction.",
    },
}


def resolve_locale(locale: Optional[str]) -> str:
    """Return a supported locale, falling back to the configured default."""
    if locale and locale in MESSAGES and locale in settings.SUPPORTED_LOCALES:
        return locale
    if locale:
        log.debug(f"Unsupported locale '{locale}', using '{settings.DEFAULT_LOCALE}'")
    return settings.DEFAULT_LOCALE


def message(key: str, locale: Optional[str] = None, **kwargs) -> str:
    text = MESSAGES[resolve_locale(locale)][key]
    return text.format(**kwargs) if kwargs else text
