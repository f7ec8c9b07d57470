"""
Confidence scoring for parsed deals.

The base score is a step function of how many independent fields were
found (brand, amount, currency, deliverables). A message that also carries
schedule context (a date, weekday, or time) earns a small bonus.
"""

import re
from collections.abc import Sequence

from ..models import Currency, Deliverable

# fields found -> confidence
FIELD_COUNT_SCORES: dict[int, float] = {
    4: 0.90,
    3: 0.70,
    2: 0.50,
    1: 0.30,
    0: 0.10,
}

SCHEDULE_CONTEXT_BONUS = 0.05
MAX_CONFIDENCE = 0.95

_WEEKDAYS = 'monday|tuesday|wednesday|thursday|friday|saturday|sunday'

SCHEDULE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r'\b(?:today|tomorrow|tonight|eod|eow|asap)\b'),
    re.compile(rf'\b(?:next|this)\s+(?:{_WEEKDAYS}|week)\b'),
    re.compile(rf'\bby\s+(?:{_WEEKDAYS}|tomorrow|eod|end of day)\b'),
    re.compile(r'\b\d{1,2}[/-]\d{1,2}(?:[/-]\d{2,4})?\b'),
    re.compile(r'\b\d{1,2}(?::\d{2})?\s*(?:am|pm)\b'),
)


def calculate_confidence(
    brand_name: str | None,
    total_value: float | None,
    currency: Currency | None,
    deliverables: Sequence[Deliverable],
) -> float:
    """Base confidence from the number of populated fields."""
    fields_found = sum(
        [
            bool(brand_name),
            total_value is not None,
            currency is not None,
            len(deliverables) > 0,
        ]
    )
    return FIELD_COUNT_SCORES[fields_found]


def has_schedule_context(text: str) -> bool:
    """True when the text mentions a day, date or clock time."""
    lowered = text.lower()
    return any(pattern.search(lowered) for pattern in SCHEDULE_PATTERNS)


def score_confidence(
    text: str,
    brand_name: str | None,
    total_value: float | None,
    currency: Currency | None,
    deliverables: Sequence[Deliverable],
) -> float:
    """Base confidence plus the schedule-context bonus, capped at MAX_CONFIDENCE."""
    confidence = calculate_confidence(brand_name, total_value, currency, deliverables)
    if has_schedule_context(text):
        confidence = min(MAX_CONFIDENCE, round(confidence + SCHEDULE_CONTEXT_BONUS, 2))
    return confidence
