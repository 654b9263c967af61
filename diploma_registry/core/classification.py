"""
UK honours degree classification.

Pure functions over (mark, credits) records. Inputs are read through
attribute access (pydantic schemas, ORM rows) or mapping access (plain
dicts), and are never mutated.

Bands, on the credit-weighted average:
- First Class Honours: 70+
- Upper Second Class Honours (2:1): 60-69
- Lower Second Class Honours (2:2): 50-59
- Third Class Honours: 40-49
- Fail: below 40

No range checks happen here; requests are validated at the API boundary.
"""
import math
from decimal import ROUND_HALF_UP, Decimal
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from diploma_registry.schemas.classification import (
    ClassificationResult,
    ColorTag,
    CreditsValidation,
    MarksValidation,
)

# (inclusive lower bound, code, full name), highest first
CLASSIFICATION_BANDS: tuple[tuple[float, str, str], ...] = (
    (70, "1st", "First Class Honours"),
    (60, "2:1", "Upper Second Class Honours"),
    (50, "2:2", "Lower Second Class Honours"),
    (40, "3rd", "Third Class Honours"),
)
FAIL = ("Fail", "Fail")
NOT_AVAILABLE = ("N/A", "No marks available")

CLASSIFICATION_COLORS: dict[str, ColorTag] = {
    "1st": "gold",
    "2:1": "blue",
    "2:2": "silver",
    "3rd": "bronze",
    "Fail": "red",
}
DEFAULT_COLOR: ColorTag = "gray"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def _round_2dp(value: float) -> float:
    if not math.isfinite(value):
        return value
    # multiply, round half away from zero, divide
    scaled = Decimal(value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(scaled) / 100


def _band(average: float) -> tuple[str, str]:
    for lower, code, full in CLASSIFICATION_BANDS:
        if average >= lower:
            return code, full
    return FAIL


def calculate_degree_classification(marks: Sequence[Any]) -> ClassificationResult:
    """
    marks: records with `mark` and `credits`
    returns: rounded credit-weighted average and its honours band
    """
    if len(marks) == 0:
        code, full = NOT_AVAILABLE
        return ClassificationResult(
            average_mark=0, classification=code, classification_full=full
        )

    weighted_sum = 0.0
    total_credits = 0.0
    for record in marks:
        mark = _field(record, "mark")
        credits = _field(record, "credits")
        weighted_sum += mark * credits
        total_credits += credits

    average = weighted_sum / total_credits if total_credits > 0 else 0
    code, full = _band(average)

    return ClassificationResult(
        average_mark=_round_2dp(average),
        classification=code,
        classification_full=full,
    )


def get_classification_color(classification: str) -> ColorTag:
    """Badge color for a classification code; unknown codes are gray."""
    return CLASSIFICATION_COLORS.get(classification, DEFAULT_COLOR)


def validate_all_marks_assigned(
    modules: Iterable[Any], marks: Iterable[Any]
) -> MarksValidation:
    marked_module_ids = {_field(m, "module_id") for m in marks}
    missing_modules = [
        _field(module, "id")
        for module in modules
        if _field(module, "id") not in marked_module_ids
    ]
    return MarksValidation(
        is_valid=len(missing_modules) == 0,
        missing_modules=missing_modules,
    )


def validate_total_credits(
    marks: Iterable[Any], required_credits: float
) -> CreditsValidation:
    total_credits = sum(_field(m, "credits") for m in marks)
    difference = required_credits - total_credits
    return CreditsValidation(
        is_valid=difference == 0,
        total_credits=total_credits,
        difference=difference,
    )
