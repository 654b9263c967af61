from typing import Literal

from pydantic import BaseModel, Field

ColorTag = Literal["gold", "blue", "silver", "bronze", "red", "gray"]


class ClassificationResult(BaseModel):
    average_mark: float
    classification: str  # "1st" | "2:1" | "2:2" | "3rd" | "Fail" | "N/A"
    classification_full: str


class MarksValidation(BaseModel):
    is_valid: bool
    missing_modules: list[int | str] = Field(default_factory=list)


class CreditsValidation(BaseModel):
    is_valid: bool
    total_credits: float
    difference: float  # required - total; positive means under-covered


class StudentClassification(BaseModel):
    student_id: int
    program_id: int | None = None
    result: ClassificationResult
    color: ColorTag
    marks: MarksValidation
    credits: CreditsValidation | None = None


class WeightedMark(BaseModel):
    """One module result with the credit weight taken from the module."""

    module_id: int | str
    mark: float
    credits: float
