from datetime import datetime

from pydantic import BaseModel, Field

from diploma_registry.core.config import MARK_MAX, MARK_MIN


class GradeCreate(BaseModel):
    student_id: int
    module_id: int
    mark: float = Field(ge=MARK_MIN, le=MARK_MAX)


class GradeUpdate(BaseModel):
    mark: float = Field(ge=MARK_MIN, le=MARK_MAX)


class GradeRead(BaseModel):
    id: int
    student_id: int
    module_id: int
    mark: float
    credits: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
