from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class ProgramCreate(BaseModel):
    university_id: int
    title: str = Field(min_length=1, max_length=255)
    level: str = Field(min_length=1, max_length=100)
    total_credits_required: int = Field(gt=0)


class ProgramUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    level: str | None = Field(default=None, min_length=1, max_length=100)
    total_credits_required: int | None = Field(default=None, gt=0)

    @field_validator("title", "level", "total_credits_required")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class ProgramRead(BaseModel):
    id: int
    university_id: int
    title: str
    level: str
    total_credits_required: int
    created_at: datetime

    class Config:
        from_attributes = True
