from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class StudentRecordCreate(BaseModel):
    student_id: int
    attendance: int = Field(ge=0, le=100)
    discipline: Optional[str] = None
    grades_pdf_url: Optional[str] = None
    transcript_pdf_url: Optional[str] = None
    diploma_pdf_url: Optional[str] = None


class StudentRecordUpdate(BaseModel):
    attendance: Optional[int] = Field(default=None, ge=0, le=100)
    discipline: Optional[str] = None
    grades_pdf_url: Optional[str] = None
    transcript_pdf_url: Optional[str] = None
    diploma_pdf_url: Optional[str] = None

    @field_validator("attendance")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class StudentRecordRead(BaseModel):
    id: int
    student_id: int
    attendance: int
    discipline: Optional[str] = None
    grades_pdf_url: Optional[str] = None
    transcript_pdf_url: Optional[str] = None
    diploma_pdf_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
