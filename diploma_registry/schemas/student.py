from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class StudentCreate(BaseModel):
    university_id: int
    program_id: Optional[int] = None
    matricule: str = Field(min_length=1, max_length=100)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    date_of_birth: Optional[date] = None
    major: Optional[str] = None
    photo_url: Optional[str] = None


class StudentUpdate(BaseModel):
    program_id: Optional[int] = None
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    date_of_birth: Optional[date] = None
    major: Optional[str] = None
    photo_url: Optional[str] = None

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class StudentRead(BaseModel):
    id: int
    university_id: int
    program_id: Optional[int] = None
    matricule: str
    first_name: str
    last_name: str
    email: EmailStr
    date_of_birth: Optional[date] = None
    major: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
