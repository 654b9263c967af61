from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator


class UniversityCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str | None = None
    contact_email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    logo_url: str | None = None


class UniversityUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = None
    contact_email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    logo_url: str | None = None

    @field_validator("name", "contact_email")
    @classmethod
    def not_null(cls, v):
        # columns are NOT NULL: omit the field to leave it unchanged
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class UniversityRead(BaseModel):
    id: int
    name: str
    address: str | None = None
    contact_email: EmailStr
    phone: str | None = None
    logo_url: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True
