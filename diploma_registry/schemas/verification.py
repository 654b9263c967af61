from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class VerificationCreate(BaseModel):
    certificate_id: int
    company_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    reason: Optional[str] = None


class VerificationRead(BaseModel):
    id: int
    certificate_id: int
    company_name: str
    email: EmailStr
    reason: Optional[str] = None
    ip_address: Optional[str] = None
    verification_date: datetime

    class Config:
        from_attributes = True
