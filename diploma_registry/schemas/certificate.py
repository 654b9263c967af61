from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from diploma_registry.core.config import MARK_MAX, MARK_MIN
from diploma_registry.models.certificate import CertificateStatus
from diploma_registry.schemas.classification import ColorTag


class MarkEntry(BaseModel):
    module_id: int
    mark: float = Field(ge=MARK_MIN, le=MARK_MAX)


class CertificateIssue(BaseModel):
    student_id: int
    degree_title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    specialization: Optional[str] = Field(default=None, min_length=1, max_length=255)
    graduation_date: Optional[datetime] = None
    pdf_url: Optional[str] = None
    # falls back to the student's stored grades when omitted
    marks: Optional[list[MarkEntry]] = None


class CertificateMarkRead(BaseModel):
    module_id: Optional[int] = None
    mark: float
    credits: int

    class Config:
        from_attributes = True


class CertificateRead(BaseModel):
    id: int
    student_id: int
    university_id: int
    program_id: Optional[int] = None
    degree_title: str
    specialization: str
    graduation_date: datetime
    final_mark: float
    degree_classification: str
    qr_hash: str
    pdf_url: Optional[str] = None
    status: CertificateStatus
    revoked_at: Optional[datetime] = None
    created_at: datetime
    marks: list[CertificateMarkRead] = []

    class Config:
        from_attributes = True


class CertificateVerification(BaseModel):
    """Public view returned to whoever scans the QR code."""

    certificate_id: int
    qr_hash: str
    status: CertificateStatus
    is_valid: bool
    student_name: str
    matricule: str
    university_name: str
    degree_title: str
    specialization: str
    graduation_date: datetime
    final_mark: float
    degree_classification: str
    classification_color: ColorTag
