import enum
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
    text,
)
from sqlalchemy.orm import relationship

from diploma_registry.db.base_class import Base


class CertificateStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    REVOKED = "REVOKED"


class Certificate(Base):
    __tablename__ = "certificates"

    id = Column(Integer, primary_key=True, index=True)

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    university_id = Column(Integer, ForeignKey("universities.id", ondelete="CASCADE"), nullable=False, index=True)
    program_id = Column(Integer, ForeignKey("programs.id", ondelete="SET NULL"), nullable=True)

    degree_title = Column(String(255), nullable=False)
    specialization = Column(String(255), nullable=False)
    graduation_date = Column(DateTime(timezone=True), nullable=False)

    # computed at issuance from the recorded marks
    final_mark = Column(Float, nullable=False)
    degree_classification = Column(String(20), nullable=False)

    qr_hash = Column(String(64), unique=True, index=True, nullable=False)
    pdf_url = Column(String(1024), nullable=True)
    status = Column(Enum(CertificateStatus), nullable=False, default=CertificateStatus.ACTIVE)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # at most one ACTIVE certificate per student
    __table_args__ = (
        Index(
            "uq_certificates_active_student",
            "student_id",
            unique=True,
            sqlite_where=text("status = 'ACTIVE'"),
            postgresql_where=text("status = 'ACTIVE'"),
        ),
    )

    student = relationship("Student", back_populates="certificates")
    university = relationship("University")

    marks = relationship(
        "CertificateMark",
        back_populates="certificate",
        cascade="all, delete-orphan",
        order_by="CertificateMark.id",
    )
    verifications = relationship(
        "Verification", back_populates="certificate", cascade="all, delete-orphan"
    )


class CertificateMark(Base):
    """Snapshot of one module result as it stood when the certificate was issued."""

    __tablename__ = "certificate_marks"

    id = Column(Integer, primary_key=True, index=True)
    certificate_id = Column(Integer, ForeignKey("certificates.id", ondelete="CASCADE"), nullable=False, index=True)
    module_id = Column(Integer, ForeignKey("modules.id", ondelete="SET NULL"), nullable=True)

    mark = Column(Float, nullable=False)
    credits = Column(Integer, nullable=False)

    certificate = relationship("Certificate", back_populates="marks")
