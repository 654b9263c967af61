from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from diploma_registry.db.base_class import Base


class StudentRecord(Base):
    """Administrative file kept alongside a student's grades."""

    __tablename__ = "student_records"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    attendance = Column(Integer, nullable=False)  # percent
    discipline = Column(Text, nullable=True)

    grades_pdf_url = Column(String(1024), nullable=True)
    transcript_pdf_url = Column(String(1024), nullable=True)
    diploma_pdf_url = Column(String(1024), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    student = relationship("Student", back_populates="record")
