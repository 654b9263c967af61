from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from diploma_registry.db.base_class import Base


class Module(Base):
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, ForeignKey("programs.id", ondelete="CASCADE"), nullable=False, index=True)

    code = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False)
    credits = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("program_id", "code", name="uq_modules_program_code"),
    )

    program = relationship("Program", back_populates="modules")

    grades = relationship("Grade", back_populates="module", cascade="all, delete-orphan")
