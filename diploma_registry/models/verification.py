from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from diploma_registry.db.base_class import Base


class Verification(Base):
    __tablename__ = "verifications"

    id = Column(Integer, primary_key=True, index=True)
    certificate_id = Column(Integer, ForeignKey("certificates.id", ondelete="CASCADE"), nullable=False, index=True)

    company_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    reason = Column(Text, nullable=True)
    ip_address = Column(String(64), nullable=True)

    verification_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    certificate = relationship("Certificate", back_populates="verifications")
