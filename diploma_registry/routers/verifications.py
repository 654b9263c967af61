import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.models.certificate import Certificate
from diploma_registry.models.verification import Verification
from diploma_registry.schemas.verification import VerificationCreate, VerificationRead

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=VerificationRead, status_code=status.HTTP_201_CREATED)
def record_verification(
    payload: VerificationCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    certificate = db.query(Certificate).filter(Certificate.id == payload.certificate_id).first()
    if not certificate:
        raise HTTPException(status_code=404, detail="Certificate not found")

    verification = Verification(
        **payload.model_dump(),
        ip_address=request.client.host if request.client else None,
    )
    db.add(verification)
    db.commit()
    db.refresh(verification)

    logger.info(
        "certificate %s verified by %s (%s)",
        certificate.id,
        verification.company_name,
        verification.ip_address,
    )
    return verification


@router.get("/", response_model=list[VerificationRead])
def list_verifications(
    certificate_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Verification)
    if certificate_id is not None:
        q = q.filter(Verification.certificate_id == certificate_id)
    return q.order_by(Verification.verification_date.desc(), Verification.id.desc()).all()
