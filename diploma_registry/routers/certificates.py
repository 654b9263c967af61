import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diploma_registry.core import config
from diploma_registry.core.classification import (
    calculate_degree_classification,
    get_classification_color,
    validate_all_marks_assigned,
    validate_total_credits,
)
from diploma_registry.core.deps import get_db
from diploma_registry.core.records import program_modules, stored_marks
from diploma_registry.models.certificate import Certificate, CertificateMark, CertificateStatus
from diploma_registry.models.module import Module
from diploma_registry.models.student import Student
from diploma_registry.schemas.certificate import (
    CertificateIssue,
    CertificateRead,
    CertificateVerification,
    MarkEntry,
)
from diploma_registry.schemas.classification import WeightedMark

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_certificate_exists(db: Session, certificate_id: int) -> Certificate:
    c = db.query(Certificate).filter(Certificate.id == certificate_id).first()
    if not c:
        raise HTTPException(status_code=404, detail="Certificate not found")
    return c


def _reject(student_id: int, detail) -> HTTPException:
    logger.warning("issuance rejected: student=%s detail=%s", student_id, detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _weighted_entries(
    db: Session,
    student: Student,
    entries: list[MarkEntry],
    curriculum: list[Module],
) -> list[WeightedMark]:
    """
    Attach module credit weights to submitted marks.
    Credits are never taken from the client.
    """
    seen: set[int] = set()
    for e in entries:
        if e.module_id in seen:
            raise _reject(student.id, f"Module {e.module_id} has more than one mark")
        seen.add(e.module_id)

    if student.program_id is not None:
        by_id = {m.id: m for m in curriculum}
    else:
        rows = db.query(Module).filter(Module.id.in_(list(seen))).all()
        by_id = {m.id: m for m in rows}

    weighted: list[WeightedMark] = []
    for e in entries:
        module = by_id.get(e.module_id)
        if module is None:
            raise _reject(
                student.id,
                f"Module {e.module_id} is not part of the student's program",
            )
        weighted.append(
            WeightedMark(module_id=module.id, mark=e.mark, credits=module.credits)
        )
    return weighted


@router.get("/", response_model=list[CertificateRead])
def list_certificates(
    university_id: Optional[int] = None,
    student_id: Optional[int] = None,
    status_filter: Optional[CertificateStatus] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Certificate)
    if university_id is not None:
        q = q.filter(Certificate.university_id == university_id)
    if student_id is not None:
        q = q.filter(Certificate.student_id == student_id)
    if status_filter is not None:
        q = q.filter(Certificate.status == status_filter)
    return q.order_by(Certificate.id.desc()).all()


@router.post(
    "/",
    response_model=CertificateRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Marks incomplete or inconsistent with the program"},
        404: {"description": "Student not found"},
        409: {"description": "Student already holds an active certificate"},
    },
)
def issue_certificate(payload: CertificateIssue, db: Session = Depends(get_db)):
    student = db.query(Student).filter(Student.id == payload.student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    already_issued = (
        db.query(Certificate)
        .filter(
            Certificate.student_id == student.id,
            Certificate.status == CertificateStatus.ACTIVE,
        )
        .first()
        is not None
    )
    if already_issued:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Student already holds an active certificate",
        )

    curriculum = program_modules(db, student.program_id)

    if payload.marks is None:
        marks = stored_marks(db, student)
    else:
        marks = _weighted_entries(db, student, payload.marks, curriculum)

    if not marks:
        raise _reject(student.id, "No marks entered for this student")

    completeness = validate_all_marks_assigned(curriculum, marks)
    if not completeness.is_valid:
        raise _reject(
            student.id,
            {
                "message": "All modules must have marks assigned",
                "missing_modules": completeness.missing_modules,
            },
        )

    if config.ENFORCE_CREDIT_TOTAL and student.program is not None:
        credit_check = validate_total_credits(marks, student.program.total_credits_required)
        if not credit_check.is_valid:
            raise _reject(
                student.id,
                {
                    "message": "Credit total does not match the program requirement",
                    "total_credits": credit_check.total_credits,
                    "difference": credit_check.difference,
                },
            )

    result = calculate_degree_classification(marks)

    certificate = Certificate(
        student_id=student.id,
        university_id=student.university_id,
        program_id=student.program_id,
        degree_title=payload.degree_title or config.DEFAULT_DEGREE_TITLE,
        specialization=payload.specialization or config.DEFAULT_SPECIALIZATION,
        graduation_date=payload.graduation_date or datetime.now(timezone.utc),
        final_mark=result.average_mark,
        degree_classification=result.classification,
        qr_hash=uuid.uuid4().hex,
        pdf_url=payload.pdf_url,
        status=CertificateStatus.ACTIVE,
        marks=[
            CertificateMark(module_id=m.module_id, mark=m.mark, credits=int(m.credits))
            for m in marks
        ],
    )
    db.add(certificate)

    try:
        db.commit()
    except IntegrityError:
        # a concurrent issuance for the same student won the race
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Student already holds an active certificate",
        )
    except Exception:
        db.rollback()
        raise

    db.refresh(certificate)
    logger.info(
        "certificate issued: id=%s student=%s final_mark=%.2f classification=%s",
        certificate.id,
        student.id,
        certificate.final_mark,
        certificate.degree_classification,
    )
    return certificate


@router.get("/verify/{qr_hash}", response_model=CertificateVerification)
def verify_certificate(qr_hash: str, db: Session = Depends(get_db)):
    certificate = db.query(Certificate).filter(Certificate.qr_hash == qr_hash).first()
    if not certificate:
        raise HTTPException(status_code=404, detail="Certificate not found")

    student = certificate.student
    return CertificateVerification(
        certificate_id=certificate.id,
        qr_hash=certificate.qr_hash,
        status=certificate.status,
        is_valid=certificate.status == CertificateStatus.ACTIVE,
        student_name=f"{student.first_name} {student.last_name}",
        matricule=student.matricule,
        university_name=certificate.university.name,
        degree_title=certificate.degree_title,
        specialization=certificate.specialization,
        graduation_date=certificate.graduation_date,
        final_mark=certificate.final_mark,
        degree_classification=certificate.degree_classification,
        classification_color=get_classification_color(certificate.degree_classification),
    )


@router.get("/{certificate_id}", response_model=CertificateRead)
def get_certificate(certificate_id: int, db: Session = Depends(get_db)):
    return _ensure_certificate_exists(db, certificate_id)


@router.patch("/{certificate_id}/revoke", response_model=CertificateRead)
def revoke_certificate(certificate_id: int, db: Session = Depends(get_db)):
    certificate = _ensure_certificate_exists(db, certificate_id)
    if certificate.status == CertificateStatus.REVOKED:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Certificate already revoked",
        )

    certificate.status = CertificateStatus.REVOKED
    certificate.revoked_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(certificate)

    logger.info("certificate revoked: id=%s", certificate.id)
    return certificate
