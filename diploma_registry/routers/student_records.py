import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.models.student import Student
from diploma_registry.models.student_record import StudentRecord
from diploma_registry.schemas.student_record import (
    StudentRecordCreate,
    StudentRecordRead,
    StudentRecordUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_record_exists(db: Session, record_id: int) -> StudentRecord:
    r = db.query(StudentRecord).filter(StudentRecord.id == record_id).first()
    if not r:
        raise HTTPException(status_code=404, detail="Student record not found")
    return r


@router.get("/", response_model=list[StudentRecordRead])
def list_student_records(db: Session = Depends(get_db)):
    return db.query(StudentRecord).order_by(StudentRecord.student_id.asc()).all()


@router.get("/student/{student_id}", response_model=StudentRecordRead)
def get_record_for_student(student_id: int, db: Session = Depends(get_db)):
    record = db.query(StudentRecord).filter(StudentRecord.student_id == student_id).first()
    if not record:
        raise HTTPException(status_code=404, detail="Student record not found")
    return record


@router.post(
    "/",
    response_model=StudentRecordRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Student already has a record"},
    },
)
def create_student_record(payload: StudentRecordCreate, db: Session = Depends(get_db)):
    student = db.query(Student).filter(Student.id == payload.student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    record = StudentRecord(**payload.model_dump())
    db.add(record)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Student already has a record")

    db.refresh(record)
    logger.info("student record created: student=%s", record.student_id)
    return record


@router.put("/{record_id}", response_model=StudentRecordRead)
def update_student_record(
    record_id: int,
    payload: StudentRecordUpdate,
    db: Session = Depends(get_db),
):
    record = _ensure_record_exists(db, record_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(record, field, value)

    db.commit()
    db.refresh(record)
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student_record(record_id: int, db: Session = Depends(get_db)):
    record = _ensure_record_exists(db, record_id)
    db.delete(record)
    db.commit()
