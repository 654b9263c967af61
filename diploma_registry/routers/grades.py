import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.models.grade import Grade
from diploma_registry.models.module import Module
from diploma_registry.models.student import Student
from diploma_registry.schemas.grade import GradeCreate, GradeRead, GradeUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_grade_exists(db: Session, grade_id: int) -> Grade:
    g = db.query(Grade).filter(Grade.id == grade_id).first()
    if not g:
        raise HTTPException(status_code=404, detail="Grade not found")
    return g


@router.get("/", response_model=list[GradeRead])
def list_grades(
    student_id: Optional[int] = None,
    module_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Grade)
    if student_id is not None:
        q = q.filter(Grade.student_id == student_id)
    if module_id is not None:
        q = q.filter(Grade.module_id == module_id)
    return q.order_by(Grade.student_id.asc(), Grade.module_id.asc()).all()


@router.post(
    "/",
    response_model=GradeRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Student already has a grade for this module"},
    },
)
def create_grade(payload: GradeCreate, db: Session = Depends(get_db)):
    student = db.query(Student).filter(Student.id == payload.student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    module = db.query(Module).filter(Module.id == payload.module_id).first()
    if not module:
        raise HTTPException(status_code=404, detail="Module not found")

    if student.program_id is not None and module.program_id != student.program_id:
        raise HTTPException(
            status_code=400,
            detail="Module is not part of the student's program",
        )

    grade = Grade(**payload.model_dump())
    db.add(grade)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=409,
            detail="Student already has a grade for this module",
        )

    db.refresh(grade)
    logger.info(
        "grade recorded: student=%s module=%s mark=%s",
        grade.student_id,
        grade.module_id,
        grade.mark,
    )
    return grade


@router.put("/{grade_id}", response_model=GradeRead)
def update_grade(
    grade_id: int,
    payload: GradeUpdate,
    db: Session = Depends(get_db),
):
    grade = _ensure_grade_exists(db, grade_id)
    grade.mark = payload.mark

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(grade)
    return grade


@router.delete("/{grade_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_grade(grade_id: int, db: Session = Depends(get_db)):
    grade = _ensure_grade_exists(db, grade_id)
    db.delete(grade)
    db.commit()
