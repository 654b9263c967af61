from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diploma_registry.core.classification import (
    calculate_degree_classification,
    get_classification_color,
    validate_all_marks_assigned,
    validate_total_credits,
)
from diploma_registry.core.deps import get_db
from diploma_registry.core.records import program_modules, stored_marks
from diploma_registry.models.program import Program
from diploma_registry.models.student import Student
from diploma_registry.models.university import University
from diploma_registry.schemas.classification import StudentClassification
from diploma_registry.schemas.student import StudentCreate, StudentRead, StudentUpdate

router = APIRouter()


def _ensure_student_exists(db: Session, student_id: int) -> Student:
    s = db.query(Student).filter(Student.id == student_id).first()
    if not s:
        raise HTTPException(status_code=404, detail="Student not found")
    return s


def _ensure_program_in_university(db: Session, program_id: int, university_id: int) -> None:
    program = db.query(Program).filter(Program.id == program_id).first()
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    if program.university_id != university_id:
        raise HTTPException(
            status_code=400,
            detail="Program belongs to another university",
        )


@router.get("/", response_model=list[StudentRead])
def list_students(
    university_id: Optional[int] = None,
    program_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Student)
    if university_id is not None:
        q = q.filter(Student.university_id == university_id)
    if program_id is not None:
        q = q.filter(Student.program_id == program_id)
    return q.order_by(Student.last_name.asc(), Student.first_name.asc()).all()


@router.post(
    "/",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Matricule already registered"},
    },
)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)):
    university = db.query(University).filter(University.id == payload.university_id).first()
    if not university:
        raise HTTPException(status_code=404, detail="University not found")
    if payload.program_id is not None:
        _ensure_program_in_university(db, payload.program_id, payload.university_id)

    student = Student(**payload.model_dump())
    db.add(student)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Matricule already registered")

    db.refresh(student)
    return student


@router.get("/{student_id}", response_model=StudentRead)
def get_student(student_id: int, db: Session = Depends(get_db)):
    return _ensure_student_exists(db, student_id)


@router.put("/{student_id}", response_model=StudentRead)
def update_student(
    student_id: int,
    payload: StudentUpdate,
    db: Session = Depends(get_db),
):
    student = _ensure_student_exists(db, student_id)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("program_id") is not None:
        _ensure_program_in_university(db, changes["program_id"], student.university_id)

    for field, value in changes.items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = _ensure_student_exists(db, student_id)
    db.delete(student)
    db.commit()


@router.get("/{student_id}/classification", response_model=StudentClassification)
def student_classification(student_id: int, db: Session = Depends(get_db)):
    """
    Live classification preview from the grades recorded so far.
    Nothing is persisted; certificates snapshot this at issuance.
    """
    student = _ensure_student_exists(db, student_id)
    marks = stored_marks(db, student)
    modules = program_modules(db, student.program_id)

    result = calculate_degree_classification(marks)

    credits = None
    if student.program is not None:
        credits = validate_total_credits(marks, student.program.total_credits_required)

    return StudentClassification(
        student_id=student.id,
        program_id=student.program_id,
        result=result,
        color=get_classification_color(result.classification),
        marks=validate_all_marks_assigned(modules, marks),
        credits=credits,
    )
