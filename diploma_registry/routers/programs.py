from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.models.program import Program
from diploma_registry.models.university import University
from diploma_registry.schemas.program import ProgramCreate, ProgramRead, ProgramUpdate

router = APIRouter()


def _ensure_program_exists(db: Session, program_id: int) -> Program:
    p = db.query(Program).filter(Program.id == program_id).first()
    if not p:
        raise HTTPException(status_code=404, detail="Program not found")
    return p


@router.get("/", response_model=list[ProgramRead])
def list_programs(
    university_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Program)
    if university_id is not None:
        q = q.filter(Program.university_id == university_id)
    return q.order_by(Program.title.asc(), Program.id.asc()).all()


@router.post("/", response_model=ProgramRead, status_code=status.HTTP_201_CREATED)
def create_program(payload: ProgramCreate, db: Session = Depends(get_db)):
    university = db.query(University).filter(University.id == payload.university_id).first()
    if not university:
        raise HTTPException(status_code=404, detail="University not found")

    program = Program(**payload.model_dump())
    db.add(program)
    db.commit()
    db.refresh(program)
    return program


@router.get("/{program_id}", response_model=ProgramRead)
def get_program(program_id: int, db: Session = Depends(get_db)):
    return _ensure_program_exists(db, program_id)


@router.put("/{program_id}", response_model=ProgramRead)
def update_program(
    program_id: int,
    payload: ProgramUpdate,
    db: Session = Depends(get_db),
):
    program = _ensure_program_exists(db, program_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(program, field, value)

    db.commit()
    db.refresh(program)
    return program


@router.delete("/{program_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_program(program_id: int, db: Session = Depends(get_db)):
    program = _ensure_program_exists(db, program_id)
    db.delete(program)
    db.commit()
