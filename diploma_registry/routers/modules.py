from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.core.records import program_modules
from diploma_registry.models.module import Module
from diploma_registry.models.program import Program
from diploma_registry.schemas.module import ModuleCreate, ModuleRead, ModuleUpdate

router = APIRouter()


def _ensure_module_exists(db: Session, module_id: int) -> Module:
    m = db.query(Module).filter(Module.id == module_id).first()
    if not m:
        raise HTTPException(status_code=404, detail="Module not found")
    return m


def _commit_or_conflict(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Module code already used in this program",
        )


@router.get("/", response_model=list[ModuleRead])
def list_modules(
    program_id: Optional[int] = None,
    university_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Module)
    if program_id is not None:
        q = q.filter(Module.program_id == program_id)
    if university_id is not None:
        # a university's catalogue is the modules of all its programs
        q = q.join(Program, Program.id == Module.program_id).filter(
            Program.university_id == university_id
        )
    return q.order_by(Module.id.asc()).all()


@router.get("/program/{program_id}", response_model=list[ModuleRead])
def list_program_modules(program_id: int, db: Session = Depends(get_db)):
    program = db.query(Program).filter(Program.id == program_id).first()
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    return program_modules(db, program.id)


@router.post("/", response_model=ModuleRead, status_code=status.HTTP_201_CREATED)
def create_module(payload: ModuleCreate, db: Session = Depends(get_db)):
    program = db.query(Program).filter(Program.id == payload.program_id).first()
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")

    module = Module(**payload.model_dump())
    db.add(module)
    _commit_or_conflict(db)
    db.refresh(module)
    return module


@router.put("/{module_id}", response_model=ModuleRead)
def update_module(
    module_id: int,
    payload: ModuleUpdate,
    db: Session = Depends(get_db),
):
    module = _ensure_module_exists(db, module_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(module, field, value)

    _commit_or_conflict(db)
    db.refresh(module)
    return module


@router.delete("/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_module(module_id: int, db: Session = Depends(get_db)):
    module = _ensure_module_exists(db, module_id)
    db.delete(module)
    db.commit()
