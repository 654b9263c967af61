from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from diploma_registry.core.deps import get_db
from diploma_registry.models.university import University
from diploma_registry.schemas.university import (
    UniversityCreate,
    UniversityRead,
    UniversityUpdate,
)

router = APIRouter()


def _ensure_university_exists(db: Session, university_id: int) -> University:
    u = db.query(University).filter(University.id == university_id).first()
    if not u:
        raise HTTPException(status_code=404, detail="University not found")
    return u


@router.get("/", response_model=list[UniversityRead])
def list_universities(db: Session = Depends(get_db)):
    return db.query(University).order_by(University.name.asc()).all()


@router.post("/", response_model=UniversityRead, status_code=status.HTTP_201_CREATED)
def create_university(payload: UniversityCreate, db: Session = Depends(get_db)):
    university = University(**payload.model_dump())
    db.add(university)
    db.commit()
    db.refresh(university)
    return university


@router.get("/{university_id}", response_model=UniversityRead)
def get_university(university_id: int, db: Session = Depends(get_db)):
    return _ensure_university_exists(db, university_id)


@router.put("/{university_id}", response_model=UniversityRead)
def update_university(
    university_id: int,
    payload: UniversityUpdate,
    db: Session = Depends(get_db),
):
    university = _ensure_university_exists(db, university_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(university, field, value)

    db.commit()
    db.refresh(university)
    return university


@router.delete("/{university_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_university(university_id: int, db: Session = Depends(get_db)):
    university = _ensure_university_exists(db, university_id)
    db.delete(university)
    db.commit()
