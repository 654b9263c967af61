from sqlalchemy.orm import Session

from diploma_registry.models.grade import Grade
from diploma_registry.models.module import Module
from diploma_registry.models.student import Student
from diploma_registry.schemas.classification import WeightedMark


def program_modules(db: Session, program_id: int | None) -> list[Module]:
    """Curriculum a student must be graded on, in module id order."""
    if program_id is None:
        return []
    return (
        db.query(Module)
        .filter(Module.program_id == program_id)
        .order_by(Module.id.asc())
        .all()
    )


def stored_marks(db: Session, student: Student) -> list[WeightedMark]:
    """
    Grades recorded for the student, weighted by module credits.
    When the student belongs to a program only that program's modules count.
    """
    q = (
        db.query(Grade.module_id, Grade.mark, Module.credits)
        .join(Module, Module.id == Grade.module_id)
        .filter(Grade.student_id == student.id)
    )
    if student.program_id is not None:
        q = q.filter(Module.program_id == student.program_id)

    rows = q.order_by(Module.id.asc()).all()
    return [
        WeightedMark(module_id=r.module_id, mark=r.mark, credits=r.credits)
        for r in rows
    ]
