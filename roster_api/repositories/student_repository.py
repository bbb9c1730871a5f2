# roster_api/repositories/student_repository.py
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster_api.models.student import Student


class StudentRepository:
    """
    Roster access used by the services. Handlers receive it through
    `Depends(get_student_repository)`, so another backend only has to
    provide the same methods.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id.asc()).all()

    def get(self, student_pk: int) -> Optional[Student]:
        return self.db.get(Student, student_pk)

    def count(self) -> int:
        return self.db.query(Student).count()

    def find_by_field(self, field: str, value: Any) -> List[Student]:
        column = getattr(Student, field, None)
        if column is None:
            raise ValueError(f"Student has no field {field!r}")
        return (
            self.db.query(Student)
            .filter(column == value)
            .order_by(Student.id.asc())
            .all()
        )

    def add(self, student: Student) -> Student:
        self.db.add(student)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(student)
        return student
