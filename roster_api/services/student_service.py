# roster_api/services/student_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from roster_api.core.errors import DuplicateStudentId, NotFound
from roster_api.models.student import Student
from roster_api.repositories.student_repository import StudentRepository
from roster_api.schemas.student import ClassSummary, StudentCreate

logger = logging.getLogger(__name__)


def list_students(repo: StudentRepository) -> List[Student]:
    return repo.list()


def parse_student_pk(raw_id: str) -> Optional[int]:
    """
    Path ids arrive as text; anything that is not an integer simply matches no student.
    """
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        return None


def get_student(repo: StudentRepository, raw_id: str) -> Student:
    student_pk = parse_student_pk(raw_id)
    student = repo.get(student_pk) if student_pk is not None else None
    if student is None:
        raise NotFound("Student not found")
    return student


def list_students_in_class(repo: StudentRepository, class_name: str) -> List[Student]:
    """
    Exact, case-sensitive match on the class name.
    """
    return repo.find_by_field("class_name", class_name)


def get_class_roster(repo: StudentRepository, class_name: str) -> List[Student]:
    students = list_students_in_class(repo, class_name)
    if not students:
        raise NotFound("No students found in this class")
    return students


def create_student(repo: StudentRepository, *, obj_in: StudentCreate) -> Student:
    """
    Append a student to the roster.

    - studentId must not be taken yet
    - id is the roster size plus one (records are never deleted)
    """
    if repo.find_by_field("student_id", obj_in.student_id):
        raise DuplicateStudentId()

    student = Student(
        id=repo.count() + 1,
        name=obj_in.name,
        class_name=obj_in.class_name,
        age=obj_in.age,
        student_id=obj_in.student_id,
        email=obj_in.email,
    )
    try:
        student = repo.add(student)
    except IntegrityError as e:
        # unique constraint on student_id backs up the check above
        raise DuplicateStudentId() from e
    logger.info(f"Added student {student.student_id} (id={student.id}) to '{student.class_name}'")
    return student


def list_classes(repo: StudentRepository) -> List[ClassSummary]:
    # dicts keep insertion order, so classes come out in first-seen order
    counts: dict[str, int] = {}
    for student in repo.list():
        counts[student.class_name] = counts.get(student.class_name, 0) + 1
    return [
        ClassSummary(class_name=name, student_count=count)
        for name, count in counts.items()
    ]
