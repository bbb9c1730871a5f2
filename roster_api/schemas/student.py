# roster_api/schemas/student.py
from typing import Annotated, List

from pydantic import Field, StringConstraints, field_validator
from pydantic.networks import validate_email

from roster_api.schemas.base import CamelModel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

MIN_AGE = 5
MAX_AGE = 25


class StudentBase(CamelModel):
    name: NonEmptyStr
    class_name: NonEmptyStr = Field(alias="class")
    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    student_id: NonEmptyStr
    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Same check as EmailStr, but the address is stored as submitted
        validate_email(value)
        return value


class StudentCreate(StudentBase):
    pass


class StudentPublic(CamelModel):
    id: int
    name: str
    class_name: str = Field(alias="class")
    age: int
    student_id: str
    email: str


class StudentList(CamelModel):
    total_students: int
    students: List[StudentPublic]


class ClassRoster(StudentList):
    class_name: str




class StudentCreated(CamelModel):
    message: str
    student: StudentPublic


class ClassSummary(CamelModel):
    class_name: str
    student_count: int


class ClassList(CamelModel):
    total_classes: int
    classes: List[ClassSummary]
