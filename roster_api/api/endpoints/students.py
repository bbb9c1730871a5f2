# roster_api/api/endpoints/students.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from roster_api.api.deps import (
    get_student_repository,
    require_admin,
    require_class_token,
)
from roster_api.db.session import get_db
from roster_api.repositories.student_repository import StudentRepository
from roster_api.schemas.access_token import ClassAccessUrl
from roster_api.schemas.auth import SessionContext
from roster_api.schemas.student import (
    ClassRoster,
    StudentCreate,
    StudentCreated,
    StudentList,
    StudentPublic,
)
from roster_api.services import access_token_service, student_service

router = APIRouter(tags=["students"])


@router.post("/class/{class_name}/generate-url", response_model=ClassAccessUrl)
def generate_class_url(
    class_name: str,
    request: Request,
    db: Session = Depends(get_db),
    repo: StudentRepository = Depends(get_student_repository),
    admin: SessionContext = Depends(require_admin),
):
    """
    Issue a shareable read-only URL for one class; any earlier URL stops working.
    """
    token = access_token_service.generate_class_token(db, repo, class_name)
    access_url = access_token_service.build_access_url(class_name, token)
    host = request.headers.get("host", request.url.netloc)
    return ClassAccessUrl(
        message="Unique access URL generated successfully",
        class_name=class_name,
        access_url=access_url,
        full_url=f"{request.url.scheme}://{host}{access_url}",
        expires_in=access_token_service.TOKEN_VALIDITY_NOTE,
    )


@router.get("/class/{class_name}/{unique_id}", response_model=ClassRoster)
def get_students_by_class(
    class_name: str = Depends(require_class_token),
    repo: StudentRepository = Depends(get_student_repository),
):
    """
    Public, token-gated view of one class.
    """
    students = student_service.get_class_roster(repo, class_name)
    return ClassRoster(
        class_name=class_name,
        total_students=len(students),
        students=[StudentPublic.model_validate(s) for s in students],
    )


@router.get("", response_model=StudentList)
def list_students(
    repo: StudentRepository = Depends(get_student_repository),
    admin: SessionContext = Depends(require_admin),
):
    students = student_service.list_students(repo)
    return StudentList(
        total_students=len(students),
        students=[StudentPublic.model_validate(s) for s in students],
    )


@router.get("/{student_id}", response_model=StudentPublic)
def get_student(
    student_id: str,
    repo: StudentRepository = Depends(get_student_repository),
    admin: SessionContext = Depends(require_admin),
):
    return student_service.get_student(repo, student_id)


@router.post("", response_model=StudentCreated, status_code=status.HTTP_201_CREATED)
def create_student(
    obj_in: StudentCreate,
    repo: StudentRepository = Depends(get_student_repository),
    admin: SessionContext = Depends(require_admin),
):
    student = student_service.create_student(repo, obj_in=obj_in)
    return StudentCreated(
        message="Student added successfully",
        student=StudentPublic.model_validate(student),
    )
