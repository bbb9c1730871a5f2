# roster_api/api/endpoints/classes.py
from fastapi import APIRouter, Depends

from roster_api.api.deps import get_student_repository, require_admin
from roster_api.repositories.student_repository import StudentRepository
from roster_api.schemas.auth import SessionContext
from roster_api.schemas.student import ClassList
from roster_api.services import student_service

router = APIRouter(tags=["classes"])


@router.get("", response_model=ClassList)
def list_classes(
    repo: StudentRepository = Depends(get_student_repository),
    admin: SessionContext = Depends(require_admin),
):
    classes = student_service.list_classes(repo)
    return ClassList(total_classes=len(classes), classes=classes)
