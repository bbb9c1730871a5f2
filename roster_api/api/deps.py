# roster_api/api/deps.py
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from roster_api.core.config import settings
from roster_api.core.errors import Unauthorized
from roster_api.db.session import get_db
from roster_api.repositories.student_repository import StudentRepository
from roster_api.schemas.auth import SessionContext
from roster_api.services import access_token_service, auth_service


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return StudentRepository(db)


def get_session_context(
    request: Request,
    db: Session = Depends(get_db),
) -> Optional[SessionContext]:
    cookie_value = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return auth_service.resolve_session(db, cookie_value)


def require_admin(
    context: Optional[SessionContext] = Depends(get_session_context),
) -> SessionContext:
    if context is None or context.role != "admin":
        raise Unauthorized()
    return context


def require_class_token(
    class_name: str,
    unique_id: str,
    db: Session = Depends(get_db),
) -> str:
    """
    Gate for the shareable class URL; the path must carry the current token.
    """
    access_token_service.validate_access_token(db, class_name, unique_id)
    return class_name
