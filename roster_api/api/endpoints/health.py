# roster_api/api/endpoints/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from roster_api.api.deps import get_student_repository
from roster_api.core.config import settings
from roster_api.db.session import get_db
from roster_api.repositories.student_repository import StudentRepository

router = APIRouter(tags=["health"])


@router.get("/live")
def liveness_probe():
    """Process is up; touches no state."""
    return {"status": "ok", "version": settings.VERSION}


@router.get("/db")
def database_health(
    db: Session = Depends(get_db),
    repo: StudentRepository = Depends(get_student_repository),
):
    """
    The shared in-memory database answers queries and still holds the roster.
    """
    db.execute(text("SELECT 1"))
    return {
        "status": "ok",
        "database": db.get_bind().dialect.name,
        "students": repo.count(),
    }
