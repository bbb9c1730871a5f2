# roster_api/services/session_service.py
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roster_api.core.config import settings
from roster_api.core.errors import SessionError
from roster_api.models.admin_session import AdminSession
from roster_api.models.admin_user import AdminUser
from roster_api.schemas.auth import SessionContext

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # SQLite drops tzinfo, so sessions are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_session(
    db: Session,
    *,
    user: AdminUser,
    max_age_seconds: int | None = None,
) -> AdminSession:
    if max_age_seconds is None:
        max_age_seconds = settings.SESSION_MAX_AGE_SECONDS
    now = _utcnow()
    session = AdminSession(
        id=secrets.token_urlsafe(32),
        user_id=user.id,
        username=user.username,
        role=user.role,
        created_at=now,
        expires_at=now + timedelta(seconds=max_age_seconds),
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def load_session(db: Session, session_id: str | None) -> Optional[SessionContext]:
    """
    Return the live session for an id; expired sessions are dropped on sight.
    """
    if not session_id:
        return None
    session = db.get(AdminSession, session_id)
    if session is None:
        return None
    if session.expires_at <= _utcnow():
        db.delete(session)
        db.commit()
        return None
    return SessionContext(
        session_id=session.id,
        user_id=session.user_id,
        username=session.username,
        role=session.role,
        expires_at=session.expires_at,
    )


def destroy_session(db: Session, session_id: str | None) -> None:
    if not session_id:
        return
    try:
        session = db.get(AdminSession, session_id)
        if session is not None:
            db.delete(session)
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to destroy session: {e}", exc_info=True)
        raise SessionError() from e


def purge_expired_sessions(db: Session) -> int:
    removed = (
        db.query(AdminSession)
        .filter(AdminSession.expires_at <= _utcnow())
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed
