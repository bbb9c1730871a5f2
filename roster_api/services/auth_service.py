# roster_api/services/auth_service.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from roster_api.core.errors import InvalidCredentials
from roster_api.core.security import (
    create_session_cookie,
    read_session_cookie,
    verify_password,
)
from roster_api.models.admin_user import AdminUser
from roster_api.schemas.auth import SessionContext
from roster_api.services import session_service

logger = logging.getLogger(__name__)


def authenticate_admin(db: Session, username: str, password: str) -> AdminUser:
    """
    Unknown user and wrong password fail the same way.
    """
    user = db.query(AdminUser).filter(AdminUser.username == username).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login attempt for '{username}'")
        raise InvalidCredentials()
    return user


def login(db: Session, username: str, password: str) -> tuple[AdminUser, str]:
    """
    Verify credentials and open a server-side session.

    Returns the user and the signed cookie value carrying the session id.
    """
    user = authenticate_admin(db, username, password)
    session_service.purge_expired_sessions(db)
    session = session_service.create_session(db, user=user)
    logger.info(f"Admin '{user.username}' logged in")
    return user, create_session_cookie(session.id)


def resolve_session(db: Session, cookie_value: str | None) -> Optional[SessionContext]:
    return session_service.load_session(db, read_session_cookie(cookie_value))


def logout(db: Session, cookie_value: str | None) -> None:
    session_id = read_session_cookie(cookie_value)
    session_service.destroy_session(db, session_id)
    if session_id:
        logger.info("Session destroyed")
