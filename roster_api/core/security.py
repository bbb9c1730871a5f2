# roster_api/core/security.py
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from roster_api.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_session_cookie(session_id: str, expires_delta: timedelta | None = None) -> str:
    """
    Sign a session id so the browser only ever holds an opaque, tamper-evident value.
    The session data itself stays on the server.
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    payload = {
        "sid": session_id,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.SESSION_SECRET, algorithm=settings.ALGORITHM)


def read_session_cookie(cookie_value: str | None) -> str | None:
    """
    Return the session id carried by a cookie, or None if it is missing, forged or expired.
    """
    if not cookie_value:
        return None
    try:
        payload = jwt.decode(
            cookie_value,
            settings.SESSION_SECRET,
            algorithms=[settings.ALGORITHM],
        )
    except jwt.PyJWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None
