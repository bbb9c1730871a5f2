# roster_api/services/access_token_service.py
import logging
import uuid
from urllib.parse import quote

from sqlalchemy.orm import Session

from roster_api.core.errors import ClassNotFound, Forbidden
from roster_api.models.access_token import ClassAccessToken
from roster_api.repositories.student_repository import StudentRepository

logger = logging.getLogger(__name__)

TOKEN_VALIDITY_NOTE = "This token remains valid until a new one is generated for this class"

# Same character set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_access_url(class_name: str, token: str) -> str:
    return f"/api/students/class/{quote(class_name, safe=_URI_COMPONENT_SAFE)}/{token}"


def generate_class_token(db: Session, repo: StudentRepository, class_name: str) -> str:
    """
    Mint a fresh token for a class and make it the only valid one.
    """
    if not repo.find_by_field("class_name", class_name):
        raise ClassNotFound()

    token = str(uuid.uuid4())
    # merge is an upsert on the class_name primary key
    db.merge(ClassAccessToken(class_name=class_name, token=token))
    db.commit()

    logger.info(f"Generated new access token for class '{class_name}'")
    return token


def get_class_token(db: Session, class_name: str) -> str | None:
    entry = db.get(ClassAccessToken, class_name)
    return entry.token if entry is not None else None


def validate_access_token(db: Session, class_name: str, supplied_token: str) -> None:
    current = get_class_token(db, class_name)
    if current is None or current != supplied_token:
        logger.warning(f"Rejected access token for class '{class_name}'")
        raise Forbidden()
