# roster_api/db/init_db.py
import logging

from sqlalchemy.orm import Session

from roster_api.core.config import settings
from roster_api.core.security import get_password_hash
from roster_api.db.base import Base
from roster_api.db.session import engine
from roster_api.models.admin_user import AdminUser
from roster_api.models.student import Student

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    {"id": 1, "name": "John Doe", "class_name": "Grade 10A", "age": 15, "student_id": "S001", "email": "john@example.com"},
    {"id": 2, "name": "Jane Smith", "class_name": "Grade 10A", "age": 16, "student_id": "S002", "email": "jane@example.com"},
    {"id": 3, "name": "Bob Johnson", "class_name": "Grade 10B", "age": 15, "student_id": "S003", "email": "bob@example.com"},
    {"id": 4, "name": "Alice Brown", "class_name": "Grade 11A", "age": 16, "student_id": "S004", "email": "alice@example.com"},
    {"id": 5, "name": "Charlie Wilson", "class_name": "Grade 11A", "age": 17, "student_id": "S005", "email": "charlie@example.com"},
]


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def seed_admin(db: Session) -> AdminUser:
    admin = (
        db.query(AdminUser)
        .filter(AdminUser.username == settings.ADMIN_USERNAME)
        .first()
    )
    if admin is not None:
        return admin

    admin = AdminUser(
        username=settings.ADMIN_USERNAME,
        password_hash=get_password_hash(settings.ADMIN_PASSWORD),
        role="admin",
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Seeded admin user '{admin.username}'")
    return admin


def seed_students(db: Session) -> int:
    """
    Load the demo roster, but only into an empty database.
    """
    if db.query(Student).count() > 0:
        return 0
    db.add_all([Student(**row) for row in SEED_STUDENTS])
    db.commit()
    logger.info(f"Seeded {len(SEED_STUDENTS)} students")
    return len(SEED_STUDENTS)


def init_db(db: Session) -> None:
    create_tables()
    seed_admin(db)
    seed_students(db)
