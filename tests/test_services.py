"""
Service and repository tests against the in-memory database, without HTTP.
"""
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from roster_api.core.errors import (
    ClassNotFound,
    DuplicateStudentId,
    Forbidden,
    InvalidCredentials,
    NotFound,
    SessionError,
)
from roster_api.core.security import (
    create_session_cookie,
    get_password_hash,
    read_session_cookie,
    verify_password,
)
from roster_api.db.init_db import init_db
from roster_api.models.admin_session import AdminSession
from roster_api.models.access_token import ClassAccessToken
from roster_api.models.admin_user import AdminUser
from roster_api.models.student import Student
from roster_api.repositories.student_repository import StudentRepository
from roster_api.schemas.student import StudentCreate
from roster_api.services import (
    access_token_service,
    auth_service,
    session_service,
    student_service,
)


@pytest.fixture
def repo(db_session):
    return StudentRepository(db_session)


def new_student(**overrides) -> StudentCreate:
    data = {
        "name": "Emily Clark",
        "class": "Grade 12A",
        "age": 17,
        "studentId": "S100",
        "email": "emily@school.org",
    }
    data.update(overrides)
    return StudentCreate(**data)


class TestStudentRepository:

    def test_list_is_ordered_by_id(self, repo):
        assert [s.id for s in repo.list()] == [1, 2, 3, 4, 5]

    def test_get(self, repo):
        assert repo.get(2).name == "Jane Smith"
        assert repo.get(42) is None

    def test_find_by_field(self, repo):
        found = repo.find_by_field("student_id", "S004")
        assert [s.name for s in found] == ["Alice Brown"]
        assert repo.find_by_field("class_name", "Grade 11A")[1].name == "Charlie Wilson"

    def test_find_by_unknown_field(self, repo):
        with pytest.raises(ValueError):
            repo.find_by_field("nickname", "JD")


class TestStudentService:

    def test_create_assigns_next_id(self, repo):
        student = student_service.create_student(repo, obj_in=new_student())
        assert student.id == 6
        assert repo.count() == 6

    def test_duplicate_rejected_after_first_success(self, repo):
        student_service.create_student(repo, obj_in=new_student())
        with pytest.raises(DuplicateStudentId):
            student_service.create_student(repo, obj_in=new_student(name="Other"))
        assert repo.count() == 6

    def test_unique_constraint_backs_up_duplicate_check(self, repo, monkeypatch):
        student_service.create_student(repo, obj_in=new_student())
        # Pretend the lookup raced with the first insert
        monkeypatch.setattr(repo, "find_by_field", lambda field, value: [])

        with pytest.raises(DuplicateStudentId):
            student_service.create_student(repo, obj_in=new_student(name="Other"))

        monkeypatch.undo()
        assert repo.count() == 6
        assert [s.name for s in repo.find_by_field("student_id", "S100")] == ["Emily Clark"]

    def test_get_student_parses_ids(self, repo):
        assert student_service.get_student(repo, "5").student_id == "S005"
        for raw in ["6", "x", ""]:
            with pytest.raises(NotFound):
                student_service.get_student(repo, raw)

    def test_class_membership_is_exact(self, repo):
        student_service.create_student(repo, obj_in=new_student(**{"class": "Grade 10AB"}))
        student_service.create_student(repo, obj_in=new_student(studentId="S101", **{"class": "grade 10a"}))

        members = student_service.list_students_in_class(repo, "Grade 10A")
        assert [s.student_id for s in members] == ["S001", "S002"]

    def test_empty_class_roster(self, repo):
        with pytest.raises(NotFound) as exc_info:
            student_service.get_class_roster(repo, "Grade 9Z")
        assert exc_info.value.message == "No students found in this class"

    def test_list_classes(self, repo):
        summaries = student_service.list_classes(repo)
        assert [(c.class_name, c.student_count) for c in summaries] == [
            ("Grade 10A", 2),
            ("Grade 10B", 1),
            ("Grade 11A", 2),
        ]


class TestAccessTokenService:

    def test_generate_and_validate(self, db_session, repo):
        token = access_token_service.generate_class_token(db_session, repo, "Grade 10A")

        access_token_service.validate_access_token(db_session, "Grade 10A", token)
        assert access_token_service.get_class_token(db_session, "Grade 10A") == token

    def test_last_writer_wins(self, db_session, repo):
        old = access_token_service.generate_class_token(db_session, repo, "Grade 10A")
        new = access_token_service.generate_class_token(db_session, repo, "Grade 10A")

        assert old != new
        with pytest.raises(Forbidden):
            access_token_service.validate_access_token(db_session, "Grade 10A", old)
        access_token_service.validate_access_token(db_session, "Grade 10A", new)

    def test_one_row_per_class(self, db_session, repo):
        for _ in range(3):
            token = access_token_service.generate_class_token(db_session, repo, "Grade 10A")

        rows = db_session.query(ClassAccessToken).all()
        assert [(r.class_name, r.token) for r in rows] == [("Grade 10A", token)]

    def test_unknown_class(self, db_session, repo):
        with pytest.raises(ClassNotFound):
            access_token_service.generate_class_token(db_session, repo, "Grade 9Z")
        assert access_token_service.get_class_token(db_session, "Grade 9Z") is None

    def test_validate_without_token(self, db_session):
        with pytest.raises(Forbidden):
            access_token_service.validate_access_token(db_session, "Grade 10B", "anything")

    def test_build_access_url_encodes_like_uri_component(self):
        assert (
            access_token_service.build_access_url("Grade 10A/B&C (x)", "tok")
            == "/api/students/class/Grade%2010A%2FB%26C%20(x)/tok"
        )


class TestSecurity:

    def test_password_hash_round_trip(self):
        password_hash = get_password_hash("s3cret")
        assert password_hash != "s3cret"
        assert verify_password("s3cret", password_hash)
        assert not verify_password("S3cret", password_hash)

    def test_hashes_are_salted(self):
        assert get_password_hash("same") != get_password_hash("same")

    def test_session_cookie(self):
        cookie = create_session_cookie("abc123")
        assert read_session_cookie(cookie) == "abc123"

    @pytest.mark.parametrize("value", [None, "", "garbage", "a.b.c"])
    def test_unreadable_cookies(self, value):
        assert read_session_cookie(value) is None

    def test_tampered_cookie(self):
        cookie = create_session_cookie("abc123")
        header, payload, signature = cookie.split(".")
        forged = ".".join([header, payload, signature[::-1]])
        assert read_session_cookie(forged) is None

    def test_expired_cookie(self):
        cookie = create_session_cookie("abc123", expires_delta=timedelta(seconds=-10))
        assert read_session_cookie(cookie) is None


class TestAuthAndSessions:

    def test_login_returns_cookie_for_new_session(self, db_session):
        user, cookie = auth_service.login(db_session, "admin", "admin123")

        assert user.username == "admin"
        context = auth_service.resolve_session(db_session, cookie)
        assert context.username == "admin"
        assert context.role == "admin"
        assert context.user_id == user.id

    @pytest.mark.parametrize(
        "username,password",
        [("admin", "nope"), ("ghost", "admin123"), ("", "")],
    )
    def test_login_failures(self, db_session, username, password):
        with pytest.raises(InvalidCredentials):
            auth_service.login(db_session, username, password)
        assert db_session.query(AdminSession).count() == 0

    def test_logout_destroys_session(self, db_session):
        _, cookie = auth_service.login(db_session, "admin", "admin123")

        auth_service.logout(db_session, cookie)

        assert auth_service.resolve_session(db_session, cookie) is None
        assert db_session.query(AdminSession).count() == 0

    def test_logout_without_cookie_is_noop(self, db_session):
        auth_service.logout(db_session, None)

    def test_expired_session(self, db_session):
        admin = db_session.query(AdminUser).first()
        session = session_service.create_session(db_session, user=admin, max_age_seconds=-1)

        assert session_service.load_session(db_session, session.id) is None

    def test_purge_expired_sessions(self, db_session):
        admin = db_session.query(AdminUser).first()
        session_service.create_session(db_session, user=admin, max_age_seconds=-1)
        live = session_service.create_session(db_session, user=admin)

        assert session_service.purge_expired_sessions(db_session) == 1
        assert [s.id for s in db_session.query(AdminSession).all()] == [live.id]

    def test_destroy_failure_raises_session_error(self):
        db = MagicMock()
        db.get.return_value = AdminSession(id="abc")
        db.commit.side_effect = OperationalError("DELETE", {}, Exception("disk I/O error"))

        with pytest.raises(SessionError):
            session_service.destroy_session(db, "abc")
        db.rollback.assert_called_once()


class TestSeeding:

    def test_init_db_is_idempotent(self, db_session):
        init_db(db_session)

        assert db_session.query(AdminUser).count() == 1
        assert db_session.query(Student).count() == 5
