# roster_api/db/base.py
# Import every model so Base.metadata knows all tables before create_all
from roster_api.db.base_class import Base  # noqa
from roster_api.models.admin_user import AdminUser  # noqa
from roster_api.models.student import Student  # noqa
from roster_api.models.access_token import ClassAccessToken  # noqa
from roster_api.models.admin_session import AdminSession  # noqa
