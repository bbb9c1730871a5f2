# roster_api/models/admin_session.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from roster_api.db.base_class import Base

class AdminSession(Base):
    __tablename__ = "admin_sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("admin_users.id"), nullable=False)
    username = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False)

    # naive UTC
    created_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
