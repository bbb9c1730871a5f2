# roster_api/models/admin_user.py
from sqlalchemy import Column, Integer, String
from roster_api.db.base_class import Base

class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="admin")  # only 'admin' for now
