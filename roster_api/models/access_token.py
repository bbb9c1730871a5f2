# roster_api/models/access_token.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from roster_api.db.base_class import Base

class ClassAccessToken(Base):
    __tablename__ = "class_access_tokens"

    # One row per class: a new token overwrites the old one
    class_name = Column(String(100), primary_key=True)
    token = Column(String(64), nullable=False)
    created_at = Column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
    )
