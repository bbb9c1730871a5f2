# roster_api/schemas/auth.py
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LoginRequest(BaseModel):
    username: NonEmptyStr
    password: Annotated[str, StringConstraints(min_length=1)]


class UserPublic(BaseModel):
    username: str
    role: str


class LoginResponse(BaseModel):
    message: str
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class SessionContext(BaseModel):
    """The authenticated admin attached to the current request."""
    session_id: str
    user_id: int
    username: str
    role: str
    expires_at: datetime

    model_config = {"from_attributes": True}
