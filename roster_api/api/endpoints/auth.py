# roster_api/api/endpoints/auth.py
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from roster_api.core.config import settings
from roster_api.db.session import get_db
from roster_api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserPublic,
)
from roster_api.services import auth_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    user, cookie_value = auth_service.login(db, payload.username, payload.password)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=cookie_value,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return LoginResponse(
        message="Login successful",
        user=UserPublic(username=user.username, role=user.role),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    auth_service.logout(db, request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return MessageResponse(message="Logout successful")
