# roster_api/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster_api.api.endpoints import auth, classes, health, root, students
from roster_api.core.config import settings
from roster_api.core.errors import RosterAPIError
from roster_api.core.logging_config import setup_logging
from roster_api.db.init_db import init_db
from roster_api.db.session import SessionLocal

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

# Any origin, with cookies: the origin is echoed back instead of "*"
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=".*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RosterAPIError)
async def roster_api_error_handler(request: Request, exc: RosterAPIError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"errors": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
def on_startup():
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()

    logger.info(f"{settings.PROJECT_NAME} ready on http://localhost:{settings.PORT}")
    if not settings.is_production:
        logger.info(
            f"Default admin credentials: username={settings.ADMIN_USERNAME} "
            f"password={settings.ADMIN_PASSWORD} (change these in production!)"
        )


app.include_router(root.router)
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(students.router, prefix="/api/students")
app.include_router(classes.router, prefix="/api/classes")
app.include_router(health.router, prefix="/health")
