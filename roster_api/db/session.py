# roster_api/db/session.py
import asyncio
import weakref
from typing import AsyncGenerator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from roster_api.core.config import settings


def _engine_kwargs(database_url: str) -> dict:
    if not database_url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # An in-memory SQLite database only lives as long as its connection,
    # so every session has to share the same one.
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# One lock per event loop. Waiting requests are parked on the loop, not on a
# threadpool worker, so the request holding the lock always gets a thread.
_db_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def get_db_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _db_locks.get(loop)
    if lock is None:
        lock = _db_locks[loop] = asyncio.Lock()
    return lock


async def get_db() -> AsyncGenerator[Session, None]:
    """
    Yield a session for one request.

    All requests share a single SQLite connection, so requests that use the
    database run one at a time; a uniqueness check and the write that
    depends on it can never interleave.
    """
    async with get_db_lock():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()
