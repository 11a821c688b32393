from __future__ import annotations
import logging
import time
from typing import Iterator
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, DeclarativeBase
from .config import settings

logger = logging.getLogger(__name__)

class Base(DeclarativeBase):
    pass

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None

def normalize_url(url: str) -> str:
    """
    Hosting providers usually hand out postgres://... or postgresql://...
    psycopg v3 needs an explicit postgresql+psycopg://
    """
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if url.startswith("postgresql://") and "+psycopg" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url

def _connect_args(url: str, timeout: float) -> dict:
    if url.startswith("sqlite"):
        # sessions are opened from FastAPI's threadpool
        return {"timeout": timeout, "check_same_thread": False}
    if url.startswith("postgresql"):
        return {
            "connect_timeout": max(1, int(timeout)),
            "options": f"-c statement_timeout={int(timeout * 1000)}",
        }
    return {}

def build_engine(url: str, timeout: float | None = None, **kwargs) -> Engine:
    """Engine with a bounded wait on every round trip to the store."""
    if not url:
        raise RuntimeError("DATABASE_URL is not set")
    timeout = settings.db_timeout_seconds if timeout is None else timeout
    url = normalize_url(url)
    kwargs.setdefault("connect_args", _connect_args(url, timeout))
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_timeout", timeout)
    return create_engine(url, pool_pre_ping=True, **kwargs)

def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = build_engine(settings.database_url)
    return _engine

def get_sessionmaker() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal

def get_session() -> Session:
    """Opens a session lazily."""
    return get_sessionmaker()()

def get_db() -> Iterator[Session]:
    """FastAPI dependency: one session per request."""
    sess = get_session()
    try:
        yield sess
    finally:
        sess.close()

def init_db(engine: Engine | None = None, max_retries: int | None = None, delay_sec: float | None = None) -> None:
    """
    Create or synchronize the schema, waiting for the database to come up
    (on a fresh deploy the database may still be starting).
    """
    from . import models  # noqa: F401
    eng = engine or get_engine()
    max_retries = settings.db_init_retries if max_retries is None else max_retries
    delay_sec = settings.db_init_delay_sec if delay_sec is None else delay_sec
    last_err: Exception | None = None
    for attempt in range(1, max_retries + 1):
        try:
            Base.metadata.create_all(bind=eng)
            with eng.connect() as conn:
                conn.execute(text("select 1"))
            logger.info("database ready (%s)", eng.url.render_as_string(hide_password=True))
            return
        except Exception as e:
            last_err = e
            logger.warning("database init attempt %d/%d failed: %s", attempt, max_retries, e)
            if attempt < max_retries:
                time.sleep(delay_sec)
    if last_err is None:
        raise RuntimeError("database init was not attempted (max_retries < 1)")
    raise last_err

def dispose_engine() -> None:
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
