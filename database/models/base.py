"""
database/models/base.py
========================
Single source of truth for Base, the Engine and the session factory.

  - one Base for the whole project
  - one Engine (created lazily, reused on every call)
  - get_session_local() always returns the same sessionmaker
  - expire_on_commit=False keeps loaded rows usable after the session closes
"""

from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine

Base = declarative_base()

_engine       = None
_SessionLocal = None


def get_engine(url: str = None):
    """
    Return the shared engine, creating it on first use.

    Args:
        url: database URL; defaults to DATABASE_URL or the user-data SQLite file
    """
    global _engine
    if _engine is None:
        if url is None:
            from core.config import get_database_url
            url = get_database_url()
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        _engine = create_engine(url, echo=False, future=True, connect_args=connect_args)
    return _engine


def get_session_local():
    """
    Return the shared sessionmaker.

        with get_session_local()() as session:
            ...
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def reset_engine():
    """Dispose the engine; the next get_engine() call builds a new one."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine       = None
    _SessionLocal = None
