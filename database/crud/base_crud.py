"""
database/crud/base_crud.py
===========================
BaseCRUD: base class for all CRUD operations.

Session rules:
  1. get_session() is a plain context manager (no nested returns)
  2. every write ends with exactly one commit
  3. automatic rollback on any exception
  4. close() guaranteed in finally
  5. accepts a callable (sessionmaker / get_session_local) or a Session (tests)
"""

from sqlalchemy.orm import Session
from contextlib import contextmanager
from typing import Any, Callable
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class BaseCRUD:

    def __init__(self, model: Any, session_factory: Callable):
        self.model           = model
        self.session_factory = session_factory
        self.table_name      = getattr(model, "__tablename__", model.__name__.lower())

    # ─────────────────────────────────────────────────────────────────────────
    # Session Management
    # ─────────────────────────────────────────────────────────────────────────

    @contextmanager
    def get_session(self) -> Session:
        """
        Yield a ready Session.

        Case 1: session_factory is a Session (test injection), used as-is, never closed.
        Case 2: callable; factory() → Session, or factory() → sessionmaker → Session.
        """
        if isinstance(self.session_factory, Session):
            yield self.session_factory
            return

        session = None
        try:
            result = self.session_factory()

            if isinstance(result, Session):
                session = result
            elif callable(result):
                session = result()
            else:
                raise TypeError(
                    f"session_factory returned unexpected type: {type(result).__name__}"
                )

            yield session

        except Exception:
            if session is not None:
                session.rollback()
            raise

        finally:
            if session is not None:
                session.close()

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)

    def _stamp(self, obj: Any, *, created: bool):
        now = self._now()
        if created and hasattr(obj, "created_at") and getattr(obj, "created_at", None) is None:
            obj.created_at = now
        if hasattr(obj, "updated_at"):
            obj.updated_at = now

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def count(self) -> int:
        with self.get_session() as session:
            return session.query(self.model).count()
