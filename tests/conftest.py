"""
tests/conftest.py
=================
Shared pytest fixtures: in-memory SQLite, no user data dir touched.
"""
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


# ─── Qt (session-scoped) ──────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    return app


# ─── Database ────────────────────────────────────────────────────────────────

@pytest.fixture
def db_engine():
    from database.models import Base
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
def store(session_factory):
    from services.persistence_service import SpacePersistenceStore
    return SpacePersistenceStore(session_factory)


# ─── Domain ──────────────────────────────────────────────────────────────────

class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def params():
    from core.parameters import GenerationParameters
    return GenerationParameters.defaults()


@pytest.fixture
def class_table():
    from core.entry_table import EntryTable
    from core.kinds import SizeKind
    return EntryTable.with_defaults(SizeKind.CLASS)


@pytest.fixture
def controller(qapp, clock):
    from core.controller import GenerationController
    rendered = []
    ctl = GenerationController(undo_window=10, clock=clock, render_target=rendered.append)
    ctl.rendered = rendered
    return ctl
