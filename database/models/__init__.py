from .base import Base, get_engine, get_session_local, reset_engine
from .option import SpaceOption

__all__ = ["Base", "get_engine", "get_session_local", "init_db", "reset_engine", "SpaceOption"]


def init_db(engine=None):
    """Create all tables."""
    Base.metadata.create_all(bind=engine or get_engine())
