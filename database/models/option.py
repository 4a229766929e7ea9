from sqlalchemy import Column, Integer, String, Text, DateTime, func
from .base import Base


class SpaceOption(Base):
    """One persisted JSON blob (settings or an entry list) keyed by name."""

    __tablename__ = "space_options"
    id = Column(Integer, primary_key=True)
    key = Column(String(64), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SpaceOption(id={self.id}, key={self.key!r})>"
