from .persistence_service import SpacePersistenceStore

__all__ = [
    "SpacePersistenceStore",
]
