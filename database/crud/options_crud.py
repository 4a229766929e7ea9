"""
database/crud/options_crud.py
==============================
Key/value access to the space_options table. Values are stored as JSON text.
"""

import json
import logging
from typing import Any, Dict, Optional

from database.models.option import SpaceOption
from .base_crud import BaseCRUD

logger = logging.getLogger(__name__)


class OptionsCRUD(BaseCRUD):

    def __init__(self, session_factory):
        super().__init__(SpaceOption, session_factory)

    def get_raw(self, key: str) -> Optional[str]:
        with self.get_session() as session:
            row = session.query(SpaceOption).filter_by(key=key).first()
            return row.value if row else None

    def get_json(self, key: str, default: Any = None) -> Any:
        """
        Decoded value, or default when the key is missing.

        Raises:
            ValueError: stored text is not valid JSON
        """
        raw = self.get_raw(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set_json(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Dict[str, Any]) -> None:
        """Upsert several keys in a single commit."""
        with self.get_session() as session:
            existing = {
                row.key: row
                for row in session.query(SpaceOption).filter(SpaceOption.key.in_(list(values)))
            }
            for key, value in values.items():
                text = json.dumps(value, ensure_ascii=False)
                row = existing.get(key)
                if row is None:
                    row = SpaceOption(key=key, value=text)
                    self._stamp(row, created=True)
                    session.add(row)
                else:
                    row.value = text
                    self._stamp(row, created=False)
            session.commit()
        logger.debug(f"Stored options: {', '.join(values)}")
