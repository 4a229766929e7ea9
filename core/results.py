"""
Operation Results
=================

Every controller event returns an OperationResult instead of raising:

    result = controller.add_entry("xxxl")
    if not result:
        show_error(result.message)
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from exceptions import SpaceForgeError


@dataclass
class OperationResult:
    ok: bool
    value: Any = None
    error: Optional[SpaceForgeError] = None
    notices: List[SpaceForgeError] = field(default_factory=list)

    @classmethod
    def success(cls, value=None, notices=None) -> "OperationResult":
        return cls(True, value=value, notices=list(notices or []))

    @classmethod
    def failure(cls, error: SpaceForgeError) -> "OperationResult":
        return cls(False, error=error)

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        """User-facing text of the error, or of the notices joined."""
        if self.error is not None:
            return self.error.message
        return "\n".join(notice.message for notice in self.notices)
