"""
Bug Model
=========

Fields:
    id       — unique across the whole document, assigned from Document.next_id
    subject  — overwritten by every change
    changes  — append-only history, oldest first

``last`` is derived from ``changes`` on every access and is never persisted.
"""
from typing import List, Optional

from pydantic import BaseModel

from .change import Change


class Bug(BaseModel):
    id: int
    subject: str = ""
    changes: List[Change] = []

    @property
    def last(self) -> Optional[Change]:
        """Most recent change, or None for a bug nobody has touched yet."""
        if not self.changes:
            return None
        return self.changes[-1]
