"""
Document Model
==============
Root of the persisted tree.

Fields:
    next_id  — id given to the next bug created; strictly greater than every bug id
    users    — reference list of users
    parts    — project parts, each holding its bugs

Lookups are linear scans. They return live references into the tree, so
mutating the result is visible to the next save.
"""
from typing import Iterator, List, Optional

from pydantic import BaseModel

from .bug import Bug
from .part import Part
from .user import User


class Document(BaseModel):
    next_id: int = 0
    users: List[User] = []
    parts: List[Part] = []

    def iter_bugs(self) -> Iterator[Bug]:
        for part in self.parts:
            yield from part.bugs

    def find_bug(self, bug_id: int) -> Optional[Bug]:
        for bug in self.iter_bugs():
            if bug.id == bug_id:
                return bug
        return None

    def find_part(self, part_id: int) -> Optional[Part]:
        for part in self.parts:
            if part.id == part_id:
                return part
        return None

    def bug_count(self) -> int:
        return sum(len(part.bugs) for part in self.parts)
