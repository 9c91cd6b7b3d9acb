"""
Change Model
============
One entry of a bug's audit history. Immutable once appended.

Fields:
    when     — timezone-aware timestamp of the change
    who      — author name
    status   — numeric status code (see app.core.constants.STATUS_NAMES)
    comment  — free-text comment
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Change(BaseModel):
    model_config = ConfigDict(frozen=True)

    when: datetime
    who: str = ""
    status: int = 0
    comment: str = ""
