"""
Part Model
==========
A component of the project that bugs are filed against.
Parts only come from the persisted file; there is no way to create one over HTTP.
"""
from typing import List

from pydantic import BaseModel

from .bug import Bug


class Part(BaseModel):
    name: str = ""
    id: int
    bugs: List[Bug] = []
