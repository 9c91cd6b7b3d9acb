"""
User Model
==========
Reference data for people who can be named as the author of a change.

Fields:
    name     — display name, used as the ``who`` of a Change
    address  — contact address (free text, usually e-mail)
"""
from pydantic import BaseModel


class User(BaseModel):
    name: str = ""
    address: str = ""
