"""
Logged in user kept by the client. The session object is handed to
`SudharNayakClient` explicitly, callers decide where (and whether) it is persisted.
"""

from typing import Optional
from pydantic import BaseModel
import os


class UserSession(BaseModel):
    token: Optional[str] = None
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role == 'admin'

    @classmethod
    def load(cls, path: str) -> "UserSession":
        """Missing file means nobody is logged in."""
        if not os.path.exists(path):
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            return cls.model_validate_json(f.read())

    def save(self, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.model_dump_json())

    def update(self, data: dict) -> None:
        """Fills the session from an auth response `{id, name, email, role, token}`"""
        for field in type(self).model_fields:
            if field in data:
                setattr(self, field, data[field])

    def clear(self) -> None:
        for field in type(self).model_fields:
            setattr(self, field, None)
