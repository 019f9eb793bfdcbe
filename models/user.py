"""
models/user.py
--------------
Domain model for application users (guests and owners).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A row of the `users` table."""
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def to_public_dict(self) -> dict:
        """User fields safe to hand to the web tier (no password)."""
        return {"id": self.id, "name": self.name, "email": self.email}
