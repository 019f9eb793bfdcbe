"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import Database
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def __init__(self, db: Database):
        self.db = db

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email.

        Returns:
            User or None.
        """
        row = self.db.query_one("SELECT * FROM users WHERE email = $1;", [email])
        return User.from_row(row) if row else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key."""
        row = self.db.query_one("SELECT * FROM users WHERE id = $1;", [user_id])
        return User.from_row(row) if row else None

    def add_user(self, name: str, email: str, password: str) -> User:
        """
        Insert a new user.

        Args:
            name: Display name.
            email: Login email; unique in the schema.
            password: Password hash, stored as given.

        Returns:
            The stored user with its `id` populated.

        Raises:
            QueryExecutionError: On a duplicate email or any other failure.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES ($1, $2, $3)
            RETURNING *;
        """
        user = User.from_row(self.db.query_one(sql, [name, email, password]))
        logger.info(f"Added user #{user.id}")
        return user
