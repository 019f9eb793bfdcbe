"""
services/search_service.py
---------------------------
Shapes repository results into the payloads the web tier sends back.
"""

from typing import Any, Mapping, Optional

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from models.filter_options import FilterOptions
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class SearchService:
    """Read-side operations exposed to the request handlers."""

    def __init__(self, db: Database):
        self.property_repo = PropertyRepository(db)
        self.reservation_repo = ReservationRepository(db)
        self.user_repo = UserRepository(db)

    def search_properties(
        self, query: Optional[Mapping[str, Any]] = None, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> dict:
        """
        Run a property search from request query values.

        Returns:
            `{"properties": [...]}`; the list is empty when nothing matched.
            Execution failures propagate as QueryExecutionError.
        """
        options = FilterOptions.from_dict(query)
        properties = self.property_repo.get_all_properties(options, limit)
        logger.debug(f"Property search {options} returned {len(properties)} rows")
        return {"properties": [p.to_dict() for p in properties]}

    def reservations_for(self, guest_id: int, limit: int = DEFAULT_SEARCH_LIMIT) -> dict:
        """Return `{"reservations": [...]}` for a guest."""
        reservations = self.reservation_repo.get_all_reservations(guest_id, limit)
        return {"reservations": [r.to_dict() for r in reservations]}

    def login_lookup(self, email: str) -> Optional[dict]:
        """
        Find the public fields of the user with this email.
        Password checking is left to the caller.
        """
        user = self.user_repo.get_user_with_email(email)
        return user.to_public_dict() if user else None
