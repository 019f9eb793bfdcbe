"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
"""

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from models.reservation import Reservation


class ReservationRepository:
    """Repository for reading a guest's reservations."""

    def __init__(self, db: Database):
        self.db = db

    def get_all_reservations(
        self, guest_id: int, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[Reservation]:
        """
        List a guest's reservations, earliest stay first.

        Args:
            guest_id: Id of the guest user.
            limit: Maximum number of reservations to return.

        Returns:
            Reservations with the reserved property's title, price and
            average rating.
        """
        sql = """
            SELECT reservations.id, properties.title, properties.cost_per_night,
                   reservations.start_date, reservations.end_date,
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = $1
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT $2;
        """
        rows = self.db.query(sql, [guest_id, limit])
        return [Reservation.from_row(r) for r in rows]
