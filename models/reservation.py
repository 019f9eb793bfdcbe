"""
models/reservation.py
---------------------
Read model for a guest's reservation listing.
"""

from dataclasses import dataclass, asdict
from datetime import date
from typing import Optional


@dataclass
class Reservation:
    """
    One reservation joined with the reserved property.

    Attributes:
        id: Reservation primary key.
        title: Title of the reserved property.
        cost_per_night: Nightly price of the property.
        start_date: First night of the stay.
        average_rating: Mean review rating of the property.
    """
    id: int
    title: str
    cost_per_night: int
    start_date: date
    end_date: Optional[date] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_row(cls, row: dict) -> "Reservation":
        rating = row.get("average_rating")
        return cls(
            id=row["id"],
            title=row["title"],
            cost_per_night=row["cost_per_night"],
            start_date=row["start_date"],
            end_date=row.get("end_date"),
            average_rating=float(rating) if rating is not None else None,
        )

    def to_dict(self) -> dict:
        return asdict(self)
