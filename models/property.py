"""
models/property.py
------------------
Domain model for rental properties.
"""

from dataclasses import dataclass, fields
from typing import Optional

# Insert order for new properties; matches the columns of `properties`
# after `id`.
PROPERTY_COLUMNS: tuple[str, ...] = (
    "title",
    "description",
    "owner_id",
    "cover_photo_url",
    "thumbnail_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "province",
    "city",
    "country",
    "street",
    "post_code",
)


@dataclass
class PropertyRecord:
    """
    A row of the `properties` table, optionally with its average rating.

    Attributes:
        id: Database primary key (None for new records).
        owner_id: Id of the user listing the property.
        cost_per_night: Nightly price in the smallest currency unit.
        average_rating: Mean of `property_reviews.rating`; None when the row
            was not produced by a rating aggregate.
    """
    title: str
    owner_id: int
    cost_per_night: int
    description: Optional[str] = None
    cover_photo_url: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    province: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    street: Optional[str] = None
    post_code: Optional[str] = None
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_row(cls, row: dict) -> "PropertyRecord":
        """Build a record from a dict row, ignoring columns it does not know."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in row.items() if k in known}
        if values.get("average_rating") is not None:
            values["average_rating"] = float(values["average_rating"])
        return cls(**values)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
