"""
models/filter_options.py
------------------------
Search filters supplied by the caller for one property search.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class FilterOptions:
    """
    Optional constraints for a property search.

    Every field is independent; `None` means "no constraint". Values are not
    type checked or cross-validated (a minimum above the maximum is allowed
    and simply matches nothing).

    Attributes:
        city: Substring matched against `properties.city`.
        maximum_price_per_night: Exclusive upper bound on `cost_per_night`.
        minimum_price_per_night: Exclusive lower bound on `cost_per_night`.
        owner_id: Only properties owned by this user.
        minimum_rating: Inclusive lower bound on the average review rating.
    """
    city: Optional[str] = None
    maximum_price_per_night: Optional[float] = None
    minimum_price_per_night: Optional[float] = None
    owner_id: Optional[int] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "FilterOptions":
        """
        Build filters from a request-style mapping.

        Unknown keys are ignored; `None` and blank strings count as absent.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{
            key: value
            for key, value in data.items()
            if key in known and is_present(value)
        })


def is_present(value: Any) -> bool:
    """True unless the value is None or a blank string. Zero is present."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True
