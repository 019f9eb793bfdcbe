"""
repositories/property_search.py
-------------------------------
Builds the filtered, rating-aggregated property search statement.

Each optional filter is a small predicate builder that looks at the
FilterOptions and either contributes a `(condition, value)` pair or nothing.
The builders run in a fixed order and their values are numbered `$1, $2, ...`
as they are appended, so the placeholder index always equals the position
in the parameter list.
"""

from typing import Any, Callable, Optional

from config import DEFAULT_SEARCH_LIMIT
from models.filter_options import FilterOptions, is_present

# A condition template with one `{}` slot for the placeholder, and its value.
Predicate = tuple[str, Any]
PredicateBuilder = Callable[[FilterOptions], Optional[Predicate]]

BASE_QUERY = (
    "SELECT properties.*, AVG(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


def _city(options: FilterOptions) -> Optional[Predicate]:
    if not is_present(options.city):
        return None
    return "city LIKE {}", f"%{options.city}%"


def _maximum_price(options: FilterOptions) -> Optional[Predicate]:
    if not is_present(options.maximum_price_per_night):
        return None
    return "cost_per_night < {}", options.maximum_price_per_night


def _minimum_price(options: FilterOptions) -> Optional[Predicate]:
    if not is_present(options.minimum_price_per_night):
        return None
    return "cost_per_night > {}", options.minimum_price_per_night


def _owner(options: FilterOptions) -> Optional[Predicate]:
    if not is_present(options.owner_id):
        return None
    return "owner_id = {}", options.owner_id


WHERE_PREDICATES: tuple[PredicateBuilder, ...] = (
    _city,
    _maximum_price,
    _minimum_price,
    _owner,
)


class PropertySearchQueryBuilder:
    """Produces `(sql_text, params)` for a property search."""

    def __init__(self, where_predicates: tuple[PredicateBuilder, ...] = WHERE_PREDICATES):
        self.where_predicates = where_predicates

    def build(
        self, options: Optional[FilterOptions] = None, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> tuple[str, list[Any]]:
        """
        Assemble the search statement.

        Args:
            options: Filters to apply; None behaves like an empty FilterOptions.
            limit: Maximum number of rows, always bound as the last parameter.

        Returns:
            The SQL text using `$n` placeholders and the ordered values.
        """
        options = options or FilterOptions()
        params: list[Any] = []

        def bind(value: Any) -> str:
            params.append(value)
            return f"${len(params)}"

        conditions = []
        for builder in self.where_predicates:
            predicate = builder(options)
            if predicate is not None:
                template, value = predicate
                conditions.append(template.format(bind(value)))

        clauses = [BASE_QUERY]
        if conditions:
            clauses.append("WHERE " + " AND ".join(conditions))
        clauses.append("GROUP BY properties.id")
        if is_present(options.minimum_rating):
            clauses.append(f"HAVING AVG(rating) >= {bind(options.minimum_rating)}")
        clauses.append(f"ORDER BY cost_per_night LIMIT {bind(limit)}")

        return "\n".join(clauses) + ";", params
