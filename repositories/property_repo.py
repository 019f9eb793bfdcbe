"""
repositories/property_repo.py
-----------------------------
Data access layer for properties.
All SQL queries related to the `properties` table live here.
"""

from typing import Any, Mapping, Optional

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from models.filter_options import FilterOptions
from models.property import PROPERTY_COLUMNS, PropertyRecord
from repositories.property_search import PropertySearchQueryBuilder
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository:
    """Repository for searching and inserting properties."""

    def __init__(self, db: Database, builder: Optional[PropertySearchQueryBuilder] = None):
        self.db = db
        self.builder = builder or PropertySearchQueryBuilder()

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self, options: Optional[FilterOptions] = None, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[PropertyRecord]:
        """
        Search properties matching the given filters, cheapest first.

        Args:
            options: Search filters; None means no filtering.
            limit: Maximum number of properties to return.

        Returns:
            Matching properties with their average rating. An empty list
            means nothing matched.

        Raises:
            QueryExecutionError: If the search could not be executed.
        """
        sql, params = self.builder.build(options, limit)
        rows = self.db.query(sql, params)
        return [PropertyRecord.from_row(r) for r in rows]

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, property_fields: Mapping[str, Any]) -> list[PropertyRecord]:
        """
        Insert a new property.

        Args:
            property_fields: Column values keyed by column name. Columns
                left out are not named in the INSERT, so the table's
                defaults apply to them.

        Returns:
            The stored rows (one property), each including its new `id`.
        """
        columns = [c for c in PROPERTY_COLUMNS if c in property_fields]
        values = [property_fields[c] for c in columns]
        placeholders = ", ".join(f"${i}" for i in range(1, len(values) + 1))
        sql = (
            f"INSERT INTO properties ({', '.join(columns)})\n"
            f"VALUES ({placeholders})\n"
            "RETURNING *;"
        )
        records = [PropertyRecord.from_row(r) for r in self.db.query(sql, values)]
        for record in records:
            logger.info(f"Added property #{record.id} for owner {record.owner_id}")
        return records
