"""Unit tests for SearchService payload shaping."""

import pytest

from db.connection import QueryExecutionError
from services.search_service import SearchService


class TestSearchProperties:

    def test_wraps_properties(self, mock_db, sample_property_row):
        mock_db.query.return_value = [sample_property_row]

        payload = SearchService(mock_db).search_properties({"city": "Van"}, limit=5)

        assert list(payload) == ["properties"]
        assert payload["properties"][0]["id"] == 7
        assert payload["properties"][0]["average_rating"] == 4.5
        assert mock_db.query.call_args.args[1] == ["%Van%", 5]

    def test_request_blanks_are_ignored(self, mock_db):
        mock_db.query.return_value = []

        payload = SearchService(mock_db).search_properties(
            {"city": "", "minimum_rating": None, "owner_id": 2}
        )

        assert payload == {"properties": []}
        assert mock_db.query.call_args.args[1] == [2, 10]

    def test_failure_is_distinct_from_no_matches(self, mock_db):
        mock_db.query.side_effect = QueryExecutionError("connection refused")

        with pytest.raises(QueryExecutionError):
            SearchService(mock_db).search_properties({"city": "Van"})


class TestOtherLookups:

    def test_reservations_for(self, mock_db, sample_reservation_row):
        mock_db.query.return_value = [sample_reservation_row]

        payload = SearchService(mock_db).reservations_for(4)

        assert payload["reservations"][0]["title"] == "Cozy loft"

    def test_login_lookup_hides_password(self, mock_db, sample_user_row):
        mock_db.query_one.return_value = sample_user_row

        assert SearchService(mock_db).login_lookup("eva@example.com") == {
            "id": 1,
            "name": "Eva Stanley",
            "email": "eva@example.com",
        }

    def test_login_lookup_unknown(self, mock_db):
        mock_db.query_one.return_value = None

        assert SearchService(mock_db).login_lookup("x@example.com") is None
