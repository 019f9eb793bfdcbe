"""
LightBnB - pytest Configuration and Fixtures

Provides shared test fixtures for:
- Sample rows as returned by the store
- A mocked psycopg2 pool/connection/cursor chain
- A mocked Database handle for repository tests
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from db.connection import Database


# ============================================================================
# Sample Data Fixtures
# ============================================================================

@pytest.fixture
def sample_property_row():
    """A `properties.*` row plus the aggregated rating, as RealDictCursor returns it."""
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Cozy loft",
        "description": "Close to the seawall",
        "thumbnail_photo_url": "https://example.com/t.jpg",
        "cover_photo_url": "https://example.com/c.jpg",
        "cost_per_night": 12500,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada",
        "street": "123 Main St",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V5K 0A1",
        "average_rating": "4.5000000000000000",
    }


@pytest.fixture
def sample_user_row():
    return {"id": 1, "name": "Eva Stanley", "email": "eva@example.com", "password": "$2a$10$hash"}


@pytest.fixture
def sample_reservation_row():
    return {
        "id": 11,
        "title": "Cozy loft",
        "cost_per_night": 12500,
        "start_date": date(2026, 3, 1),
        "end_date": date(2026, 3, 5),
        "average_rating": 3.75,
    }


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def mock_cursor():
    """Cursor returning no rows by default."""
    cursor = MagicMock()
    cursor.description = [("id",)]
    cursor.fetchall.return_value = []
    return cursor


@pytest.fixture
def mock_conn(mock_cursor):
    conn = MagicMock()
    conn.closed = 0
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    return conn


@pytest.fixture
def mock_pool(mock_conn):
    pool = MagicMock()
    pool.getconn.return_value = mock_conn
    return pool


@pytest.fixture
def open_db(mock_pool):
    """A Database whose pool is a mock; nothing touches a real server."""
    with patch("db.connection.pool.SimpleConnectionPool", return_value=mock_pool):
        database = Database(dsn="postgresql://test@localhost/test")
        database.open()
        yield database
        database.close()


@pytest.fixture
def mock_db():
    """A Database stand-in for repository tests."""
    return MagicMock(spec=Database)
