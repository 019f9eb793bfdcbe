"""Unit tests for FilterOptions construction from request values."""

import dataclasses

import pytest

from models.filter_options import FilterOptions, is_present


class TestFromDict:

    def test_none_and_empty_mapping(self):
        assert FilterOptions.from_dict(None) == FilterOptions()
        assert FilterOptions.from_dict({}) == FilterOptions()

    def test_unknown_keys_are_ignored(self):
        options = FilterOptions.from_dict({"city": "Van", "page": 2})

        assert options == FilterOptions(city="Van")

    def test_blank_values_are_dropped(self):
        options = FilterOptions.from_dict({
            "city": "",
            "owner_id": None,
            "minimum_rating": "4",
        })

        assert options == FilterOptions(minimum_rating="4")

    def test_zero_is_kept(self):
        assert FilterOptions.from_dict({"owner_id": 0}).owner_id == 0


def test_options_are_immutable():
    options = FilterOptions(city="Van")

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.city = "Tor"


@pytest.mark.parametrize("value, expected", [
    (None, False),
    ("", False),
    ("  ", False),
    (0, True),
    (0.0, True),
    ("Van", True),
])
def test_is_present(value, expected):
    assert is_present(value) is expected
