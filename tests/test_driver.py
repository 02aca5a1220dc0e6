"""Tests for driver profiles."""

import json

import pytest

from carsim.driver import Driver, create_driver, load_driver
from carsim.errors import InvalidDriverDataError


@pytest.fixture
def payload():
    """Random-user style payload with one result."""
    return {
        "results": [
            {
                "name": {"title": "Mr", "first": "John", "last": "Doe"},
                "location": {"city": "Stockholm", "country": "Sweden"},
            }
        ]
    }


class TestCreateDriver:
    """Tests for create_driver."""

    def test_maps_fields(self, payload):
        """Test payload fields map onto the driver."""
        driver = create_driver(payload)
        assert driver == Driver(first="John", last="Doe", title="Mr", city="Stockholm", country="Sweden")

    def test_full_name_and_origin(self, payload):
        """Test derived name and origin strings."""
        driver = create_driver(payload)
        assert driver.full_name == "Mr John Doe"
        assert driver.origin == "Stockholm, Sweden"

    def test_optional_fields_default_empty(self):
        """Test only the first name is required."""
        driver = create_driver({"results": [{"name": {"first": "Ada"}}]})
        assert driver.full_name == "Ada"
        assert driver.origin == ""

    @pytest.mark.parametrize("bad", [
        {},
        {"results": []},
        {"results": [{"name": {"last": "Doe"}}]},
        {"results": [{}]},
        [],
    ])
    def test_invalid_payloads(self, bad):
        """Test malformed payloads raise InvalidDriverDataError."""
        with pytest.raises(InvalidDriverDataError):
            create_driver(bad)


class TestLoadDriver:
    """Tests for load_driver."""

    def test_load_from_file(self, tmp_path, payload):
        """Test loading a payload from JSON."""
        path = tmp_path / "driver.json"
        path.write_text(json.dumps(payload))
        assert load_driver(str(path)).first == "John"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_driver(str(tmp_path / "nobody.json"))
