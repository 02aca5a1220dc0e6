"""
Driver profile.

Profiles arrive as random-user style payloads:
    {"results": [{"name": {"title", "first", "last"},
                  "location": {"city", "country"}}]}
Fetching them is left to the caller.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .errors import InvalidDriverDataError


@dataclass
class Driver:
    """Who is behind the wheel."""
    first: str
    last: str = ""
    title: str = ""
    city: str = ""
    country: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.title, self.first, self.last) if part)

    @property
    def origin(self) -> str:
        return ", ".join(part for part in (self.city, self.country) if part)


def create_driver(payload: Dict[str, Any]) -> Driver:
    """
    Build a Driver from the first entry of a results payload.

    Raises:
        InvalidDriverDataError: If there are no results or no first name.
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    if not results:
        raise InvalidDriverDataError("Driver payload has no results")

    result = results[0]
    name = result.get("name") or {}
    location = result.get("location") or {}

    first = name.get("first")
    if not first:
        raise InvalidDriverDataError("Driver payload is missing name.first")

    return Driver(
        first=first,
        last=name.get("last", ""),
        title=name.get("title", ""),
        city=location.get("city", ""),
        country=location.get("country", ""),
    )


def load_driver(path: str) -> Driver:
    """Load a driver payload from a JSON file."""
    driver_path = Path(path)
    if not driver_path.exists():
        raise FileNotFoundError(f"Driver file not found: {path}")

    with open(driver_path) as f:
        return create_driver(json.load(f))
