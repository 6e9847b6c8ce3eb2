"""
Module `geo.coordinate` defines the validated latitude/longitude pair every
analysis starts from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping


class InvalidInput(ValueError):
    """Raised when a coordinate or region label cannot be analysed."""


def _check_number(name: str, value: Any, limit: float) -> float:
    # bool is a Real subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"{name} must be numeric, got {value!r}")
    value = float(value)
    if math.isnan(value) or not -limit <= value <= limit:
        raise InvalidInput(f"{name} must be within [-{limit:g}, {limit:g}], got {value}")
    return value


@dataclass(frozen=True)
class Coordinate:
    """Geographic point in decimal degrees (WGS84)."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lat", _check_number("lat", self.lat, 90.0))
        object.__setattr__(self, "lng", _check_number("lng", self.lng, 180.0))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Coordinate":
        """Build a coordinate from a ``{"lat": .., "lng": ..}`` mapping."""
        if not isinstance(data, Mapping):
            raise InvalidInput("coordinates must be an object with lat and lng")
        try:
            return cls(data["lat"], data["lng"])
        except KeyError as exc:
            raise InvalidInput(f"coordinates missing {exc.args[0]!r}") from exc

    @property
    def abs_lat(self) -> float:
        return abs(self.lat)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}
