"""Catalogue of demo regions offered by the map picker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from regenlens.geo.coordinate import Coordinate


@dataclass(frozen=True)
class SampleRegion:
    """A well-known degradation hotspot with a representative point."""

    id: int
    name: str
    coordinate: Coordinate
    country: str
    degradation_level: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "coordinates": self.coordinate.to_dict(),
            "country": self.country,
            "degradationLevel": self.degradation_level,
            "description": self.description,
        }


SAMPLE_REGIONS: tuple[SampleRegion, ...] = (
    SampleRegion(
        1,
        "Machakos County, Kenya",
        Coordinate(-1.5177, 37.2634),
        "Kenya",
        "high",
        "Semi-arid region experiencing severe soil erosion",
    ),
    SampleRegion(
        2,
        "Rajasthan Desert, India",
        Coordinate(27.0238, 74.2179),
        "India",
        "severe",
        "Desert expansion and drought stress",
    ),
    SampleRegion(
        3,
        "Sahel Region, Niger",
        Coordinate(13.5116, 2.1254),
        "Niger",
        "severe",
        "Desertification and overgrazing",
    ),
    SampleRegion(
        4,
        "São Paulo Farmland, Brazil",
        Coordinate(-23.5505, -46.6333),
        "Brazil",
        "moderate",
        "Agricultural intensification impacts",
    ),
    SampleRegion(
        5,
        "Inner Mongolia, China",
        Coordinate(40.8142, 111.9562),
        "China",
        "high",
        "Grassland degradation and desertification",
    ),
)


def get_region(name: str) -> SampleRegion:
    """Return the sample region called *name* (case-insensitive)."""
    wanted = name.strip().lower()
    for region in SAMPLE_REGIONS:
        if region.name.lower() == wanted:
            return region
    raise KeyError(f"Unknown sample region: {name}")
