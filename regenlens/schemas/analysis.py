from __future__ import annotations

"""Data models for a single land-degradation analysis.

Internal records use :mod:`dataclasses` with snake_case fields;
:meth:`AnalysisResult.to_dict` renders the camelCase JSON shape the web
frontend consumes. Incoming request bodies are validated with Pydantic.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from regenlens.analytics.results import VegetationTrend
from regenlens.geo.coordinate import Coordinate


def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class EnvironmentalContext:
    """Climate zone, rainfall and threat profile of a location."""

    climate_zone: str
    avg_rainfall_mm: int
    primary_threats: List[str]
    soil_type: str = "mixed"
    elevation_m: int = 0
    land_use: str = "agriculture/pastoral"


@dataclass
class AnalysisMetadata:
    """Descriptive fields echoed back with a satellite analysis."""

    cloud_cover_pct: int
    confidence_pct: int
    last_image_date: datetime
    data_quality: str = "high"
    satellite_source: str = "Sentinel-2 (simulated)"
    resolution: str = "10m"


@dataclass
class SatelliteAnalysis:
    """Trend, score and metadata produced by the orchestration layer."""

    trend: VegetationTrend
    degradation_score: float
    metadata: AnalysisMetadata


@dataclass
class AnalysisResult:
    """Complete per-request report handed back to the HTTP layer."""

    region: str
    coordinate: Coordinate
    satellite: SatelliteAnalysis
    context: EnvironmentalContext
    narrative: str
    analysis_date: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def ndvi_trend(self) -> List[float]:
        return self.satellite.trend.to_list()

    @property
    def degradation_score(self) -> float:
        return self.satellite.degradation_score

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready representation with frontend field names."""
        meta = self.satellite.metadata
        return {
            "region": self.region,
            "coordinates": self.coordinate.to_dict(),
            "ndviTrend": self.ndvi_trend,
            "degradationScore": self.degradation_score,
            "aiSummary": self.narrative,
            "metadata": {
                "dataQuality": meta.data_quality,
                "cloudCover": meta.cloud_cover_pct,
                "lastImageDate": _iso(meta.last_image_date),
                "satelliteSource": meta.satellite_source,
                "confidence": meta.confidence_pct,
                "climateZone": self.context.climate_zone,
                "avgRainfall": self.context.avg_rainfall_mm,
                "primaryThreats": list(self.context.primary_threats),
            },
            "analysisDate": _iso(self.analysis_date),
        }

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)


class CoordinatesModel(BaseModel):
    """Request-level coordinate pair."""

    lat: float = Field(strict=True, ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(strict=True, ge=-180, le=180, allow_inf_nan=False)


class AnalysisRequest(BaseModel):
    """Body of an analysis request as posted by the frontend."""

    region: str = Field(min_length=1)
    coordinates: CoordinatesModel

    @field_validator("region")
    @classmethod
    def _strip_region(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("region must not be blank")
        return value

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.coordinates.lat, self.coordinates.lng)


__all__ = [
    "EnvironmentalContext",
    "AnalysisMetadata",
    "SatelliteAnalysis",
    "AnalysisResult",
    "CoordinatesModel",
    "AnalysisRequest",
]
