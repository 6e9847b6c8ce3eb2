# pylint: disable=missing-module-docstring,missing-function-docstring
from dataclasses import is_dataclass
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from regenlens.analytics.results import VegetationTrend
from regenlens.geo.coordinate import Coordinate
from regenlens.schemas.analysis import (
    AnalysisMetadata,
    AnalysisRequest,
    AnalysisResult,
    EnvironmentalContext,
    SatelliteAnalysis,
)


def _result() -> AnalysisResult:
    ts = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return AnalysisResult(
        region="Sahel Region, Niger",
        coordinate=Coordinate(13.5116, 2.1254),
        satellite=SatelliteAnalysis(
            trend=VegetationTrend((0.3, 0.25, 0.2, 0.15)),
            degradation_score=0.5,
            metadata=AnalysisMetadata(
                cloud_cover_pct=12, confidence_pct=88, last_image_date=ts
            ),
        ),
        context=EnvironmentalContext(
            climate_zone="arid",
            avg_rainfall_mm=200,
            primary_threats=["desertification", "drought", "overgrazing"],
        ),
        narrative="Act now.",
        analysis_date=ts,
    )


def test_context_defaults():
    ctx = EnvironmentalContext("tropical", 1200, ["soil erosion"])
    assert ctx.soil_type == "mixed"
    assert ctx.land_use == "agriculture/pastoral"
    assert is_dataclass(ctx)


def test_result_to_dict_field_names():
    data = _result().to_dict()
    assert data == {
        "region": "Sahel Region, Niger",
        "coordinates": {"lat": 13.5116, "lng": 2.1254},
        "ndviTrend": [0.3, 0.25, 0.2, 0.15],
        "degradationScore": 0.5,
        "aiSummary": "Act now.",
        "metadata": {
            "dataQuality": "high",
            "cloudCover": 12,
            "lastImageDate": "2025-01-02T03:04:05Z",
            "satelliteSource": "Sentinel-2 (simulated)",
            "confidence": 88,
            "climateZone": "arid",
            "avgRainfall": 200,
            "primaryThreats": ["desertification", "drought", "overgrazing"],
        },
        "analysisDate": "2025-01-02T03:04:05Z",
    }


def test_request_validation_ok():
    req = AnalysisRequest.model_validate(
        {"region": " Machakos ", "coordinates": {"lat": -1.5177, "lng": 37.2634}}
    )
    assert req.region == "Machakos"
    assert req.to_coordinate() == Coordinate(-1.5177, 37.2634)


@pytest.mark.parametrize(
    "body",
    [
        {"coordinates": {"lat": 1.0, "lng": 2.0}},
        {"region": "", "coordinates": {"lat": 1.0, "lng": 2.0}},
        {"region": "   ", "coordinates": {"lat": 1.0, "lng": 2.0}},
        {"region": "x"},
        {"region": "x", "coordinates": {"lat": "abc", "lng": 2.0}},
        {"region": "x", "coordinates": {"lat": "1.0", "lng": 2.0}},
        {"region": "x", "coordinates": {"lat": 1.0}},
        {"region": "x", "coordinates": {"lat": 95.0, "lng": 2.0}},
        {"region": "x", "coordinates": {"lat": 1.0, "lng": -200.0}},
    ],
)
def test_request_validation_rejects(body):
    with pytest.raises(ValidationError):
        AnalysisRequest.model_validate(body)
