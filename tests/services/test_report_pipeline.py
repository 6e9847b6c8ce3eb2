# pylint: disable=missing-module-docstring,missing-function-docstring
import asyncio
import json
import logging
import time

import pandas as pd
import pytest

from regenlens.analytics.random_source import FixedSequence
from regenlens.geo.coordinate import Coordinate, InvalidInput
from regenlens.services.narrative import TemplateNarrative
from regenlens.services.report import build_analysis_report, build_analysis_report_async
from regenlens.services.satellite import SatelliteAnalysisService


class BrokenNarrative:
    """Narrative generator that always fails, like an unreachable API."""

    def __init__(self):
        self.calls = 0

    def generate(self, region, trend, score, coordinate):
        self.calls += 1
        raise RuntimeError("service unavailable")


class SlowNarrative:
    """Blocking generator, like a synchronous HTTP client."""

    def generate(self, region, trend, score, coordinate):
        time.sleep(0.3)
        return f"{region}: slow"


class EchoNarrative:
    def generate(self, region, trend, score, coordinate):
        return f"{region}: {trend.first} -> {trend.last} ({score})"


@pytest.fixture
def service(frozen_now):
    return SatelliteAnalysisService(clock=lambda: frozen_now)


def test_report_for_machakos(service, machakos):
    result = build_analysis_report(
        machakos, "Machakos County, Kenya", service=service, rng=FixedSequence([0.0])
    )
    data = result.to_dict()

    assert data["region"] == "Machakos County, Kenya"
    assert data["coordinates"] == {"lat": -1.5177, "lng": 37.2634}
    assert data["ndviTrend"] == pytest.approx([0.575, 0.555, 0.535, 0.515])
    assert data["degradationScore"] == 0.104
    meta = data["metadata"]
    assert meta["climateZone"] == "semi-arid"
    assert meta["avgRainfall"] == 500
    assert meta["primaryThreats"] == ["soil erosion", "drought", "deforestation"]
    assert meta["cloudCover"] == 0
    assert meta["confidence"] == 80
    assert meta["lastImageDate"] == "2025-06-01T12:00:00Z"
    # first template with a zero draw
    assert data["aiSummary"].startswith(
        "Vegetation analysis for Machakos County, Kenya (-1.5177, 37.2634) shows 10.4%"
    )
    assert data["analysisDate"].endswith("Z")


def test_report_is_json_serialisable(service, rajasthan):
    result = build_analysis_report(rajasthan, "Rajasthan Desert, India", service=service)
    payload = json.loads(result.to_json())
    assert len(payload["ndviTrend"]) == 4
    assert 0 <= payload["degradationScore"] <= 0.9
    assert payload["metadata"]["climateZone"] == "arid"


def test_custom_narrative_is_used(service):
    result = build_analysis_report(
        Coordinate(0, 0),
        "Sahel",
        service=service,
        narrative=EchoNarrative(),
        rng=FixedSequence([0.5]),
    )
    assert result.narrative.startswith("Sahel: 0.3 -> ")


def test_failing_narrative_falls_back_to_template(service):
    broken = BrokenNarrative()
    result = build_analysis_report(
        Coordinate(13.5116, 2.1254), "Sahel Region, Niger", service=service, narrative=broken
    )
    assert broken.calls == 1
    assert "Sahel Region, Niger" in result.narrative
    assert len(result.ndvi_trend) == 4


@pytest.mark.parametrize("region", ["", "   ", None])
def test_region_is_required(service, region):
    with pytest.raises(InvalidInput):
        build_analysis_report(Coordinate(0, 0), region, service=service)


def test_region_is_stripped(service):
    result = build_analysis_report(Coordinate(0, 0), "  Sahel  ", service=service)
    assert result.region == "Sahel"


def test_async_report(service, machakos):
    result = asyncio.run(
        build_analysis_report_async(
            machakos, "Machakos County, Kenya", service=service, rng=FixedSequence([0.0])
        )
    )
    assert result.degradation_score == 0.104
    assert result.context.climate_zone == "semi-arid"


def test_template_narrative_second_template(machakos):
    gen = TemplateNarrative(rng=FixedSequence([0.9]))
    service = SatelliteAnalysisService()
    sat = service.analyze(machakos, "Machakos", FixedSequence([0.99]))
    text = gen.generate("Machakos", sat.trend, sat.degradation_score, machakos)
    assert text.startswith("The Machakos area exhibits")
    assert "between 2022 and 2025" in text
    assert "RESTORATION STRATEGY" in text


def test_template_narrative_requires_templates():
    with pytest.raises(ValueError):
        TemplateNarrative(templates=())


def test_async_reports_run_blocking_narratives_concurrently(service):
    async def run_many():
        return await asyncio.gather(
            *(
                build_analysis_report_async(
                    Coordinate(i, i), f"plot {i}", service=service, narrative=SlowNarrative()
                )
                for i in range(5)
            )
        )

    start = time.perf_counter()
    results = asyncio.run(run_many())
    elapsed = time.perf_counter() - start

    assert [r.narrative for r in results] == [f"plot {i}: slow" for i in range(5)]
    assert elapsed < 0.6


def test_async_failing_narrative_falls_back_to_template(service):
    broken = BrokenNarrative()
    result = asyncio.run(
        build_analysis_report_async(
            Coordinate(13.5116, 2.1254),
            "Sahel Region, Niger",
            service=service,
            narrative=broken,
        )
    )
    assert broken.calls == 1
    assert "Sahel Region, Niger" in result.narrative


def test_default_service_logs_under_satellite_module(monkeypatch, machakos):
    created = []
    original_init = SatelliteAnalysisService.__init__

    def recording_init(self, **kwargs):
        original_init(self, **kwargs)
        created.append(self)

    monkeypatch.setattr(SatelliteAnalysisService, "__init__", recording_init)
    build_analysis_report(
        machakos,
        "Machakos County, Kenya",
        rng=FixedSequence([0.0]),
        logger=logging.getLogger("tests.report"),
    )

    assert len(created) == 1
    assert created[0].logger.name == "regenlens.services.satellite"


def test_trend_csv_export(service, machakos, tmp_path):
    out = tmp_path / "trend.csv"
    result = build_analysis_report(
        machakos,
        "Machakos County, Kenya",
        service=service,
        rng=FixedSequence([0.0]),
        trend_csv=str(out),
    )

    df = pd.read_csv(out)
    assert list(df.columns) == ["year", "ndvi"]
    assert df["year"].tolist() == [2022, 2023, 2024, 2025]
    assert df["ndvi"].tolist() == pytest.approx(result.ndvi_trend)
