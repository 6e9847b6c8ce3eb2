"""Per-request analysis pipeline: satellite analysis, context, narrative."""

from __future__ import annotations

import asyncio
import logging

from regenlens.analytics.context import classify_context
from regenlens.analytics.random_source import RandomSource, new_source
from regenlens.core.logger import Logger
from regenlens.geo.coordinate import Coordinate, InvalidInput
from regenlens.schemas.analysis import (
    AnalysisResult,
    EnvironmentalContext,
    SatelliteAnalysis,
)
from regenlens.services.narrative import NarrativeGenerator, TemplateNarrative
from regenlens.services.satellite import SatelliteAnalysisService


def _require_region(region: str) -> str:
    if not isinstance(region, str) or not region.strip():
        raise InvalidInput("region name is required")
    return region.strip()


def _template_text(
    fallback: TemplateNarrative,
    region: str,
    coordinate: Coordinate,
    satellite: SatelliteAnalysis,
) -> str:
    return fallback.generate(
        region, satellite.trend, satellite.degradation_score, coordinate
    )


def _recover(
    exc: Exception,
    fallback: TemplateNarrative,
    region: str,
    coordinate: Coordinate,
    satellite: SatelliteAnalysis,
    log: logging.Logger,
) -> str:
    log.error("Narrative generation failed for %s: %s", region, exc)
    log.info("Falling back to template recommendations")
    return _template_text(fallback, region, coordinate, satellite)


def _build_result(
    region: str,
    coordinate: Coordinate,
    satellite: SatelliteAnalysis,
    context: EnvironmentalContext,
    text: str,
    trend_csv: str | None,
    log: logging.Logger,
) -> AnalysisResult:
    if trend_csv:
        log.info("Writing NDVI trend to %s", trend_csv)
        satellite.trend.to_csv(trend_csv)
    log.info("Analysis completed for %s", region)
    return AnalysisResult(
        region=region,
        coordinate=coordinate,
        satellite=satellite,
        context=context,
        narrative=text,
    )


def build_analysis_report(
    coordinate: Coordinate,
    region: str,
    *,
    service: SatelliteAnalysisService | None = None,
    narrative: NarrativeGenerator | None = None,
    rng: RandomSource | None = None,
    logger: logging.Logger | None = None,
    trend_csv: str | None = None,
) -> AnalysisResult:
    """Run the full analysis for one request and return the result.

    Parameters
    ----------
    coordinate:
        Validated location to analyse.
    region:
        Non-empty region label; raises :class:`InvalidInput` otherwise.
    service:
        Satellite analysis service. Defaults to one with default config.
    narrative:
        Optional external narrative generator. If it fails, the template
        narrative is used so the analysis is still returned.
    rng:
        Random source for every draw of this request. A fresh one is
        created when omitted.
    trend_csv:
        Optional path the yearly NDVI trend is written to.
    """
    log = logger or Logger.get_logger(__name__)
    region = _require_region(region)
    rng = rng or new_source()
    service = service or SatelliteAnalysisService()
    log.info(
        "Starting analysis for %s at (%s, %s)", region, coordinate.lat, coordinate.lng
    )
    satellite = service.analyze(coordinate, region, rng)
    context = classify_context(coordinate, region, rng)

    fallback = TemplateNarrative(rng=rng)
    if narrative is None:
        text = _template_text(fallback, region, coordinate, satellite)
    else:
        try:
            text = narrative.generate(
                region, satellite.trend, satellite.degradation_score, coordinate
            )
        except Exception as exc:  # pylint: disable=broad-except
            text = _recover(exc, fallback, region, coordinate, satellite, log)
    return _build_result(region, coordinate, satellite, context, text, trend_csv, log)


async def build_analysis_report_async(
    coordinate: Coordinate,
    region: str,
    *,
    service: SatelliteAnalysisService | None = None,
    narrative: NarrativeGenerator | None = None,
    rng: RandomSource | None = None,
    logger: logging.Logger | None = None,
    trend_csv: str | None = None,
) -> AnalysisResult:
    """Async variant of :func:`build_analysis_report`.

    Honours the simulated latency, and runs an external *narrative*
    generator in a worker thread so its I/O does not stall other requests.
    """
    log = logger or Logger.get_logger(__name__)
    region = _require_region(region)
    rng = rng or new_source()
    service = service or SatelliteAnalysisService()
    log.info(
        "Starting analysis for %s at (%s, %s)", region, coordinate.lat, coordinate.lng
    )
    satellite = await service.analyze_async(coordinate, region, rng)
    context = classify_context(coordinate, region, rng)

    fallback = TemplateNarrative(rng=rng)
    if narrative is None:
        text = _template_text(fallback, region, coordinate, satellite)
    else:
        try:
            text = await asyncio.to_thread(
                narrative.generate,
                region,
                satellite.trend,
                satellite.degradation_score,
                coordinate,
            )
        except Exception as exc:  # pylint: disable=broad-except
            text = _recover(exc, fallback, region, coordinate, satellite, log)
    return _build_result(region, coordinate, satellite, context, text, trend_csv, log)
