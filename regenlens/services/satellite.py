from __future__ import annotations

"""Service simulating a remote-sensing analysis for a single location."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from regenlens.analytics.degradation import score_degradation
from regenlens.analytics.ndvi import synthesize_trend
from regenlens.analytics.random_source import (
    RandomSource,
    new_source,
    randint_rounded,
    uniform,
)
from regenlens.core.config import ConfigManager
from regenlens.geo.coordinate import Coordinate
from regenlens.schemas.analysis import AnalysisMetadata, SatelliteAnalysis
from regenlens.services.base import BaseService

MAX_CLOUD_COVER_PCT = 30
CONFIDENCE_RANGE_PCT = (80, 100)
MAX_IMAGE_AGE = timedelta(days=30)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SatelliteAnalysisService(BaseService):
    """Compose NDVI synthesis, scoring and acquisition metadata.

    The service holds configuration only. Each call uses the generator it is
    given, or a fresh one, so concurrent analyses never share random state.
    """

    def __init__(
        self,
        *,
        config: ConfigManager | None = None,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        super().__init__(logger)
        self.config = config or ConfigManager()
        self.clock = clock

    def _metadata(self, rng: RandomSource) -> AnalysisMetadata:
        cloud_cover = randint_rounded(rng, 0, MAX_CLOUD_COVER_PCT)
        age = MAX_IMAGE_AGE * rng.random()
        confidence = randint_rounded(rng, *CONFIDENCE_RANGE_PCT)
        return AnalysisMetadata(
            cloud_cover_pct=cloud_cover,
            confidence_pct=confidence,
            last_image_date=self.clock() - age,
        )

    def analyze(
        self,
        coordinate: Coordinate,
        region: str,
        rng: RandomSource | None = None,
    ) -> SatelliteAnalysis:
        """Return trend, degradation score and metadata for *coordinate*."""
        rng = rng or new_source()
        self.logger.info("Analyzing satellite data for %s", region)
        trend = synthesize_trend(
            coordinate,
            region,
            rng,
            start_year=self.config.get_trend_start_year(),
            decline_range=self.config.get_decline_rate_range(),
            jitter=self.config.get_seasonal_jitter(),
        )
        score = score_degradation(
            trend, fallback=self.config.get_degradation_fallback()
        )
        metadata = self._metadata(rng)
        self.logger.info(
            "Satellite analysis complete for %s: score=%.3f",
            region,
            score,
            extra={
                "event": "satellite.analysis",
                "region": region,
                "degradation_score": score,
                "cloud_cover_pct": metadata.cloud_cover_pct,
            },
        )
        return SatelliteAnalysis(trend=trend, degradation_score=score, metadata=metadata)

    async def analyze_async(
        self,
        coordinate: Coordinate,
        region: str,
        rng: RandomSource | None = None,
    ) -> SatelliteAnalysis:
        """Like :meth:`analyze`, after the configured simulated latency.

        The delay is awaited, so other requests keep running meanwhile, and it
        is drawn from its own generator so results match :meth:`analyze` for
        the same *rng*.
        """
        low, high = self.config.get_simulated_delay()
        if high > 0:
            delay = uniform(new_source(), low, high)
            self.logger.debug("Simulating %.2fs processing for %s", delay, region)
            await asyncio.sleep(delay)
        return self.analyze(coordinate, region, rng)
