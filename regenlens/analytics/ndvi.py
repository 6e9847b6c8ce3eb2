"""Synthetic NDVI trend generation.

Stands in for a real remote-sensing pipeline: a plausible baseline NDVI is
picked from the region label (or, failing that, from coarse climate bands)
and a few years of gradual decline with seasonal noise are layered on top.
"""

from __future__ import annotations

from typing import Sequence

from regenlens.analytics.random_source import RandomSource, uniform
from regenlens.analytics.results import NDVI_CEILING, NDVI_FLOOR, VegetationTrend
from regenlens.core.logger import Logger
from regenlens.geo.coordinate import Coordinate
from regenlens.geo.lexicon import BASE_INDEX_RULES, KeywordRule, match_rule

logger = Logger.get_logger(__name__)

DEFAULT_BASE_INDEX = 0.7
POLAR_LAT = 60.0
TEMPERATE_LAT = 40.0
TROPIC_LAT = 23.5

# Africa / Middle East box inside the tropics, prone to desertification
_DRYLAND_LNG = (-20.0, 50.0)
_DRYLAND_LAT = (-35.0, 35.0)


def _climate_band_index(coordinate: Coordinate) -> float:
    abs_lat = coordinate.abs_lat
    if abs_lat > POLAR_LAT:
        return 0.4
    if abs_lat > TEMPERATE_LAT:
        return 0.6
    if abs_lat < TROPIC_LAT:
        in_dryland = (
            _DRYLAND_LNG[0] < coordinate.lng < _DRYLAND_LNG[1]
            and _DRYLAND_LAT[0] < coordinate.lat < _DRYLAND_LAT[1]
        )
        return 0.5 if in_dryland else 0.8
    return DEFAULT_BASE_INDEX


def base_index(
    coordinate: Coordinate,
    region_label: str,
    rules: Sequence[KeywordRule] = BASE_INDEX_RULES,
) -> float:
    """Return the baseline NDVI for a location.

    A keyword match on *region_label* takes precedence over the
    latitude/longitude band heuristic.
    """
    rule = match_rule(rules, region_label)
    if rule is not None:
        return float(rule.value)
    return _climate_band_index(coordinate)


def _clamp(value: float) -> float:
    return max(NDVI_FLOOR, min(NDVI_CEILING, value))


def synthesize_trend(
    coordinate: Coordinate,
    region_label: str,
    rng: RandomSource,
    *,
    years: int = 4,
    start_year: int = 2022,
    decline_range: tuple[float, float] = (0.02, 0.08),
    jitter: float = 0.025,
    rules: Sequence[KeywordRule] = BASE_INDEX_RULES,
) -> VegetationTrend:
    """Generate a yearly NDVI trend for *coordinate*.

    Draw order from *rng* is fixed: one decline rate for the run, then per
    year a decline multiplier in ``[1.0, 1.5]`` (skipped for the first year)
    followed by a jitter in ``[-jitter, +jitter]``. Each yearly value is
    clamped to ``[0.1, 1.0]`` and rounded to three decimals.
    """
    if years < 1:
        raise ValueError("years must be at least 1")
    current = base_index(coordinate, region_label, rules)
    decline_rate = uniform(rng, *decline_range)

    values = []
    for year in range(years):
        if year > 0:
            current -= decline_rate * uniform(rng, 1.0, 1.5)
        noisy = current + uniform(rng, -jitter, jitter)
        values.append(round(_clamp(noisy), 3))

    logger.debug("Generated NDVI trend for %s: %s", region_label, values)
    return VegetationTrend(tuple(values), start_year=start_year)
