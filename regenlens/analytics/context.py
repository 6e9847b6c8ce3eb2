"""Coarse climate and threat classification for a location."""

from __future__ import annotations

from typing import Sequence

from regenlens.analytics.random_source import RandomSource, new_source, randint_rounded
from regenlens.geo.coordinate import Coordinate
from regenlens.geo.lexicon import CONTEXT_RULES, KeywordRule, match_rule
from regenlens.schemas.analysis import EnvironmentalContext

DEFAULT_THREATS = ("soil erosion", "climate variability")
MAX_ELEVATION_M = 2000


def classify_context(
    coordinate: Coordinate,
    region_label: str,
    rng: RandomSource | None = None,
    rules: Sequence[KeywordRule] = CONTEXT_RULES,
) -> EnvironmentalContext:
    """Classify *coordinate* into a climate zone with rainfall and threats.

    Latitude gives the default zone; a keyword rule matching *region_label*
    then overrides zone, rainfall and threats together. Elevation is filler
    drawn from *rng*.
    """
    abs_lat = coordinate.abs_lat
    if abs_lat < 23.5:
        zone, rainfall = "tropical", 1200
    elif abs_lat > 40:
        zone, rainfall = "temperate", 600
    else:
        zone, rainfall = "temperate", 800
    threats = list(DEFAULT_THREATS)

    rule = match_rule(rules, region_label)
    if rule is not None:
        zone = rule.value["climate_zone"]
        rainfall = int(rule.value["avg_rainfall_mm"])
        threats = list(rule.value["primary_threats"])

    rng = rng or new_source()
    return EnvironmentalContext(
        climate_zone=zone,
        avg_rainfall_mm=rainfall,
        primary_threats=threats,
        elevation_m=randint_rounded(rng, 0, MAX_ELEVATION_M),
    )
