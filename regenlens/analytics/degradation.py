"""Degradation scoring and plain-language trend descriptors."""

from __future__ import annotations

from typing import Sequence

from regenlens.core.logger import Logger

logger = Logger.get_logger(__name__)

FALLBACK_SCORE = 0.3

# (upper bound, label), checked in order
SEVERITY_BANDS: tuple[tuple[float, str], ...] = (
    (0.1, "Low Risk"),
    (0.25, "Moderate Risk"),
    (0.5, "High Risk"),
)
SEVERE_LABEL = "Severe Risk"

# (lower bound on % change, description), checked in order
TREND_BANDS: tuple[tuple[float, str], ...] = (
    (10.0, "improving vegetation health"),
    (-10.0, "stable vegetation with minor fluctuations"),
    (-25.0, "moderate vegetation decline"),
)
SEVERE_TREND = "severe vegetation degradation"
INSUFFICIENT_DATA = "insufficient data"


class DegenerateTrend(ValueError):
    """Raised in strict mode when a trend cannot be scored."""


def _degenerate_reason(values: Sequence[float]) -> str | None:
    if len(values) < 2:
        return f"trend has {len(values)} value(s), need at least 2"
    if values[0] == 0:
        return "trend starts at zero"
    return None


def score_degradation(
    trend: Sequence[float] | None,
    *,
    strict: bool = False,
    fallback: float = FALLBACK_SCORE,
) -> float:
    """Return the fractional NDVI decline between first and last value.

    The result is clamped to ``[0, 1]`` and rounded to three decimals, so an
    improving trend scores ``0``. Trends shorter than two values, or starting
    at zero, return *fallback* (moderate risk); with ``strict=True`` they raise
    :class:`DegenerateTrend` instead.
    """
    values = list(trend) if trend is not None else []
    reason = _degenerate_reason(values)
    if reason is not None:
        if strict:
            raise DegenerateTrend(reason)
        logger.warning("Using fallback degradation score %.2f: %s", fallback, reason)
        return fallback

    first, last = values[0], values[-1]
    decline = (first - last) / first
    score = max(0.0, min(1.0, decline))
    logger.debug("Calculated degradation score: %.1f%%", score * 100)
    return round(score, 3)


def severity_level(score: float) -> str:
    """Map a degradation score to a risk label."""
    for bound, label in SEVERITY_BANDS:
        if score < bound:
            return label
    return SEVERE_LABEL


def describe_trend(trend: Sequence[float]) -> str:
    """Summarise the percentage change from first to last value."""
    values = list(trend)
    if _degenerate_reason(values) is not None:
        return INSUFFICIENT_DATA
    change = (values[-1] - values[0]) / values[0] * 100
    for bound, description in TREND_BANDS:
        if change > bound:
            return description
    return SEVERE_TREND
