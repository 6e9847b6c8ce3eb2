"""Synthetic environmental analysis primitives."""

from importlib import import_module

__all__ = [
    "classify_context",
    "DegenerateTrend",
    "describe_trend",
    "score_degradation",
    "severity_level",
    "base_index",
    "synthesize_trend",
    "FixedSequence",
    "VegetationTrend",
]

_LOCATIONS = {
    "classify_context": ".context",
    "DegenerateTrend": ".degradation",
    "describe_trend": ".degradation",
    "score_degradation": ".degradation",
    "severity_level": ".degradation",
    "base_index": ".ndvi",
    "synthesize_trend": ".ndvi",
    "FixedSequence": ".random_source",
    "VegetationTrend": ".results",
}


def __getattr__(name):
    if name in _LOCATIONS:
        return getattr(import_module(_LOCATIONS[name], __name__), name)
    raise AttributeError(name)
