"""ReGenLens synthetic land-degradation analysis engine."""

__version__ = "0.1.0"
