"""core.config
---------------

Configuration loader/manager for ReGenLens. Provides a central API for
loading engine settings from YAML/TOML/JSON and retrieving them via
:py:meth:`ConfigManager.get`.
"""

import os
import json
import yaml
import toml


class ConfigValidationError(Exception):
    """Raised when configuration loading or validation fails."""


class ConfigManager:
    """
    Loads and manages configuration from file or defaults.
    Provides a central entry point for the synthetic analysis parameters.
    """

    # Synthetic NDVI trend shape
    TREND_START_YEAR: int = 2022
    DECLINE_RATE_RANGE: tuple[float, float] = (0.02, 0.08)
    SEASONAL_JITTER: float = 0.025

    # Score returned when a trend carries too little information
    DEGRADATION_FALLBACK: float = 0.3

    # Artificial latency of the orchestration layer, in seconds (disabled)
    SIMULATED_DELAY_S: tuple[float, float] = (0.0, 0.0)

    # Settings pinned by the JSON contract with the frontend
    FIXED_KEYS: dict[str, object] = {"trend_years": 4}

    def __init__(self, config_path=None):
        self.config = {
            "trend_start_year": self.TREND_START_YEAR,
            "decline_rate_range": list(self.DECLINE_RATE_RANGE),
            "seasonal_jitter": self.SEASONAL_JITTER,
            "degradation_fallback": self.DEGRADATION_FALLBACK,
            "simulated_delay_s": list(self.SIMULATED_DELAY_S),
        }
        if config_path:
            self.load(config_path)

    def load(self, path: str) -> None:
        """
        Load configuration from a file (YAML, TOML, or JSON).
        Overwrites existing keys in self.config.
        """
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path, "r", encoding="utf-8") as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                elif ext == ".toml":
                    data = toml.load(f)
                elif ext == ".json":
                    data = json.load(f)
                else:
                    raise ConfigValidationError(f"Unsupported config format: {ext}")
        except Exception as e:
            raise ConfigValidationError(
                f"Failed to load config from {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigValidationError(f"Config file {path} did not produce a dict")
        for key, fixed in self.FIXED_KEYS.items():
            if key in data and data[key] != fixed:
                raise ConfigValidationError(
                    f"{key} cannot be changed (fixed at {fixed}), got {data[key]!r}"
                )
        self.config.update(data)

    def get(self, key, default=None):
        """
        Retrieve a configuration value by key, or return `default` if not present.

        Args:
            key (str): The configuration parameter to look up.
            default:  The value to return if `key` is not found.
        """
        return self.config.get(key, default)

    def merge(self, other: "ConfigManager") -> None:
        """
        Merge another ConfigManager into this one.
        Values in other.config override this.config.
        """
        if not isinstance(other, ConfigManager):
            raise TypeError("Can only merge ConfigManager instances")
        self.config.update(other.config)

    def _get_range(self, key: str, default: tuple[float, float]) -> tuple[float, float]:
        value = self.get(key, default)
        try:
            low, high = (float(v) for v in value)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(
                f"{key} must be a pair of numbers, got {value!r}"
            ) from exc
        if low > high or low < 0:
            raise ConfigValidationError(f"{key} must satisfy 0 <= low <= high")
        return low, high

    def get_trend_start_year(self) -> int:
        """Return the calendar year labelling the first trend value."""
        return int(self.get("trend_start_year", self.TREND_START_YEAR))

    def get_decline_rate_range(self) -> tuple[float, float]:
        """Return the (low, high) bounds of the per-run NDVI decline rate."""
        return self._get_range("decline_rate_range", self.DECLINE_RATE_RANGE)

    def get_seasonal_jitter(self) -> float:
        """Return the absolute half-width of the yearly jitter."""
        return float(self.get("seasonal_jitter", self.SEASONAL_JITTER))

    def get_degradation_fallback(self) -> float:
        """Return the score used for degenerate trends."""
        return float(self.get("degradation_fallback", self.DEGRADATION_FALLBACK))

    def get_simulated_delay(self) -> tuple[float, float]:
        """Return the (low, high) simulated latency in seconds."""
        return self._get_range("simulated_delay_s", self.SIMULATED_DELAY_S)
