from __future__ import annotations

"""Region-label keyword lexicon.

Region labels are free text ("Sahel Region, Niger"). They are never geocoded;
instead each lexicon is an ordered list of :class:`KeywordRule` entries and
the first rule with a keyword contained in the lower-cased label wins.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

import yaml

from regenlens.core.config import ConfigValidationError


@dataclass(frozen=True)
class KeywordRule:
    """A set of keywords mapped to a classification payload."""

    keywords: tuple[str, ...]
    value: Any

    def matches(self, label: str) -> bool:
        """Return ``True`` when any keyword is a substring of *label*."""
        lowered = (label or "").lower()
        return any(kw in lowered for kw in self.keywords)


def make_rule(keywords: Iterable[str], value: Any) -> KeywordRule:
    """Build a rule with normalised (lower-case, stripped) keywords."""
    kws = tuple(k.strip().lower() for k in keywords if k and k.strip())
    if not kws:
        raise ConfigValidationError("keyword rule needs at least one keyword")
    return KeywordRule(kws, value)


def match_rule(rules: Sequence[KeywordRule], label: str) -> KeywordRule | None:
    """Return the first rule in *rules* matching *label*, or ``None``."""
    for rule in rules:
        if rule.matches(label):
            return rule
    return None


def load_rules(path: str | Path) -> list[KeywordRule]:
    """Load an ordered rule list from a YAML file.

    The file holds a list of mappings, each with ``keywords`` (list of
    strings) and ``value`` (any YAML value)::

        - keywords: [sahel, desert]
          value: 0.3
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or []
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Failed to load rules from {path}: {exc}") from exc
    if not isinstance(data, list):
        raise ConfigValidationError(f"Rule file {path} must contain a list")
    rules = []
    for entry in data:
        if not isinstance(entry, dict) or "keywords" not in entry or "value" not in entry:
            raise ConfigValidationError(
                f"Rule entries need 'keywords' and 'value': {entry!r}"
            )
        keywords = entry["keywords"]
        if isinstance(keywords, str):
            keywords = [keywords]
        rules.append(make_rule(keywords, entry["value"]))
    return rules


# Baseline NDVI for well-known degradation hotspots.
BASE_INDEX_RULES: tuple[KeywordRule, ...] = (
    make_rule(["sahel", "desert", "rajasthan"], 0.3),
    make_rule(["machakos", "kenya"], 0.6),
    make_rule(["brazil", "amazon"], 0.8),
    make_rule(["mongolia", "grassland"], 0.5),
)

# Climate/threat overrides applied on top of the latitude default.
CONTEXT_RULES: tuple[KeywordRule, ...] = (
    make_rule(
        ["sahel", "desert"],
        {
            "climate_zone": "arid",
            "avg_rainfall_mm": 200,
            "primary_threats": ["desertification", "drought", "overgrazing"],
        },
    ),
    make_rule(
        ["kenya", "machakos"],
        {
            "climate_zone": "semi-arid",
            "avg_rainfall_mm": 500,
            "primary_threats": ["soil erosion", "drought", "deforestation"],
        },
    ),
)
