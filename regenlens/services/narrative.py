"""Plain-language recommendation text for an analysis."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from regenlens.analytics.degradation import describe_trend, severity_level
from regenlens.analytics.random_source import RandomSource, new_source
from regenlens.analytics.results import VegetationTrend
from regenlens.geo.coordinate import Coordinate

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
DEFAULT_TEMPLATES: tuple[str, ...] = (
    "recommendations_conservation.txt.j2",
    "recommendations_restoration.txt.j2",
)


class NarrativeGenerator(Protocol):
    """Anything able to turn a trend and score into a recommendation paragraph."""

    def generate(
        self,
        region: str,
        trend: VegetationTrend,
        score: float,
        coordinate: Coordinate,
    ) -> str:
        """Return recommendation text for *region*."""


class TemplateNarrative:
    """Render one of a few fixed recommendation templates."""

    def __init__(
        self,
        *,
        templates: Sequence[str] = DEFAULT_TEMPLATES,
        templates_dir: str | Path = TEMPLATES_DIR,
        rng: RandomSource | None = None,
    ) -> None:
        if not templates:
            raise ValueError("at least one template is required")
        self.templates = tuple(templates)
        self.rng = rng
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )

    def _pick(self) -> str:
        rng = self.rng or new_source()
        idx = min(int(rng.random() * len(self.templates)), len(self.templates) - 1)
        return self.templates[idx]

    def generate(
        self,
        region: str,
        trend: VegetationTrend,
        score: float,
        coordinate: Coordinate,
    ) -> str:
        severity = severity_level(score)
        context = {
            "region": region,
            "lat": f"{coordinate.lat:.4f}",
            "lng": f"{coordinate.lng:.4f}",
            "score_pct": f"{score * 100:.1f}",
            "severity": severity,
            "severe": severity in ("High Risk", "Severe Risk"),
            "trend_description": describe_trend(trend),
            "first_ndvi": f"{trend.first:.2f}" if len(trend) else "n/a",
            "last_ndvi": f"{trend.last:.2f}" if len(trend) else "n/a",
            "first_year": trend.years[0] if len(trend) else "",
            "last_year": trend.years[-1] if len(trend) else "",
        }
        return self.env.get_template(self._pick()).render(**context).strip()
