from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

NDVI_FLOOR = 0.1
NDVI_CEILING = 1.0


@dataclass(frozen=True)
class VegetationTrend:
    """Yearly NDVI values, oldest first."""

    values: tuple[float, ...]
    start_year: int = 2022

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, idx):
        return self.values[idx]

    @property
    def years(self) -> List[int]:
        """Calendar year of each value."""
        return [self.start_year + i for i in range(len(self.values))]

    @property
    def first(self) -> float:
        return self.values[0]

    @property
    def last(self) -> float:
        return self.values[-1]

    def to_list(self) -> List[float]:
        return list(self.values)

    def to_dataframe(self) -> pd.DataFrame:
        """Return the trend as a DataFrame with ``year`` and ``ndvi`` columns."""
        return pd.DataFrame({"year": self.years, "ndvi": self.to_list()})

    def to_csv(self, path: str) -> None:
        """Write the trend to CSV."""
        self.to_dataframe().to_csv(path, index=False)
