"""Type definitions for temporal simulation."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_snake

from city_planner.grid.types import LayoutParams
from city_planner.stats.engine import CityStats

RATIO_FIELDS = frozenset(LayoutParams.model_fields)


def _ratio_field(key: str) -> str:
    """Normalize "green", "greenRatio" or "green_ratio" to "green_ratio"."""
    name = to_snake(key)
    if not name.endswith("_ratio"):
        name = f"{name}_ratio"
    if name not in RATIO_FIELDS:
        raise ValueError(f"Unknown ratio: {key!r}")
    return name


class Scenario(BaseModel):
    """A named policy bundle of ratio changes.

    ``targets`` replace baseline ratios, then ``deltas`` shift them. Keys may
    be given as ``green``, ``greenRatio`` or ``green_ratio``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    deltas: dict[str, float] = Field(default_factory=dict)
    targets: dict[str, float] = Field(default_factory=dict)

    @field_validator("deltas", "targets")
    @classmethod
    def normalize_keys(cls, v: dict[str, float]) -> dict[str, float]:
        return {_ratio_field(key): value for key, value in v.items()}

    def apply(self, params: LayoutParams) -> LayoutParams:
        """Return params with this scenario's targets and deltas merged in."""
        values = params.model_dump()
        values.update(self.targets)
        for key, delta in self.deltas.items():
            values[key] += delta
        return LayoutParams.model_validate(values)


@dataclass(frozen=True)
class YearProjection:
    """Projected ratios and statistics for one simulated year."""

    year: int
    params: LayoutParams
    stats: CityStats

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "params": self.params.to_dict(),
            "stats": self.stats.to_dict(),
        }
