"""Type definitions for the zoned city grid."""

import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ZoneType(StrEnum):
    """Land-use assignments a grid cell can carry."""

    EMPTY = "empty"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    GREEN = "green"
    TRANSIT = "transit"
    ROAD = "road"


class CitySize(StrEnum):
    """Named size classes for a city."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# Grid edge length and target population by size class
SIZE_CONFIG: dict[CitySize, dict[str, int]] = {
    CitySize.SMALL: {"grid": 50, "population": 100_000},
    CitySize.MEDIUM: {"grid": 80, "population": 500_000},
    CitySize.LARGE: {"grid": 120, "population": 2_000_000},
}

MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 160


def size_for_grid(grid_size: int) -> CitySize:
    """Bucket an explicit grid size into the nearest size class."""
    if grid_size <= 60:
        return CitySize.SMALL
    if grid_size <= 100:
        return CitySize.MEDIUM
    return CitySize.LARGE


def new_zone_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Zone:
    """A single grid cell.

    Zones are immutable: changing a cell's type replaces the Zone with a new
    one carrying a fresh id, so history snapshots can share Zone objects with
    the live grid.
    """

    type: ZoneType
    id: str = field(default_factory=new_zone_id)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "id": self.id}


# Ratio bounds accepted at the grid boundary
RATIO_MIN = 0.0
RATIO_MAX = 0.5


class LayoutParams(BaseModel):
    """Ratio parameters that drive procedural layout generation.

    Values are influence weights, not exact shares: they need not sum to 1
    and the generator only uses them to bias per-cell probabilities.
    Out-of-range values are clamped into [0, 0.5]; camelCase keys from the
    AI and preset layers (``residentialRatio``) are accepted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    residential_ratio: float = 0.35
    commercial_ratio: float = 0.15
    industrial_ratio: float = 0.10
    green_ratio: float = 0.25
    transit_ratio: float = 0.08
    road_ratio: float = 0.07

    @field_validator("*", mode="before")
    @classmethod
    def clamp_ratio(cls, v: Any) -> float:
        """Clamp each ratio into the supported range."""
        try:
            value = float(v)
        except (TypeError, ValueError) as e:
            raise ValueError(f"ratio must be a number, got {v!r}") from e
        if value != value:  # NaN
            raise ValueError("ratio must be a number")
        return max(RATIO_MIN, min(RATIO_MAX, value))

    @classmethod
    def coerce(cls, params: "LayoutParams | dict[str, Any] | None") -> "LayoutParams":
        """Build LayoutParams from an instance, a plain mapping or None."""
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        return cls.model_validate(params)

    def to_dict(self) -> dict[str, float]:
        """Convert to the camelCase shape used by presets and exports."""
        return self.model_dump(by_alias=True)
