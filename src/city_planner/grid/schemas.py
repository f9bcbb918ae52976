"""Wire schemas for the city export/import payload.

The payload keeps the camelCase keys consumed by the persistence and report
collaborators: ``{id, name, size, gridSize, grid, stats, distribution,
exportedAt}``.
"""

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from city_planner.grid.types import (
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    SIZE_CONFIG,
    CitySize,
    ZoneType,
    new_zone_id,
)

DEFAULT_IMPORT_NAME = "Imported City"


class ZoneRecord(BaseModel):
    """One grid cell as serialized in the payload."""

    model_config = ConfigDict(extra="ignore")

    type: ZoneType
    id: str = Field(default_factory=new_zone_id)

    @field_validator("id", mode="before")
    @classmethod
    def default_blank_id(cls, v: Any) -> str:
        return str(v) if v else new_zone_id()


class CityPayload(BaseModel):
    """A plain JSON-serializable city snapshot."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = DEFAULT_IMPORT_NAME
    size: CitySize = CitySize.MEDIUM
    grid_size: int | None = Field(default=None, ge=MIN_GRID_SIZE, le=MAX_GRID_SIZE)
    grid: list[list[ZoneRecord]]
    # Informational only: stats and distribution are recomputed from the grid
    stats: dict[str, Any] = Field(default_factory=dict)
    distribution: dict[str, Any] = Field(default_factory=dict)
    exported_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def default_blank_city_id(cls, v: Any) -> str:
        return str(v) if v else str(uuid.uuid4())

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v: Any) -> str:
        return str(v) if v else DEFAULT_IMPORT_NAME

    @field_validator("size", mode="before")
    @classmethod
    def default_unknown_size(cls, v: Any) -> CitySize:
        """Unknown or missing size classes fall back to medium."""
        try:
            return CitySize(v)
        except ValueError:
            return CitySize.MEDIUM

    @model_validator(mode="after")
    def check_grid_shape(self) -> "CityPayload":
        """Resolve gridSize from the size class and require a square grid."""
        if self.grid_size is None:
            self.grid_size = SIZE_CONFIG[self.size]["grid"]
        if len(self.grid) != self.grid_size:
            raise ValueError(
                f"grid has {len(self.grid)} rows, expected {self.grid_size}"
            )
        for y, row in enumerate(self.grid):
            if len(row) != self.grid_size:
                raise ValueError(
                    f"grid row {y} has {len(row)} cells, expected {self.grid_size}"
                )
        return self
