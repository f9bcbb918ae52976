"""Undo/redo history of full-state city snapshots."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from city_planner.grid.types import LayoutParams, Zone, ZoneType
from city_planner.stats.engine import CityStats

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class Snapshot:
    """An immutable captured copy of grid, distribution, stats and layout ratios.

    Rows are stored as tuples of immutable Zones, so the snapshot shares no
    mutable structure with the live grid.
    """

    grid: tuple[tuple[Zone, ...], ...]
    distribution: Mapping[ZoneType, int]
    stats: CityStats
    layout_params: LayoutParams | None = None

    @classmethod
    def capture(
        cls,
        grid: Sequence[Sequence[Zone]],
        distribution: Mapping[ZoneType, int],
        stats: CityStats,
        layout_params: LayoutParams | None = None,
    ) -> "Snapshot":
        return cls(
            grid=tuple(tuple(row) for row in grid),
            distribution=MappingProxyType(dict(distribution)),
            stats=stats,
            layout_params=layout_params,
        )

    def grid_copy(self) -> list[list[Zone]]:
        """Return a fresh mutable grid built from this snapshot."""
        return [list(row) for row in self.grid]


class History:
    """Ordered snapshots with a cursor.

    Invariant: 0 <= index < len(snapshots) whenever snapshots is non-empty.
    Once the limit is exceeded the oldest snapshot is evicted and the cursor
    shifts back by one.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._snapshots: list[Snapshot] = []
        self._index = -1

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def index(self) -> int:
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._snapshots) - 1

    def push(self, snapshot: Snapshot) -> None:
        """Append a snapshot, discarding any redo states beyond the cursor."""
        del self._snapshots[self._index + 1:]
        self._snapshots.append(snapshot)
        self._index = len(self._snapshots) - 1

        if len(self._snapshots) > self.limit:
            self._snapshots.pop(0)
            self._index -= 1
            logger.debug("History limit %d reached, evicted oldest snapshot", self.limit)

    def back(self) -> Snapshot | None:
        """Move the cursor one step back; None at the oldest snapshot."""
        if not self.can_undo:
            return None
        self._index -= 1
        return self._snapshots[self._index]

    def forward(self) -> Snapshot | None:
        """Move the cursor one step forward; None at the newest snapshot."""
        if not self.can_redo:
            return None
        self._index += 1
        return self._snapshots[self._index]

    def clear(self) -> None:
        self._snapshots.clear()
        self._index = -1
