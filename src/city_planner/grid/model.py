"""City model - the zoned grid, its distribution, statistics and history.

Grid mutators are total: invalid coordinates or zone types are ignored
rather than raised, and every mutation leaves grid, distribution and stats
consistent before it returns.
"""

import json
import logging
import random
import time
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from city_planner.config import settings
from city_planner.grid.catalog import empty_distribution, is_known_zone
from city_planner.grid.history import History, Snapshot
from city_planner.grid.layout import LayoutGenerator
from city_planner.grid.schemas import CityPayload, ZoneRecord
from city_planner.grid.types import (
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    SIZE_CONFIG,
    CitySize,
    LayoutParams,
    Zone,
    ZoneType,
    size_for_grid,
)
from city_planner.stats.engine import CityStats, calculate_stats

logger = logging.getLogger(__name__)

DEFAULT_CITY_NAME = "New City"


class City:
    """Aggregate root for a zoned city grid.

    The grid is indexed ``grid[y][x]``. grid_size is fixed for the lifetime
    of the instance; a different size means a new City.
    """

    def __init__(
        self,
        size: CitySize | str | int | None = None,
        *,
        name: str = DEFAULT_CITY_NAME,
        history_limit: int | None = None,
        seed: int | None = None,
    ) -> None:
        if size is None:
            size = settings.default_size

        if isinstance(size, int) and not isinstance(size, bool):
            if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
                raise ValueError(
                    f"grid_size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {size}"
                )
            self.size = size_for_grid(size)
            self.grid_size = size
        else:
            try:
                self.size = CitySize(size)
            except ValueError:
                raise ValueError(f"Unknown city size: {size!r}") from None
            self.grid_size = SIZE_CONFIG[self.size]["grid"]

        self.id = str(uuid.uuid4())
        self.name = name
        self.target_population = SIZE_CONFIG[self.size]["population"]
        self.layout_params: LayoutParams | None = None
        self.rng = random.Random(settings.layout_seed if seed is None else seed)

        self.grid: list[list[Zone]] = self._empty_grid()
        self.distribution: dict[ZoneType, int] = self._empty_counts()
        self.stats: CityStats = self.calculate_stats()

        self.history = History(history_limit or settings.history_limit)
        self.save_state()

    def __repr__(self) -> str:
        return f"City(id={self.id!r}, name={self.name!r}, grid_size={self.grid_size})"

    # ── Derived values ─────────────────────────────────────────

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def built_cells(self) -> int:
        return self.total_cells - self.distribution[ZoneType.EMPTY]

    @property
    def history_index(self) -> int:
        return self.history.index

    def calculate_stats(self) -> CityStats:
        """Compute statistics for the current distribution (no side effects)."""
        return calculate_stats(self.distribution, self.grid_size)

    def _refresh_stats(self) -> None:
        self.stats = self.calculate_stats()

    def _empty_grid(self) -> list[list[Zone]]:
        return [
            [Zone(ZoneType.EMPTY) for _ in range(self.grid_size)]
            for _ in range(self.grid_size)
        ]

    def _empty_counts(self) -> dict[ZoneType, int]:
        counts = empty_distribution()
        counts[ZoneType.EMPTY] = self.total_cells
        return counts

    def in_bounds(self, x: int, y: int) -> bool:
        return (
            isinstance(x, int) and isinstance(y, int)
            and 0 <= x < self.grid_size
            and 0 <= y < self.grid_size
        )

    # ── Grid mutation ──────────────────────────────────────────

    def _assign(self, x: int, y: int, zone_type: ZoneType) -> bool:
        """Change one cell and its counts without recomputing stats."""
        old_type = self.grid[y][x].type
        if old_type == zone_type:
            return False
        self.distribution[old_type] -= 1
        self.distribution[zone_type] += 1
        self.grid[y][x] = Zone(zone_type)
        return True

    def set_zone(self, x: int, y: int, zone_type: ZoneType | str) -> bool:
        """Set the zone type of one cell.

        Returns True if the cell changed. Out-of-range coordinates, unknown
        types and same-type writes are no-ops. Does not record history.
        """
        if not self.in_bounds(x, y) or not is_known_zone(zone_type):
            return False
        if not self._assign(x, y, ZoneType(zone_type)):
            return False
        self._refresh_stats()
        return True

    def fill_area(
        self, x1: int, y1: int, x2: int, y2: int, zone_type: ZoneType | str,
    ) -> int:
        """Fill the inclusive rectangle between two corners with a zone type.

        The whole fill is recorded as a single history step. Returns the
        number of cells that changed.
        """
        changed = 0
        corners_valid = all(isinstance(v, int) for v in (x1, y1, x2, y2))
        if corners_valid and is_known_zone(zone_type):
            min_x, max_x = min(x1, x2), max(x1, x2)
            min_y, max_y = min(y1, y2), max(y1, y2)
            zone_type = ZoneType(zone_type)
            for y in range(max(min_y, 0), min(max_y, self.grid_size - 1) + 1):
                for x in range(max(min_x, 0), min(max_x, self.grid_size - 1) + 1):
                    if self._assign(x, y, zone_type):
                        changed += 1
            if changed:
                self._refresh_stats()

        self.save_state()
        return changed

    def get_zone(self, x: int, y: int) -> Zone | None:
        """Return the zone at (x, y), or None when out of range."""
        if not self.in_bounds(x, y):
            return None
        return self.grid[y][x]

    def clear(self) -> None:
        """Reset every cell to empty. Does not record history."""
        self.grid = self._empty_grid()
        self.distribution = self._empty_counts()
        self.layout_params = None
        self._refresh_stats()

    def generate_layout(
        self,
        params: LayoutParams | Mapping[str, Any] | None = None,
        *,
        seed: int | None = None,
    ) -> LayoutParams:
        """Replace the grid with a procedurally generated layout.

        Records one history step. Returns the clamped parameters used.
        """
        layout_params = LayoutParams.coerce(params)
        rng = random.Random(seed) if seed is not None else self.rng

        t_start = time.perf_counter()
        plan = LayoutGenerator(layout_params, rng).generate(self.grid_size)

        self.clear()
        for y, row in enumerate(plan):
            for x, zone_type in enumerate(row):
                if zone_type != ZoneType.EMPTY:
                    self._assign(x, y, zone_type)
        self._refresh_stats()
        self.layout_params = layout_params
        self.save_state()

        logger.info(
            "Generated %dx%d layout for %s in %.1fms (%d built cells)",
            self.grid_size, self.grid_size, self.name,
            (time.perf_counter() - t_start) * 1000, self.built_cells,
        )
        return layout_params

    # ── History ────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        """Capture the current grid, distribution, stats and layout ratios."""
        return Snapshot.capture(
            self.grid, self.distribution, self.stats, self.layout_params,
        )

    def save_state(self) -> None:
        """Push the current state onto the history, dropping any redo states."""
        self.history.push(self.snapshot())

    def restore(self, snapshot: Snapshot, *, record: bool = True) -> None:
        """Replace the current state with a snapshot of the same grid size."""
        if len(snapshot.grid) != self.grid_size:
            raise ValueError(
                f"Snapshot grid size {len(snapshot.grid)} does not match {self.grid_size}"
            )
        self._apply_snapshot(snapshot)
        if record:
            self.save_state()

    def _apply_snapshot(self, snapshot: Snapshot) -> None:
        self.grid = snapshot.grid_copy()
        self.distribution = dict(snapshot.distribution)
        self.stats = snapshot.stats
        self.layout_params = snapshot.layout_params

    def undo(self) -> bool:
        """Step back one history entry. Returns False at the oldest entry."""
        snapshot = self.history.back()
        if snapshot is None:
            return False
        self._apply_snapshot(snapshot)
        return True

    def redo(self) -> bool:
        """Step forward one history entry. Returns False at the newest entry."""
        snapshot = self.history.forward()
        if snapshot is None:
            return False
        self._apply_snapshot(snapshot)
        return True

    # ── Export / import ────────────────────────────────────────

    def export_data(self) -> dict[str, Any]:
        """Return a plain JSON-serializable snapshot of the city."""
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size.value,
            "gridSize": self.grid_size,
            "grid": [[zone.to_dict() for zone in row] for row in self.grid],
            "stats": self.stats.to_dict(),
            "distribution": {
                zone_type.value: count for zone_type, count in self.distribution.items()
            },
            "exportedAt": datetime.now(UTC).isoformat(),
        }

    def export_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.export_data(), indent=indent)

    def import_data(self, data: Any) -> bool:
        """Replace this city's state with an exported payload.

        All-or-nothing: a malformed payload, or one whose gridSize differs
        from this city's, leaves the city untouched and returns False.
        """
        payload = parse_payload(data)
        if payload is None:
            return False
        if payload.grid_size != self.grid_size:
            logger.warning(
                "Rejected import: gridSize %s does not match city gridSize %d",
                payload.grid_size, self.grid_size,
            )
            return False

        self._load_payload(payload)
        self.save_state()
        logger.info("Imported city %s (%s)", self.name, self.id)
        return True

    def import_json(self, text: str) -> bool:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            logger.warning("Rejected import: invalid JSON (%s)", e)
            return False
        return self.import_data(data)

    def _load_payload(self, payload: CityPayload) -> None:
        grid, distribution = _grid_from_records(payload.grid)
        self.id = payload.id
        self.name = payload.name
        self.size = payload.size
        self.target_population = SIZE_CONFIG[self.size]["population"]
        self.grid = grid
        self.distribution = distribution
        # Imported grids carry no generation ratios
        self.layout_params = None
        self._refresh_stats()


def parse_payload(data: Any) -> CityPayload | None:
    """Validate an export payload, returning None when it is malformed."""
    try:
        return CityPayload.model_validate(data)
    except ValidationError as e:
        logger.warning("Rejected import: %d validation error(s): %s", e.error_count(), e)
        return None


def _grid_from_records(
    records: list[list[ZoneRecord]],
) -> tuple[list[list[Zone]], dict[ZoneType, int]]:
    """Build a grid and its recounted distribution from payload records."""
    distribution = empty_distribution()
    grid = []
    for row in records:
        zones = []
        for record in row:
            zones.append(Zone(record.type, record.id))
            distribution[record.type] += 1
        grid.append(zones)
    return grid, distribution


def load_city(data: Any, *, seed: int | None = None) -> City | None:
    """Construct a new City from an export payload, or None if malformed."""
    payload = parse_payload(data)
    if payload is None:
        return None

    city = City(payload.grid_size, seed=seed)
    city._load_payload(payload)
    city.history.clear()
    city.save_state()
    return city

