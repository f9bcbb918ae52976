"""Procedural city layout generation.

Builds a full zoning plan for a square grid in three passes:
1. A deterministic road skeleton (grid lines plus a diagonal boulevard)
2. Concentric-ring zoning, each ring biased toward different land uses
3. 2x2 transit hubs on a coarser lattice, overwriting whatever was there

The ratio parameters only bias per-cell probabilities; the resulting
distribution is not guaranteed to match them.
"""

import logging
import random
from enum import StrEnum

import numpy as np
from numpy.typing import NDArray

from city_planner.grid.types import LayoutParams, ZoneType

logger = logging.getLogger(__name__)

# Road grid lines every grid_size // ROAD_SPACING_DIVISOR cells
ROAD_SPACING_DIVISOR = 8
# Transit hubs every grid_size // HUB_SPACING_DIVISOR cells
HUB_SPACING_DIVISOR = 4
HUB_SIZE = 2
BOULEVARD_HALF_WIDTH = 2
# Normalization factor applied to the center offset for ring distances
RING_DISTANCE_SCALE = 1.4

Plan = list[list[ZoneType]]


class Ring(StrEnum):
    """Concentric distance bands used to bias zoning."""

    OUTER = "outer"
    MID_OUTER = "mid_outer"
    MID_INNER = "mid_inner"
    CORE = "core"


def ring_for_distance(normalized_distance: float) -> Ring:
    if normalized_distance > 0.9:
        return Ring.OUTER
    if normalized_distance > 0.6:
        return Ring.MID_OUTER
    if normalized_distance > 0.3:
        return Ring.MID_INNER
    return Ring.CORE


def ring_thresholds(ring: Ring, params: LayoutParams) -> list[tuple[float, ZoneType]]:
    """Cumulative-probability thresholds for a ring, in evaluation order.

    A uniform draw below a threshold selects that zone; a draw above all of
    them leaves the cell empty.
    """
    res = params.residential_ratio
    com = params.commercial_ratio
    ind = params.industrial_ratio
    green = params.green_ratio
    transit = params.transit_ratio

    if ring == Ring.OUTER:
        # Greenbelt and industry on the fringe
        green_edge = green + 0.15
        return [
            (green_edge, ZoneType.GREEN),
            (green_edge + ind + 0.10, ZoneType.INDUSTRIAL),
        ]
    if ring == Ring.MID_OUTER:
        return [
            (res * 1.5, ZoneType.RESIDENTIAL),
            (res * 1.5 + green, ZoneType.GREEN),
        ]
    if ring == Ring.MID_INNER:
        return [
            (res, ZoneType.RESIDENTIAL),
            (res + com, ZoneType.COMMERCIAL),
            (res + com + green * 0.5, ZoneType.GREEN),
        ]
    return [
        (com * 2, ZoneType.COMMERCIAL),
        (com * 2 + transit * 2, ZoneType.TRANSIT),
        (com * 2 + transit * 2 + green * 0.3, ZoneType.GREEN),
    ]


def pick_zone(thresholds: list[tuple[float, ZoneType]], draw: float) -> ZoneType:
    for threshold, zone_type in thresholds:
        if draw < threshold:
            return zone_type
    return ZoneType.EMPTY


def grid_center(grid_size: int) -> int:
    return grid_size // 2


def distance_field(grid_size: int) -> NDArray[np.float64]:
    """Normalized distance from the grid center for every cell, indexed [y, x]."""
    center = grid_center(grid_size)
    ys, xs = np.mgrid[0:grid_size, 0:grid_size]
    dist = np.hypot(xs - center, ys - center)
    max_dist = center * RING_DISTANCE_SCALE
    if max_dist == 0:
        return np.zeros((grid_size, grid_size), dtype=np.float64)
    return dist / max_dist


def road_cells(grid_size: int) -> set[tuple[int, int]]:
    """Cells (x, y) covered by the road skeleton."""
    cells: set[tuple[int, int]] = set()
    spacing = grid_size // ROAD_SPACING_DIVISOR

    if spacing > 0:
        for line in range(spacing, grid_size, spacing):
            for i in range(grid_size):
                cells.add((i, line))  # horizontal
                cells.add((line, i))  # vertical

    # Diagonal boulevard through the center, one run of cells per row
    for offset in range(-BOULEVARD_HALF_WIDTH, BOULEVARD_HALF_WIDTH + 1):
        for x in range(grid_size):
            y = x + offset
            if 0 <= y < grid_size:
                cells.add((x, y))

    return cells


def hub_anchors(grid_size: int) -> list[tuple[int, int]]:
    """Top-left corners (x, y) of transit hubs."""
    spacing = grid_size // HUB_SPACING_DIVISOR
    if spacing <= 0:
        return []
    positions = range(spacing, grid_size, spacing)
    return [(x, y) for y in positions for x in positions]


def hub_cells(grid_size: int) -> set[tuple[int, int]]:
    """In-range cells covered by transit hubs."""
    cells: set[tuple[int, int]] = set()
    for ax, ay in hub_anchors(grid_size):
        for dy in range(HUB_SIZE):
            for dx in range(HUB_SIZE):
                x, y = ax + dx, ay + dy
                if x < grid_size and y < grid_size:
                    cells.add((x, y))
    return cells


class LayoutGenerator:
    """Generates zoning plans from ratio parameters."""

    def __init__(self, params: LayoutParams, rng: random.Random | None = None) -> None:
        self.params = params
        self.rng = rng or random.Random()

    def generate(self, grid_size: int) -> Plan:
        """Produce a full plan indexed [y][x]."""
        plan: Plan = [[ZoneType.EMPTY] * grid_size for _ in range(grid_size)]

        for x, y in road_cells(grid_size):
            plan[y][x] = ZoneType.ROAD

        distances = distance_field(grid_size)
        thresholds = {ring: ring_thresholds(ring, self.params) for ring in Ring}
        for y in range(grid_size):
            row = plan[y]
            for x in range(grid_size):
                if row[x] != ZoneType.EMPTY:
                    continue
                ring = ring_for_distance(float(distances[y, x]))
                row[x] = pick_zone(thresholds[ring], self.rng.random())

        for x, y in hub_cells(grid_size):
            plan[y][x] = ZoneType.TRANSIT

        logger.debug("Generated %dx%d layout plan", grid_size, grid_size)
        return plan
