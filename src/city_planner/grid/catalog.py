"""Zone catalog - per-type coefficients consumed by the statistics engine."""

from dataclasses import dataclass

from city_planner.grid.types import ZoneType


@dataclass(frozen=True)
class ZoneSpec:
    """Static coefficients for one zone type."""

    label: str
    population: int  # residents per cell
    energy: int  # energy units per cell
    cost: int  # construction cost per cell (thousands)
    color: str


ZONE_CATALOG: dict[ZoneType, ZoneSpec] = {
    ZoneType.EMPTY: ZoneSpec(label="Empty", population=0, energy=0, cost=0, color="#1e293b"),
    ZoneType.RESIDENTIAL: ZoneSpec(
        label="Residential", population=100, energy=50, cost=100, color="#3b82f6",
    ),
    ZoneType.COMMERCIAL: ZoneSpec(
        label="Commercial", population=20, energy=80, cost=150, color="#f59e0b",
    ),
    ZoneType.INDUSTRIAL: ZoneSpec(
        label="Industrial", population=10, energy=150, cost=200, color="#6b7280",
    ),
    ZoneType.GREEN: ZoneSpec(label="Green Space", population=0, energy=5, cost=30, color="#22c55e"),
    ZoneType.TRANSIT: ZoneSpec(label="Transit", population=5, energy=30, cost=250, color="#ec4899"),
    ZoneType.ROAD: ZoneSpec(label="Road", population=0, energy=0, cost=50, color="#475569"),
}


def is_known_zone(zone_type: object) -> bool:
    """Check whether a value names a zone type in the catalog."""
    try:
        return ZoneType(zone_type) in ZONE_CATALOG
    except ValueError:
        return False


def empty_distribution() -> dict[ZoneType, int]:
    """Return a zero count for every catalogued zone type."""
    return {zone_type: 0 for zone_type in ZONE_CATALOG}
