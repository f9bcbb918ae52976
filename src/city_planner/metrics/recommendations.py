"""Advisory recommendations derived from city statistics.

Each rule inspects one indicator; when it falls below the fair threshold
the rule names the weakest contributing ratio and suggests how to move it.
Recommendations are text only and never touch the city.
"""

from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass

from city_planner.grid.types import ZoneType
from city_planner.metrics.ratings import FAIR_THRESHOLD, green_coverage_score
from city_planner.stats.engine import CityStats

# Industrial share above which poor air quality is blamed on industry
HIGH_INDUSTRIAL_SHARE = 0.15


@dataclass(frozen=True)
class Recommendation:
    """A single prioritized planning suggestion."""

    title: str
    description: str
    impact: str
    priority: int  # how far the indicator sits below the fair threshold

    def to_dict(self) -> dict[str, str | int]:
        return asdict(self)


@dataclass(frozen=True)
class _Shares:
    """Zone shares over built cells."""

    residential: float
    commercial: float
    industrial: float
    green: float
    transit: float
    road: float

    @classmethod
    def from_distribution(cls, distribution: Mapping[ZoneType, int]) -> "_Shares":
        built = sum(n for t, n in distribution.items() if t != ZoneType.EMPTY)

        def share(zone_type: ZoneType) -> float:
            return distribution.get(zone_type, 0) / built if built > 0 else 0.0

        return cls(
            residential=share(ZoneType.RESIDENTIAL),
            commercial=share(ZoneType.COMMERCIAL),
            industrial=share(ZoneType.INDUSTRIAL),
            green=share(ZoneType.GREEN),
            transit=share(ZoneType.TRANSIT),
            road=share(ZoneType.ROAD),
        )


def _pct(share: float) -> str:
    return f"{share * 100:.0f}%"


def _severity(score: float) -> int:
    return max(1, round(FAIR_THRESHOLD - score))


def _green_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    score = green_coverage_score(stats.green_coverage)
    if score >= FAIR_THRESHOLD:
        return None
    return Recommendation(
        title="Expand green space",
        description=(
            f"Green space covers only {stats.green_coverage}% of built land. "
            "Raise the green ratio toward 25-35% with parks, greenways and "
            "street trees between residential blocks."
        ),
        impact="Improves air quality, walkability and energy efficiency",
        priority=_severity(score),
    )


def _transit_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.transit_score >= FAIR_THRESHOLD:
        return None
    return Recommendation(
        title="Increase transit coverage",
        description=(
            f"Transit serves {_pct(shares.transit)} of built land against "
            f"{_pct(shares.residential)} residential. Raise the transit ratio "
            "and add hubs near dense housing."
        ),
        impact="Raises transit score and cuts car dependency",
        priority=_severity(stats.transit_score),
    )


def _walkability_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.walkability >= FAIR_THRESHOLD:
        return None

    # Contributions mirror the walkability formula
    green_bonus = stats.green_coverage * 0.5
    transit_bonus = shares.transit * 50
    industrial_penalty = shares.industrial * 30

    if industrial_penalty >= green_bonus and industrial_penalty >= transit_bonus:
        title = "Buffer industrial districts"
        description = (
            f"Industry occupies {_pct(shares.industrial)} of built land. Reduce "
            "the industrial ratio or ring industrial zones with green buffers."
        )
    elif green_bonus <= transit_bonus:
        title = "Add neighborhood parks"
        description = (
            f"Green space at {stats.green_coverage}% gives pedestrians little "
            "relief. Increase the green ratio with small parks on every block."
        )
    else:
        title = "Connect neighborhoods to transit"
        description = (
            f"Transit at {_pct(shares.transit)} leaves most blocks beyond "
            "walking distance of a stop. Increase the transit ratio."
        )
    return Recommendation(
        title=title,
        description=description,
        impact="Improves walkability",
        priority=_severity(stats.walkability),
    )


def _air_quality_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.air_quality >= FAIR_THRESHOLD:
        return None
    if shares.industrial >= HIGH_INDUSTRIAL_SHARE:
        return Recommendation(
            title="Reduce industrial zoning",
            description=(
                f"Industry covers {_pct(shares.industrial)} of built land and "
                "dominates air pollution. Lower the industrial ratio or move "
                "plants to the outer ring downwind of housing."
            ),
            impact="Large air quality gain",
            priority=_severity(stats.air_quality),
        )
    return Recommendation(
        title="Plant urban forests",
        description=(
            "Air quality is poor despite limited industry. Increase the green "
            "ratio to filter particulates and absorb emissions."
        ),
        impact="Improves air quality and carbon balance",
        priority=_severity(stats.air_quality),
    )


def _energy_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.energy_efficiency >= FAIR_THRESHOLD:
        return None
    return Recommendation(
        title="Improve energy efficiency",
        description=(
            f"Industrial load ({_pct(shares.industrial)} of built land) "
            "outweighs renewable capacity. Reduce the industrial ratio and "
            "add green space for distributed generation."
        ),
        impact="Lowers energy consumption per resident",
        priority=_severity(stats.energy_efficiency),
    )


def _carbon_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.carbon_footprint <= 0:
        return None
    emitter = "industrial" if shares.industrial * 2 >= shares.commercial else "commercial"
    return Recommendation(
        title="Offset carbon emissions",
        description=(
            f"The city is a net emitter (footprint {stats.carbon_footprint}). "
            f"Reduce the {emitter} ratio or raise green and transit ratios "
            "to bring the balance below zero."
        ),
        impact="Moves the city toward carbon neutrality",
        priority=max(1, min(FAIR_THRESHOLD, stats.carbon_footprint // 2)),
    )


def _sustainability_rule(stats: CityStats, shares: _Shares) -> Recommendation | None:
    if stats.sustainability_score >= FAIR_THRESHOLD:
        return None
    weakest = min(
        [("green", shares.green), ("transit", shares.transit)],
        key=lambda item: item[1],
    )[0]
    return Recommendation(
        title="Rebalance land use",
        description=(
            f"The overall sustainability score is {stats.sustainability_score}. "
            f"The {weakest} ratio is the weakest lever; raise it before "
            "adding more built area."
        ),
        impact="Raises the overall sustainability score",
        priority=_severity(stats.sustainability_score),
    )


RULES: list[Callable[[CityStats, _Shares], Recommendation | None]] = [
    _sustainability_rule,
    _green_rule,
    _air_quality_rule,
    _transit_rule,
    _walkability_rule,
    _energy_rule,
    _carbon_rule,
]


def build_recommendations(
    stats: CityStats, distribution: Mapping[ZoneType, int],
) -> list[Recommendation]:
    """Evaluate every rule and return recommendations, most severe first."""
    if not any(n for t, n in distribution.items() if t != ZoneType.EMPTY):
        return []

    shares = _Shares.from_distribution(distribution)
    seen: set[str] = set()
    recommendations: list[Recommendation] = []
    for rule in RULES:
        rec = rule(stats, shares)
        if rec is None or rec.title in seen:
            continue
        seen.add(rec.title)
        recommendations.append(rec)

    # Stable sort keeps rule order for equal priorities
    recommendations.sort(key=lambda r: r.priority, reverse=True)
    return recommendations
