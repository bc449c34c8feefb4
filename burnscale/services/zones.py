"""
Wellness zone classification.

Scores are bucketed relative to their own population: the 20/40/60/80th
percentiles become the zone boundaries. A population with no spread falls
back to fixed boundaries so it does not collapse into a single zone.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class Zone(str, Enum):
    ENERGIZED = "Energized"
    MILD_STRESS = "Mild Stress"
    WARNING_ZONE = "Warning Zone"
    BURNOUT_ZONE = "Burnout Zone"
    CRITICAL = "Critical"


# Ordinal order, least to most burned out
ZONES: tuple[Zone, ...] = tuple(Zone)

QUANTILE_FRACTIONS = (0.2, 0.4, 0.6, 0.8)
FALLBACK_THRESHOLDS: tuple[float, float, float, float] = (20, 40, 60, 80)


@dataclass(frozen=True, slots=True)
class ZoneSummary:
    counts: dict[Zone, int]
    thresholds: tuple[float, float, float, float]
    total: int
    used_fallback: bool = field(default=False)

    def percentages(self) -> dict[Zone, float]:
        """Share of the population per zone, for the stacked bar."""
        return {zone: count / self.total * 100 for zone, count in self.counts.items()}


def quantile(sorted_scores: Sequence[float], q: float) -> float:
    """
    Linear interpolation between the two nearest ranks of an ascending sequence.
    """
    pos = (len(sorted_scores) - 1) * q
    base = math.floor(pos)
    frac = pos - base
    if base + 1 < len(sorted_scores):
        return sorted_scores[base] + frac * (sorted_scores[base + 1] - sorted_scores[base])
    return sorted_scores[base]


def zone_thresholds(scores: Sequence[float]) -> tuple[tuple[float, float, float, float], bool]:
    """
    Returns (thresholds, used_fallback) for a non-empty score population.
    """
    ordered = sorted(scores)
    q20, q40, q60, q80 = (quantile(ordered, q) for q in QUANTILE_FRACTIONS)
    if q20 == q40 == q60 == q80:
        return FALLBACK_THRESHOLDS, True
    return (q20, q40, q60, q80), False


def zone_for(score: float, thresholds: Sequence[float]) -> Zone:
    for zone, upper in zip(ZONES, thresholds):
        if score <= upper:
            return zone
    return Zone.CRITICAL


def classify_zones(scores: Sequence[float]) -> ZoneSummary:
    """
    Count how many scores fall in each zone.

    Callers must not pass an empty population; there is nothing to show and
    no threshold to derive, so ValueError is raised.
    """
    if not scores:
        raise ValueError("classify_zones requires at least one score")

    thresholds, used_fallback = zone_thresholds(scores)
    counts = {zone: 0 for zone in ZONES}
    for score in scores:
        counts[zone_for(score, thresholds)] += 1
    return ZoneSummary(counts=counts, thresholds=thresholds, total=len(scores), used_fallback=used_fallback)
