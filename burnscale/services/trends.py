from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional, Protocol, Sequence

from burnscale.utils.time import day_key, weekday_label


class CheckInLike(Protocol):
    created_at: datetime
    mood: str
    energy_level: int
    meaningfulness: int
    stress_triggers: Optional[list[str]]
    burnout_score: int


@dataclass(slots=True)
class DayStat:
    day: str
    value: int


@dataclass(slots=True)
class WeeklyTrends:
    labels: list[str]
    energy: list[int]
    meaningfulness: list[int]
    total: int
    most_common_mood: Optional[str]
    most_common_mood_count: int
    highest_meaning: Optional[DayStat]
    lowest_energy: Optional[DayStat]


@dataclass(slots=True)
class DailyAggregate:
    day: date
    checkins: int
    avg_score: float
    avg_energy: float
    avg_meaning: float
    trigger_counts: dict[str, int] = field(default_factory=dict)


def weekly_trends(rows: Sequence[CheckInLike]) -> WeeklyTrends:
    """
    Chart series and headline stats for check-ins ordered oldest first.

    Ties keep the earliest entry: the most common mood is the first to reach
    the top count, and best/worst days only move on a strict improvement.
    """
    if not rows:
        return WeeklyTrends([], [], [], 0, None, 0, None, None)

    labels = [weekday_label(r.created_at) for r in rows]

    mood_counts: dict[str, int] = {}
    highest = DayStat(day="", value=0)
    lowest = DayStat(day="", value=10)
    for r, label in zip(rows, labels):
        mood_counts[r.mood] = mood_counts.get(r.mood, 0) + 1
        if r.meaningfulness > highest.value:
            highest = DayStat(day=label, value=r.meaningfulness)
        if r.energy_level < lowest.value:
            lowest = DayStat(day=label, value=r.energy_level)

    top_mood, top_count = None, 0
    for mood, count in mood_counts.items():
        if count > top_count:
            top_mood, top_count = mood, count

    return WeeklyTrends(
        labels=labels,
        energy=[r.energy_level for r in rows],
        meaningfulness=[r.meaningfulness for r in rows],
        total=len(rows),
        most_common_mood=top_mood,
        most_common_mood_count=top_count,
        highest_meaning=highest if highest.day else None,
        lowest_energy=lowest if lowest.day else None,
    )


def daily_aggregates(rows: Iterable[CheckInLike]) -> list[DailyAggregate]:
    """Per-day means and trigger tallies, earliest day first."""
    buckets: dict[date, list[CheckInLike]] = {}
    for r in rows:
        buckets.setdefault(day_key(r.created_at), []).append(r)

    out: list[DailyAggregate] = []
    for day in sorted(buckets):
        entries = buckets[day]
        n = len(entries)
        triggers: Counter[str] = Counter()
        for e in entries:
            triggers.update(e.stress_triggers or [])
        out.append(DailyAggregate(
            day=day,
            checkins=n,
            avg_score=sum(e.burnout_score for e in entries) / n,
            avg_energy=sum(e.energy_level for e in entries) / n,
            avg_meaning=sum(e.meaningfulness for e in entries) / n,
            trigger_counts=dict(triggers),
        ))
    return out


def trigger_totals(days: Iterable[DailyAggregate]) -> dict[str, int]:
    totals: Counter[str] = Counter()
    for d in days:
        totals.update(d.trigger_counts)
    return dict(totals.most_common())
