from typing import Annotated
from pydantic import BaseModel, Field
from burnscale.services.zones import ZoneSummary

class ScoreIn(BaseModel):
    mood: str
    energy_level: int
    meaningfulness: int
    stress_triggers: list[str] = Field(default_factory=list)

class ScoreOut(BaseModel):
    burnout_score: int
    zone: str

class ZonesIn(BaseModel):
    # daily averages are fractional
    scores: list[Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]]

class ZoneBucket(BaseModel):
    zone: str
    count: int
    percent: float

class ZoneSummaryOut(BaseModel):
    total: int
    thresholds: list[float]
    used_fallback: bool
    zone_counts: dict[str, int]
    zones: list[ZoneBucket]

    @classmethod
    def from_summary(cls, summary: ZoneSummary) -> "ZoneSummaryOut":
        percents = summary.percentages()
        return cls(
            total=summary.total,
            thresholds=list(summary.thresholds),
            used_fallback=summary.used_fallback,
            zone_counts={zone.value: count for zone, count in summary.counts.items()},
            zones=[
                ZoneBucket(zone=zone.value, count=count, percent=round(percents[zone], 2))
                for zone, count in summary.counts.items()
            ],
        )
