from pydantic import BaseModel
from datetime import date
from burnscale.schemas.burnout import ZoneSummaryOut

class DailyPoint(BaseModel):
    day: date
    checkins: int
    avg_score: float
    avg_energy: float
    avg_meaning: float
    trigger_counts: dict[str, int]

class DashboardOut(BaseModel):
    days: int
    daily: list[DailyPoint]
    zone_summary: ZoneSummaryOut | None = None
    trigger_counts: dict[str, int]

class DayStatOut(BaseModel):
    day: str
    value: int

class TrendsOut(BaseModel):
    days: int
    total: int
    labels: list[str]
    energy: list[int]
    meaningfulness: list[int]
    most_common_mood: str | None = None
    most_common_mood_count: int = 0
    highest_meaning: DayStatOut | None = None
    lowest_energy: DayStatOut | None = None
