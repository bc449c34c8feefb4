from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime

class CheckinCreate(BaseModel):
    mood: str  # Happy | Meh | Sad | Angry
    energy_level: int
    meaningfulness: int
    stress_triggers: list[str] = Field(default_factory=list)
    recovery_activities: list[str] = Field(default_factory=list)
    notes: str | None = None

class CheckinCreated(BaseModel):
    checkin_id: UUID
    created_at: datetime
    burnout_score: int
    zone: str

class CheckinOut(BaseModel):
    id: UUID
    created_at: datetime
    mood: str
    energy_level: int
    meaningfulness: int
    stress_triggers: list[str] = Field(default_factory=list)
    recovery_activities: list[str] = Field(default_factory=list)
    notes: str | None = None
    burnout_score: int

    model_config = {"from_attributes": True}

class CheckinList(BaseModel):
    days: int
    checkins: list[CheckinOut]
