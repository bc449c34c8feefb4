from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime

class TriggersIn(BaseModel):
    triggers: list[str] = Field(default_factory=list)

class StressTipsOut(BaseModel):
    advice: str

class TipsOut(BaseModel):
    tips: list[str]

class NotesAnalysisIn(BaseModel):
    notes: str | None = None

class NotesAnalysisOut(BaseModel):
    summary: str
    sentiment: str  # positive | neutral | negative
    themes: list[str]

class MoodBoardOut(BaseModel):
    id: UUID
    created_at: datetime
    summary: str
    image_prompt: str = Field(validation_alias="prompt")
    image_url: str
    personal_reflection: str | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}

class MoodBoardList(BaseModel):
    moodboards: list[MoodBoardOut]
