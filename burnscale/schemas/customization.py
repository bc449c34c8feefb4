from pydantic import BaseModel, field_validator

class CustomizationIn(BaseModel):
    type: str  # stress_trigger | recovery_activity
    value: str

    @field_validator("type")
    @classmethod
    def _known_type(cls, v):
        if v not in ("stress_trigger", "recovery_activity"):
            raise ValueError("type must be stress_trigger or recovery_activity")
        return v

    @field_validator("value")
    @classmethod
    def _not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("value must not be blank")
        return v

class OptionPoolsOut(BaseModel):
    moods: list[str]
    stress_triggers: list[str]
    recovery_activities: list[str]
