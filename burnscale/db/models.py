from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, String, Enum, SmallInteger, Boolean, CheckConstraint, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID, ARRAY
import uuid
from datetime import datetime
from typing import Optional, List

mood_enum = Enum(
    "Happy", "Meh", "Sad", "Angry",
    name="checkin_mood",
    schema="public"
)

customization_type_enum = Enum(
    "stress_trigger", "recovery_activity",
    name="customization_type",
    schema="public"
)

class Base(DeclarativeBase):
    pass

class CheckIn(Base):
    __tablename__ = "checkins"
    __table_args__ = (
        CheckConstraint("energy_level BETWEEN 1 AND 5", name="ck_checkins_energy_level"),
        CheckConstraint("meaningfulness BETWEEN 1 AND 5", name="ck_checkins_meaningfulness"),
        CheckConstraint("burnout_score BETWEEN 0 AND 100", name="ck_checkins_burnout_score"),
        {"schema": "app"},
    )
    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(server_default=text("now()"))
    mood: Mapped[str] = mapped_column(mood_enum)
    energy_level: Mapped[int] = mapped_column(SmallInteger)
    meaningfulness: Mapped[int] = mapped_column(SmallInteger)
    stress_triggers: Mapped[List[str]] = mapped_column(ARRAY(String), server_default=text("'{}'"))
    recovery_activities: Mapped[List[str]] = mapped_column(ARRAY(String), server_default=text("'{}'"))
    notes: Mapped[Optional[str]]
    burnout_score: Mapped[int] = mapped_column(SmallInteger)

class MoodBoard(Base):
    __tablename__ = "moodboards"
    __table_args__ = {"schema": "app"}
    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(server_default=text("now()"))
    summary: Mapped[str]
    prompt: Mapped[str]
    image_url: Mapped[str] = mapped_column(String, server_default=text("''"))
    personal_reflection: Mapped[Optional[str]]

class UserCustomization(Base):
    __tablename__ = "user_customizations"
    __table_args__ = (
        UniqueConstraint("user_id", "type", "value", name="uq_user_customizations_user_type_value"),
        {"schema": "app"},
    )
    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    type: Mapped[str] = mapped_column(customization_type_enum)
    value: Mapped[str]
    is_active: Mapped[bool] = mapped_column(Boolean, server_default=text("true"))
    created_at: Mapped[datetime] = mapped_column(server_default=text("now()"))
