"""checkins, moodboards and user customizations

Revision ID: 0001_initial
Revises:
Create Date: 2025-07-12 10:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

mood = postgresql.ENUM("Happy", "Meh", "Sad", "Angry", name="checkin_mood", schema="public", create_type=False)
customization_type = postgresql.ENUM(
    "stress_trigger", "recovery_activity", name="customization_type", schema="public", create_type=False
)


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS app")
    mood.create(op.get_bind(), checkfirst=True)
    customization_type.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "checkins",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.Column("mood", mood, nullable=False),
        sa.Column("energy_level", sa.SmallInteger(), nullable=False),
        sa.Column("meaningfulness", sa.SmallInteger(), nullable=False),
        sa.Column("stress_triggers", postgresql.ARRAY(sa.String()), server_default=sa.text("'{}'"), nullable=False),
        sa.Column("recovery_activities", postgresql.ARRAY(sa.String()), server_default=sa.text("'{}'"), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("burnout_score", sa.SmallInteger(), nullable=False),
        sa.CheckConstraint("energy_level BETWEEN 1 AND 5", name="ck_checkins_energy_level"),
        sa.CheckConstraint("meaningfulness BETWEEN 1 AND 5", name="ck_checkins_meaningfulness"),
        sa.CheckConstraint("burnout_score BETWEEN 0 AND 100", name="ck_checkins_burnout_score"),
        schema="app",
    )
    op.create_index("ix_app_checkins_user_id", "checkins", ["user_id"], schema="app")

    op.create_table(
        "moodboards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.Column("summary", sa.String(), nullable=False),
        sa.Column("prompt", sa.String(), nullable=False),
        sa.Column("image_url", sa.String(), server_default=sa.text("''"), nullable=False),
        sa.Column("personal_reflection", sa.String(), nullable=True),
        schema="app",
    )
    op.create_index("ix_app_moodboards_user_id", "moodboards", ["user_id"], schema="app")

    op.create_table(
        "user_customizations",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("type", customization_type, nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("user_id", "type", "value", name="uq_user_customizations_user_type_value"),
        schema="app",
    )


def downgrade() -> None:
    op.drop_table("user_customizations", schema="app")
    op.drop_index("ix_app_moodboards_user_id", table_name="moodboards", schema="app")
    op.drop_table("moodboards", schema="app")
    op.drop_index("ix_app_checkins_user_id", table_name="checkins", schema="app")
    op.drop_table("checkins", schema="app")
    customization_type.drop(op.get_bind(), checkfirst=True)
    mood.drop(op.get_bind(), checkfirst=True)
