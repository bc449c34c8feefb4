"""
Unit tests for request and response schemas.
"""
from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest
from pydantic import ValidationError

from burnscale.schemas.ai import MoodBoardOut
from burnscale.schemas.burnout import ZoneSummaryOut
from burnscale.schemas.customization import CustomizationIn
from burnscale.services.zones import classify_zones


class TestCustomizationIn:
    """Test CustomizationIn validation."""

    def test_value_trimmed(self):
        """Values are trimmed."""
        assert CustomizationIn(type="recovery_activity", value=" Yoga ").value == "Yoga"

    @pytest.mark.parametrize("type_", ["mood", "", "Stress_Trigger"])
    def test_unknown_type(self, type_):
        """Only stress triggers and recovery activities are customizable."""
        with pytest.raises(ValidationError):
            CustomizationIn(type=type_, value="Yoga")

    def test_blank_value(self):
        """Blank values are rejected."""
        with pytest.raises(ValidationError):
            CustomizationIn(type="stress_trigger", value="  ")


class TestZoneSummaryOut:
    """Test ZoneSummaryOut.from_summary."""

    def test_from_summary(self):
        """Counts, percentages and thresholds carry over in zone order."""
        out = ZoneSummaryOut.from_summary(classify_zones([50, 50, 50, 90]))

        assert out.total == 4
        assert out.zone_counts["Energized"] == 3
        assert out.zone_counts["Critical"] == 1
        assert [b.zone for b in out.zones][0] == "Energized"
        assert sum(b.percent for b in out.zones) == pytest.approx(100.0)


class TestMoodBoardOut:
    """Test MoodBoardOut mapping."""

    def test_reads_prompt_column(self):
        """The stored prompt is exposed as image_prompt."""
        row = SimpleNamespace(
            id=uuid4(),
            created_at=datetime.now(timezone.utc),
            summary="Calm.",
            prompt="a lake",
            image_url="",
            personal_reflection=None,
        )
        out = MoodBoardOut.model_validate(row)
        assert out.image_prompt == "a lake"
        assert out.model_dump()["image_prompt"] == "a lake"
