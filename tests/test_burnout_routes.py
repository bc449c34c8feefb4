"""
Tests for burnout score and zone routes.
"""
from unittest.mock import patch

import pytest


class TestScoreRoute:
    """Test POST /api/burnout/score."""

    def test_best_case(self, sync_client):
        """The calmest possible check-in scores 3."""
        payload = {"mood": "Happy", "energy_level": 5, "meaningfulness": 5, "stress_triggers": []}
        response = sync_client.post("/api/burnout/score", json=payload)

        assert response.status_code == 200
        assert response.json() == {"burnout_score": 3, "zone": "Energized"}

    def test_worst_case(self, sync_client):
        """The worst possible check-in scores 88."""
        payload = {
            "mood": "Angry",
            "energy_level": 1,
            "meaningfulness": 1,
            "stress_triggers": ["Work", "Sleep", "Finances", "Social", "Health"],
        }
        response = sync_client.post("/api/burnout/score", json=payload)

        assert response.json() == {"burnout_score": 88, "zone": "Critical"}

    def test_invalid_meaningfulness(self, sync_client):
        """Out-of-range values map to INVALID_INPUT."""
        payload = {"mood": "Meh", "energy_level": 3, "meaningfulness": 0}
        response = sync_client.post("/api/burnout/score", json=payload)

        assert response.status_code == 422
        assert response.json()["error_code"] == "INVALID_INPUT"


class TestZonesRoute:
    """Test POST /api/burnout/zones."""

    def test_spread_population(self, sync_client):
        """One score per zone with interpolated thresholds."""
        response = sync_client.post("/api/burnout/zones", json={"scores": [10, 30, 50, 70, 90]})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert data["used_fallback"] is False
        assert data["thresholds"] == pytest.approx([26, 42, 58, 74])
        assert data["zone_counts"] == {
            "Energized": 1, "Mild Stress": 1, "Warning Zone": 1, "Burnout Zone": 1, "Critical": 1,
        }
        assert [z["zone"] for z in data["zones"]] == [
            "Energized", "Mild Stress", "Warning Zone", "Burnout Zone", "Critical",
        ]
        assert all(z["percent"] == 20.0 for z in data["zones"])

    def test_uniform_population(self, sync_client):
        """No spread uses the fixed thresholds."""
        response = sync_client.post("/api/burnout/zones", json={"scores": [50, 50, 50]})

        data = response.json()
        assert data["used_fallback"] is True
        assert data["thresholds"] == [20, 40, 60, 80]
        assert data["zone_counts"]["Warning Zone"] == 3

    def test_empty_scores(self, sync_client):
        """An empty population is a client error."""
        response = sync_client.post("/api/burnout/zones", json={"scores": []})

        assert response.status_code == 400
        assert response.json()["detail"] == "No scores provided"

    def test_score_out_of_range(self, sync_client):
        """Scores must lie on the 0-100 scale."""
        response = sync_client.post("/api/burnout/zones", json={"scores": [50, 120]})
        assert response.status_code == 422

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_scores_rejected(self, sync_client, raw):
        """NaN and infinities never reach the classifier."""
        body = '{"scores": [' + raw + ', 10, 90]}'
        with patch("burnscale.api.routes.burnout.classify_zones") as mock_classify:
            response = sync_client.post(
                "/api/burnout/zones", content=body, headers={"Content-Type": "application/json"},
            )

        assert response.status_code == 422
        mock_classify.assert_not_called()

    def test_fractional_scores_accepted(self, sync_client):
        """Daily averages with fractions classify fine."""
        response = sync_client.post("/api/burnout/zones", json={"scores": [12.5, 40.0, 63.25]})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["thresholds"] == sorted(data["thresholds"])
