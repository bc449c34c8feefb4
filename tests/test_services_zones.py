"""
Unit tests for burnscale.services.zones module.
"""
import random

import pytest
from burnscale.services.zones import (
    FALLBACK_THRESHOLDS,
    ZONES,
    Zone,
    classify_zones,
    quantile,
    zone_for,
    zone_thresholds,
)


class TestQuantile:
    """Test quantile function."""

    def test_interpolates_between_ranks(self):
        """The median of four values sits halfway between the middle two."""
        assert quantile([1, 2, 3, 4], 0.5) == pytest.approx(2.5)

    def test_single_value(self):
        """Every quantile of one value is that value."""
        assert quantile([42], 0.8) == 42

    def test_extremes(self):
        """q=0 and q=1 are the minimum and maximum."""
        assert quantile([5, 10, 20], 0.0) == 5
        assert quantile([5, 10, 20], 1.0) == 20


class TestZoneThresholds:
    """Test zone_thresholds function."""

    def test_spread_population(self):
        """Five evenly spread scores give interpolated boundaries."""
        thresholds, used_fallback = zone_thresholds([10, 30, 50, 70, 90])
        assert not used_fallback
        assert thresholds == pytest.approx((26, 42, 58, 74))

    def test_no_spread_uses_fixed_boundaries(self):
        """Identical scores fall back to 20/40/60/80."""
        thresholds, used_fallback = zone_thresholds([50, 50, 50])
        assert used_fallback
        assert thresholds == FALLBACK_THRESHOLDS

    def test_two_values_are_not_degenerate(self):
        """Two distinct scores still have spread."""
        thresholds, used_fallback = zone_thresholds([0, 100])
        assert not used_fallback
        assert thresholds == pytest.approx((20, 40, 60, 80))

    def test_unsorted_input(self):
        """Input order does not matter."""
        assert zone_thresholds([90, 10, 70, 30, 50]) == zone_thresholds([10, 30, 50, 70, 90])

    def test_thresholds_are_non_decreasing(self):
        """Boundaries are ordered for any population."""
        rng = random.Random(7)
        for _ in range(50):
            scores = [rng.randint(0, 100) for _ in range(rng.randint(1, 30))]
            thresholds, _ = zone_thresholds(scores)
            assert list(thresholds) == sorted(thresholds)


class TestZoneFor:
    """Test zone_for function."""

    @pytest.mark.parametrize("score,zone", [
        (0, Zone.ENERGIZED),
        (20, Zone.ENERGIZED),
        (20.5, Zone.MILD_STRESS),
        (40, Zone.MILD_STRESS),
        (60, Zone.WARNING_ZONE),
        (80, Zone.BURNOUT_ZONE),
        (80.5, Zone.CRITICAL),
        (100, Zone.CRITICAL),
    ])
    def test_boundaries_are_inclusive(self, score, zone):
        """A score equal to a boundary lands in the lower zone."""
        assert zone_for(score, FALLBACK_THRESHOLDS) is zone


class TestClassifyZones:
    """Test classify_zones function."""

    def test_one_score_per_zone(self):
        """An evenly spread population puts one score in each zone."""
        summary = classify_zones([10, 30, 50, 70, 90])
        assert summary.counts == {zone: 1 for zone in ZONES}
        assert summary.total == 5
        assert not summary.used_fallback

    def test_uniform_population_lands_in_warning_zone(self):
        """Uniform scores of 50 use the fallback and all land in Warning Zone."""
        summary = classify_zones([50, 50, 50, 50])
        assert summary.used_fallback
        assert summary.counts[Zone.WARNING_ZONE] == 4
        assert sum(summary.counts.values()) == 4

    def test_single_score(self):
        """A lone score is placed on the fixed scale."""
        summary = classify_zones([85])
        assert summary.counts[Zone.CRITICAL] == 1
        assert summary.used_fallback

    def test_all_zones_present(self):
        """Every zone has a count, zero included, in ordinal order."""
        summary = classify_zones([50, 50])
        assert list(summary.counts) == list(ZONES)
        assert summary.counts[Zone.ENERGIZED] == 0

    def test_counts_sum_to_total(self):
        """No score is lost or double counted."""
        rng = random.Random(11)
        scores = [rng.randint(3, 88) for _ in range(37)]
        summary = classify_zones(scores)
        assert sum(summary.counts.values()) == len(scores) == summary.total

    def test_idempotent_and_order_independent(self):
        """Same population, same answer; the input is left untouched."""
        scores = [88, 3, 40, 43, 60, 73, 12]
        snapshot = list(scores)
        first = classify_zones(scores)
        shuffled = list(scores)
        random.Random(3).shuffle(shuffled)
        assert classify_zones(scores) == first
        assert classify_zones(shuffled).counts == first.counts
        assert scores == snapshot

    def test_float_scores(self):
        """Daily averages are fractional and classify fine."""
        summary = classify_zones([12.5, 40.0, 63.25])
        assert summary.total == 3

    def test_empty_population_rejected(self):
        """There is nothing to classify in an empty population."""
        with pytest.raises(ValueError):
            classify_zones([])

    def test_percentages(self):
        """Shares add up to 100."""
        summary = classify_zones([10, 30, 50, 70, 90])
        percents = summary.percentages()
        assert all(p == pytest.approx(20.0) for p in percents.values())
        assert sum(percents.values()) == pytest.approx(100.0)

    def test_zone_labels(self):
        """Zone values are the display labels."""
        assert [z.value for z in ZONES] == [
            "Energized", "Mild Stress", "Warning Zone", "Burnout Zone", "Critical",
        ]
