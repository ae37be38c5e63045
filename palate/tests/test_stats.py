from __future__ import annotations

from palate.profile.stats import compute_avg_vibe, compute_confidence, confidence_label


class TestAvgVibe:
    def test_empty(self):
        assert compute_avg_vibe([]) == 0

    def test_mean(self):
        assert compute_avg_vibe([{"vibe_score": 80}, {"vibe_score": 40}]) == 60

    def test_missing_and_null_count_as_zero(self):
        assert compute_avg_vibe([{"vibe_score": 90}, {"vibe_score": None}, {}]) == 30

    def test_rounds_half_up(self):
        assert compute_avg_vibe([{"vibe_score": 2}, {"vibe_score": 3}]) == 3
        assert compute_avg_vibe([{"vibe_score": 1}, {"vibe_score": 2}]) == 2

    def test_rounds_to_nearest(self):
        assert compute_avg_vibe([{"vibe_score": 80}, {"vibe_score": 40}, {"vibe_score": 40}]) == 53


class TestConfidence:
    def test_no_visits(self):
        assert compute_confidence(0) == 0

    def test_halfway(self):
        assert compute_confidence(4) == 0.5

    def test_full(self):
        assert compute_confidence(8) == 1.0

    def test_saturates(self):
        assert compute_confidence(16) == 1.0

    def test_non_decreasing(self):
        values = [compute_confidence(n) for n in range(20)]
        assert values == sorted(values)


class TestConfidenceLabel:
    def test_new(self):
        assert confidence_label(0.0) == "New"
        assert confidence_label(compute_confidence(3)) == "New"

    def test_building(self):
        assert confidence_label(0.4) == "Building"
        assert confidence_label(compute_confidence(5)) == "Building"

    def test_established(self):
        assert confidence_label(compute_confidence(6)) == "Established"
        assert confidence_label(1.0) == "Established"
