"""
Tests for scoring.scorer
"""

import pytest

from scoring.scorer import compute_percentage, grade_for, round_half_up, score_label


class TestGrades:

    @pytest.mark.parametrize("percentage, grade", [
        (100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"),
        (70, "C"), (69, "D"), (60, "D"), (59, "F"), (0, "F"),
    ])
    def test_grade_bands(self, percentage, grade):
        """Grades change exactly on the band boundaries"""
        assert grade_for(percentage) == grade


class TestPercentage:

    def test_zero_max_score(self):
        """Nothing evaluated means zero, not a division error"""
        assert compute_percentage(0, 0) == 0

    def test_rounds_half_up(self):
        """Halves round up rather than to even"""
        assert compute_percentage(1, 8) == 13      # 12.5
        assert compute_percentage(2, 3) == 67

    def test_bounds(self):
        """A perfect score is 100"""
        assert compute_percentage(45, 45) == 100
        assert compute_percentage(0, 45) == 0


class TestRoundHalfUp:

    def test_integers(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2

    def test_decimals(self):
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(66.04, 1) == 66.0


class TestScoreLabel:

    def test_labels(self):
        assert score_label(95) == "Excellent"
        assert score_label(75) == "Good"
        assert score_label(50) == "Needs Work"
        assert score_label(10) == "Poor"
