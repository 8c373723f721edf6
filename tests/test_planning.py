from __future__ import annotations

import math
from datetime import date, timedelta

import pytest

from wealth_engine.services.planning import compute_fire_metrics, compute_goal_progress, goal_milestone


def test_fire_number_from_withdrawal_rate():
    metrics = compute_fire_metrics(15_000_000, 600_000, 0, 40, 45)
    assert metrics.fire_number == pytest.approx(15_000_000)
    assert metrics.progress == pytest.approx(100)
    assert metrics.years_to_fire == 0
    assert metrics.fire_age == 40
    assert metrics.on_track is True


def test_contributions_without_growth():
    metrics = compute_fire_metrics(0, 12_000, 10_000, 30, 35, expected_return=0.0)
    assert metrics.fire_number == pytest.approx(300_000)
    assert metrics.progress == 0
    assert metrics.years_to_fire == pytest.approx(2.5)
    assert metrics.fire_age == pytest.approx(32.5)
    assert metrics.on_track is True


def test_compounding_only():
    metrics = compute_fire_metrics(1_000_000, 80_000, 0, 30, 33, expected_return=0.12)
    expected_years = math.log(2) / math.log(1.01) / 12
    assert metrics.progress == pytest.approx(50)
    assert metrics.years_to_fire == pytest.approx(expected_years)
    assert metrics.on_track is False


def test_unreachable_target():
    metrics = compute_fire_metrics(100_000, 600_000, 0, 30, 60, expected_return=0.0)
    assert math.isinf(metrics.years_to_fire)
    assert metrics.on_track is False


def test_goal_progress_and_savings_needed():
    reference = date(2024, 1, 1)
    progress = compute_goal_progress(250_000, 1_000_000, reference + timedelta(days=300), reference)
    assert progress.progress == pytest.approx(25)
    assert progress.days_remaining == 300
    assert progress.months_remaining == 10
    assert progress.gap == pytest.approx(750_000)
    assert progress.monthly_savings_needed == pytest.approx(75_000)
    assert progress.milestone == "Building Momentum"


def test_goal_past_deadline():
    reference = date(2024, 6, 1)
    progress = compute_goal_progress(100, 1_000, date(2024, 1, 1), reference)
    assert progress.days_remaining == 0
    assert progress.months_remaining == 0
    assert progress.monthly_savings_needed == 0


def test_goal_exceeded_and_missing_target():
    reference = date(2024, 6, 1)
    done = compute_goal_progress(1_500, 1_000, date(2025, 1, 1), reference)
    assert done.progress == 100
    assert done.gap == -500
    assert done.milestone == "Goal Achieved"
    assert compute_goal_progress(1_500, 0, None, reference).progress == 0


@pytest.mark.parametrize(
    "progress, label",
    [
        (0, "Just Getting Started"),
        (24.9, "Just Getting Started"),
        (25, "Building Momentum"),
        (50, "Halfway Point"),
        (80, "Almost There"),
        (100, "Goal Achieved"),
    ],
)
def test_milestones(progress, label):
    assert goal_milestone(progress) == label
