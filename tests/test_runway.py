from __future__ import annotations

from datetime import date

import pytest

from factories import make_holding, make_transaction
from wealth_engine.services.records import TransactionType
from wealth_engine.services.runway import (
    RunwayState,
    RunwayThresholds,
    classify_runway,
    compute_runway,
    liquid_assets,
    monthly_burn,
)

REFERENCE = date(2024, 6, 30)


def test_burn_averages_over_elapsed_months():
    txns = [
        make_transaction("rent", date(2024, 4, 1), 20_000, "Rent"),
        make_transaction("food", date(2024, 5, 1), 10_000, "Food"),
        make_transaction("salary", date(2024, 5, 1), 150_000, "Income", type=TransactionType.CREDIT),
        make_transaction("move", date(2024, 5, 2), 99_000, "Transfers", excluded=True),
    ]
    assert monthly_burn(txns, REFERENCE) == pytest.approx(10_000)


def test_burn_uses_at_least_one_month():
    txns = [make_transaction("today", REFERENCE, 5_000)]
    assert monthly_burn(txns, REFERENCE) == pytest.approx(5_000)


def test_only_liquid_types_count():
    holdings = [
        make_holding("s", 40_000, 50_000, asset_type="Stocks"),
        make_holding("c", 20_000, 20_000, asset_type="Cash"),
        make_holding("re", 900_000, 1_000_000, asset_type="Real Estate"),
    ]
    assert liquid_assets(holdings) == pytest.approx(70_000)
    assert liquid_assets(holdings, ["Real Estate"]) == pytest.approx(1_000_000)


def test_runway_report():
    txns = [make_transaction("rent", date(2024, 4, 1), 30_000, "Rent")]
    holdings = [
        make_holding("s", 40_000, 50_000, asset_type="Stocks"),
        make_holding("c", 20_000, 20_000, asset_type="Cash"),
    ]
    report = compute_runway(txns, holdings, REFERENCE)
    assert report.monthly_burn == pytest.approx(10_000)
    assert report.runway_months == pytest.approx(7)
    assert report.is_infinite is False
    assert report.state == RunwayState.WARNING


def test_no_spend_with_savings_is_infinite():
    report = compute_runway([], [make_holding("c", 1_000, 1_000, asset_type="Cash")], REFERENCE)
    assert report.is_infinite is True
    assert report.state == RunwayState.FREEDOM


def test_nothing_at_all_is_panic():
    report = compute_runway([], [], REFERENCE)
    assert report.runway_months == 0
    assert report.is_infinite is False
    assert report.state == RunwayState.PANIC


@pytest.mark.parametrize(
    "months, expected",
    [
        (0, RunwayState.PANIC),
        (6, RunwayState.PANIC),
        (6.5, RunwayState.WARNING),
        (12, RunwayState.WARNING),
        (13, RunwayState.SAFE),
        (60, RunwayState.SAFE),
        (61, RunwayState.FREEDOM),
    ],
)
def test_classification_bounds(months, expected):
    assert classify_runway(months, False) == expected


def test_custom_thresholds():
    assert classify_runway(4, False, RunwayThresholds(warning=3, safe=6, freedom=24)) == RunwayState.WARNING
