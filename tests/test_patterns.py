from __future__ import annotations

from datetime import date, timedelta

import pytest

from factories import make_transaction
from wealth_engine.services.patterns import (
    Frequency,
    FrequencyBuckets,
    PatternConfig,
    counterparty_key,
    detect_recurring,
)


def netflix_history():
    return [
        make_transaction("n1", date(2024, 1, 5), 499, "Subscriptions", "Netflix"),
        make_transaction("n2", date(2024, 2, 5), 499, "Subscriptions", "Netflix"),
        make_transaction("n3", date(2024, 3, 5), 499, "Subscriptions", "Netflix"),
    ]


def test_monthly_subscription_is_detected():
    patterns = detect_recurring(netflix_history())
    assert len(patterns) == 1
    pattern = patterns[0]
    assert pattern.merchant == "Netflix"
    assert pattern.frequency == Frequency.MONTHLY
    assert pattern.count == 3
    assert pattern.amount == pytest.approx(499)
    assert pattern.last_date == date(2024, 3, 5)
    assert pattern.average_interval_days == pytest.approx(30)
    assert pattern.next_expected == date(2024, 4, 4)


def test_single_observation_is_not_a_pattern():
    assert detect_recurring(netflix_history()[:1]) == []


def test_volatile_amounts_are_excluded():
    txns = [
        make_transaction("a1", date(2024, 1, 1), 100, merchant="Grocer"),
        make_transaction("a2", date(2024, 1, 8), 500, merchant="Grocer"),
        make_transaction("a3", date(2024, 1, 15), 900, merchant="Grocer"),
    ]
    assert detect_recurring(txns) == []


def test_weekly_cadence():
    start = date(2024, 5, 6)
    txns = [make_transaction(f"w{i}", start + timedelta(days=7 * i), 250, merchant="Gym") for i in range(4)]
    [pattern] = detect_recurring(txns)
    assert pattern.frequency == Frequency.WEEKLY
    assert pattern.next_expected == start + timedelta(days=28)


def test_same_day_duplicates_have_zero_gap():
    txns = [
        make_transaction("d1", date(2024, 1, 1), 40, merchant="Metro"),
        make_transaction("d2", date(2024, 1, 1), 40, merchant="Metro"),
    ]
    [pattern] = detect_recurring(txns)
    assert pattern.average_interval_days == 0
    assert pattern.frequency == Frequency.DAILY
    assert pattern.next_expected == date(2024, 1, 1)


def test_description_prefix_is_used_without_merchant():
    txns = [
        make_transaction("e1", date(2024, 1, 10), 1200, "Utilities", description="UPI/ELECTRICITY BOARD BILL JAN"),
        make_transaction("e2", date(2024, 2, 10), 1200, "Utilities", description="UPI/ELECTRICITY BOARD BILL FEB"),
    ]
    assert counterparty_key(txns[0]) == "UPI/ELECTRICITY BOAR"
    [pattern] = detect_recurring(txns)
    assert pattern.merchant == "UPI/ELECTRICITY BOAR"
    assert pattern.count == 2


def test_results_ordered_by_count_and_capped():
    txns = []
    for merchant_index in range(12):
        for month in range(1, 3):
            txns.append(
                make_transaction(f"m{merchant_index}-{month}", date(2024, month, 1), 99, merchant=f"Service {merchant_index}")
            )
    txns.extend(make_transaction(f"s{month}", date(2024, month, 3), 149, merchant="Spotify") for month in range(1, 6))

    patterns = detect_recurring(txns)
    assert len(patterns) == 10
    assert patterns[0].merchant == "Spotify"
    assert patterns[0].count == 5
    assert [p.count for p in patterns] == sorted((p.count for p in patterns), reverse=True)


def test_custom_threshold_admits_looser_amounts():
    txns = [
        make_transaction("b1", date(2024, 1, 1), 100, merchant="Broadband"),
        make_transaction("b2", date(2024, 2, 1), 110, merchant="Broadband"),
    ]
    assert detect_recurring(txns) == []
    assert len(detect_recurring(txns, config=PatternConfig(dispersion_threshold=1.0))) == 1


@pytest.mark.parametrize(
    "gap, expected",
    [
        (1, Frequency.DAILY),
        (2, Frequency.WEEKLY),
        (9.9, Frequency.WEEKLY),
        (14, Frequency.BIWEEKLY),
        (44, Frequency.MONTHLY),
        (45, Frequency.YEARLY),
        (365, Frequency.YEARLY),
    ],
)
def test_frequency_bucket_edges(gap, expected):
    assert FrequencyBuckets().classify(gap) == expected


def test_half_day_average_gap_rounds_up():
    txns = [
        make_transaction("h1", date(2024, 1, 1), 999, merchant="Hosting"),
        make_transaction("h2", date(2024, 1, 31), 999, merchant="Hosting"),
        make_transaction("h3", date(2024, 3, 2), 999, merchant="Hosting"),
    ]
    [pattern] = detect_recurring(txns)
    assert pattern.average_interval_days == pytest.approx(30.5)
    assert pattern.next_expected == date(2024, 4, 2)
