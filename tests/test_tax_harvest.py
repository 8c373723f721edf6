from __future__ import annotations

import pytest

from factories import make_holding
from wealth_engine.services.tax_harvest import HarvestConfig, find_opportunities, total_tax_saving


def test_larger_loss_ranks_first():
    holdings = [
        make_holding("small", 20_000, 15_000),
        make_holding("large", 50_000, 40_000),
    ]
    opportunities = find_opportunities(holdings)
    assert [opp.holding.id for opp in opportunities] == ["large", "small"]
    assert opportunities[0].unrealized_loss == pytest.approx(10_000)
    assert opportunities[0].loss_percent == pytest.approx(20.0)
    assert opportunities[0].potential_tax_saving == pytest.approx(2_000)
    assert total_tax_saving(opportunities) == pytest.approx(3_000)


def test_gains_and_flat_positions_are_never_returned():
    holdings = [
        make_holding("gain", 10_000, 12_000),
        make_holding("flat", 10_000, 10_000),
        make_holding("loss", 10_000, 9_000),
    ]
    assert [opp.holding.id for opp in find_opportunities(holdings)] == ["loss"]


def test_zero_cost_basis_is_skipped():
    holdings = [make_holding("gift", 0, 0), make_holding("bonus", 0, 500)]
    assert find_opportunities(holdings) == []


def test_equal_losses_keep_input_order():
    holdings = [make_holding("first", 10_000, 8_000), make_holding("second", 4_000, 2_000)]
    assert [opp.holding.id for opp in find_opportunities(holdings)] == ["first", "second"]


def test_rate_is_configurable():
    [opp] = find_opportunities([make_holding("a", 1_000, 500)], config=HarvestConfig(tax_rate=0.3))
    assert opp.potential_tax_saving == pytest.approx(150)


def test_inputs_are_left_untouched():
    holdings = [make_holding("a", 1_000, 500)]
    snapshot = list(holdings)
    find_opportunities(holdings)
    assert holdings == snapshot


def test_invalid_rate_rejected():
    with pytest.raises(ValueError):
        HarvestConfig(tax_rate=1.5)


def test_empty_input():
    assert find_opportunities([]) == []
    assert total_tax_saving([]) == 0


def test_loss_matches_holding_unrealized_pnl():
    holding = make_holding("a", 8_000, 6_500)
    assert holding.unrealized_pnl == pytest.approx(-1_500)
    [opp] = find_opportunities([holding])
    assert opp.unrealized_loss == pytest.approx(-holding.unrealized_pnl)
