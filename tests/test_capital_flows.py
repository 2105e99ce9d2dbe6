from __future__ import annotations
import pytest
from config.cycle_stats import PUSH_PULL_FACTORS
from knowledge_base.crisis_schema import PushPullFactor
from processing.capital_flows import assess_capital_flow_balance, net_flow


def _factor(factor_type: str, level: str = "medium", n: int = 0) -> PushPullFactor:
    return PushPullFactor(
        id=f"{factor_type}-{n}", name=f"{factor_type} {n}", type=factor_type,
        direction="outflow" if factor_type == "push" else "inflow", current_level=level,
    )


def test_more_push_is_outflow():
    factors = [_factor("push", "high", 1), _factor("push", "high", 2), _factor("pull", "low", 3)]
    balance = assess_capital_flow_balance(factors)
    assert (balance.push, balance.pull, balance.net) == (2, 1, "outflow")


def test_more_pull_is_inflow():
    factors = [_factor("pull", n=1), _factor("pull", n=2), _factor("push", n=3)]
    assert assess_capital_flow_balance(factors).net == "inflow"


def test_levels_do_not_weight_the_count():
    """One high push against one low pull is still a tie."""
    factors = [_factor("push", "high"), _factor("pull", "low")]
    assert assess_capital_flow_balance(factors).net == "neutral"


def test_empty_basket_is_neutral():
    balance = assess_capital_flow_balance([])
    assert (balance.push, balance.pull, balance.net) == (0, 0, "neutral")


@pytest.mark.parametrize("push,pull,expected", [
    (0, 1, "inflow"), (1, 0, "outflow"), (3, 3, "neutral"),
])
def test_net_flow(push, pull, expected):
    assert net_flow(push, pull) == expected


def test_bundled_factors_balance():
    balance = assess_capital_flow_balance(list(PUSH_PULL_FACTORS))
    assert (balance.push, balance.pull) == (4, 4)
    assert balance.net == "neutral"
