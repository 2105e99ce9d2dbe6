"""
Capital Flow Balance — push vs. pull.

Counts the push factors (global conditions sending capital out of developed
markets) against the pull factors (what draws it into emerging markets).
More pull than push reads as net inflow, more push as net outflow, and an
exact tie is neutral.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from knowledge_base.crisis_schema import PushPullFactor

logger = logging.getLogger(__name__)

NetFlow = Literal["inflow", "outflow", "neutral"]


@dataclass
class CapitalFlowBalance:
    push: int
    pull: int
    net: NetFlow


def net_flow(push: int, pull: int) -> NetFlow:
    if pull > push:
        return "inflow"
    if push > pull:
        return "outflow"
    return "neutral"


def assess_capital_flow_balance(factors: list[PushPullFactor]) -> CapitalFlowBalance:
    """Count push and pull factors and derive the net direction."""
    push = sum(1 for f in factors if f.type == "push")
    pull = sum(1 for f in factors if f.type == "pull")
    return CapitalFlowBalance(push=push, pull=pull, net=net_flow(push, pull))


def print_balance(balance: CapitalFlowBalance, factors: list[PushPullFactor]) -> None:
    """Log the balance with each factor's current level."""
    net_emoji = {"inflow": "🟢", "outflow": "🔴", "neutral": "⚪"}

    logger.info("")
    logger.info("=" * 70)
    logger.info(
        "%s CAPITAL FLOWS — net %s (push=%d, pull=%d)",
        net_emoji[balance.net], balance.net.upper(), balance.push, balance.pull,
    )
    logger.info("=" * 70)
    for f in factors:
        logger.info(
            "    [%s] %-34s level=%-6s direction=%s",
            f.type.upper(), f.name, f.current_level, f.direction,
        )
