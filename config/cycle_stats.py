"""
Cycle Indicator Registry — the basket that places "now" in the business cycle,
plus the push/pull factors driving emerging-market capital flows.

Direction taxonomy:
  - inverted=False: danger is a HIGH reading (debt ratios, valuations, leverage)
  - inverted=True:  danger is a LOW reading (yield curve, real rates,
    current account). Thresholds then step DOWN from the historical average.

Push factors originate in developed markets (rates, risk appetite, liquidity);
pull factors are properties of the receiving economies (growth, yield, reform).
"""
from __future__ import annotations

from knowledge_base.crisis_schema import CycleIndicator, PushPullFactor


# ─── Cycle Indicators ───────────────────────────────────────────────────────

CYCLE_INDICATORS: list[CycleIndicator] = [

    # ══════════════════════════════════════════════════════════════════════
    # LEVERAGE
    # ══════════════════════════════════════════════════════════════════════

    CycleIndicator(
        name="US Debt-to-GDP", unit="%",
        current_value=123, historical_average=65, precrisis_average=95,
        warning_threshold=90, danger_threshold=120,
        interpretation="Government debt relative to economic output",
    ),
    CycleIndicator(
        name="Private Debt-to-GDP", unit="%",
        current_value=150, historical_average=120, precrisis_average=160,
        warning_threshold=150, danger_threshold=180,
        interpretation="Household and corporate debt relative to GDP",
    ),
    CycleIndicator(
        name="Bank Leverage Ratio", unit="x",
        current_value=12, historical_average=15, precrisis_average=25,
        warning_threshold=20, danger_threshold=30,
        interpretation="Assets divided by equity",
    ),

    # ══════════════════════════════════════════════════════════════════════
    # RATES & CURVE
    # ══════════════════════════════════════════════════════════════════════

    CycleIndicator(
        name="Real Interest Rate", unit="%",
        current_value=2.0, historical_average=2.5, precrisis_average=1.5,
        warning_threshold=-1, danger_threshold=-2, inverted=True,
        interpretation="Interest rate minus inflation",
    ),
    CycleIndicator(
        name="Yield Curve Spread", unit="%",
        current_value=0.5, historical_average=1.5, precrisis_average=0.2,
        warning_threshold=0, danger_threshold=-0.5, inverted=True,
        interpretation="10Y Treasury minus 2Y Treasury yield",
    ),
    CycleIndicator(
        name="Credit Spreads", unit="%",
        current_value=1.5, historical_average=2.0, precrisis_average=1.0,
        warning_threshold=2.5, danger_threshold=4.0,
        interpretation="Corporate bond yields minus Treasury yields",
    ),

    # ══════════════════════════════════════════════════════════════════════
    # REAL ECONOMY & PRICES
    # ══════════════════════════════════════════════════════════════════════

    CycleIndicator(
        name="Unemployment Rate", unit="%",
        current_value=4.2, historical_average=5.8, precrisis_average=4.5,
        warning_threshold=6.0, danger_threshold=7.5,
        interpretation="Percentage of labor force unemployed",
    ),
    CycleIndicator(
        name="Inflation Rate", unit="%",
        current_value=3.2, historical_average=3.0, precrisis_average=2.5,
        warning_threshold=4, danger_threshold=6,
        interpretation="Annual change in consumer prices",
    ),
    CycleIndicator(
        name="Stock Market Valuation (CAPE)", unit="ratio",
        current_value=32, historical_average=17, precrisis_average=28,
        warning_threshold=25, danger_threshold=35,
        interpretation="Cyclically Adjusted Price-to-Earnings ratio",
    ),
    CycleIndicator(
        name="Current Account Balance", unit="% GDP",
        current_value=-3.0, historical_average=-2.5, precrisis_average=-4.5,
        warning_threshold=-4, danger_threshold=-6, inverted=True,
        interpretation="Trade balance plus investment income",
    ),
]


# ─── Push / Pull Factors ────────────────────────────────────────────────────

PUSH_PULL_FACTORS: list[PushPullFactor] = [
    # Push factors (developed markets)
    PushPullFactor(
        id="dm-interest-rates", name="Developed Market Interest Rates",
        type="push", direction="outflow", current_level="high",
        description="Low DM rates push investors to seek yield in EM; high DM rates pull "
                    "capital back.",
        indicators=("Fed Funds Rate", "ECB Deposit Rate", "BoJ Policy Rate", "US 10Y Treasury"),
    ),
    PushPullFactor(
        id="global-risk-appetite", name="Global Risk Appetite",
        type="push", direction="inflow", current_level="medium",
        description="Risk-on sentiment pushes capital to EM; risk-off triggers outflows.",
        indicators=("VIX Index", "Credit Spreads", "EM Flows Tracker"),
    ),
    PushPullFactor(
        id="dm-growth-outlook", name="DM Growth Outlook",
        type="push", direction="outflow", current_level="medium",
        description="Weak DM growth pushes investors to EM; strong DM growth keeps capital home.",
        indicators=("US GDP Growth", "Euro Area Growth", "Leading Economic Indicators"),
    ),
    PushPullFactor(
        id="liquidity-conditions", name="Global Liquidity Conditions",
        type="push", direction="outflow", current_level="medium",
        description="Central bank balance sheet expansion pushes liquidity to EM; QT reverses it.",
        indicators=("Fed Balance Sheet", "Global M2", "Dollar Liquidity"),
    ),

    # Pull factors (emerging markets)
    PushPullFactor(
        id="em-growth-premium", name="EM Growth Premium",
        type="pull", direction="inflow", current_level="medium",
        description="Higher EM growth relative to DM attracts portfolio and FDI flows.",
        indicators=("EM GDP Growth", "Growth Differential vs DM", "Earnings Growth"),
    ),
    PushPullFactor(
        id="em-interest-rates", name="EM Interest Rate Differential",
        type="pull", direction="inflow", current_level="medium",
        description="Higher EM yields attract carry trade and fixed income flows.",
        indicators=("EM Local Bond Yields", "Carry vs DM", "Real Interest Rate Gap"),
    ),
    PushPullFactor(
        id="reform-momentum", name="Reform Momentum",
        type="pull", direction="inflow", current_level="low",
        description="Structural reforms and improving governance attract long-term capital.",
        indicators=("Business Climate Rankings", "Governance Scores", "Trade Agreements"),
    ),
    PushPullFactor(
        id="commodity-prices", name="Commodity Prices",
        type="pull", direction="inflow", current_level="medium",
        description="Rising commodity prices benefit EM exporters, attracting investment.",
        indicators=("CRB Index", "Oil Price", "Metal Prices"),
    ),
]
