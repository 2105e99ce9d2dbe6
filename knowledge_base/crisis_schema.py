"""
Crisis entity schema.

Typed, immutable records for the crisis catalog, pre-crisis snapshots,
cycle indicators, capital-flow factors and episodes, and debt-cycle phases.
Construction is where catalog data gets validated: a record that builds is
safe to hand to any of the assessors.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Literal, NewType, Optional, get_args


class ConfigurationError(ValueError):
    """Catalog or engine configuration that must be fixed before evaluation."""


# ── Enumerations ──────────────────────────────────────────────────────────────

CrisisId = NewType("CrisisId", str)

CrisisType = Literal["banking", "sovereign_debt", "currency", "inflation", "stock_market"]
CrisisGeneration = Literal["1st", "2nd", "3rd"]
RiskLevel = Literal["low", "medium", "high"]
FactorType = Literal["push", "pull"]
FlowDirection = Literal["inflow", "outflow"]
CycleType = Literal["long_term", "short_term"]
DebtPhase = Literal["early", "bubble", "top", "depression", "deleveraging", "normalization"]
CapitalFlowType = Literal["sudden_stop", "capital_bonanza", "flight_to_safety"]

CRISIS_TYPES: tuple[str, ...] = get_args(CrisisType)
CRISIS_GENERATIONS: tuple[str, ...] = get_args(CrisisGeneration)
RISK_LEVELS: tuple[str, ...] = get_args(RiskLevel)

CRISIS_TYPE_LABELS: dict[str, str] = {
    "banking":        "Banking Crisis",
    "sovereign_debt": "Sovereign Debt Crisis",
    "currency":       "Currency Crisis",
    "inflation":      "Inflation Crisis",
    "stock_market":   "Stock Market Crash",
}

CAPITAL_FLOW_TYPE_LABELS: dict[str, str] = {
    "sudden_stop":      "Sudden Stop",
    "capital_bonanza":  "Capital Bonanza",
    "flight_to_safety": "Flight to Safety",
}

SEVERITY_LABELS: dict[int, str] = {
    1: "Minor",
    2: "Moderate",
    3: "Significant",
    4: "Severe",
    5: "Catastrophic",
}


def _check_choice(owner: str, field_name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ConfigurationError(
            f"{owner}.{field_name}={value!r} is not one of {', '.join(allowed)}"
        )


def severity_label(severity: int) -> str:
    """Map 1-5 severity → Minor … Catastrophic."""
    return SEVERITY_LABELS.get(severity, "Unknown")


def crisis_type_label(crisis_type: str) -> str:
    return CRISIS_TYPE_LABELS.get(crisis_type, "Unknown")


# ── Crisis events ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CrisisEvent:
    """
    One historical crisis episode.

    crisis_generation is an explicit override: None means "classify from the
    linked pre-crisis conditions", any tag means "use this one as-is".
    """
    id: CrisisId
    name: str
    year: int
    country: str
    country_code: str
    type: CrisisType
    severity: int
    description: str = ""
    end_year: Optional[int] = None
    region: str = "Global"
    causes: tuple[str, ...] = ()
    consequences: tuple[str, ...] = ()

    # Outcome metrics, only populated where the episode has them
    gdp_decline: Optional[float] = None
    recovery_years: Optional[float] = None
    peak_inflation: Optional[float] = None
    currency_decline: Optional[float] = None
    bank_failures: Optional[int] = None
    debt_to_gdp: Optional[float] = None

    crisis_generation: Optional[CrisisGeneration] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ConfigurationError("CrisisEvent.id must be non-empty")
        _check_choice("CrisisEvent", "type", self.type, CRISIS_TYPES)
        if not 1 <= self.severity <= 5:
            raise ConfigurationError(
                f"CrisisEvent {self.id!r}: severity {self.severity} outside [1, 5]"
            )
        if self.crisis_generation is not None:
            _check_choice("CrisisEvent", "crisis_generation",
                          self.crisis_generation, CRISIS_GENERATIONS)
        if self.end_year is not None and self.end_year < self.year:
            raise ConfigurationError(
                f"CrisisEvent {self.id!r}: end_year {self.end_year} before year {self.year}"
            )

    @property
    def severity_label(self) -> str:
        return severity_label(self.severity)

    @property
    def type_label(self) -> str:
        return crisis_type_label(self.type)


# ── Macro snapshots ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CrisisConditions:
    """Macro snapshot: pre-crisis conditions, or "now" via CurrentConditions."""
    debt_to_gdp: float             # public debt, % of GDP
    private_debt: float            # household + corporate debt, % of GDP
    interest_rates: float          # policy rate, %
    inflation: float               # CPI, % YoY
    unemployment: float            # %
    yield_curve: float             # 10Y minus 2Y, pp
    stock_valuation: float         # CAPE
    current_account_gdp: float     # % of GDP
    foreign_currency_debt: float   # % of debt in foreign currency
    short_term_debt_reserves: float  # short-term external debt / reserves, %
    real_exchange_rate_deviation: float  # % deviation from PPP
    capital_flow_risk: RiskLevel
    characteristics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_choice(type(self).__name__, "capital_flow_risk",
                      self.capital_flow_risk, RISK_LEVELS)

    def with_overrides(self, **changes) -> "CrisisConditions":
        """Return a what-if copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class CurrentConditions(CrisisConditions):
    """The "now" snapshot. Passed explicitly into every comparison."""


# ── Cycle indicators ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CycleIndicator:
    """
    One indicator in the business-cycle basket.

    inverted=True means danger is signalled by a LOW value (yield curve,
    real rates, current account). Thresholds must move monotonically away
    from the historical average in that direction.
    """
    name: str
    unit: str
    current_value: float
    warning_threshold: float
    danger_threshold: float
    historical_average: float
    inverted: bool = False
    precrisis_average: Optional[float] = None
    interpretation: str = ""

    def __post_init__(self) -> None:
        avg, warn, danger = self.historical_average, self.warning_threshold, self.danger_threshold
        if self.inverted:
            ok = avg >= warn > danger
            expected = "historical_average >= warning_threshold > danger_threshold"
        else:
            ok = avg <= warn < danger
            expected = "historical_average <= warning_threshold < danger_threshold"
        if not ok:
            raise ConfigurationError(
                f"CycleIndicator {self.name!r}: thresholds ({avg}, {warn}, {danger}) "
                f"violate {expected}"
            )


# ── Capital flows ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PushPullFactor:
    """A global (push) or local (pull) driver of emerging-market capital flows."""
    id: str
    name: str
    type: FactorType
    direction: FlowDirection
    current_level: RiskLevel
    description: str = ""
    indicators: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_choice("PushPullFactor", "type", self.type, ("push", "pull"))
        _check_choice("PushPullFactor", "direction", self.direction, ("inflow", "outflow"))
        _check_choice("PushPullFactor", "current_level", self.current_level, RISK_LEVELS)


@dataclass(frozen=True)
class CapitalFlowEvent:
    """
    A historical capital-flow episode.

    magnitude is the net flow in % of GDP: negative for a sudden stop,
    positive for a bonanza or a flight-to-safety inflow.
    """
    id: str
    type: CapitalFlowType
    country: str
    country_code: str
    year: int
    magnitude: float
    description: str = ""
    end_year: Optional[int] = None
    triggers: tuple[str, ...] = ()
    consequences: tuple[str, ...] = ()
    related_crisis: Optional[CrisisId] = None

    def __post_init__(self) -> None:
        _check_choice("CapitalFlowEvent", "type", self.type, get_args(CapitalFlowType))
        if self.end_year is not None and self.end_year < self.year:
            raise ConfigurationError(
                f"CapitalFlowEvent {self.id!r}: end_year {self.end_year} before year {self.year}"
            )
        outflow = self.type == "sudden_stop"
        if (outflow and self.magnitude > 0) or (not outflow and self.magnitude < 0):
            raise ConfigurationError(
                f"CapitalFlowEvent {self.id!r}: magnitude {self.magnitude} has the wrong "
                f"sign for {self.type}"
            )

    @property
    def type_label(self) -> str:
        return CAPITAL_FLOW_TYPE_LABELS[self.type]


# ── Debt cycles ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DebtCyclePhase:
    id: str
    name: str
    start_year: int
    end_year: int
    cycle_type: CycleType
    phase: DebtPhase
    interest_rate_trend: Literal["rising", "falling", "low", "high"]
    debt_trend: Literal["rising", "falling", "stable"]
    asset_prices: Literal["rising", "falling", "stable"]
    description: str = ""
    characteristics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_choice("DebtCyclePhase", "cycle_type", self.cycle_type, get_args(CycleType))
        _check_choice("DebtCyclePhase", "phase", self.phase, get_args(DebtPhase))
        if self.end_year < self.start_year:
            raise ConfigurationError(
                f"DebtCyclePhase {self.id!r}: end_year {self.end_year} before {self.start_year}"
            )

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year


# ── Reference catalogs ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CrisisGenerationModel:
    """Academic crisis model (Krugman 1979, Obstfeld 1994, Krugman/Chang-Velasco 1999)."""
    generation: CrisisGeneration
    name: str
    theorists: tuple[str, ...]
    year: int
    mechanism: str
    description: str
    key_indicators: tuple[str, ...] = ()
    historical_examples: tuple[str, ...] = ()
    warning_signals: tuple[str, ...] = ()


@dataclass(frozen=True)
class CountryDebtProfile:
    """Debt vulnerability scores for one country, all on a 0-100 scale."""
    country_code: str
    country: str
    debt_intolerance: float
    original_sin_index: float
    safe_haven_status: bool
    reserve_currency_issuer: bool
    current_debt_to_gdp: float
    external_debt_share: float
    foreign_currency_debt_share: float
    vulnerability_score: float = field(default=0.0)

    def __post_init__(self) -> None:
        for name in ("debt_intolerance", "original_sin_index", "vulnerability_score"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigurationError(
                    f"CountryDebtProfile {self.country_code}: {name}={value} outside [0, 100]"
                )
