"""
Crisis Cycle Engine — Configuration

Engine parameters for the four assessors: similarity factor weights and
tolerances, generation classification thresholds, and cycle phase bands.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)

# ─── Storage Paths ───────────────────────────────────────────────────────────

# Only used by the demo entry point when exporting report tables
DEV_DATA_ROOT = Path(__file__).parent.parent / "data"
DEV_REPORT_DIR = DEV_DATA_ROOT / "reports"


# ─── Similarity Scoring ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class SimilarityWeights:
    """
    Weights and tolerances for comparing a snapshot against a pre-crisis one.

    Every weight is always added to the denominator, matched or not. The two
    penalties are heuristic constants with no empirical calibration behind
    them; treat them as tunable, not as estimates.
    """
    public_debt: float = 20.0
    private_debt: float = 20.0
    interest_rate: float = 15.0
    unemployment: float = 10.0
    stock_valuation: float = 20.0
    yield_curve: float = 15.0
    current_account: float = 10.0
    original_sin: float = 10.0
    capital_flow_risk: float = 10.0

    # Tolerances: absolute difference below which a factor counts as a match
    public_debt_tolerance: float = 20.0
    private_debt_tolerance: float = 30.0
    private_debt_divisor: float = 1.5
    interest_rate_tolerance: float = 2.0
    unemployment_tolerance: float = 2.0
    stock_valuation_tolerance: float = 10.0
    yield_curve_tolerance: float = 1.0
    current_account_tolerance: float = 3.0
    current_account_deficit_flag: float = -5.0   # historical CA below this gets flagged
    fx_debt_tolerance: float = 20.0
    original_sin_historical_min: float = 50.0    # historical FX debt share above this...
    original_sin_current_max: float = 10.0       # ...while current share is below this

    # Subtractive penalties (heuristic)
    no_original_sin_penalty: float = 10.0
    safe_haven_penalty: float = 5.0

    @property
    def total_weight(self) -> float:
        """Denominator of the similarity ratio (130 with the defaults)."""
        return (
            self.public_debt + self.private_debt + self.interest_rate
            + self.unemployment + self.stock_valuation + self.yield_curve
            + self.current_account + self.original_sin + self.capital_flow_risk
        )

    def validate(self) -> None:
        """Reject negative parameters and an empty denominator."""
        from knowledge_base.crisis_schema import ConfigurationError

        for f in fields(self):
            if f.name == "current_account_deficit_flag":
                continue  # a signed level, not a weight
            value = getattr(self, f.name)
            if value < 0:
                raise ConfigurationError(f"SimilarityWeights.{f.name} must be >= 0, got {value}")
        if self.private_debt_divisor == 0:
            raise ConfigurationError("SimilarityWeights.private_debt_divisor must be non-zero")
        if self.total_weight <= 0:
            raise ConfigurationError("SimilarityWeights total weight must be positive")


DEFAULT_SIMILARITY_WEIGHTS = SimilarityWeights()

# Top-match alert levels for the batch report
SIMILARITY_ALERT_HIGH = 70
SIMILARITY_ALERT_ELEVATED = 50


# ─── Crisis Generation Classification ────────────────────────────────────────

@dataclass(frozen=True)
class GenerationThresholds:
    """Cut-offs used when a crisis carries no explicit generation tag."""
    high_fx_debt_share: float = 50.0         # % of debt in foreign currency
    moderate_debt_to_gdp_max: float = 90.0
    moderate_inflation_max: float = 10.0
    moderate_current_account_min: float = -5.0
    mismatch_markers: tuple[str, ...] = (
        "original sin",
        "fx debt",
        "foreign currency",
        "mismatch",
    )
    # Read against the crisis's own causes, for cause_mismatch_types only
    cause_mismatch_markers: tuple[str, ...] = (
        "foreign currency",
        "short-term",
        "leverage",
        "mismatch",
        "balance sheet",
    )
    cause_mismatch_types: tuple[str, ...] = ("banking", "currency")
    # A phrase opening with one of these denies the marker ("No original sin exposure")
    negation_prefixes: tuple[str, ...] = ("no ", "not ", "low ", "without ", "limited ")


DEFAULT_GENERATION_THRESHOLDS = GenerationThresholds()


# ─── Cycle Phase Bands ───────────────────────────────────────────────────────
# Half-open bands over the 0-100 risk score: a boundary value belongs to the
# higher band. Ordered by lower bound.

CYCLE_PHASE_BANDS: list[tuple[float, str, str]] = [
    (0.0, "early", "Early Cycle"),
    (25.0, "mid", "Mid Cycle"),
    (50.0, "late", "Late Cycle"),
    (75.0, "crisis", "Crisis Warning"),
]


# ─── Country Vulnerability Levels ────────────────────────────────────────────
# (upper bound exclusive, label); anything at or above the last bound is Critical

VULNERABILITY_LEVELS: list[tuple[float, str]] = [
    (30.0, "Low"),
    (50.0, "Low-Medium"),
    (65.0, "Medium"),
    (80.0, "High"),
]
HIGH_VULNERABILITY_THRESHOLD = 70.0
