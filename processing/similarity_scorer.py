"""
Similarity Scorer — "this time is different?"

Compares a current macro snapshot with the pre-crisis snapshot of each
historical episode and scores the resemblance 0-100 (Reinhart-Rogoff style
comparison, extended with the Handbook of International Economics external
vulnerability metrics: current account, original sin, capital-flow risk).

Scoring is additive: each factor contributes up to its weight when the two
snapshots are close, and every factor's weight goes into the denominator
whether it matched or not. Two factors can SUBTRACT: a historical episode
driven by foreign-currency debt is made less similar to a present that has
none, and likewise for a sudden-stop-prone past versus a safe-haven present.
The raw ratio can therefore go negative; the final score is clamped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import polars as pl

from config.settings import (
    DEFAULT_SIMILARITY_WEIGHTS,
    SIMILARITY_ALERT_ELEVATED,
    SIMILARITY_ALERT_HIGH,
    SimilarityWeights,
)
from knowledge_base.crisis_schema import CrisisConditions, CrisisEvent
from knowledge_base.repository import DataIntegrityIssue, IndicatorRepository
from processing.scores import clamp, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class FactorComparison:
    """Result of comparing two snapshots, before it is attached to a crisis."""
    similarity_score: int
    matching_factors: list[str]
    differing_factors: list[str]
    raw_score: float = 0.0   # accumulated points, may be negative
    total_weight: float = 0.0


@dataclass
class HistoricalComparison:
    """One historical crisis scored against the current snapshot."""
    crisis: CrisisEvent
    similarity_score: int
    matching_factors: list[str]
    differing_factors: list[str]


@dataclass
class SimilarityReport:
    """Batch result: comparisons sorted by score, plus skipped-entry diagnostics."""
    comparisons: list[HistoricalComparison]
    diagnostics: list[DataIntegrityIssue] = field(default_factory=list)

    @property
    def top_match(self) -> Optional[HistoricalComparison]:
        return self.comparisons[0] if self.comparisons else None

    @property
    def alert_level(self) -> str:
        """'high' above 70, 'elevated' above 50, otherwise 'none'."""
        top = self.top_match
        if top is None:
            return "none"
        if top.similarity_score > SIMILARITY_ALERT_HIGH:
            return "high"
        if top.similarity_score > SIMILARITY_ALERT_ELEVATED:
            return "elevated"
        return "none"


def _higher_or_lower(current: float, historical: float) -> str:
    return "higher" if current > historical else "lower"


class SimilarityScorer:
    """
    Scores a current snapshot against historical pre-crisis snapshots.

    Stateless apart from its weights: the current snapshot is always passed
    in, so several what-if snapshots can be scored side by side.
    """

    def __init__(self, weights: SimilarityWeights = DEFAULT_SIMILARITY_WEIGHTS):
        weights.validate()
        self.weights = weights

    def score(self, current: CrisisConditions, historical: CrisisConditions) -> FactorComparison:
        """Compare two snapshots factor by factor."""
        w = self.weights
        matching: list[str] = []
        differing: list[str] = []
        score = 0.0

        # Public debt: partial credit shrinking with distance
        debt_diff = abs(current.debt_to_gdp - historical.debt_to_gdp)
        if debt_diff < w.public_debt_tolerance:
            matching.append("Similar public debt levels")
            score += w.public_debt - debt_diff
        else:
            differing.append(
                f"Public debt {_higher_or_lower(current.debt_to_gdp, historical.debt_to_gdp)} now"
            )

        # Private debt: partial credit, gentler slope
        private_diff = abs(current.private_debt - historical.private_debt)
        if private_diff < w.private_debt_tolerance:
            matching.append("Similar private debt levels")
            score += w.private_debt - private_diff / w.private_debt_divisor
        else:
            differing.append(
                f"Private debt {_higher_or_lower(current.private_debt, historical.private_debt)} now"
            )

        if abs(current.interest_rates - historical.interest_rates) < w.interest_rate_tolerance:
            matching.append("Similar interest rate environment")
            score += w.interest_rate
        else:
            differing.append(
                f"Rates {_higher_or_lower(current.interest_rates, historical.interest_rates)} now"
            )

        if abs(current.unemployment - historical.unemployment) < w.unemployment_tolerance:
            matching.append("Similar unemployment levels")
            score += w.unemployment

        if abs(current.stock_valuation - historical.stock_valuation) < w.stock_valuation_tolerance:
            matching.append("Similar market valuations")
            score += w.stock_valuation

        if abs(current.yield_curve - historical.yield_curve) < w.yield_curve_tolerance:
            matching.append("Similar yield curve shape")
            score += w.yield_curve

        # Current account: a deep historical deficit is worth calling out
        ca_diff = abs(current.current_account_gdp - historical.current_account_gdp)
        if ca_diff < w.current_account_tolerance:
            matching.append("Similar current account position")
            score += w.current_account
        elif historical.current_account_gdp < w.current_account_deficit_flag:
            size = "smaller" if current.current_account_gdp > historical.current_account_gdp else "larger"
            differing.append(f"Current account deficit {size} now")

        # Original sin: FX-debt-driven past vs. own-currency borrower now
        if (historical.foreign_currency_debt > w.original_sin_historical_min
                and current.foreign_currency_debt < w.original_sin_current_max):
            differing.append("No original sin now (borrows in own currency)")
            score -= w.no_original_sin_penalty
        elif abs(current.foreign_currency_debt - historical.foreign_currency_debt) < w.fx_debt_tolerance:
            matching.append("Similar currency debt exposure")
            score += w.original_sin

        # Capital flow risk: categorical
        if current.capital_flow_risk == historical.capital_flow_risk:
            matching.append("Similar capital flow risk profile")
            score += w.capital_flow_risk
        elif historical.capital_flow_risk == "high" and current.capital_flow_risk == "low":
            differing.append("Safe haven status now (lower sudden stop risk)")
            score -= w.safe_haven_penalty

        total_weight = w.total_weight
        ratio = 100.0 * score / total_weight
        if not 0.0 <= ratio <= 100.0:
            logger.debug("Similarity ratio %.2f outside [0, 100], clamping", ratio)

        return FactorComparison(
            similarity_score=round_half_up(clamp(ratio)),
            matching_factors=matching,
            differing_factors=differing,
            raw_score=score,
            total_weight=total_weight,
        )

    def score_catalog(
        self, current: CrisisConditions, repository: IndicatorRepository
    ) -> SimilarityReport:
        """
        Score every historical snapshot in the repository.

        Results are sorted by score descending; ties keep catalog order.
        Snapshots whose crisis cannot be resolved are skipped and reported.
        """
        comparisons: list[HistoricalComparison] = []
        diagnostics: list[DataIntegrityIssue] = list(repository.diagnostics)

        for crisis_id, historical in repository.conditions.items():
            crisis = repository.events.get(crisis_id)
            if crisis is None:
                issue = DataIntegrityIssue(
                    kind="orphan_conditions",
                    crisis_id=crisis_id,
                    message=f"Pre-crisis conditions for {crisis_id!r} match no crisis event",
                )
                logger.warning("Skipping comparison: %s", issue.message)
                diagnostics.append(issue)
                continue

            result = self.score(current, historical)
            comparisons.append(HistoricalComparison(
                crisis=crisis,
                similarity_score=result.similarity_score,
                matching_factors=result.matching_factors,
                differing_factors=result.differing_factors,
            ))

        # sorted() is stable, so equal scores stay in catalog order
        comparisons = sorted(comparisons, key=lambda c: c.similarity_score, reverse=True)
        return SimilarityReport(comparisons=comparisons, diagnostics=diagnostics)

    def print_report(self, report: SimilarityReport, limit: int = 4) -> None:
        """Log the top comparisons in a readable layout."""
        alert_emoji = {"high": "🔴", "elevated": "🟡", "none": "🟢"}

        logger.info("")
        logger.info("=" * 70)
        logger.info("%s HISTORICAL COMPARISON — alert level: %s",
                    alert_emoji.get(report.alert_level, "⚪"), report.alert_level.upper())
        logger.info("=" * 70)

        for rank, comp in enumerate(report.comparisons[:limit], start=1):
            logger.info(
                "  %d. %-40s %4d%%  (%d, %s)",
                rank, comp.crisis.name, comp.similarity_score,
                comp.crisis.year, comp.crisis.type_label,
            )
            for factor in comp.matching_factors:
                logger.info("       ✓ %s", factor)
            for factor in comp.differing_factors:
                logger.info("       ✗ %s", factor)

        for issue in report.diagnostics:
            logger.info("  ⚠ skipped %s: %s", issue.crisis_id, issue.message)


def score_similarity(
    current: CrisisConditions,
    repository: IndicatorRepository,
    weights: SimilarityWeights = DEFAULT_SIMILARITY_WEIGHTS,
) -> list[HistoricalComparison]:
    """Score the whole catalog against current; sorted, stable on ties."""
    return SimilarityScorer(weights).score_catalog(current, repository).comparisons


def comparisons_frame(comparisons: list[HistoricalComparison]) -> pl.DataFrame:
    """Tabular view of a comparison list, one row per crisis, rank from 1."""
    return pl.DataFrame(
        {
            "rank": list(range(1, len(comparisons) + 1)),
            "crisis_id": [c.crisis.id for c in comparisons],
            "name": [c.crisis.name for c in comparisons],
            "year": [c.crisis.year for c in comparisons],
            "type": [c.crisis.type for c in comparisons],
            "similarity_score": [c.similarity_score for c in comparisons],
            "matching_count": [len(c.matching_factors) for c in comparisons],
            "differing_count": [len(c.differing_factors) for c in comparisons],
        },
        schema={
            "rank": pl.Int64, "crisis_id": pl.Utf8, "name": pl.Utf8, "year": pl.Int64,
            "type": pl.Utf8, "similarity_score": pl.Int64,
            "matching_count": pl.Int64, "differing_count": pl.Int64,
        },
    )
