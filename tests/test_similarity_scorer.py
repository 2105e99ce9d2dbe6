from __future__ import annotations
import dataclasses
import pytest
import polars as pl
from config.settings import DEFAULT_SIMILARITY_WEIGHTS, SimilarityWeights
from config.crisis_catalog import CRISIS_CONDITIONS, CRISIS_EVENTS, CURRENT_CONDITIONS
from knowledge_base.crisis_schema import ConfigurationError, CrisisEvent, CrisisId, CurrentConditions
from knowledge_base.repository import DataIntegrityIssue, IndicatorRepository
from processing.similarity_scorer import (
    SimilarityScorer,
    comparisons_frame,
    score_similarity,
)


@pytest.fixture(scope="module")
def repo() -> IndicatorRepository:
    return IndicatorRepository.from_catalogs()


def _conditions(crisis_id: str):
    return CRISIS_CONDITIONS[CrisisId(crisis_id)]


def _event(crisis_id: str, year: int = 2000) -> CrisisEvent:
    return CrisisEvent(
        id=CrisisId(crisis_id), name=crisis_id, year=year,
        country="Testland", country_code="TL", type="banking", severity=3,
    )


# ── Pairwise scoring ──────────────────────────────────────────────────────────

def test_identical_snapshots_score_100():
    scorer = SimilarityScorer()
    result = scorer.score(CURRENT_CONDITIONS, CURRENT_CONDITIONS)
    assert result.similarity_score == 100
    assert result.differing_factors == []
    assert len(result.matching_factors) == 9
    assert result.total_weight == 130


def test_maximally_divergent_snapshots_clamp_to_zero():
    """Penalties push the raw score negative; the reported score stops at 0."""
    current = CurrentConditions(
        debt_to_gdp=200, private_debt=300, interest_rates=20, inflation=2,
        unemployment=20, yield_curve=-5, stock_valuation=80,
        current_account_gdp=5, foreign_currency_debt=0, short_term_debt_reserves=10,
        real_exchange_rate_deviation=0, capital_flow_risk="low",
    )
    historical = current.with_overrides(
        debt_to_gdp=0, private_debt=0, interest_rates=0, unemployment=0,
        yield_curve=5, stock_valuation=0, current_account_gdp=-10,
        foreign_currency_debt=90, capital_flow_risk="high",
    )
    result = SimilarityScorer().score(current, historical)
    assert result.raw_score == -15
    assert result.similarity_score == 0
    assert result.matching_factors == []
    assert "No original sin now (borrows in own currency)" in result.differing_factors
    assert "Safe haven status now (lower sudden stop risk)" in result.differing_factors
    assert "Current account deficit smaller now" in result.differing_factors


def test_1929_comparison():
    """High valuations now and then, much heavier public debt now."""
    result = SimilarityScorer().score(CURRENT_CONDITIONS, _conditions("us-1929-stock"))
    # private 20 - 10/1.5, rates 15, unemployment 10, valuation 20,
    # yield curve 15, FX debt 10, capital flow 10 → 93.33 / 130
    assert result.similarity_score == 72
    assert "Similar market valuations" in result.matching_factors
    assert "Public debt higher now" in result.differing_factors
    assert "Similar public debt levels" not in result.matching_factors


def test_public_debt_partial_credit_shrinks_with_distance():
    scorer = SimilarityScorer()
    near = scorer.score(CURRENT_CONDITIONS, CURRENT_CONDITIONS.with_overrides(debt_to_gdp=120))
    far = scorer.score(CURRENT_CONDITIONS, CURRENT_CONDITIONS.with_overrides(debt_to_gdp=110))
    assert near.raw_score == 127
    assert far.raw_score == 117
    assert "Similar public debt levels" in far.matching_factors


def test_tolerance_boundary_is_not_a_match():
    """A difference exactly at the tolerance counts as differing."""
    result = SimilarityScorer().score(
        CURRENT_CONDITIONS, CURRENT_CONDITIONS.with_overrides(debt_to_gdp=103)
    )
    assert "Public debt higher now" in result.differing_factors
    assert "Similar public debt levels" not in result.matching_factors


def test_rates_lower_now_wording():
    result = SimilarityScorer().score(
        CURRENT_CONDITIONS, CURRENT_CONDITIONS.with_overrides(interest_rates=12)
    )
    assert "Rates lower now" in result.differing_factors


def test_medium_vs_low_capital_flow_risk_is_silent():
    """Unequal levels other than high-vs-low neither match nor penalise."""
    result = SimilarityScorer().score(
        CURRENT_CONDITIONS, CURRENT_CONDITIONS.with_overrides(capital_flow_risk="medium")
    )
    assert result.raw_score == 120
    assert not any("capital flow" in f.lower() for f in result.matching_factors)
    assert not any("safe haven" in f.lower() for f in result.differing_factors)


def test_custom_weights_without_penalties():
    weights = dataclasses.replace(
        DEFAULT_SIMILARITY_WEIGHTS, no_original_sin_penalty=0, safe_haven_penalty=0
    )
    default = SimilarityScorer().score(CURRENT_CONDITIONS, _conditions("argentina-2001-debt"))
    relaxed = SimilarityScorer(weights).score(CURRENT_CONDITIONS, _conditions("argentina-2001-debt"))
    assert default.similarity_score == 0
    assert relaxed.similarity_score == 8   # current account only: 10 / 130


def test_negative_weight_rejected():
    with pytest.raises(ConfigurationError):
        SimilarityScorer(SimilarityWeights(stock_valuation=-1))


def test_zero_total_weight_rejected():
    zeroed = SimilarityWeights(**{
        name: 0.0 for name in (
            "public_debt", "private_debt", "interest_rate", "unemployment",
            "stock_valuation", "yield_curve", "current_account", "original_sin",
            "capital_flow_risk",
        )
    })
    with pytest.raises(ConfigurationError):
        SimilarityScorer(zeroed)


# ── Catalog scoring ───────────────────────────────────────────────────────────

def test_catalog_ranking(repo):
    report = SimilarityScorer().score_catalog(CURRENT_CONDITIONS, repo)
    ranked = [(c.crisis.id, c.similarity_score) for c in report.comparisons]
    assert ranked == [
        ("us-1929-stock", 72),
        ("global-2020-pandemic", 69),
        ("us-2008-banking", 64),
        ("japan-1990-asset", 38),
        ("germany-1923-inflation", 27),
        ("greece-2010-debt", 16),
        ("asia-1997-currency", 8),
        ("argentina-2001-debt", 0),
    ]
    assert report.top_match.crisis.id == "us-1929-stock"
    assert report.alert_level == "high"
    assert report.diagnostics == []


def test_scores_stay_in_range(repo):
    for comp in score_similarity(CURRENT_CONDITIONS, repo):
        assert 0 <= comp.similarity_score <= 100


def test_scoring_is_deterministic(repo):
    first = [(c.crisis.id, c.similarity_score) for c in score_similarity(CURRENT_CONDITIONS, repo)]
    second = [(c.crisis.id, c.similarity_score) for c in score_similarity(CURRENT_CONDITIONS, repo)]
    assert first == second


def test_ties_keep_catalog_order():
    snapshot = _conditions("us-2008-banking")
    events = [_event("b-crisis"), _event("a-crisis"), _event("c-crisis")]
    conditions = {CrisisId("b-crisis"): snapshot, CrisisId("a-crisis"): snapshot,
                  CrisisId("c-crisis"): snapshot}
    repo = IndicatorRepository.build(events, conditions, CURRENT_CONDITIONS)

    ids = [c.crisis.id for c in score_similarity(CURRENT_CONDITIONS, repo)]
    assert ids == ["b-crisis", "a-crisis", "c-crisis"]


def test_what_if_snapshot_changes_ranking(repo):
    """An EM-style present with FX debt no longer gets the original-sin penalty."""
    em = CURRENT_CONDITIONS.with_overrides(
        foreign_currency_debt=70, capital_flow_risk="high", current_account_gdp=-7.0,
    )
    baseline = {c.crisis.id: c.similarity_score for c in score_similarity(CURRENT_CONDITIONS, repo)}
    what_if = {c.crisis.id: c.similarity_score for c in score_similarity(em, repo)}
    assert what_if["asia-1997-currency"] > baseline["asia-1997-currency"]
    assert what_if["argentina-2001-debt"] > baseline["argentina-2001-debt"]


def test_orphan_snapshot_skipped_during_scoring():
    """A repository assembled without build() still never crashes the batch."""
    repo = IndicatorRepository(
        events={CrisisId("known"): _event("known")},
        conditions={
            CrisisId("known"): _conditions("us-2008-banking"),
            CrisisId("ghost"): _conditions("us-1929-stock"),
        },
        current=CURRENT_CONDITIONS,
    )
    report = SimilarityScorer().score_catalog(CURRENT_CONDITIONS, repo)
    assert [c.crisis.id for c in report.comparisons] == ["known"]
    assert len(report.diagnostics) == 1
    assert isinstance(report.diagnostics[0], DataIntegrityIssue)
    assert report.diagnostics[0].crisis_id == "ghost"


def test_build_diagnostics_carried_into_report():
    conditions = {CrisisId("ghost"): _conditions("us-1929-stock")}
    repo = IndicatorRepository.build(CRISIS_EVENTS, conditions, CURRENT_CONDITIONS)
    report = SimilarityScorer().score_catalog(CURRENT_CONDITIONS, repo)
    assert report.comparisons == []
    assert report.top_match is None
    assert report.alert_level == "none"
    assert [d.crisis_id for d in report.diagnostics] == ["ghost"]


def test_comparisons_frame(repo):
    df = comparisons_frame(score_similarity(CURRENT_CONDITIONS, repo))
    assert isinstance(df, pl.DataFrame)
    assert df["rank"].to_list() == list(range(1, 9))
    assert df.row(0, named=True)["crisis_id"] == "us-1929-stock"


def test_empty_comparisons_frame():
    df = comparisons_frame([])
    assert df.height == 0
    assert "similarity_score" in df.columns
