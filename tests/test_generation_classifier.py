from __future__ import annotations
import pytest
from config.crisis_catalog import CRISIS_CONDITIONS, CURRENT_CONDITIONS
from config.settings import GenerationThresholds
from knowledge_base.crisis_schema import CrisisConditions, CrisisEvent, CrisisId
from knowledge_base.repository import IndicatorRepository
from processing.generation_classifier import classify_catalog, classify_generation


def _event(crisis_type: str = "currency", generation=None) -> CrisisEvent:
    return CrisisEvent(
        id=CrisisId("test-1995-currency"), name="Test Peg Break", year=1995,
        country="Testland", country_code="TL", type=crisis_type, severity=3,
        crisis_generation=generation,
    )


def _conditions(**overrides) -> CrisisConditions:
    attrs = dict(
        debt_to_gdp=50, private_debt=80, interest_rates=8, inflation=3,
        unemployment=9, yield_curve=1, stock_valuation=15,
        current_account_gdp=-2, foreign_currency_debt=10, short_term_debt_reserves=60,
        real_exchange_rate_deviation=15, capital_flow_risk="high",
    )
    attrs.update(overrides)
    return CrisisConditions(**attrs)


def test_explicit_tag_wins_over_conditions():
    """A 1st-generation tag sticks even when FX debt would say 3rd."""
    crisis = _event(generation="1st")
    assert classify_generation(crisis, _conditions(foreign_currency_debt=80)) == "1st"


def test_no_conditions_defaults_to_first():
    assert classify_generation(_event()) == "1st"


def test_high_fx_debt_is_third_generation():
    assert classify_generation(_event(), _conditions(foreign_currency_debt=51)) == "3rd"


def test_fx_debt_at_threshold_is_not_third_generation():
    """The FX-debt test is strictly above the threshold."""
    assert classify_generation(_event(), _conditions(foreign_currency_debt=50)) == "2nd"


@pytest.mark.parametrize("marker", [
    "High original sin (FX debt)",
    "Currency mismatch on corporate balance sheets",
    "Short-term FOREIGN CURRENCY borrowing",
])
def test_mismatch_characteristics_are_third_generation(marker):
    conditions = _conditions(foreign_currency_debt=20, characteristics=(marker,))
    assert classify_generation(_event(crisis_type="banking"), conditions) == "3rd"


def test_speculative_attack_on_moderate_fundamentals_is_second():
    assert classify_generation(_event("currency"), _conditions()) == "2nd"
    assert classify_generation(_event("sovereign_debt"), _conditions()) == "2nd"


def test_second_generation_requires_attackable_type():
    assert classify_generation(_event("banking"), _conditions()) == "1st"


def test_second_generation_requires_high_flow_risk():
    assert classify_generation(_event(), _conditions(capital_flow_risk="medium")) == "1st"


@pytest.mark.parametrize("override", [
    {"debt_to_gdp": 120},
    {"inflation": 25},
    {"current_account_gdp": -8},
])
def test_weak_fundamentals_fall_back_to_first(override):
    assert classify_generation(_event(), _conditions(**override)) == "1st"


def test_thresholds_are_configurable():
    strict = GenerationThresholds(high_fx_debt_share=5)
    assert classify_generation(_event(), _conditions(), strict) == "3rd"


def test_bundled_snapshots_without_tags():
    """Greece 2010 carries heavy public debt, so it is not self-fulfilling."""
    greece = CrisisEvent(
        id=CrisisId("greece-2010-debt"), name="Greek Debt Crisis", year=2010,
        country="Greece", country_code="GR", type="sovereign_debt", severity=5,
    )
    assert classify_generation(greece, CRISIS_CONDITIONS[CrisisId("greece-2010-debt")]) == "1st"


def test_classify_catalog_is_total():
    repo = IndicatorRepository.from_catalogs()
    tags = classify_catalog(repo)

    assert set(tags) == set(repo.events)
    assert set(tags.values()) <= {"1st", "2nd", "3rd"}
    assert tags["germany-1923-inflation"] == "1st"
    assert tags["asia-1997-currency"] == "3rd"
    assert tags["argentina-2001-debt"] == "3rd"
    assert tags["uk-1992-currency"] == "2nd"
    assert tags["us-1929-stock"] == "1st"


def test_catalog_snapshots_drive_untagged_events():
    """An untagged event picks up its tag from the linked snapshot."""
    event = _event()
    conditions = {event.id: _conditions(foreign_currency_debt=75)}
    repo = IndicatorRepository.build([event], conditions, CURRENT_CONDITIONS)
    assert classify_catalog(repo) == {event.id: "3rd"}


# ── Negated markers ───────────────────────────────────────────────────────────

def test_negated_characteristic_is_not_a_mismatch():
    """The bundled US snapshot says "No original sin exposure"; that is not 3rd generation."""
    assert "No original sin exposure" in CURRENT_CONDITIONS.characteristics
    conditions = CURRENT_CONDITIONS.with_overrides(
        characteristics=("No original sin exposure",), foreign_currency_debt=0,
    )
    assert classify_generation(_event("banking"), conditions) == "1st"
    assert classify_generation(_event("banking"), CURRENT_CONDITIONS) == "1st"


@pytest.mark.parametrize("phrase", [
    "Low foreign currency debt",
    "  without FX debt",
    "Not a currency mismatch",
])
def test_negation_prefixes_are_case_and_space_insensitive(phrase):
    conditions = _conditions(foreign_currency_debt=0, characteristics=(phrase,))
    assert classify_generation(_event("banking"), conditions) == "1st"


# ── Causes ────────────────────────────────────────────────────────────────────

def test_currency_crisis_causes_without_snapshot_are_third():
    crisis = CrisisEvent(
        id=CrisisId("test-1998-currency"), name="Peg Collapse", year=1998,
        country="Testland", country_code="TL", type="currency", severity=4,
        causes=("Current account deficit", "Foreign currency debt"),
    )
    assert classify_generation(crisis) == "3rd"


@pytest.mark.parametrize("cause", [
    "Short-term bank borrowing", "Corporate leverage", "Balance sheet losses",
])
def test_banking_crisis_cause_markers(cause):
    crisis = CrisisEvent(
        id=CrisisId("test-2005-banking"), name="Bank Run", year=2005,
        country="Testland", country_code="TL", type="banking", severity=3,
        causes=(cause,),
    )
    assert classify_generation(crisis) == "3rd"


def test_cause_markers_ignored_for_other_crisis_types():
    """Only banking and currency crises are read for balance-sheet causes."""
    crisis = CrisisEvent(
        id=CrisisId("test-2005-debt"), name="Default", year=2005,
        country="Testland", country_code="TL", type="sovereign_debt", severity=3,
        causes=("Foreign currency debt",),
    )
    assert classify_generation(crisis) == "1st"


def test_negated_cause_is_ignored():
    crisis = CrisisEvent(
        id=CrisisId("test-2005-currency"), name="Devaluation", year=2005,
        country="Testland", country_code="TL", type="currency", severity=2,
        causes=("No foreign currency borrowing",),
    )
    assert classify_generation(crisis) == "1st"


def test_explicit_tag_still_beats_causes():
    crisis = CrisisEvent(
        id=CrisisId("test-1992-currency"), name="ERM Exit", year=1992,
        country="Testland", country_code="TL", type="currency", severity=3,
        causes=("Short-term speculation",), crisis_generation="2nd",
    )
    assert classify_generation(crisis) == "2nd"
