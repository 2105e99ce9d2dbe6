from __future__ import annotations
import pytest
import polars as pl
from knowledge_base.crisis_schema import ConfigurationError, CrisisId
from knowledge_base.repository import IndicatorRepository, RepositoryHandle, vulnerability_level
from config.crisis_catalog import CRISIS_CONDITIONS, CRISIS_EVENTS, CURRENT_CONDITIONS


@pytest.fixture(scope="module")
def repo() -> IndicatorRepository:
    return IndicatorRepository.from_catalogs()


def test_bundled_catalog_has_no_diagnostics(repo):
    assert repo.diagnostics == ()
    assert len(repo.conditions) == 8
    assert repo.event("us-1929-stock").name.startswith("Wall Street Crash")
    assert repo.conditions_for("us-1929-stock").stock_valuation == 32
    assert repo.conditions_for("us-1987-stock") is None


def test_joined_pairs_follow_catalog_order(repo):
    ids = [event.id for event, _ in repo.joined()]
    assert ids == list(CRISIS_CONDITIONS.keys())


# ── Build-time integrity ──────────────────────────────────────────────────────

def test_orphan_conditions_skipped_and_reported():
    """Conditions keyed by an unknown crisis id are dropped, not fatal."""
    conditions = dict(CRISIS_CONDITIONS)
    conditions[CrisisId("atlantis-1700-banking")] = CRISIS_CONDITIONS[CrisisId("us-1929-stock")]

    repo = IndicatorRepository.build(CRISIS_EVENTS, conditions, CURRENT_CONDITIONS)

    assert CrisisId("atlantis-1700-banking") not in repo.conditions
    assert len(repo.conditions) == 8
    assert len(repo.diagnostics) == 1
    issue = repo.diagnostics[0]
    assert issue.kind == "orphan_conditions"
    assert issue.crisis_id == "atlantis-1700-banking"


def test_duplicate_crisis_id_rejected():
    events = list(CRISIS_EVENTS) + [CRISIS_EVENTS[0]]
    with pytest.raises(ConfigurationError):
        IndicatorRepository.build(events, {}, CURRENT_CONDITIONS)


def test_duplicate_generation_model_rejected():
    from config.crisis_catalog import CRISIS_GENERATION_MODELS
    models = list(CRISIS_GENERATION_MODELS) + [CRISIS_GENERATION_MODELS[0]]
    with pytest.raises(ConfigurationError):
        IndicatorRepository.build(
            CRISIS_EVENTS, {}, CURRENT_CONDITIONS, generation_models=models
        )


# ── Queries ───────────────────────────────────────────────────────────────────

def test_crises_by_type(repo):
    inflation = [e.id for e in repo.crises_by_type("inflation")]
    assert inflation == ["germany-1923-inflation", "venezuela-2016-inflation"]


def test_crises_by_decade(repo):
    nineties = {e.id for e in repo.crises_by_decade(1990)}
    assert nineties == {
        "japan-1990-asset", "uk-1992-currency", "mexico-1994-currency",
        "asia-1997-currency", "russia-1998-debt",
    }


def test_crises_by_region(repo):
    asia = {e.id for e in repo.crises_by_region("Asia")}
    assert asia == {"japan-1990-asset", "asia-1997-currency", "china-2015-stock"}


def test_debt_cycle_phase_lookup(repo):
    assert repo.debt_cycle_phase_at(2008).id == "gfc-deleveraging"
    assert repo.debt_cycle_phase_at(2025).id == "rate-normalization"
    assert repo.debt_cycle_phase_at(2005, "short_term").id == "housing-boom"
    assert repo.debt_cycle_phase_at(1930) is None


def test_overlapping_phase_years_return_first_in_catalog(repo):
    """2022 closes the pandemic phase and opens normalization."""
    assert repo.debt_cycle_phase_at(2022).id == "pandemic-response"


def test_generation_model_lookup(repo):
    assert repo.generation_model("3rd").year == 1999
    assert repo.generation_model("4th") is None


def test_famine_episode_is_in_catalog(repo):
    famine = repo.event("ireland-1845-famine")
    assert famine.type == "sovereign_debt"
    assert famine in repo.crises_by_decade(1840)


# ── Capital flow episodes ─────────────────────────────────────────────────────

def test_capital_flows_by_type(repo):
    assert len(repo.capital_flow_events) == 14
    assert len(repo.capital_flows_by_type("sudden_stop")) == 8
    assert [f.id for f in repo.capital_flows_by_type("capital_bonanza")] == [
        "latam-1990s-bonanza", "asia-1990s-bonanza", "em-2010s-bonanza",
    ]
    assert len(repo.capital_flows_by_type("flight_to_safety")) == 3
    assert all(f.magnitude < 0 for f in repo.capital_flows_by_type("sudden_stop"))


def test_capital_flows_by_country(repo):
    assert [f.id for f in repo.capital_flows_by_country("MX")] == [
        "mexico-1982-stop", "mexico-1994-stop",
    ]
    assert [f.id for f in repo.capital_flows_by_country("US")] == [
        "gfc-2008-flight", "covid-2020-flight",
    ]
    assert repo.capital_flows_by_country("XX") == []


def test_capital_flows_for_crisis(repo):
    ids = [f.id for f in repo.capital_flows_for_crisis("asia-1997-currency")]
    assert ids == ["thailand-1997-stop", "korea-1997-stop"]
    assert repo.capital_flows_for_crisis("us-1929-stock") == []


def test_unresolved_flow_link_cleared_and_reported():
    from config.crisis_catalog import CAPITAL_FLOW_EVENTS
    events = [e for e in CRISIS_EVENTS if e.id != "turkey-2018-currency"]

    repo = IndicatorRepository.build(
        events, {}, CURRENT_CONDITIONS, capital_flow_events=CAPITAL_FLOW_EVENTS
    )

    turkey = repo.capital_flows_by_country("TR")[0]
    assert turkey.related_crisis is None
    assert len(repo.capital_flow_events) == 14
    assert len(repo.diagnostics) == 1
    issue = repo.diagnostics[0]
    assert issue.kind == "unresolved_related_crisis"
    assert issue.crisis_id == "turkey-2018-currency"


def test_duplicate_capital_flow_id_rejected():
    from config.crisis_catalog import CAPITAL_FLOW_EVENTS
    flows = list(CAPITAL_FLOW_EVENTS) + [CAPITAL_FLOW_EVENTS[0]]
    with pytest.raises(ConfigurationError):
        IndicatorRepository.build(
            CRISIS_EVENTS, {}, CURRENT_CONDITIONS, capital_flow_events=flows
        )


# ── Country debt profiles ─────────────────────────────────────────────────────

@pytest.mark.parametrize("score,label", [
    (0, "Low"), (29.9, "Low"), (30, "Low-Medium"), (64, "Medium"),
    (65, "High"), (79.9, "High"), (80, "Critical"), (100, "Critical"),
])
def test_vulnerability_level_bands(score, label):
    assert vulnerability_level(score) == label


def test_safe_havens_and_vulnerable_countries(repo):
    assert {p.country_code for p in repo.safe_haven_countries()} == {"US", "DE", "JP", "GB", "CH"}
    assert {p.country_code for p in repo.high_vulnerability_countries()} == {
        "TR", "AR", "PK", "EG", "LK",
    }
    assert repo.country_debt_profile("AR").original_sin_index == 85
    assert repo.country_debt_profile("XX") is None


# ── Tabular views ─────────────────────────────────────────────────────────────

def test_crises_frame(repo):
    df = repo.crises_frame()
    assert isinstance(df, pl.DataFrame)
    assert df.height == len(repo.events)
    assert df["has_conditions"].sum() == 8
    tagged = df.filter(pl.col("crisis_generation") == "3rd")
    assert "asia-1997-currency" in tagged["id"].to_list()


def test_country_profiles_frame(repo):
    df = repo.country_profiles_frame()
    assert df.height == len(repo.country_profiles)
    row = df.filter(pl.col("country_code") == "LK").row(0, named=True)
    assert row["vulnerability_level"] == "Critical"


def test_capital_flows_frame(repo):
    df = repo.capital_flows_frame()
    assert df.height == 14
    assert df.filter(pl.col("related_crisis").is_null()).height == 6
    assert df.filter(pl.col("type") == "sudden_stop")["magnitude"].min() == -15.2


# ── Hot swap ──────────────────────────────────────────────────────────────────

def test_handle_swap_publishes_new_repository(repo):
    """A reader holding the old repository keeps seeing it after a swap."""
    handle = RepositoryHandle(repo)
    held = handle.current()

    smaller = IndicatorRepository.build(
        [e for e in CRISIS_EVENTS if e.year >= 2000], {}, CURRENT_CONDITIONS
    )
    previous = handle.swap(smaller)

    assert previous is repo
    assert handle.current() is smaller
    assert len(held.events) == len(repo.events)
    assert all(e.year >= 2000 for e in handle.current().events.values())


def test_repository_is_frozen(repo):
    with pytest.raises(AttributeError):
        repo.current = CURRENT_CONDITIONS  # type: ignore[misc]
