"""
Indicator Repository — the loaded, join-checked catalogs.

Crisis events and their pre-crisis snapshots live in two maps keyed by the
same CrisisId. The join between them is checked once, in build(): snapshots
whose id resolves to no event are dropped and reported as DataIntegrityIssue
diagnostics instead of failing the load. Everything downstream can then
trust repository.conditions without re-checking.

The repository is never mutated after build. A refresh produces a new
repository which RepositoryHandle.swap() publishes with one reference
assignment, so a computation that grabbed handle.current() keeps seeing a
single consistent snapshot.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import polars as pl

from config.settings import HIGH_VULNERABILITY_THRESHOLD, VULNERABILITY_LEVELS
from knowledge_base.crisis_schema import (
    CapitalFlowEvent,
    ConfigurationError,
    CountryDebtProfile,
    CrisisConditions,
    CrisisEvent,
    CrisisGenerationModel,
    CrisisId,
    CurrentConditions,
    CycleIndicator,
    DebtCyclePhase,
    PushPullFactor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataIntegrityIssue:
    """A catalog entry that was skipped because it failed a cross-reference."""
    kind: str           # "orphan_conditions" | "unresolved_related_crisis"
    crisis_id: str
    message: str


def vulnerability_level(score: float) -> str:
    """Map a 0-100 composite vulnerability score → Low … Critical."""
    for upper, label in VULNERABILITY_LEVELS:
        if score < upper:
            return label
    return "Critical"


@dataclass(frozen=True)
class IndicatorRepository:
    """Immutable bundle of every catalog the assessors read."""
    events: dict[CrisisId, CrisisEvent]
    conditions: dict[CrisisId, CrisisConditions]
    current: CurrentConditions
    cycle_indicators: tuple[CycleIndicator, ...] = ()
    push_pull_factors: tuple[PushPullFactor, ...] = ()
    debt_cycle_phases: tuple[DebtCyclePhase, ...] = ()
    generation_models: tuple[CrisisGenerationModel, ...] = ()
    country_profiles: tuple[CountryDebtProfile, ...] = ()
    capital_flow_events: tuple[CapitalFlowEvent, ...] = ()
    diagnostics: tuple[DataIntegrityIssue, ...] = field(default=())

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def build(
        cls,
        events: Iterable[CrisisEvent],
        conditions: dict[CrisisId, CrisisConditions],
        current: CurrentConditions,
        cycle_indicators: Iterable[CycleIndicator] = (),
        push_pull_factors: Iterable[PushPullFactor] = (),
        debt_cycle_phases: Iterable[DebtCyclePhase] = (),
        generation_models: Iterable[CrisisGenerationModel] = (),
        country_profiles: Iterable[CountryDebtProfile] = (),
        capital_flow_events: Iterable[CapitalFlowEvent] = (),
    ) -> "IndicatorRepository":
        """
        Index the catalogs and check the event ↔ conditions join.

        Raises ConfigurationError for duplicate crisis or capital-flow ids (the
        catalog itself is broken). Orphan conditions are skipped, and a flow
        episode whose related_crisis resolves to nothing keeps its place with
        the link cleared; both are recorded in diagnostics.
        """
        event_map: dict[CrisisId, CrisisEvent] = {}
        for event in events:
            if event.id in event_map:
                raise ConfigurationError(f"Duplicate crisis id in catalog: {event.id!r}")
            event_map[event.id] = event

        joined: dict[CrisisId, CrisisConditions] = {}
        issues: list[DataIntegrityIssue] = []
        for crisis_id, snapshot in conditions.items():
            if crisis_id not in event_map:
                issue = DataIntegrityIssue(
                    kind="orphan_conditions",
                    crisis_id=crisis_id,
                    message=f"Pre-crisis conditions for {crisis_id!r} match no crisis event",
                )
                logger.warning("Skipping conditions: %s", issue.message)
                issues.append(issue)
                continue
            joined[crisis_id] = snapshot

        generation_models = tuple(generation_models)
        tags = [m.generation for m in generation_models]
        if len(tags) != len(set(tags)):
            raise ConfigurationError("Duplicate generation tag in generation model catalog")

        flows: list[CapitalFlowEvent] = []
        flow_ids: set[str] = set()
        for flow in capital_flow_events:
            if flow.id in flow_ids:
                raise ConfigurationError(f"Duplicate capital flow id in catalog: {flow.id!r}")
            flow_ids.add(flow.id)
            if flow.related_crisis is not None and flow.related_crisis not in event_map:
                issue = DataIntegrityIssue(
                    kind="unresolved_related_crisis",
                    crisis_id=flow.related_crisis,
                    message=f"Capital flow {flow.id!r} links to unknown crisis "
                            f"{flow.related_crisis!r}",
                )
                logger.warning("Clearing crisis link: %s", issue.message)
                issues.append(issue)
                flow = dataclasses.replace(flow, related_crisis=None)
            flows.append(flow)

        repo = cls(
            events=event_map,
            conditions=joined,
            current=current,
            cycle_indicators=tuple(cycle_indicators),
            push_pull_factors=tuple(push_pull_factors),
            debt_cycle_phases=tuple(debt_cycle_phases),
            generation_models=generation_models,
            country_profiles=tuple(country_profiles),
            capital_flow_events=tuple(flows),
            diagnostics=tuple(issues),
        )
        logger.info(
            "Repository loaded: %d crises, %d pre-crisis snapshots, %d indicators, "
            "%d push/pull factors, %d capital flow episodes (%d diagnostics)",
            len(repo.events), len(repo.conditions), len(repo.cycle_indicators),
            len(repo.push_pull_factors), len(repo.capital_flow_events), len(repo.diagnostics),
        )
        return repo

    @classmethod
    def from_catalogs(cls) -> "IndicatorRepository":
        """Build from the catalogs bundled under config/."""
        from config.crisis_catalog import (
            CAPITAL_FLOW_EVENTS,
            COUNTRY_DEBT_PROFILES,
            CRISIS_CONDITIONS,
            CRISIS_EVENTS,
            CRISIS_GENERATION_MODELS,
            CURRENT_CONDITIONS,
            DEBT_CYCLE_PHASES,
        )
        from config.cycle_stats import CYCLE_INDICATORS, PUSH_PULL_FACTORS

        return cls.build(
            events=CRISIS_EVENTS,
            conditions=CRISIS_CONDITIONS,
            current=CURRENT_CONDITIONS,
            cycle_indicators=CYCLE_INDICATORS,
            push_pull_factors=PUSH_PULL_FACTORS,
            debt_cycle_phases=DEBT_CYCLE_PHASES,
            generation_models=CRISIS_GENERATION_MODELS,
            country_profiles=COUNTRY_DEBT_PROFILES,
            capital_flow_events=CAPITAL_FLOW_EVENTS,
        )

    # ── Crisis lookups ────────────────────────────────────────────────────────

    def event(self, crisis_id: str) -> Optional[CrisisEvent]:
        return self.events.get(CrisisId(crisis_id))

    def conditions_for(self, crisis_id: str) -> Optional[CrisisConditions]:
        return self.conditions.get(CrisisId(crisis_id))

    def joined(self) -> list[tuple[CrisisEvent, CrisisConditions]]:
        """(event, pre-crisis snapshot) pairs in catalog order."""
        return [(self.events[cid], snap) for cid, snap in self.conditions.items()]

    def crises_by_type(self, crisis_type: str) -> list[CrisisEvent]:
        return [e for e in self.events.values() if e.type == crisis_type]

    def crises_by_decade(self, decade: int) -> list[CrisisEvent]:
        """Crises starting in [decade, decade + 10)."""
        return [e for e in self.events.values() if decade <= e.year < decade + 10]

    def crises_by_region(self, region: str) -> list[CrisisEvent]:
        return [e for e in self.events.values() if e.region == region]

    # ── Debt cycles & reference models ────────────────────────────────────────

    def debt_cycle_phase_at(
        self, year: int, cycle_type: str = "long_term"
    ) -> Optional[DebtCyclePhase]:
        """First phase of the given cycle type whose span contains year."""
        for phase in self.debt_cycle_phases:
            if phase.cycle_type == cycle_type and phase.contains(year):
                return phase
        return None

    def generation_model(self, generation: str) -> Optional[CrisisGenerationModel]:
        for model in self.generation_models:
            if model.generation == generation:
                return model
        return None

    # ── Capital flow episodes ─────────────────────────────────────────────────

    def capital_flows_by_type(self, flow_type: str) -> list[CapitalFlowEvent]:
        return [f for f in self.capital_flow_events if f.type == flow_type]

    def capital_flows_by_country(self, country_code: str) -> list[CapitalFlowEvent]:
        return [f for f in self.capital_flow_events if f.country_code == country_code]

    def capital_flows_for_crisis(self, crisis_id: str) -> list[CapitalFlowEvent]:
        """Flow episodes linked to the given crisis, in catalog order."""
        return [f for f in self.capital_flow_events if f.related_crisis == crisis_id]

    # ── Country debt profiles ─────────────────────────────────────────────────

    def country_debt_profile(self, country_code: str) -> Optional[CountryDebtProfile]:
        for profile in self.country_profiles:
            if profile.country_code == country_code:
                return profile
        return None

    def safe_haven_countries(self) -> list[CountryDebtProfile]:
        return [p for p in self.country_profiles if p.safe_haven_status]

    def high_vulnerability_countries(
        self, threshold: float = HIGH_VULNERABILITY_THRESHOLD
    ) -> list[CountryDebtProfile]:
        return [p for p in self.country_profiles if p.vulnerability_score >= threshold]

    # ── Tabular views ─────────────────────────────────────────────────────────

    def crises_frame(self) -> pl.DataFrame:
        """One row per crisis event, in catalog order."""
        rows = [
            {
                "id": e.id,
                "name": e.name,
                "year": e.year,
                "end_year": e.end_year,
                "country": e.country,
                "country_code": e.country_code,
                "region": e.region,
                "type": e.type,
                "severity": e.severity,
                "crisis_generation": e.crisis_generation,
                "has_conditions": e.id in self.conditions,
            }
            for e in self.events.values()
        ]
        schema = {
            "id": pl.Utf8, "name": pl.Utf8, "year": pl.Int64, "end_year": pl.Int64,
            "country": pl.Utf8, "country_code": pl.Utf8, "region": pl.Utf8,
            "type": pl.Utf8, "severity": pl.Int64, "crisis_generation": pl.Utf8,
            "has_conditions": pl.Boolean,
        }
        return pl.DataFrame(rows, schema=schema)

    def country_profiles_frame(self) -> pl.DataFrame:
        """Country debt profiles with the vulnerability level label attached."""
        df = pl.DataFrame(
            {
                "country_code": [p.country_code for p in self.country_profiles],
                "country": [p.country for p in self.country_profiles],
                "original_sin_index": [p.original_sin_index for p in self.country_profiles],
                "safe_haven": [p.safe_haven_status for p in self.country_profiles],
                "vulnerability_score": [p.vulnerability_score for p in self.country_profiles],
            },
            schema={
                "country_code": pl.Utf8, "country": pl.Utf8,
                "original_sin_index": pl.Float64, "safe_haven": pl.Boolean,
                "vulnerability_score": pl.Float64,
            },
        )
        levels = [vulnerability_level(s) for s in df["vulnerability_score"].to_list()]
        return df.with_columns(pl.Series("vulnerability_level", levels, dtype=pl.Utf8))

    def capital_flows_frame(self) -> pl.DataFrame:
        rows = [
            {
                "id": f.id,
                "type": f.type,
                "country": f.country,
                "country_code": f.country_code,
                "year": f.year,
                "end_year": f.end_year,
                "magnitude": f.magnitude,
                "related_crisis": f.related_crisis,
            }
            for f in self.capital_flow_events
        ]
        schema = {
            "id": pl.Utf8, "type": pl.Utf8, "country": pl.Utf8, "country_code": pl.Utf8,
            "year": pl.Int64, "end_year": pl.Int64, "magnitude": pl.Float64,
            "related_crisis": pl.Utf8,
        }
        return pl.DataFrame(rows, schema=schema)


class RepositoryHandle:
    """
    Holds the active repository.

    Readers call current() once per computation and use that object
    throughout. swap() replaces the reference in a single assignment.
    """

    def __init__(self, repository: IndicatorRepository):
        self._repository = repository

    def current(self) -> IndicatorRepository:
        return self._repository

    def swap(self, repository: IndicatorRepository) -> IndicatorRepository:
        """Publish a new repository; returns the one it replaced."""
        previous = self._repository
        self._repository = repository
        logger.info(
            "Repository swapped: %d → %d crises", len(previous.events), len(repository.events)
        )
        return previous
