"""
Crisis Generation Classifier — tags each episode with the academic model
that best explains it:

  1st  fundamentals-based (Krugman 1979): fiscal deficits drain the reserves
       defending a peg; the default when nothing else fits.
  2nd  self-fulfilling (Obstfeld 1994): fundamentals are only moderate but
       capital-flow risk is high, so expectations alone can tip the peg.
  3rd  balance-sheet (Krugman 1999, Chang-Velasco): foreign-currency debt
       or currency mismatch turns a depreciation into a solvency crisis.
       Read from the snapshot, or for banking and currency crises from
       their listed causes. Negated phrases ("No original sin exposure")
       never count as a marker.

An explicit crisis_generation on the event always wins. Classification is
total: any CrisisEvent, with or without linked conditions, gets exactly one tag.
"""
from __future__ import annotations

import logging
from typing import Optional

from config.settings import DEFAULT_GENERATION_THRESHOLDS, GenerationThresholds
from knowledge_base.crisis_schema import CrisisConditions, CrisisEvent, CrisisGeneration
from knowledge_base.repository import IndicatorRepository

logger = logging.getLogger(__name__)

# Crisis types that can carry a speculative-attack (2nd generation) signature
_ATTACKABLE_TYPES = ("currency", "sovereign_debt")


def _mentions_marker(
    phrases: tuple[str, ...], markers: tuple[str, ...], negation_prefixes: tuple[str, ...]
) -> bool:
    """True if any non-negated phrase contains one of the markers."""
    for phrase in phrases:
        text = phrase.strip().lower()
        if text.startswith(negation_prefixes):
            continue
        if any(marker in text for marker in markers):
            return True
    return False


def _has_currency_mismatch(
    conditions: CrisisConditions, thresholds: GenerationThresholds
) -> bool:
    if conditions.foreign_currency_debt > thresholds.high_fx_debt_share:
        return True
    return _mentions_marker(
        conditions.characteristics, thresholds.mismatch_markers, thresholds.negation_prefixes
    )


def _causes_show_mismatch(crisis: CrisisEvent, thresholds: GenerationThresholds) -> bool:
    if crisis.type not in thresholds.cause_mismatch_types:
        return False
    return _mentions_marker(
        crisis.causes, thresholds.cause_mismatch_markers, thresholds.negation_prefixes
    )


def _has_moderate_fundamentals(
    conditions: CrisisConditions, thresholds: GenerationThresholds
) -> bool:
    return (
        conditions.debt_to_gdp <= thresholds.moderate_debt_to_gdp_max
        and conditions.inflation <= thresholds.moderate_inflation_max
        and conditions.current_account_gdp >= thresholds.moderate_current_account_min
    )


def classify_generation(
    crisis: CrisisEvent,
    conditions: Optional[CrisisConditions] = None,
    thresholds: GenerationThresholds = DEFAULT_GENERATION_THRESHOLDS,
) -> CrisisGeneration:
    """
    Classify a crisis as '1st', '2nd' or '3rd' generation.

    Args:
        crisis: The episode. Its crisis_generation, when set, is returned as-is.
        conditions: The episode's pre-crisis snapshot, if the catalog has one.
            Without it only the explicit tag, the causes check or the
            1st-generation default apply.
        thresholds: Cut-offs for "high FX debt" and "moderate fundamentals".
    """
    if crisis.crisis_generation is not None:
        return crisis.crisis_generation

    if _causes_show_mismatch(crisis, thresholds):
        return "3rd"

    if conditions is None:
        return "1st"

    if _has_currency_mismatch(conditions, thresholds):
        return "3rd"

    if (crisis.type in _ATTACKABLE_TYPES
            and conditions.capital_flow_risk == "high"
            and _has_moderate_fundamentals(conditions, thresholds)):
        return "2nd"

    return "1st"


def classify_catalog(
    repository: IndicatorRepository,
    thresholds: GenerationThresholds = DEFAULT_GENERATION_THRESHOLDS,
) -> dict[str, CrisisGeneration]:
    """Tag every crisis in the repository, using its linked snapshot where present."""
    tags: dict[str, CrisisGeneration] = {}
    for crisis_id, crisis in repository.events.items():
        tags[crisis_id] = classify_generation(
            crisis, repository.conditions.get(crisis_id), thresholds
        )

    counts = {g: sum(1 for t in tags.values() if t == g) for g in ("1st", "2nd", "3rd")}
    logger.info(
        "Classified %d crises: 1st=%d 2nd=%d 3rd=%d",
        len(tags), counts["1st"], counts["2nd"], counts["3rd"],
    )
    return tags
