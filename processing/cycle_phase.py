"""
Cycle Phase Assessor — where are we in the cycle?

Each indicator in the basket is graded normal / warning / danger against its
own thresholds, then the grades are pooled into a 0-100 risk score:

    risk = 100 × (2·danger + warning) / (2·total)

A danger reading counts double, so a basket entirely in danger scores 100
and one entirely in warning scores 50. The score maps onto four half-open
bands (early / mid / late / crisis); a score sitting exactly on a boundary
belongs to the higher band.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from config.settings import CYCLE_PHASE_BANDS
from knowledge_base.crisis_schema import CycleIndicator
from processing.scores import round_half_up

logger = logging.getLogger(__name__)

IndicatorLevel = Literal["normal", "warning", "danger"]
CyclePhase = Literal["early", "mid", "late", "crisis"]


@dataclass
class IndicatorStatus:
    """Grade of a single indicator."""
    name: str
    current_value: float
    warning_threshold: float
    danger_threshold: float
    inverted: bool
    status: IndicatorLevel
    unit: str = ""


@dataclass
class CycleAssessment:
    """Pooled assessment of the whole indicator basket."""
    risk_score: int
    phase: CyclePhase
    label: str
    danger_count: int
    warning_count: int
    normal_count: int
    statuses: list[IndicatorStatus] = field(default_factory=list)


def classify_indicator(indicator: CycleIndicator) -> IndicatorLevel:
    """Grade one indicator; inverted indicators signal danger on LOW values."""
    value = indicator.current_value
    if indicator.inverted:
        if value <= indicator.danger_threshold:
            return "danger"
        if value <= indicator.warning_threshold:
            return "warning"
        return "normal"

    if value >= indicator.danger_threshold:
        return "danger"
    if value >= indicator.warning_threshold:
        return "warning"
    return "normal"


def phase_for_score(risk_score: float) -> tuple[CyclePhase, str]:
    """Map a risk score to (phase, label); boundaries go to the higher band."""
    phase, label = CYCLE_PHASE_BANDS[0][1], CYCLE_PHASE_BANDS[0][2]
    for lower, band_phase, band_label in CYCLE_PHASE_BANDS:
        if risk_score >= lower:
            phase, label = band_phase, band_label
    return phase, label


class CyclePhaseAssessor:
    """Grades a basket of cycle indicators and places it in a cycle phase."""

    def assess(self, indicators: list[CycleIndicator]) -> CycleAssessment:
        statuses: list[IndicatorStatus] = []
        danger_count = warning_count = normal_count = 0

        for ind in indicators:
            level = classify_indicator(ind)
            if level == "danger":
                danger_count += 1
            elif level == "warning":
                warning_count += 1
            else:
                normal_count += 1

            statuses.append(IndicatorStatus(
                name=ind.name,
                current_value=ind.current_value,
                warning_threshold=ind.warning_threshold,
                danger_threshold=ind.danger_threshold,
                inverted=ind.inverted,
                status=level,
                unit=ind.unit,
            ))

        total = len(indicators)
        if total == 0:
            risk_score = 0
        else:
            risk_score = round_half_up(100 * (2 * danger_count + warning_count) / (2 * total))

        phase, label = phase_for_score(risk_score)
        return CycleAssessment(
            risk_score=risk_score,
            phase=phase,
            label=label,
            danger_count=danger_count,
            warning_count=warning_count,
            normal_count=normal_count,
            statuses=statuses,
        )

    def print_report(self, assessment: CycleAssessment) -> None:
        """Log the assessment and each indicator's grade."""
        phase_emoji = {"early": "🟢", "mid": "🔵", "late": "🟡", "crisis": "🔴"}
        status_mark = {"normal": "✓ OK", "warning": "⚠ WARN", "danger": "✗ DANGER"}

        logger.info("")
        logger.info("=" * 70)
        logger.info(
            "%s CYCLE POSITION — %s (risk score %d/100)",
            phase_emoji.get(assessment.phase, "⚪"), assessment.label.upper(),
            assessment.risk_score,
        )
        logger.info("=" * 70)
        logger.info(
            "  danger=%d  warning=%d  normal=%d",
            assessment.danger_count, assessment.warning_count, assessment.normal_count,
        )
        for s in assessment.statuses:
            logger.info(
                "    %-9s %-32s value=%s%s  warn=%s  danger=%s%s",
                status_mark[s.status], s.name, s.current_value, s.unit,
                s.warning_threshold, s.danger_threshold,
                "  (low is bad)" if s.inverted else "",
            )


def assess_cycle_phase(indicators: list[CycleIndicator]) -> CycleAssessment:
    return CyclePhaseAssessor().assess(indicators)
