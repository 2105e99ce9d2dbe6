"""
Crisis Cycle Engine — Main Entry Point

Runs the four assessors over the bundled catalogs and logs a report:
1. Historical similarity: how much "now" resembles past pre-crisis conditions
2. Crisis generation classification (1st / 2nd / 3rd)
3. Business-cycle phase from the indicator basket
4. Capital-flow push/pull balance and historical sudden stops

Usage:
    # Everything
    python main.py --mode all

    # One section
    python main.py --mode similarity
    python main.py --mode generations
    python main.py --mode cycle
    python main.py --mode capital-flows

    # Similarity against a what-if snapshot (EM-style FX debt, sudden-stop risk)
    python main.py --mode similarity --what-if-em

    # Also write the tables to data/reports/
    python main.py --export
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import DEV_REPORT_DIR  # also configures logging
from knowledge_base.crisis_schema import CurrentConditions
from knowledge_base.repository import IndicatorRepository, RepositoryHandle, vulnerability_level
from processing.capital_flows import assess_capital_flow_balance, print_balance
from processing.cycle_phase import CyclePhaseAssessor
from processing.generation_classifier import classify_catalog
from processing.similarity_scorer import SimilarityReport, SimilarityScorer, comparisons_frame

logger = logging.getLogger("main")


def run_similarity(repo: IndicatorRepository, current: CurrentConditions) -> SimilarityReport:
    """Phase 1: Score the current snapshot against every pre-crisis snapshot."""
    scorer = SimilarityScorer()
    report = scorer.score_catalog(current, repo)
    scorer.print_report(report)
    logger.info("\n%s", comparisons_frame(report.comparisons))
    return report


def run_generations(repo: IndicatorRepository) -> None:
    """Phase 2: Tag every crisis with its generation model."""
    logger.info("")
    logger.info("=" * 70)
    logger.info("CRISIS GENERATIONS")
    logger.info("=" * 70)

    tags = classify_catalog(repo)
    for generation in ("1st", "2nd", "3rd"):
        model = repo.generation_model(generation)
        members = [repo.events[cid] for cid, tag in tags.items() if tag == generation]
        title = model.name if model else generation
        logger.info("\n%s GENERATION — %s (%d crises):", generation, title, len(members))
        for crisis in members:
            source = "tagged" if crisis.crisis_generation else "computed"
            logger.info("  %d  %-40s %-22s [%s]",
                        crisis.year, crisis.name, crisis.type_label, source)


def run_cycle(repo: IndicatorRepository, year: int) -> None:
    """Phase 3: Cycle position from the indicator basket, plus debt-cycle context."""
    assessor = CyclePhaseAssessor()
    assessment = assessor.assess(list(repo.cycle_indicators))
    assessor.print_report(assessment)

    long_term = repo.debt_cycle_phase_at(year, "long_term")
    short_term = repo.debt_cycle_phase_at(year, "short_term")
    if long_term:
        logger.info("  Long-term debt cycle (%d): %s — %s", year, long_term.name, long_term.phase)
    if short_term:
        logger.info("  Short-term cycle (%d): %s — %s", year, short_term.name, short_term.phase)


def run_capital_flows(repo: IndicatorRepository) -> None:
    """Phase 4: Push/pull balance and the most vulnerable debtors."""
    factors = list(repo.push_pull_factors)
    print_balance(assess_capital_flow_balance(factors), factors)

    logger.info("  Most vulnerable to a sudden stop:")
    for profile in repo.high_vulnerability_countries():
        logger.info(
            "    %-15s score=%3.0f (%s)  FX debt share=%.0f%%",
            profile.country, profile.vulnerability_score,
            vulnerability_level(profile.vulnerability_score),
            profile.foreign_currency_debt_share,
        )

    logger.info("  Historical sudden stops:")
    for flow in repo.capital_flows_by_type("sudden_stop"):
        logger.info(
            "    %d  %-15s %6.1f%% of GDP  → %s",
            flow.year, flow.country, flow.magnitude, flow.related_crisis or "-",
        )


def export_reports(repo: IndicatorRepository, report: Optional[SimilarityReport]) -> Path:
    """Write the tabular views to a dated directory under DEV_REPORT_DIR."""
    date_str = datetime.now(timezone.utc).strftime("%Y%m%d")
    report_dir = DEV_REPORT_DIR / f"report_{date_str}"
    report_dir.mkdir(parents=True, exist_ok=True)

    crises_path = report_dir / "crises.parquet"
    repo.crises_frame().write_parquet(crises_path, compression="zstd")
    logger.info("  ✓ Crises exported (%d rows)", len(repo.events))

    profiles_path = report_dir / "country_profiles.parquet"
    repo.country_profiles_frame().write_parquet(profiles_path, compression="zstd")
    logger.info("  ✓ Country profiles exported (%d rows)", len(repo.country_profiles))

    flows_path = report_dir / "capital_flows.parquet"
    repo.capital_flows_frame().write_parquet(flows_path, compression="zstd")
    logger.info("  ✓ Capital flow episodes exported (%d rows)", len(repo.capital_flow_events))

    if report is not None and report.comparisons:
        sim_path = report_dir / "similarity.parquet"
        comparisons_frame(report.comparisons).write_parquet(sim_path, compression="zstd")
        logger.info("  ✓ Similarity ranking exported (%d rows)", len(report.comparisons))

    return report_dir


def main() -> None:
    parser = argparse.ArgumentParser(description="Crisis Cycle Engine")
    parser.add_argument(
        "--mode",
        choices=["all", "similarity", "generations", "cycle", "capital-flows"],
        default="all",
        help="Which assessment to run",
    )
    parser.add_argument(
        "--year", type=int, default=datetime.now(timezone.utc).year,
        help="Year for the debt-cycle lookup (default: current year)",
    )
    parser.add_argument(
        "--what-if-em", action="store_true",
        help="Score similarity against an emerging-market variant of the current snapshot",
    )
    parser.add_argument(
        "--export", action="store_true",
        help="Write crisis, country, capital flow and similarity tables as parquet under data/reports/",
    )
    args = parser.parse_args()

    handle = RepositoryHandle(IndicatorRepository.from_catalogs())
    repo = handle.current()

    current = repo.current
    if args.what_if_em:
        current = current.with_overrides(
            foreign_currency_debt=60, capital_flow_risk="high", current_account_gdp=-6.0,
        )
        logger.info("Using what-if snapshot: FX debt 60%, high capital-flow risk, CA -6%")

    report = None
    if args.mode in ("all", "similarity"):
        report = run_similarity(repo, current)
    if args.mode in ("all", "generations"):
        run_generations(repo)
    if args.mode in ("all", "cycle"):
        run_cycle(repo, args.year)
    if args.mode in ("all", "capital-flows"):
        run_capital_flows(repo)
    if args.export:
        report_dir = export_reports(repo, report)
        logger.info("Reports written to %s", report_dir)

    logger.info("\nDone.")


if __name__ == "__main__":
    main()
