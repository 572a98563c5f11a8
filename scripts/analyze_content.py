#!/usr/bin/env python3
"""
Content Analysis Runner

Runs every content analyzer over a local text file and enforces the
quality gates.

Usage:
    python scripts/analyze_content.py article.md

    # With options:
    python scripts/analyze_content.py article.md \
        --industry "personal finance" \
        --keyword "index funds" \
        --region UK \
        --eliminate \
        --json

Exits with status 1 when a required quality gate fails.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.analysis import (
    EeatContext,
    EeatOptimizer,
    HallucinationDetectionConfig,
    HallucinationDetector,
    LocalSearchAnalyzer,
    ProhibitedPhraseDetector,
)
from src.quality import ContentQualityEnforcer
from src.utils.config import get_settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_analysis(content: str, industry: str, keyword: str, region: str = None, eliminate: bool = False) -> dict:
    """Run all analyzers and gates over content."""
    settings = get_settings()

    phrase_detector = ProhibitedPhraseDetector()
    phrases = phrase_detector.calculate_quality_score(content)
    hallucination = HallucinationDetector(HallucinationDetectionConfig(
        confidence_threshold=settings.HALLUCINATION_CONFIDENCE_THRESHOLD,
        strict_mode=settings.HALLUCINATION_STRICT_MODE,
    )).detect(content)
    eeat = EeatOptimizer().optimize(content, EeatContext(industry=industry, keyword=keyword))

    enforcement = ContentQualityEnforcer.from_settings(settings).enforce({
        "phrases": phrases,
        "hallucination": hallucination,
        "eeat": eeat,
    })

    report = {
        "approved": enforcement.passed,
        "quality_gates": enforcement.to_dict(),
        "phrases": phrases.to_dict(),
        "hallucination": hallucination.to_dict(),
        "eeat": eeat.to_dict(),
    }
    if region is not None:
        report["local_search"] = LocalSearchAnalyzer().analyze(region, keyword).to_dict()
    if eliminate:
        report["cleaned_content"] = phrase_detector.eliminate(content)

    return report


def print_summary(report: dict):
    """Print a human-readable summary."""
    gates = report["quality_gates"]

    print(f"\n{'='*60}")
    print(f"Content {'APPROVED' if report['approved'] else 'REJECTED'} "
          f"(composite score {gates['composite_score']})")
    print(f"{'='*60}")

    for gate in gates["gate_results"]:
        print(f"  [{gate['status'].upper():8}] {gate['gate_name']}: {gate['message']}")

    print(f"\nPhrase quality: {report['phrases']['overall_score']}/100")
    for rec in report["phrases"]["recommendations"]:
        print(f"  - {rec}")

    hallucination = report["hallucination"]
    print(f"\nHallucination score: {hallucination['hallucination_score']}/100 ({hallucination['risk_level']} risk)")
    for flag in hallucination["flagged_sentences"][:10]:
        print(f"  - [{flag['severity']}] {flag['reason']}")

    eeat = report["eeat"]
    print(f"\nE-E-A-T score: {eeat['eeat_score']}/100")
    for rec in eeat["eeat_recommendations"]:
        print(f"  - {rec}")

    if "local_search" in report:
        local = report["local_search"]
        print(f"\nLocal search profile: {local['region']}")
        for rec in local["recommendations"]:
            print(f"  - {rec}")

    if "cleaned_content" in report:
        print(f"\n{'-'*60}\n{report['cleaned_content']}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run content quality analysis on a text file"
    )
    parser.add_argument(
        "file",
        help="Path to the content file (plain text or markdown)"
    )
    parser.add_argument(
        "--industry",
        default="general",
        help="Content industry (default: general)"
    )
    parser.add_argument(
        "--keyword",
        default="",
        help="Target keyword"
    )
    parser.add_argument(
        "--region",
        help="Target region for local search analysis"
    )
    parser.add_argument(
        "--eliminate",
        action="store_true",
        help="Also output the content with prohibited phrases replaced"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )

    args = parser.parse_args()

    load_dotenv()
    setup_logging(args.verbose)

    content = Path(args.file).read_text(encoding="utf-8")
    if not content.strip():
        print(f"ERROR: {args.file} is empty")
        sys.exit(2)

    report = run_analysis(
        content,
        industry=args.industry,
        keyword=args.keyword,
        region=args.region,
        eliminate=args.eliminate,
    )

    if args.json:
        print(json.dumps(report, indent=2, default=str))
    else:
        print_summary(report)

    sys.exit(0 if report["approved"] else 1)


if __name__ == "__main__":
    main()
