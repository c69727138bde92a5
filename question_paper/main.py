# question_paper/main.py
"""Main entry point for paper generation"""
import logging
import random
import sys
from typing import Dict, Any

from question_paper.config import (
    QUESTIONS_FILE, BLUEPRINT_FILE, OUTPUT_DIR, RANDOM_SEED, LOG_LEVEL
)
from question_paper.errors import EmptyInput, QuestionPaperError
from question_paper.io import QuestionLoader, PaperSaver
from question_paper.assembly import PaperAssembler, load_blueprint
from question_paper.sampling import QuotaAllocator, ShortageReport
from question_paper.analysis import PoolAnalyzer, PaperMetrics


class OutputFormatter:
    """Formats and displays a generated paper"""

    @staticmethod
    def print_results(paper: Dict[str, Any], report: ShortageReport,
                      pool_analysis: Dict[str, Any], metrics: Dict[str, Any]):
        """Pretty print paper summary"""
        print("\n" + "="*80)
        print("📋 QUESTION PAPER")
        print("="*80)

        OutputFormatter._print_pool(pool_analysis)
        OutputFormatter._print_metrics(metrics)
        OutputFormatter._print_sections(paper)
        OutputFormatter._print_shortages(report)

        print("\n" + "="*80)

    @staticmethod
    def _print_pool(pool_analysis: Dict[str, Any]):
        """Print pool section"""
        by_marks = pool_analysis.get('questions_by_marks', {})
        print(f"\n📚 POOL:")
        print(f"   Total Questions: {pool_analysis.get('total_questions', 0)}")
        for marks in sorted(by_marks, key=str):
            print(f"   {marks} marks: {len(by_marks[marks])}")

    @staticmethod
    def _print_metrics(metrics: Dict[str, Any]):
        """Print metrics section"""
        print(f"\n📊 METRICS:")
        print(f"   Questions: {metrics.get('questions_delivered', 0)}/"
              f"{metrics.get('questions_wanted', 0)}")
        print(f"   Marks: {metrics.get('total_marks', 0)}/{metrics.get('target_marks', 0)}")
        print(f"   Fulfilment Rate: {metrics.get('fulfilment_rate', 0):.1%}")

    @staticmethod
    def _print_sections(paper: Dict[str, Any]):
        """Print each section with its questions"""
        sections = paper.get('sections', {})
        print(f"\n📝 SECTIONS ({len(sections)}):")
        print("-"*80)

        for name, section in sections.items():
            print(f"\n{section['title']} ({len(section['questions'])} questions)")
            groups = section.get('parts') or [section]
            for group in groups:
                if group is not section:
                    print(f"   {group['title']}")
                for question in group['questions']:
                    qid = question.get('_id', question.get('question_id'))
                    text = question.get('text', question.get('question', ''))
                    print(f"      • [{qid}] {text}")

    @staticmethod
    def _print_shortages(report: ShortageReport):
        """Print shortages"""
        shortfall = report.shortfall
        if not shortfall:
            print(f"\n✅ All quotas met!")
            return

        print(f"\n⚠️  SHORTAGES ({len(shortfall)}):")
        print("-"*80)
        for label, missing in shortfall.items():
            print(f"   • {label}: wanted {report.wanted[label]}, "
                  f"got {report.delivered[label]} ({missing} short)")
        for key, size in report.pool_size.items():
            print(f"   Pool for {key} marks: {size}")


def main() -> int:
    """Main entry point"""
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        # Load data
        print("📂 Loading questions...")
        questions = QuestionLoader.load_questions(QUESTIONS_FILE)
        if not questions:
            raise EmptyInput(QUESTIONS_FILE)

        blueprint = load_blueprint(BLUEPRINT_FILE)
        rng = random.Random(RANDOM_SEED) if RANDOM_SEED is not None else None
        assembler = PaperAssembler(blueprint, allocator=QuotaAllocator(rng=rng))

        # Draw the paper
        print("\n🎲 Drawing questions...")
        paper, report = assembler.generate(questions)
    except QuestionPaperError as e:
        print(f"❌ {e}")
        return 1

    pool_analysis = PoolAnalyzer.analyze(questions)
    metrics = PaperMetrics.calculate(paper, report)

    # Display results
    OutputFormatter.print_results(paper, report, pool_analysis, metrics)

    saver = PaperSaver(OUTPUT_DIR)
    saver.save_paper(paper)

    return 0


if __name__ == "__main__":
    sys.exit(main())
