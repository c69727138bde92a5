"""
Tests for pool analysis and paper metrics.
"""

import pytest

from question_paper.analysis import PaperMetrics, PoolAnalyzer
from question_paper.assembly import PaperAssembler
from question_paper.sampling import QuotaAllocator


class TestPoolAnalyzer:
    """Test pool breakdown."""

    def test_groups_ids_by_marks(self, mixed_pool):
        """Question ids are listed under their marks value."""
        analysis = PoolAnalyzer.analyze(mixed_pool)

        assert analysis["total_questions"] == 15
        assert len(analysis["questions_by_marks"][2]) == 12
        assert len(analysis["questions_by_marks"][3]) == 3


class TestPaperMetrics:
    """Test paper metrics."""

    def test_short_pool_metrics(self, mixed_pool, rng):
        """Fulfilment rate reflects delivered over wanted questions."""
        paper, report = PaperAssembler(allocator=QuotaAllocator(rng=rng)).generate(mixed_pool)

        metrics = PaperMetrics.calculate(paper, report)

        assert metrics["questions_wanted"] == 27
        assert metrics["questions_delivered"] == 15
        assert metrics["fulfilment_rate"] == pytest.approx(15 / 27)
        assert metrics["sections"] == {"A": 10, "B": 5, "C": 0}
        assert metrics["shortfall"]["sectionC"] == 7

    def test_empty_plan_is_fully_met(self, rng):
        """No requests means nothing is missing."""
        _, report = QuotaAllocator(rng=rng).allocate({}, [])

        metrics = PaperMetrics.calculate({}, report)

        assert metrics["fulfilment_rate"] == 1.0
        assert metrics["questions_delivered"] == 0
