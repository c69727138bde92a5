"""
Tests for paper assembly from a blueprint and a question pool.
"""

import json
import random
from datetime import datetime

import pytest

from question_paper.assembly import PaperAssembler, load_blueprint
from question_paper.errors import InvalidBlueprint, InvalidPlan
from question_paper.models import Blueprint
from question_paper.sampling import QuotaAllocator


@pytest.fixture
def assembler(rng):
    return PaperAssembler(allocator=QuotaAllocator(rng=rng))


@pytest.fixture
def full_pool(make_questions):
    """Enough questions of every marks value for the default paper."""
    return make_questions(2, 15) + make_questions(3, 5) + make_questions(5, 7)


class TestGeneratePaper:
    """Test the default 80-mark paper."""

    def test_full_pool_meets_every_quota(self, assembler, full_pool):
        """A sufficient pool yields 27 questions worth 80 marks."""
        paper, report = assembler.generate(full_pool)

        assert paper["meta"]["total_questions"] == 27
        assert paper["meta"]["total_marks"] == 80
        assert paper["meta"]["target_marks"] == 80
        assert not report.has_shortage

    def test_section_shapes(self, assembler, full_pool):
        """Single-part sections carry marks_each; section B lists its parts."""
        paper, _ = assembler.generate(full_pool)
        sections = paper["sections"]

        assert list(sections) == ["A", "B", "C"]
        assert sections["A"]["marks_each"] == 2
        assert len(sections["A"]["questions"]) == 10
        assert len(sections["C"]["questions"]) == 7

        part1, part2 = sections["B"]["parts"]
        assert part1["marks_each"] == 2 and len(part1["questions"]) == 5
        assert part2["marks_each"] == 3 and len(part2["questions"]) == 5
        assert sections["B"]["questions"] == part1["questions"] + part2["questions"]

    def test_no_question_appears_twice(self, assembler, full_pool):
        """Section A and section B part 1 never share a question."""
        paper, _ = assembler.generate(full_pool)

        ids = [
            q["_id"]
            for name in ("A", "B", "C")
            for q in paper["sections"][name]["questions"]
        ]
        assert len(ids) == len(set(ids))

    def test_short_pool_reports_shortage(self, assembler, mixed_pool):
        """12/3/0 pool: section B and C run short, with the pool sizes reported."""
        paper, report = assembler.generate(mixed_pool)

        assert report.delivered == {
            "sectionA": 10, "sectionB_part1": 2, "sectionB_part2": 3, "sectionC": 0,
        }
        assert paper["report"]["available"] == {"mark2": 12, "mark3": 3, "mark5": 0}
        assert paper["report"]["shortfall"] == {
            "sectionB_part1": 3, "sectionB_part2": 2, "sectionC": 7,
        }
        assert paper["meta"]["total_marks"] == 10 * 2 + 2 * 2 + 3 * 3

    def test_empty_pool(self, assembler):
        """An empty pool assembles an empty paper without error."""
        paper, report = assembler.generate([])

        assert paper["meta"]["total_questions"] == 0
        assert paper["meta"]["total_marks"] == 0
        assert report.is_empty

    def test_paper_is_json_serializable(self, assembler, full_pool):
        """Paper output can be written as JSON."""
        paper, _ = assembler.generate(full_pool)

        assert json.loads(json.dumps(paper))["meta"]["total_questions"] == 27

    def test_assemble_uses_given_timestamp(self, assembler):
        """created_at is the supplied time in ISO format."""
        plan = assembler.blueprint.to_plan()
        results, report = assembler.allocator.allocate({}, plan)
        when = datetime(2024, 3, 1, 9, 30)

        paper = assembler.assemble(results, report, created_at=when)

        assert paper["meta"]["created_at"] == "2024-03-01T09:30:00"

    def test_invalid_blueprint_counts_raise_invalid_plan(self, full_pool):
        """Negative counts in a blueprint fail before drawing."""
        blueprint = Blueprint.from_dict(
            {"sections": [{"name": "A", "parts": [{"marks": 2, "count": -1}]}]}
        )

        with pytest.raises(InvalidPlan):
            PaperAssembler(blueprint, QuotaAllocator(rng=random.Random(0))).generate(full_pool)

    def test_blueprint_note_overrides_default(self):
        """A note in the blueprint replaces the default note."""
        blueprint = Blueprint.from_dict({
            "note": "Mid-term",
            "sections": [{"name": "A", "parts": [{"marks": 2, "count": 1}]}],
        })

        assert PaperAssembler(blueprint).note == "Mid-term"


class TestLoadBlueprint:
    """Test blueprint loading."""

    def test_default_when_no_file(self):
        """No path means the default 80-mark layout."""
        assert load_blueprint(None).target_marks == 80

    def test_load_from_file(self, tmp_path):
        """Blueprints can be read from JSON files."""
        path = tmp_path / "blueprint.json"
        path.write_text(json.dumps({
            "sections": [{"name": "X", "parts": [{"marks": 4, "count": 2}]}]
        }))

        blueprint = load_blueprint(str(path))

        assert blueprint.target_marks == 8

    def test_bad_json_raises_invalid_blueprint(self, tmp_path):
        """Unparseable files are reported as blueprint errors."""
        path = tmp_path / "blueprint.json"
        path.write_text("{not json")

        with pytest.raises(InvalidBlueprint):
            load_blueprint(str(path))

    def test_null_marks_fail_before_generation(self, tmp_path):
        """A blueprint file with null marks is rejected at load time."""
        path = tmp_path / "blueprint.json"
        path.write_text(json.dumps({
            "sections": [{"name": "A", "parts": [{"marks": None, "count": 2}]}]
        }))

        with pytest.raises(InvalidBlueprint):
            load_blueprint(str(path))
