# question_paper/assembly/assembler.py
"""Turns a blueprint and an allocation into a question paper document"""
import json
import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, Sequence, Tuple

from question_paper.config import DEFAULT_BLUEPRINT, PAPER_NOTE
from question_paper.errors import InvalidBlueprint
from question_paper.models import Blueprint, Question, Section
from question_paper.sampling import QuotaAllocator, ShortageReport, partition
from question_paper.utils import total_marks

logger = logging.getLogger(__name__)


def load_blueprint(filepath: Optional[str] = None) -> Blueprint:
    """Load a blueprint from a JSON file, or the default paper layout"""
    if filepath is None:
        return Blueprint.from_dict(DEFAULT_BLUEPRINT)
    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidBlueprint(f"Blueprint file {filepath} is not valid JSON: {e}") from e
    return Blueprint.from_dict(data)


class PaperAssembler:
    """Coordinates partition -> allocate -> assemble for one blueprint"""
    
    def __init__(self, blueprint: Optional[Blueprint] = None,
                 allocator: Optional[QuotaAllocator] = None,
                 note: str = PAPER_NOTE):
        self.blueprint = blueprint or Blueprint.from_dict(DEFAULT_BLUEPRINT)
        self.allocator = allocator or QuotaAllocator()
        self.note = blueprint.note if blueprint and blueprint.note else note
    
    def generate(self, questions: Sequence[Question]) -> Tuple[Dict[str, Any], ShortageReport]:
        """Draw a paper from the question pool. Returns (paper, report)."""
        plan = self.blueprint.to_plan()
        buckets = partition(questions)
        results, report = self.allocator.allocate(buckets, plan)
        
        if report.has_shortage:
            logger.info("Paper assembled with shortages: %s", report.shortfall)
        
        return self.assemble(results, report), report
    
    def assemble(self, results: Dict[str, List[Question]], report: ShortageReport,
                 created_at: Optional[datetime] = None) -> Dict[str, Any]:
        """Arrange per-label picks into sections, with meta and report"""
        if created_at is None:
            created_at = datetime.now()
        
        sections = {}
        all_questions = []
        for section in self.blueprint.sections:
            sections[section.name] = self._build_section(section, results)
            for part in section.parts:
                all_questions.extend(results.get(part.label, []))
        
        return {
            "meta": {
                "total_questions": len(all_questions),
                "total_marks": total_marks(all_questions),
                "target_marks": self.blueprint.target_marks,
                "created_at": created_at.isoformat(),
                "note": self.note,
            },
            "sections": sections,
            "report": self._build_report(report),
        }
    
    def _build_section(self, section: Section,
                       results: Dict[str, List[Question]]) -> Dict[str, Any]:
        """Build one section; multi-part sections also list their parts"""
        questions = []
        parts = []
        for part in section.parts:
            picked = results.get(part.label, [])
            questions.extend(q.to_dict() for q in picked)
            parts.append({
                "title": part.title,
                "marks_each": part.marks,
                "questions": [q.to_dict() for q in picked],
            })
        
        if section.is_single_part:
            return {
                "title": section.title,
                "marks_each": section.parts[0].marks,
                "questions": questions,
            }
        
        return {
            "title": section.title,
            "parts": parts,
            "questions": questions,
        }
    
    @staticmethod
    def _build_report(report: ShortageReport) -> Dict[str, Any]:
        data = report.to_dict()
        data["available"] = {f"mark{key}": size for key, size in report.pool_size.items()}
        return data
