# question_paper/analysis/analyzer.py
"""Pool and paper analysis"""
from typing import Dict, Any, List
from question_paper.models import Question
from question_paper.sampling import ShortageReport


class PoolAnalyzer:
    """Analyzes the question pool"""
    
    @staticmethod
    def analyze(questions: List[Question]) -> Dict[str, Any]:
        """Count questions per marks value"""
        analysis = {
            'total_questions': len(questions),
            'questions_by_marks': {},
        }
        
        for question in questions:
            marks = question.marks
            if marks not in analysis['questions_by_marks']:
                analysis['questions_by_marks'][marks] = []
            analysis['questions_by_marks'][marks].append(question.question_id)
        
        return analysis


class PaperMetrics:
    """Calculates metrics from an assembled paper"""
    
    @staticmethod
    def calculate(paper: Dict[str, Any], report: ShortageReport) -> Dict[str, Any]:
        """Summarize how well the paper met its quotas"""
        total_wanted = sum(report.wanted.values())
        total_delivered = sum(report.delivered.values())
        meta = paper.get('meta', {})
        
        return {
            'total_questions': meta.get('total_questions', total_delivered),
            'total_marks': meta.get('total_marks', 0),
            'target_marks': meta.get('target_marks', 0),
            'questions_wanted': total_wanted,
            'questions_delivered': total_delivered,
            'fulfilment_rate': total_delivered / total_wanted if total_wanted > 0 else 1.0,
            'shortfall': report.shortfall,
            'sections': {
                name: len(section.get('questions', []))
                for name, section in paper.get('sections', {}).items()
            },
        }
