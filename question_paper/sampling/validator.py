# question_paper/sampling/validator.py
"""Quota plan validation"""
from typing import List, Sequence
from question_paper.models import QuotaRequest


class PlanValidator:
    """Checks a quota plan against the allocator's contract"""
    
    @staticmethod
    def validate(plan: Sequence[QuotaRequest]) -> List[str]:
        """Return a list of contract violations; empty means the plan is usable"""
        issues = []
        seen_labels = set()
        reported_duplicates = set()
        
        for position, request in enumerate(plan):
            count = request.count
            
            # Check count
            if isinstance(count, bool) or not isinstance(count, int):
                issues.append(
                    f"Request {position} ({request.label!r}) has non-integer "
                    f"count {count!r}"
                )
            elif count < 0:
                issues.append(
                    f"Request {position} ({request.label!r}) has negative "
                    f"count {count}"
                )
            
            # Check label uniqueness
            if request.label in seen_labels:
                if request.label not in reported_duplicates:
                    issues.append(f"Duplicate request label {request.label!r}")
                    reported_duplicates.add(request.label)
            else:
                seen_labels.add(request.label)
        
        return issues
