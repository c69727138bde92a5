# question_paper/__init__.py
"""Stratified question selection and paper assembly"""

from .errors import QuestionPaperError, InvalidPlan, InvalidBlueprint, InvalidQuestion, EmptyInput
from .sampling import partition, allocate, QuotaAllocator, ShortageReport
from .assembly import PaperAssembler

__all__ = [
    'QuestionPaperError', 'InvalidPlan', 'InvalidBlueprint', 'InvalidQuestion', 'EmptyInput',
    'partition', 'allocate', 'QuotaAllocator', 'ShortageReport',
    'PaperAssembler',
]
