# question_paper/sampling/__init__.py
"""Stratified sampling logic"""

from .partitioner import partition, marks_of
from .validator import PlanValidator
from .allocator import QuotaAllocator, RandomSource, ShortageReport, allocate

__all__ = [
    'partition', 'marks_of', 'PlanValidator',
    'QuotaAllocator', 'RandomSource', 'ShortageReport', 'allocate',
]
