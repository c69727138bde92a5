# question_paper/analysis/__init__.py
"""Analysis functionality"""

from .analyzer import PoolAnalyzer, PaperMetrics

__all__ = ['PoolAnalyzer', 'PaperMetrics']
