# question_paper/models/__init__.py
"""Data models for questions, quota requests and blueprints"""

from .question import Question
from .quota import QuotaRequest
from .blueprint import Blueprint, Section, SectionPart

__all__ = ['Question', 'QuotaRequest', 'Blueprint', 'Section', 'SectionPart']
