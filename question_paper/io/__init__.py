# question_paper/io/__init__.py
"""Input/Output operations"""

from .loader import QuestionLoader
from .saver import PaperSaver

__all__ = ['QuestionLoader', 'PaperSaver']
