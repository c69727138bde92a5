# question_paper/errors.py
"""Exceptions raised by the question paper package"""
from typing import List


class QuestionPaperError(Exception):
    """Base class for all question paper errors"""


class InvalidPlan(QuestionPaperError):
    """A quota plan broke its contract (negative count, duplicate label)"""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("Invalid quota plan: " + "; ".join(self.issues))


class InvalidBlueprint(QuestionPaperError):
    """A paper blueprint could not be parsed"""


class EmptyInput(QuestionPaperError):
    """The question source yielded no questions"""

    def __init__(self, source: str = ''):
        self.source = source
        message = "No questions found"
        if source:
            message += f" in {source}"
        super().__init__(message)


class InvalidQuestion(QuestionPaperError):
    """A record in the question source could not be parsed"""
