"""
Shared pytest fixtures.

Provides question factories and seeded random sources for the sampling tests.
"""

import random
from typing import Callable, List

import pytest

from question_paper.models import Question


def build_questions(marks: int, count: int, prefix: str = "q") -> List[Question]:
    """Build `count` questions worth `marks` with ids like q2_0, q2_1, ..."""
    return [
        Question({"_id": f"{prefix}{marks}_{i}", "marks": marks, "text": f"Question {i}"})
        for i in range(count)
    ]


@pytest.fixture
def make_questions() -> Callable[..., List[Question]]:
    return build_questions


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def mixed_pool() -> List[Question]:
    """12 two-mark questions, 3 three-mark questions and no five-mark questions."""
    return build_questions(2, 12) + build_questions(3, 3)
