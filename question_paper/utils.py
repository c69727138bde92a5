# question_paper/utils.py
"""Utility functions"""
import os
from datetime import datetime
from typing import Any, Iterable, Optional, Union

Number = Union[int, float]


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S')


def normalize_marks(value: Any) -> Optional[Number]:
    """Coerce a marks value ("2", 2.0, 2) to a number, integral where possible"""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"marks must be numeric, got {value!r}")
    number = float(value)
    if number.is_integer():
        return int(number)
    return number


def total_marks(questions: Iterable[Any]) -> Number:
    """Sum the marks of a sequence of questions"""
    return sum(q.marks or 0 for q in questions)
