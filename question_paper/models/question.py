# question_paper/models/question.py
"""Question model"""
from typing import Dict, Any, Optional, Union
from question_paper.utils import normalize_marks


class Question:
    """Represents a single question in the pool"""
    
    def __init__(self, data: Dict[str, Any]):
        raw_id = data.get('_id', data.get('question_id'))
        if raw_id is None:
            raise ValueError(f"Question record has no '_id' or 'question_id': {data!r}")
        self.question_id: str = str(raw_id)
        self.marks: Optional[Union[int, float]] = normalize_marks(data.get('marks'))
        self.text: str = data.get('text', data.get('question', ''))
        self.teacher: str = data.get('teacher', '')
        self._raw_data = data
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return self._raw_data.copy()
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Question):
            return NotImplemented
        return self.question_id == other.question_id
    
    def __hash__(self) -> int:
        return hash(self.question_id)
    
    def __repr__(self) -> str:
        return f"Question({self.question_id}, {self.marks} marks)"
