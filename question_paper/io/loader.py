# question_paper/io/loader.py
"""Question loading functionality"""
import json
from typing import List
from question_paper.errors import InvalidQuestion
from question_paper.models import Question


class QuestionLoader:
    """Handles loading of the question pool"""
    
    @staticmethod
    def load_json(filepath: str) -> List[dict]:
        """Load JSON file"""
        with open(filepath, 'r') as f:
            return json.load(f)
    
    @staticmethod
    def load_questions(questions_file: str) -> List[Question]:
        """Load questions from a JSON array of records"""
        try:
            data = QuestionLoader.load_json(questions_file)
        except json.JSONDecodeError as e:
            raise InvalidQuestion(f"{questions_file} is not valid JSON: {e}") from e
        if isinstance(data, dict):
            data = data.get('questions', [])
        
        questions = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise InvalidQuestion(
                    f"Record {index} in {questions_file} is not an object: {record!r}"
                )
            try:
                questions.append(Question(record))
            except (TypeError, ValueError) as e:
                raise InvalidQuestion(
                    f"Record {index} in {questions_file} is invalid: {e}"
                ) from e
        
        print(f"Loaded {len(questions)} questions")
        
        return questions
