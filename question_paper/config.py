# question_paper/config.py
"""Configuration settings for paper generation"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# File paths
DATA_DIR = os.getenv('DATA_DIR', './data')
QUESTIONS_FILE = os.getenv('QUESTIONS_FILE', os.path.join(DATA_DIR, 'questions.json'))
BLUEPRINT_FILE = os.getenv('BLUEPRINT_FILE')  # optional, falls back to DEFAULT_BLUEPRINT
OUTPUT_DIR = os.getenv('OUTPUT_DIR', os.path.join(DATA_DIR, 'papers'))

# Sampling settings
_seed = os.getenv('RANDOM_SEED')
RANDOM_SEED = int(_seed) if _seed not in (None, '') else None

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')

# Paper layout: A = 10 x 2, B = 5 x 2 + 5 x 3, C = 7 x 5 (80 marks)
DEFAULT_BLUEPRINT = {
    'sections': [
        {
            'name': 'A',
            'title': 'Section A – 2 marks each',
            'parts': [{'marks': 2, 'count': 10}],
        },
        {
            'name': 'B',
            'title': 'Section B – mix (2 marks & 3 marks)',
            'parts': [
                {'marks': 2, 'count': 5, 'title': 'Part 1 (2 marks each)'},
                {'marks': 3, 'count': 5, 'title': 'Part 2 (3 marks each)'},
            ],
        },
        {
            'name': 'C',
            'title': 'Section C – 5 marks each',
            'parts': [{'marks': 5, 'count': 7}],
        },
    ]
}

PAPER_NOTE = (
    "Questions picked randomly across all teachers. If the pool had insufficient "
    "questions of a marks value, fewer questions were picked."
)
