# question_paper/io/saver.py
"""Paper saving functionality"""
import json
import os
from typing import Dict, Any
from question_paper.config import OUTPUT_DIR
from question_paper.utils import ensure_directory, format_timestamp


class PaperSaver:
    """Handles saving of generated papers"""
    
    def __init__(self, output_dir: str = OUTPUT_DIR):
        self.output_dir = output_dir
        ensure_directory(self.output_dir)
    
    def save_paper(self, paper: Dict[str, Any]) -> str:
        """Save a paper to a timestamped file and return its path"""
        meta = paper.get('meta', {})
        timestamp = format_timestamp()
        filename = (f"paper_{timestamp}_{meta.get('total_questions', 0)}q_"
                    f"{meta.get('total_marks', 0)}m.json")
        filepath = os.path.join(self.output_dir, filename)
        
        with open(filepath, 'w') as f:
            json.dump(paper, f, indent=2, ensure_ascii=False)
        
        print(f"\n💾 Paper saved to {filepath}")
        return filepath
