# question_paper/assembly/__init__.py
"""Paper assembly"""

from .assembler import PaperAssembler, load_blueprint

__all__ = ['PaperAssembler', 'load_blueprint']
