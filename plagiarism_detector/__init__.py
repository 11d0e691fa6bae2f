"""
Word-frequency plagiarism checker.

Compares two text files by the cosine similarity of their word counts and
flags pairs whose similarity reaches the plagiarism threshold.
"""

__version__ = "1.0.0"

from .core import *
