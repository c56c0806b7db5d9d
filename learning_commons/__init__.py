"""
Learning Commons engine for intervention planning.

Knowledge graph queries (prerequisites, progressions, skill mapping) and
rubric-based evaluation of instructional text.
"""

__version__ = "1.0.0"
