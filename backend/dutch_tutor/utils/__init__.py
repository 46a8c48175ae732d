"""
Utilities Module
Spaced repetition scheduling.
"""
from dutch_tutor.utils.srs_algorithm import SRSAlgorithm, quality_from_correctness

__all__ = ["SRSAlgorithm", "quality_from_correctness"]
