"""Wordlist and dice scheme diagnostics."""
from .coverage import CoverageReport, RollDistribution, analyze_wordlist, roll_distribution

__all__ = [
    "CoverageReport",
    "RollDistribution",
    "analyze_wordlist",
    "roll_distribution",
]
