"""Composite content scoring."""

from seokit.scoring.calculator import ContentScore, ScoreBreakdown, calculate_score, grade_for

__all__ = [
    "ContentScore",
    "ScoreBreakdown",
    "calculate_score",
    "grade_for",
]
