"""Recommendation generation for content-quality improvements."""

from seokit.fixes.generator import (
    Category,
    Priority,
    Recommendation,
    RecommendationConfig,
    RecommendationGenerator,
    generate_recommendations,
    sort_by_priority,
)

__all__ = [
    "Category",
    "Priority",
    "Recommendation",
    "RecommendationConfig",
    "RecommendationGenerator",
    "generate_recommendations",
    "sort_by_priority",
]
