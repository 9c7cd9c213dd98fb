"""Section-level snippet potential scoring."""

from seokit.chunking.scorer import (
    ChunkAnalysis,
    ChunkResult,
    ChunkScorer,
    ChunkScorerConfig,
    ChunkSummary,
    compute_snippet_score,
    snippet_grade,
    summarize_chunks,
    topic_alignment,
)

__all__ = [
    "ChunkAnalysis",
    "ChunkResult",
    "ChunkScorer",
    "ChunkScorerConfig",
    "ChunkSummary",
    "compute_snippet_score",
    "snippet_grade",
    "summarize_chunks",
    "topic_alignment",
]
