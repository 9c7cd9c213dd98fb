"""Metric extractors for page content."""

from seokit.extraction.entities import EntitySummary, analyze_entities
from seokit.extraction.keywords import Keyword, KeywordStats, TermCount, analyze_keywords
from seokit.extraction.meta import Issue, LengthStatus, MetaAudit, Severity, audit_meta
from seokit.extraction.readability import ReadabilityMetrics, ReadingTime, analyze_readability
from seokit.extraction.sentiment import SentimentSummary, analyze_sentiment
from seokit.extraction.structure import H1Status, StructureSummary, analyze_structure

__all__ = [
    # Readability
    "ReadabilityMetrics",
    "ReadingTime",
    "analyze_readability",
    # Keywords
    "Keyword",
    "KeywordStats",
    "TermCount",
    "analyze_keywords",
    # Entities
    "EntitySummary",
    "analyze_entities",
    # Sentiment
    "SentimentSummary",
    "analyze_sentiment",
    # Structure
    "H1Status",
    "StructureSummary",
    "analyze_structure",
    # Meta
    "Issue",
    "LengthStatus",
    "MetaAudit",
    "Severity",
    "audit_meta",
]
