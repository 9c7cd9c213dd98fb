"""SEOKit: content-quality analysis and RAG snippet scoring for web pages."""

from seokit.analyzer import VERSION, AnalyzerConfig, SEOAnalyzer, analyze_page
from seokit.logging import setup_logging
from seokit.page.models import PageContent
from seokit.report import AnalysisError, Report, TextAnalysis

__version__ = VERSION

__all__ = [
    "AnalysisError",
    "AnalyzerConfig",
    "PageContent",
    "Report",
    "SEOAnalyzer",
    "TextAnalysis",
    "analyze_page",
    "setup_logging",
]
