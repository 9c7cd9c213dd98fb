"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment before any analyzer code reads settings
os.environ["SEOKIT_ENV"] = "test"
os.environ["SEOKIT_READING_WORDS_PER_MINUTE"] = "200"

from seokit.analyzer import AnalyzerConfig, SEOAnalyzer  # noqa: E402
from seokit.config import get_settings  # noqa: E402
from tests.fixtures.oracle import StubOracle, full_oracle  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def oracle() -> StubOracle:
    """Oracle with readability and sentence importance support."""
    return full_oracle(
        entities={"Portland": "GPE", "Rodale Institute": "ORG"},
        sentence_scores={
            "Healthy compost smells earthy.": 0.6,
            "Gardeners in Portland love compost bins.": 0.4,
        },
    )


@pytest.fixture
def basic_oracle() -> StubOracle:
    """Oracle without any optional capability."""
    return StubOracle(entities={"Portland": "GPE"})


@pytest.fixture
def analyzer(oracle: StubOracle) -> SEOAnalyzer:
    return SEOAnalyzer(oracle, AnalyzerConfig())
