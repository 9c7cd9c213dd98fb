"""Keyword and n-gram statistics.

Terms are the normal forms of non-stop word tokens. Equal counts keep the
order in which terms first appear in the document.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from seokit.nlp.document import RawDocument
from seokit.rounding import percentage

MAX_KEYWORDS = 30
MAX_BIGRAMS = 15
MAX_TRIGRAMS = 10
MIN_NGRAM_COUNT = 2


@dataclass(frozen=True)
class Keyword:
    term: str
    count: int
    density: float  # % of content words

    def to_dict(self) -> dict:
        return {"term": self.term, "count": self.count, "density": self.density}


@dataclass(frozen=True)
class TermCount:
    term: str
    count: int

    def to_dict(self) -> dict:
        return {"term": self.term, "count": self.count}


@dataclass(frozen=True)
class KeywordStats:
    """Keyword frequency statistics for a document."""

    total_content_words: int
    unique_words: int
    lexical_diversity: float  # unique / total, %
    top_keywords: tuple[Keyword, ...]
    top_bigrams: tuple[TermCount, ...]
    top_trigrams: tuple[TermCount, ...]

    def top_terms(self, n: int) -> tuple[str, ...]:
        """The ``n`` most frequent terms."""
        return tuple(k.term for k in self.top_keywords[:n])

    def to_dict(self) -> dict:
        return {
            "total_content_words": self.total_content_words,
            "unique_words": self.unique_words,
            "lexical_diversity": self.lexical_diversity,
            "top_keywords": [k.to_dict() for k in self.top_keywords],
            "top_bigrams": [b.to_dict() for b in self.top_bigrams],
            "top_trigrams": [t.to_dict() for t in self.top_trigrams],
        }


def rank_terms(terms: Sequence[str]) -> list[tuple[str, int]]:
    """Count terms, most frequent first, ties in first-seen order."""
    # Counter keeps insertion order and most_common() sorts stably
    return Counter(terms).most_common()


def extract_ngrams(terms: Sequence[str], n: int, min_count: int = MIN_NGRAM_COUNT) -> list[TermCount]:
    """
    Count sliding-window n-grams over ``terms``.

    Args:
        terms: Filtered term sequence
        n: Window size
        min_count: Drop n-grams seen fewer times than this

    Returns:
        TermCount list, most frequent first
    """
    grams = [" ".join(terms[i : i + n]) for i in range(len(terms) - n + 1)]
    return [TermCount(term=g, count=c) for g, c in rank_terms(grams) if c >= min_count]


def lexical_diversity(unique: int, total: int) -> float:
    """Unique terms as a percentage of all terms, 1 decimal."""
    return percentage(unique, total, 1)


def analyze_keywords(
    doc: RawDocument,
    max_keywords: int = MAX_KEYWORDS,
    max_bigrams: int = MAX_BIGRAMS,
    max_trigrams: int = MAX_TRIGRAMS,
) -> KeywordStats:
    """
    Compute keyword, bigram and trigram statistics for a document.

    Args:
        doc: Annotated text
        max_keywords: Number of keywords to return
        max_bigrams: Number of bigrams to return
        max_trigrams: Number of trigrams to return

    Returns:
        KeywordStats for the document
    """
    terms = doc.content_terms()
    total = len(terms)
    ranked = rank_terms(terms)

    top = tuple(
        Keyword(term=term, count=count, density=percentage(count, total, 2))
        for term, count in ranked[:max_keywords]
    )

    return KeywordStats(
        total_content_words=total,
        unique_words=len(ranked),
        lexical_diversity=lexical_diversity(len(ranked), total),
        top_keywords=top,
        top_bigrams=tuple(extract_ngrams(terms, 2)[:max_bigrams]),
        top_trigrams=tuple(extract_ngrams(terms, 3)[:max_trigrams]),
    )
