"""NLP oracle interface and annotated documents."""

from seokit.nlp.document import RawDocument, read_document
from seokit.nlp.oracle import (
    Annotation,
    Capability,
    Entity,
    NLPOracle,
    ReadabilityStats,
    Sentence,
    SentenceImportance,
    Token,
)

__all__ = [
    "Annotation",
    "Capability",
    "Entity",
    "NLPOracle",
    "RawDocument",
    "ReadabilityStats",
    "Sentence",
    "SentenceImportance",
    "Token",
    "read_document",
]
