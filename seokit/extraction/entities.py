"""Named entity summary."""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from seokit.nlp.document import RawDocument
from seokit.nlp.oracle import Entity

MAX_ENTITIES = 50
UNKNOWN_TYPE = "UNKNOWN"


@dataclass(frozen=True)
class EntitySummary:
    total: int  # Uncapped
    items: tuple[Entity, ...]
    type_summary: Mapping[str, int]  # Read-only

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "items": [e.to_dict() for e in self.items],
            "type_summary": dict(self.type_summary),
        }


def count_entity_types(entities: Iterable[Entity]) -> dict[str, int]:
    """Histogram of entity types; untyped entities count as UNKNOWN."""
    return dict(Counter(e.type or UNKNOWN_TYPE for e in entities))


def analyze_entities(doc: RawDocument, max_items: int = MAX_ENTITIES) -> EntitySummary:
    entities = doc.entities
    return EntitySummary(
        total=len(entities),
        items=tuple(entities[:max_items]),
        type_summary=MappingProxyType(count_entity_types(entities)),
    )
