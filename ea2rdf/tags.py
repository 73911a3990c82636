from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from rdflib import Literal, URIRef

from .mapping import MappingConfig, Term

logger = logging.getLogger(__name__)

# Tag keys
URI = "uri"
LABEL = "label"
IGNORE = "ignore"

# Leg prefixes for connectors with an association class
ASSOCIATION_SOURCE_PREFIX = "assocSource:"
ASSOCIATION_SOURCE_REV_PREFIX = "assocSourceRev:"
ASSOCIATION_DEST_PREFIX = "assocDest:"
ASSOCIATION_DEST_REV_PREFIX = "assocDestRev:"


class TermKind(Enum):
    RESOURCE = "resource"
    PROPERTY = "property"
    LITERAL = "literal"


class TagHelper:
    """Reads tags from elements / connectors and maps them to RDF terms."""

    def __init__(self, mapping: MappingConfig) -> None:
        self.mapping = mapping

    def values(self, entity, key: str, prefix: str = "") -> List[str]:
        full = prefix + key
        return [t.value for t in entity.tags if t.key == full]

    def single_value(self, entity, key: str, prefix: str = "") -> Optional[str]:
        found = self.values(entity, key, prefix)
        if not found:
            return None
        if len(found) > 1 and key not in self.mapping.multi_valued:
            logger.warning("Tag %r occurs %d times on %s, using the last value",
                           prefix + key, len(found), _describe(entity))
        return found[-1]

    def resolve(self, entity, key: str, prefix: str = "",
                kind: TermKind = TermKind.RESOURCE) -> Optional[Term]:
        value = self.single_value(entity, key, prefix)
        if value is None:
            return None
        return self.resolve_value(value, kind, key, entity)

    def resolve_all(self, entity, key: str, prefix: str = "",
                    kind: TermKind = TermKind.RESOURCE) -> List[Term]:
        out: List[Term] = []
        for value in self.values(entity, key, prefix):
            term = self.resolve_value(value, kind, key, entity)
            if term is not None and term not in out:
                out.append(term)
        return out

    def resolve_value(self, value: str, kind: TermKind, key: str = "",
                      entity=None) -> Optional[Term]:
        if kind is TermKind.LITERAL:
            annotation = self.mapping.annotation_for(key)
            if annotation and annotation.datatype is not None:
                return Literal(value, datatype=annotation.datatype)
            return Literal(value, lang=annotation.lang if annotation else None)

        table = self.mapping.resources if kind is TermKind.RESOURCE else self.mapping.properties
        term: Optional[URIRef] = table.get(value)
        if term is None:
            term = self.mapping.expand(value)
        if term is None and ":" in value:
            logger.warning("Cannot resolve %r (tag %r on %s): unknown prefix",
                           value, key, _describe(entity))
        return term

    def is_ignored(self, entity) -> bool:
        value = self.single_value(entity, IGNORE)
        return (value or "").strip().lower() == "true"


def _describe(entity) -> str:
    if entity is None:
        return "?"
    name = getattr(entity, "name", None)
    if name:
        return f"{type(entity).__name__} {name!r}"
    return f"{type(entity).__name__} #{getattr(entity, 'id', '?')}"
