from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from rdflib import Graph, Literal

from ..errors import ModelReadError
from ..handler_registry import register
from ..mapping import MappingConfig, Term
from ..renderer import save_text

logger = logging.getLogger(__name__)


@register("rdf")
class RDFOutputHandler:
    """Collects facts in an rdflib Graph, serialized as Turtle on finalize()."""

    def __init__(self, mapping: MappingConfig, full_output: bool = False) -> None:
        self.mapping = mapping
        self.full_output = full_output
        self.graph = Graph()
        self._text: Optional[str] = None

    def add_base(self, path: Path) -> None:
        """Load starting statements from a Turtle file."""
        try:
            self.graph.parse(str(path), format="turtle")
        except Exception as e:
            raise ModelReadError(f"Cannot parse base graph {path}: {e}") from e
        logger.info("Loaded %d base statements from %s", len(self.graph), path)

    def begin_run(self) -> None:
        self._text = None
        for prefix, ns in self.mapping.prefixes.items():
            self.graph.bind(prefix, ns)

    def record_element_fact(self, subject: Term, predicate: Term, value: Term) -> None:
        if isinstance(value, Literal) and not self.full_output and not self.mapping.is_internal(subject):
            logger.debug("Skipping %s on external term %s", predicate, subject)
            return
        self.graph.add((subject, predicate, value))

    def record_relationship_fact(self, subject: Term, predicate: Term, obj: Term) -> None:
        self.graph.add((subject, predicate, obj))

    def finalize(self) -> str:
        self._text = self.graph.serialize(format="turtle")
        return self._text

    def save(self, path: Path) -> Path:
        if self._text is None:
            self.finalize()
        return save_text(self._text, path)
