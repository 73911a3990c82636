from __future__ import annotations
import logging
from typing import Dict, List, Optional

from rdflib import OWL, RDF, RDFS, URIRef

from . import tags
from .handler_registry import OutputHandler
from .mapping import Term
from .models import Connector, Diagram, Element, Id
from .normalizer import ConnectorLike, normalize
from .tags import TagHelper, TermKind

logger = logging.getLogger(__name__)

ELEMENT_TYPE_TO_RDF: Dict[str, URIRef] = {
    "Class": OWL.Class,
    "Enumeration": OWL.Class,
    "DataType": RDFS.Datatype,
    "PrimitiveType": RDFS.Datatype,
}


class Converter:
    """Walks one diagram and feeds the resolved facts to an output handler."""

    def __init__(self, tag_helper: TagHelper, handler: OutputHandler) -> None:
        self.tag_helper = tag_helper
        self.handler = handler
        self._terms: Dict[Id, Optional[URIRef]] = {}

    def convert_diagram(self, diagram: Diagram) -> str:
        logger.info("Converting diagram %r (%d elements, %d connectors)",
                    diagram.name, len(diagram.elements), len(diagram.connectors))
        self._terms = {}
        self.handler.begin_run()

        for element in diagram.elements:
            self._convert_element(element)

        for connector in diagram.connectors:
            self._convert_connector(connector)

        return self.handler.finalize()

    # -------- elements ----------
    def _convert_element(self, element: Element) -> None:
        if self.tag_helper.is_ignored(element):
            logger.debug("Ignoring element %r", element.name)
            return
        rdf_type = ELEMENT_TYPE_TO_RDF.get(element.type)
        if rdf_type is None:
            logger.debug("Skipping %s %r: no RDF mapping for this type", element.type, element.name)
            return
        subject = self.element_term(element)
        if subject is None:
            logger.info("Skipping %s %r: not in the configured vocabulary", element.type, element.name)
            return

        self.handler.record_element_fact(subject, RDF.type, rdf_type)
        for annotation in self.tag_helper.mapping.annotations:
            if annotation.multiple:
                values = self.tag_helper.resolve_all(element, annotation.tag, kind=TermKind.LITERAL)
            else:
                value = self.tag_helper.resolve(element, annotation.tag, kind=TermKind.LITERAL)
                values = [value] if value is not None else []
            for value in values:
                self.handler.record_element_fact(subject, annotation.predicate, value)

    def element_term(self, element: Element) -> Optional[URIRef]:
        if element.id not in self._terms:
            term = self.tag_helper.resolve(element, tags.URI, kind=TermKind.RESOURCE)
            if term is None:
                term = self.tag_helper.mapping.resources.get(element.name)
            self._terms[element.id] = term
        return self._terms[element.id]

    # -------- connectors ----------
    def _convert_connector(self, connector: Connector) -> None:
        if self.tag_helper.is_ignored(connector):
            logger.debug("Ignoring connector #%s", connector.id)
            return
        for view in normalize(connector, connector.direction):
            predicates = self.predicates(view)
            if not predicates:
                continue
            subject = self._endpoint_term(view.source)
            obj = self._endpoint_term(view.destination)
            if subject is None or obj is None:
                logger.warning("Connector #%s (%s -> %s): endpoint not in the configured vocabulary",
                               view.id, view.source.name, view.destination.name)
                continue
            for predicate in predicates:
                self.handler.record_relationship_fact(subject, predicate, obj)

    def predicates(self, view: ConnectorLike) -> List[Term]:
        found: List[Term] = []
        for key in (tags.URI, tags.LABEL):
            if key in self.tag_helper.mapping.multi_valued:
                terms = self.tag_helper.resolve_all(view, key, kind=TermKind.PROPERTY)
            else:
                term = self.tag_helper.resolve(view, key, kind=TermKind.PROPERTY)
                terms = [term] if term is not None else []
            for term in terms:
                if term not in found:
                    found.append(term)
        if not found and view.name:
            term = self.tag_helper.mapping.properties.get(view.name)
            if term is not None:
                found.append(term)
        return found

    def _endpoint_term(self, element: Element) -> Optional[URIRef]:
        if self.tag_helper.is_ignored(element):
            return None
        return self.element_term(element)
