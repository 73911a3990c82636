"""
Pytest configuration and shared fixtures.

Models are built in memory; nothing here needs Enterprise Architect.
"""

import os
import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
root_dir = os.path.join(os.path.dirname(__file__), '..')
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

from ea2rdf.mapping import parse_mapping
from ea2rdf.models import Connector, Diagram, Direction, Element, Package, Tag
from ea2rdf.repository import MemoryRepository
from ea2rdf.tags import TagHelper


EX = "http://example.org/ns#"

SAMPLE_MAPPING = {
    "prefixes": {
        "ex": EX,
        "skos": "http://www.w3.org/2004/02/skos/core#",
        "other": "http://other.example.com/",
    },
    "resources": {
        "Person": "ex:Person",
        "Organization": "ex:Organization",
        "Membership": "ex:Membership",
    },
    "properties": {
        "hasRole": "ex:role",
        "memberOf": "ex:memberOf",
        "worksFor": "ex:worksFor",
    },
    "annotations": [
        {"tag": "definition", "predicate": "skos:definition", "lang": "en"},
        {"tag": "altLabel", "predicate": "skos:altLabel", "multiple": True},
    ],
    "internal": ["ex"],
}


class RecordingHandler:
    """Output handler keeping every call in order."""

    def __init__(self):
        self.calls = []

    def begin_run(self):
        self.calls.append(("begin",))

    def record_element_fact(self, subject, predicate, value):
        self.calls.append(("element", subject, predicate, value))

    def record_relationship_fact(self, subject, predicate, obj):
        self.calls.append(("relationship", subject, predicate, obj))

    def finalize(self):
        self.calls.append(("finalize",))
        return "done"

    def save(self, path):
        return Path(path)

    @property
    def element_facts(self):
        return [c[1:] for c in self.calls if c[0] == "element"]

    @property
    def relationship_facts(self):
        return [c[1:] for c in self.calls if c[0] == "relationship"]


def make_element(id, name, type="Class", tags=()):
    return Element(id=id, guid=f"{{GUID-{id}}}", name=name, type=type,
                   tags=tuple(Tag(k, v) for k, v in tags))


def make_connector(id, source, destination, tags=(), association_class=None,
                   direction=Direction.SOURCE_TO_DEST, name=None):
    return Connector(id=id, name=name, type="Association", source=source,
                     destination=destination, direction=direction,
                     tags=tuple(Tag(k, v) for k, v in tags),
                     association_class=association_class)


@pytest.fixture
def mapping():
    return parse_mapping(SAMPLE_MAPPING)


@pytest.fixture
def tag_helper(mapping):
    return TagHelper(mapping)


@pytest.fixture
def recorder():
    return RecordingHandler()


@pytest.fixture
def person():
    return make_element(1, "Person", tags=[("definition", "A human being")])


@pytest.fixture
def organization():
    return make_element(2, "Organization")


@pytest.fixture
def membership():
    return make_element(3, "Membership")


@pytest.fixture
def association_diagram(person, organization, membership):
    conn = make_connector(
        10, person, organization,
        tags=[("assocSource:label", "hasRole")],
        association_class=membership,
    )
    return Diagram(id=100, name="Main", type="Logical",
                   elements=[person, organization, membership],
                   connectors=[conn])


@pytest.fixture
def repository(association_diagram, person):
    other = Diagram(id=101, name="Other", type="Logical")
    note = make_element(50, "Read me", type="Note")
    root = Package(id=1, name="Model", diagrams=[association_diagram], elements=[person, note],
                   packages=[Package(id=2, name="Sub", diagrams=[other])])
    return MemoryRepository([root])
