"""
Tests for tag lookup and term resolution (ea2rdf/tags.py).
"""

import logging

from rdflib import Literal, URIRef

from conftest import EX, make_connector, make_element
from ea2rdf.models import Direction
from ea2rdf.normalizer import normalize
from ea2rdf.tags import ASSOCIATION_SOURCE_PREFIX, TermKind


class TestValues:

    def test_values_in_model_order(self, tag_helper):
        el = make_element(1, "E", tags=[("label", "a"), ("other", "x"), ("label", "b")])
        assert tag_helper.values(el, "label") == ["a", "b"]
        assert tag_helper.values(el, "missing") == []

    def test_single_value_last_wins(self, tag_helper, caplog):
        el = make_element(1, "E", tags=[("label", "a"), ("label", "b")])
        with caplog.at_level(logging.WARNING):
            assert tag_helper.single_value(el, "label") == "b"
        assert "occurs 2 times" in caplog.text

    def test_multi_valued_no_warning(self, tag_helper, caplog):
        el = make_element(1, "E", tags=[("altLabel", "a"), ("altLabel", "b")])
        with caplog.at_level(logging.WARNING):
            tag_helper.single_value(el, "altLabel")
        assert caplog.text == ""

    def test_prefix_argument(self, tag_helper, person, organization, membership):
        conn = make_connector(1, person, organization, association_class=membership,
                              tags=[("assocSource:label", "hasRole")])
        assert tag_helper.single_value(conn, "label", ASSOCIATION_SOURCE_PREFIX) == "hasRole"
        assert tag_helper.single_value(conn, "label") is None

    def test_empty_view_tags(self, tag_helper, person, organization, membership):
        conn = make_connector(1, person, organization, association_class=membership)
        for view in normalize(conn, Direction.SOURCE_TO_DEST):
            assert tag_helper.values(view, "label") == []
            assert tag_helper.resolve(view, "label", kind=TermKind.PROPERTY) is None


class TestResolve:

    def test_property_table(self, tag_helper):
        el = make_element(1, "E", tags=[("label", "hasRole")])
        assert tag_helper.resolve(el, "label", kind=TermKind.PROPERTY) == URIRef(EX + "role")

    def test_resource_table(self, tag_helper):
        el = make_element(1, "E", tags=[("uri", "Person")])
        assert tag_helper.resolve(el, "uri") == URIRef(EX + "Person")

    def test_prefixed_name_expanded(self, tag_helper):
        el = make_element(1, "E", tags=[("uri", "ex:Custom")])
        assert tag_helper.resolve(el, "uri") == URIRef(EX + "Custom")

    def test_unmapped_value_is_absent(self, tag_helper):
        el = make_element(1, "E", tags=[("label", "notMapped")])
        assert tag_helper.resolve(el, "label", kind=TermKind.PROPERTY) is None

    def test_unknown_prefix_is_absent_with_warning(self, tag_helper, caplog):
        el = make_element(1, "E", tags=[("uri", "zz:Thing")])
        with caplog.at_level(logging.WARNING):
            assert tag_helper.resolve(el, "uri") is None
        assert "unknown prefix" in caplog.text

    def test_literal_with_language(self, tag_helper):
        el = make_element(1, "E", tags=[("definition", "A thing")])
        term = tag_helper.resolve(el, "definition", kind=TermKind.LITERAL)
        assert term == Literal("A thing", lang="en")

    def test_literal_without_annotation(self, tag_helper):
        el = make_element(1, "E", tags=[("note", "plain")])
        assert tag_helper.resolve(el, "note", kind=TermKind.LITERAL) == Literal("plain")

    def test_resolve_all_dedupes(self, tag_helper):
        el = make_element(1, "E", tags=[("label", "hasRole"), ("label", "ex:role"),
                                        ("label", "memberOf"), ("label", "nothing")])
        terms = tag_helper.resolve_all(el, "label", kind=TermKind.PROPERTY)
        assert terms == [URIRef(EX + "role"), URIRef(EX + "memberOf")]


class TestIgnore:

    def test_ignored(self, tag_helper):
        assert tag_helper.is_ignored(make_element(1, "E", tags=[("ignore", "TRUE")]))
        assert not tag_helper.is_ignored(make_element(1, "E", tags=[("ignore", "no")]))
        assert not tag_helper.is_ignored(make_element(1, "E"))
