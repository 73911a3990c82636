"""
Tests for the command line (ea2rdf/cli.py, ea2rdf/main.py).

The EA model loader is replaced by the in-memory repository fixture.
"""

import json

import pytest
from rdflib import Graph, URIRef

from conftest import EX, SAMPLE_MAPPING
from ea2rdf import cli, main
from ea2rdf.errors import ModelReadError


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(SAMPLE_MAPPING), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def fake_loader(monkeypatch, repository):
    monkeypatch.setattr(main, "load_repository", lambda path: repository)


class TestConvert:

    def test_convert(self, tmp_path, config_file):
        out = tmp_path / "out" / "model.ttl"
        code = cli.main(["convert", "-i", "model.eap", "-c", str(config_file),
                         "-d", "Main", "-o", str(out)])
        assert code == 0
        g = Graph().parse(str(out), format="turtle")
        assert (URIRef(EX + "Person"), URIRef(EX + "role"), URIRef(EX + "Membership")) in g

    def test_convert_with_base(self, tmp_path, config_file):
        base = tmp_path / "base.ttl"
        base.write_text(f"<{EX}Ontology> <{EX}version> \"1\" .\n", encoding="utf-8")
        out = tmp_path / "model.ttl"
        code = cli.main(["convert", "-i", "model.eap", "-c", str(config_file), "-b", str(base),
                         "-d", "Main", "-o", str(out), "--full"])
        assert code == 0
        g = Graph().parse(str(out), format="turtle")
        assert (URIRef(EX + "Ontology"), URIRef(EX + "version"), None) in g

    def test_tsv(self, tmp_path, config_file):
        out = tmp_path / "terms.tsv"
        code = cli.main(["tsv", "-i", "model.eap", "-c", str(config_file),
                         "-d", "Main", "-o", str(out)])
        assert code == 0
        assert out.read_text(encoding="utf-8").splitlines()[0].startswith("term\t")


class TestFailures:

    def test_unknown_diagram(self, tmp_path, config_file):
        out = tmp_path / "model.ttl"
        code = cli.main(["convert", "-i", "model.eap", "-c", str(config_file),
                         "-d", "Nope", "-o", str(out)])
        assert code == 1
        assert not out.exists()

    def test_invalid_configuration(self, tmp_path):
        bad = tmp_path / "config.json"
        bad.write_text("{}", encoding="utf-8")
        out = tmp_path / "terms.tsv"
        code = cli.main(["tsv", "-i", "model.eap", "-c", str(bad), "-d", "Main", "-o", str(out)])
        assert code == 1
        assert not out.exists()

    def test_model_read_error(self, monkeypatch, tmp_path, config_file):
        def fail(path):
            raise ModelReadError("broken file")
        monkeypatch.setattr(main, "load_repository", fail)
        code = cli.main(["convert", "-i", "model.eap", "-c", str(config_file),
                         "-d", "Main", "-o", str(tmp_path / "x.ttl")])
        assert code == 1

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["convert", "-i", "model.eap"])
        assert exc.value.code == 2


class TestList:

    def test_list(self, capsys):
        assert cli.main(["list", "-i", "model.eap"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Package: Model",
            "  Diagram: Main",
            "  Package: Sub",
            "    Diagram: Other",
        ]

    def test_list_full_prints_mapped_element_types(self, capsys):
        assert cli.main(["list", "-i", "model.eap", "--full"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Package: Model",
            "  Diagram: Main",
            "  Class: Person",
            "  Package: Sub",
            "    Diagram: Other",
        ]
        assert "Read me" not in out
