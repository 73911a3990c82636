"""
Mapping configuration: which tag values become which RDF terms.

The configuration is a JSON document:

    {
      "prefixes":    {"ex": "http://example.org/ns#"},
      "resources":   {"Person": "ex:Person"},
      "properties":  {"hasRole": "ex:role"},
      "annotations": [{"tag": "definition", "predicate": "skos:definition", "lang": "en"}],
      "multiValued": ["label"],
      "internal":    ["ex"]
    }

Only "prefixes" is required. Table values are prefixed names or absolute IRIs
and are expanded once, at load time.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from rdflib import OWL, RDF, RDFS, XSD, Literal, URIRef

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

Term = Union[URIRef, Literal]

WELL_KNOWN_PREFIXES: Dict[str, str] = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "owl": str(OWL),
    "xsd": str(XSD),
}

_ABSOLUTE_SCHEMES = ("http://", "https://", "urn:")


@dataclass(frozen=True)
class Annotation:
    tag: str
    predicate: URIRef
    lang: Optional[str] = None
    datatype: Optional[URIRef] = None
    multiple: bool = False


@dataclass
class MappingConfig:
    prefixes: Dict[str, str]
    resources: Dict[str, URIRef] = field(default_factory=dict)
    properties: Dict[str, URIRef] = field(default_factory=dict)
    annotations: List[Annotation] = field(default_factory=list)
    multi_valued: Set[str] = field(default_factory=set)
    internal: List[str] = field(default_factory=list)  # namespace IRIs

    def expand(self, value: str) -> Optional[URIRef]:
        """Prefixed name or absolute IRI → URIRef; None when it is neither."""
        value = (value or "").strip()
        if value.startswith(_ABSOLUTE_SCHEMES):
            return URIRef(value)
        if ":" not in value:
            return None
        prefix, local = value.split(":", 1)
        ns = self.prefixes.get(prefix)
        if ns is None:
            return None
        return URIRef(ns + local)

    def compact(self, term: Term) -> str:
        if isinstance(term, Literal):
            return str(term)
        text = str(term)
        best = None
        for prefix, ns in self.prefixes.items():
            if text.startswith(ns) and (best is None or len(ns) > len(best[1])):
                best = (prefix, ns)
        if best is None:
            return text
        return f"{best[0]}:{text[len(best[1]):]}"

    def is_internal(self, term: Term) -> bool:
        if not self.internal:
            return True
        return any(str(term).startswith(ns) for ns in self.internal)

    def annotation_for(self, tag: str) -> Optional[Annotation]:
        for a in self.annotations:
            if a.tag == tag:
                return a
        return None


def load_mapping(path: Path) -> MappingConfig:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            text = f.read()
        if not text.strip():
            raise InvalidConfigurationError("Empty configuration file.")
        data = json.loads(text)
    except OSError as e:
        raise InvalidConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except ValueError as e:
        raise InvalidConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e
    cfg = parse_mapping(data)
    logger.debug("Loaded configuration %s: %d prefixes, %d resources, %d properties",
                 path, len(cfg.prefixes), len(cfg.resources), len(cfg.properties))
    return cfg


def parse_mapping(data: Any) -> MappingConfig:
    if not data:
        raise InvalidConfigurationError("Empty configuration file.")
    if not isinstance(data, dict):
        raise InvalidConfigurationError("Configuration must be a JSON object.")

    declared = _table(data, "prefixes", required=True)
    if not declared:
        raise InvalidConfigurationError("Configuration declares no prefixes.")
    prefixes = dict(WELL_KNOWN_PREFIXES)
    prefixes.update({str(k): str(v) for k, v in declared.items()})
    cfg = MappingConfig(prefixes=prefixes)

    cfg.resources = {str(k): _term(cfg, v, "resources")
                     for k, v in _table(data, "resources").items()}
    cfg.properties = {str(k): _term(cfg, v, "properties")
                      for k, v in _table(data, "properties").items()}

    annotations = data.get("annotations", [])
    if not isinstance(annotations, list):
        raise InvalidConfigurationError("'annotations' must be a list.")
    for entry in annotations:
        if not isinstance(entry, dict) or "tag" not in entry or "predicate" not in entry:
            raise InvalidConfigurationError(
                f"Annotation entries need 'tag' and 'predicate': {entry!r}")
        datatype = entry.get("datatype")
        cfg.annotations.append(Annotation(
            tag=str(entry["tag"]),
            predicate=_term(cfg, entry["predicate"], "annotations"),
            lang=entry.get("lang") or None,
            datatype=_term(cfg, datatype, "annotations") if datatype else None,
            multiple=bool(entry.get("multiple", False)),
        ))

    cfg.multi_valued = set(_names(data, "multiValued"))
    cfg.multi_valued.update(a.tag for a in cfg.annotations if a.multiple)

    for prefix in _names(data, "internal"):
        ns = cfg.prefixes.get(prefix)
        if ns is None:
            raise InvalidConfigurationError(f"'internal' names undeclared prefix {prefix!r}.")
        cfg.internal.append(ns)
    return cfg


def _table(data: Dict[str, Any], key: str, required: bool = False) -> Dict[str, Any]:
    if key not in data:
        if required:
            raise InvalidConfigurationError(f"Missing '{key}' in configuration.")
        return {}
    value = data[key]
    if not isinstance(value, dict):
        raise InvalidConfigurationError(f"'{key}' must be a JSON object.")
    return value


def _names(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise InvalidConfigurationError(f"'{key}' must be a list.")
    return [str(v) for v in value]


def _term(cfg: MappingConfig, value: Any, table: str) -> URIRef:
    term = cfg.expand(str(value)) if isinstance(value, str) else None
    if term is None:
        raise InvalidConfigurationError(
            f"Value {value!r} in '{table}' is not an IRI or a prefixed name with a declared prefix.")
    return term
