"""
ea2rdf package – EA diagram → RDF / TSV converter.

Responsibilities:
 - COM access isolated in ea_adapter.py
 - Pure data models in models.py, package tree lookup in repository.py
 - Association-class splitting in normalizer.py
 - Tag → term resolution in tags.py, driven by the JSON mapping in mapping.py
 - Diagram walk in converter.py
 - Output formats in handlers/* (rdf, tsv), looked up through handler_registry.py
 - CLI wiring in cli.py, run orchestration in main.py
"""
__all__ = [
    "cli",
    "config",
    "converter",
    "ea_adapter",
    "errors",
    "handler_registry",
    "handlers",
    "main",
    "mapping",
    "models",
    "normalizer",
    "renderer",
    "repository",
    "structure",
    "tags",
]
