# ea2rdf/main.py
from __future__ import annotations
from pathlib import Path
from typing import Optional

from .config import Config
from .converter import Converter
from .ea_adapter import EAAdapter
from .handler_registry import resolve
from .handlers import rdf, tsv  # noqa: F401
from .mapping import load_mapping
from .repository import MemoryRepository, find_diagram
from .structure import print_structure
from .tags import TagHelper


def load_repository(path: Path) -> MemoryRepository:
    return EAAdapter(path).load()


def run(cfg: Config, repository: Optional[MemoryRepository] = None) -> Optional[Path]:
    if cfg.command == "list":
        print_structure(repository or load_repository(cfg.input), cfg.print_elements)
        return None

    mapping = load_mapping(cfg.config)
    repository = repository or load_repository(cfg.input)
    diagram = find_diagram(repository, cfg.diagram)

    Handler = resolve("rdf" if cfg.command == "convert" else cfg.command)
    if cfg.command == "convert":
        out = Handler(mapping, full_output=cfg.full_output)
        if cfg.base is not None:
            out.add_base(cfg.base)
    else:
        out = Handler(mapping)

    Converter(TagHelper(mapping), out).convert_diagram(diagram)
    return out.save(cfg.output)
