from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Protocol

from .mapping import Term


class OutputHandler(Protocol):
    def begin_run(self) -> None: ...
    def record_element_fact(self, subject: Term, predicate: Term, value: Term) -> None: ...
    def record_relationship_fact(self, subject: Term, predicate: Term, obj: Term) -> None: ...
    def finalize(self) -> str: ...
    def save(self, path: Path) -> Path: ...


_REGISTRY: Dict[str, type] = {}


def register(output_format: str) -> Callable[[type], type]:
    def deco(cls: type) -> type:
        _REGISTRY[output_format.strip().lower()] = cls
        return cls
    return deco


def resolve(output_format: str) -> type:
    key = (output_format or "").strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(f"No output handler registered for format: {output_format!r}")
