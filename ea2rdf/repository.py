from __future__ import annotations
from typing import Iterator, List, Sequence

from .errors import AmbiguousDiagramError, DiagramNotFoundError
from .models import Diagram, Package


class MemoryRepository:
    """Read-only package tree as loaded from the EA project."""

    def __init__(self, packages: Sequence[Package]) -> None:
        self._packages = list(packages)

    @property
    def packages(self) -> List[Package]:
        return list(self._packages)

    @property
    def diagrams(self) -> List[Diagram]:
        return list(self._walk_diagrams(self._packages))

    def _walk_diagrams(self, packages: Sequence[Package]) -> Iterator[Diagram]:
        for pkg in packages:
            yield from pkg.diagrams
            yield from self._walk_diagrams(pkg.packages)


def find_diagram(repository, name: str) -> Diagram:
    if name is None:
        raise TypeError("diagram name is required")
    matches = [d for d in repository.diagrams if d.name == name]
    if len(matches) > 1:
        raise AmbiguousDiagramError(f'Multiple diagrams share the name "{name}" - cannot continue.')
    if not matches:
        raise DiagramNotFoundError(f"Diagram not found: {name}.")
    return matches[0]
