from __future__ import annotations
import sys
from typing import Optional, Sequence, TextIO

from .converter import ELEMENT_TYPE_TO_RDF
from .models import Package

_INDENT = "  "


def print_structure(repository, print_elements: bool = False, out: Optional[TextIO] = None) -> None:
    """Print the package tree with its diagrams (and elements when asked)."""
    out = out or sys.stdout
    _print_packages(repository.packages, 0, print_elements, out)


def _print_packages(packages: Sequence[Package], depth: int, print_elements: bool, out: TextIO) -> None:
    pad = _INDENT * depth
    for pkg in packages:
        out.write(f"{pad}Package: {pkg.name}\n")
        for dia in pkg.diagrams:
            out.write(f"{pad}{_INDENT}Diagram: {dia.name}\n")
        if print_elements:
            for el in pkg.elements:
                if el.type in ELEMENT_TYPE_TO_RDF:
                    out.write(f"{pad}{_INDENT}{el.type}: {el.name}\n")
        _print_packages(pkg.packages, depth + 1, print_elements, out)
