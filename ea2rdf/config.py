from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    # Mirrors the CLI flags (names kept identical)
    command: str                         # list | convert | tsv
    input: Path                          # -i / --input (EA project file)
    diagram: Optional[str] = None        # -d / --diagram
    config: Optional[Path] = None        # -c / --config (JSON mapping)
    output: Optional[Path] = None        # -o / --output
    base: Optional[Path] = None          # -b / --base (convert only, Turtle)
    full_output: bool = False            # -f / --full (convert only)
    print_elements: bool = False         # --full (list only)
    log_level: str = "INFO"              # --log-level
