from __future__ import annotations
import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


class TableWriter:
    """
    Pure row builder. Only `save_text()` touches the filesystem.
    """
    def __init__(self, delimiter: str = "\t"):
        self._delimiter = delimiter
        self._header: Optional[List[str]] = None
        self._rows: List[List[str]] = []

    def header(self, columns: Iterable[str]) -> None:
        self._header = list(columns)

    def writerow(self, row: Iterable[str]) -> None:
        self._rows.append(list(row))

    def text(self) -> str:
        buf = io.StringIO()
        w = csv.writer(buf, delimiter=self._delimiter, lineterminator="\n")
        if self._header is not None:
            w.writerow(self._header)
        w.writerows(self._rows)
        return buf.getvalue()


def save_text(text: str, path: Path) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %s", path)
    return path
