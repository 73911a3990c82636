from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..handler_registry import register
from ..mapping import MappingConfig, Term
from ..renderer import TableWriter, save_text

logger = logging.getLogger(__name__)

MULTI_VALUE_SEPARATOR = ", "


@register("tsv")
class TSVOutputHandler:
    """
    One row per subject, one column per predicate seen during the run.

    Rows and columns keep first-seen order. Nothing is written before
    finalize(); save() is the only call touching the filesystem.
    """

    def __init__(self, mapping: MappingConfig) -> None:
        self.mapping = mapping
        self._rows: Dict[str, Dict[str, List[str]]] = {}
        self._columns: List[str] = []
        self._text: Optional[str] = None

    def begin_run(self) -> None:
        self._rows = {}
        self._columns = []
        self._text = None

    def record_element_fact(self, subject: Term, predicate: Term, value: Term) -> None:
        self._record(subject, predicate, value)

    def record_relationship_fact(self, subject: Term, predicate: Term, obj: Term) -> None:
        self._record(subject, predicate, obj)

    def _record(self, subject: Term, predicate: Term, value: Term) -> None:
        row = self._rows.setdefault(self.mapping.compact(subject), {})
        column = self.mapping.compact(predicate)
        if column not in self._columns:
            self._columns.append(column)
        cell = row.setdefault(column, [])
        text = self.mapping.compact(value)
        if text not in cell:
            cell.append(text)

    def finalize(self) -> str:
        table = TableWriter()
        table.header(["term"] + self._columns)
        for term, row in self._rows.items():
            table.writerow([term] + [MULTI_VALUE_SEPARATOR.join(row.get(c, [])) for c in self._columns])
        self._text = table.text()
        logger.debug("TSV table: %d rows, %d columns", len(self._rows), len(self._columns))
        return self._text

    def save(self, path: Path) -> Path:
        if self._text is None:
            self.finalize()
        return save_text(self._text, path)
