# ea2rdf/ea_adapter.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional

try:
    import win32com.client  # type: ignore
except Exception:
    win32com = None  # type: ignore

from .errors import ModelReadError
from .models import Connector, Diagram, Direction, Element, Package, Tag, Tags
from .repository import MemoryRepository

logger = logging.getLogger(__name__)


class EAAdapter:
    """EA COM adapter → neutral models. All pywin32 lives here."""
    def __init__(self, path: Path, repo=None) -> None:
        self._path = Path(path)
        self._repo = repo
        self._owns_repo = repo is None
        self._elements: Dict[int, Element] = {}
        self._package_names: Dict[int, str] = {}

    def _ensure_repo(self):
        if self._repo is not None:
            return
        if win32com is None:
            raise ModelReadError("pywin32 is required. Install with: pip install pywin32")
        if not self._path.is_file():
            raise ModelReadError(f"EA project file not found: {self._path}")
        repo = win32com.client.Dispatch("EA.Repository")
        if not repo.OpenFile(str(self._path.resolve())):
            repo.Exit()
            raise ModelReadError(f"EA could not open {self._path}")
        self._repo = repo

    def load(self) -> MemoryRepository:
        try:
            self._ensure_repo()
            self._index_packages(self._repo.Models)
            packages = [self._package(m) for m in self._repo.Models]
        except ModelReadError:
            raise
        except Exception as e:  # COM errors surface as pywintypes.com_error
            raise ModelReadError(f"An error occurred while reading {self._path}: {e}") from e
        finally:
            self._close()
        repository = MemoryRepository(packages)
        logger.info("Loaded %s: %d diagrams", self._path, len(repository.diagrams))
        return repository

    def _close(self) -> None:
        if self._owns_repo and self._repo is not None:
            self._repo.CloseFile()
            self._repo.Exit()
            self._repo = None

    # ---------- packages ----------
    def _index_packages(self, packages) -> None:
        for pkg in packages:
            self._package_names[int(pkg.PackageID)] = pkg.Name or ""
            self._index_packages(pkg.Packages)

    def _package(self, pkg) -> Package:
        package = Package(id=int(pkg.PackageID), name=pkg.Name or "")
        for el in pkg.Elements:
            package.elements.append(self._element(el))
        for dia in pkg.Diagrams:
            package.diagrams.append(self._diagram(dia, package.name))
        for child in pkg.Packages:
            package.packages.append(self._package(child))
        return package

    # ---------- diagrams ----------
    def _diagram(self, dia, package_name: str) -> Diagram:
        diagram = Diagram(id=int(dia.DiagramID), name=dia.Name or "",
                          type=dia.Type or "", package=package_name)
        on_diagram = set()
        for d_obj in dia.DiagramObjects:
            el = self._element_by_id(int(d_obj.ElementID))
            if el is not None and el.id not in on_diagram:
                on_diagram.add(el.id)
                diagram.elements.append(el)

        for d_link in dia.DiagramLinks:
            if getattr(d_link, "IsHidden", False):
                continue
            conn = self._repo.GetConnectorByID(d_link.ConnectorID)
            c = self._connector(conn)
            if c is None:
                logger.debug("Skipping connector #%s on %r: unresolved endpoint",
                             d_link.ConnectorID, diagram.name)
                continue
            diagram.connectors.append(c)
        return diagram

    # ---------- elements / connectors ----------
    def _element_by_id(self, element_id: int) -> Optional[Element]:
        if not element_id:
            return None
        if element_id not in self._elements:
            el = self._repo.GetElementByID(element_id)
            if el is None:
                return None
            self._element(el)
        return self._elements[element_id]

    def _element(self, el) -> Element:
        element_id = int(el.ElementID)
        cached = self._elements.get(element_id)
        if cached is not None:
            return cached
        elem = Element(
            id=element_id,
            guid=str(el.ElementGUID),
            name=el.Name or "",
            type=el.Type or "",
            stereotype=getattr(el, "Stereotype", None) or None,
            package=self._package_names.get(int(getattr(el, "PackageID", 0) or 0)),
            tags=self._collect_tags(el),
        )
        self._elements[element_id] = elem
        return elem

    def _connector(self, conn) -> Optional[Connector]:
        source = self._element_by_id(int(conn.ClientID))
        destination = self._element_by_id(int(conn.SupplierID))
        if source is None or destination is None:
            return None
        assoc_id = self._association_class_id(conn)
        return Connector(
            id=int(conn.ConnectorID),
            name=getattr(conn, "Name", None) or None,
            type=conn.Type or "",
            source=source,
            destination=destination,
            direction=Direction.from_ea(getattr(conn, "Direction", None)),
            tags=self._collect_tags(conn),
            association_class=self._element_by_id(assoc_id) if assoc_id else None,
        )

    # ---------- helpers ----------
    @staticmethod
    def _association_class_id(conn) -> int:
        ident = int(getattr(conn, "AssociationClassElementID", 0) or 0)
        if not ident and (getattr(conn, "Subtype", "") or "") == "Class":
            ident = int(conn.MiscData(0) or 0)
        return ident

    @staticmethod
    def _collect_tags(obj) -> Tags:
        tags: List[Tag] = []
        for tv in obj.TaggedValues:
            name = getattr(tv, "Name", None)
            val = getattr(tv, "Value", None)
            if val is None or val == "<memo>":
                val = getattr(tv, "Notes", None)
            if name:
                tags.append(Tag(str(name), "" if val is None else str(val)))
        return tuple(tags)
