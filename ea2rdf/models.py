from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Id = int  # EA model ElementID / ConnectorID / DiagramID / PackageID


@dataclass(frozen=True)
class Tag:
    key: str
    value: str


Tags = Tuple[Tag, ...]  # keys may repeat; model order


@dataclass(frozen=True)
class Element:
    id: Id                  # EA model ElementID
    guid: str               # EA.Element.ElementGUID
    name: str
    type: str               # EA.Element.Type ("Class", "Enumeration", "DataType", ...)
    stereotype: Optional[str] = None
    package: Optional[str] = None
    tags: Tags = ()


class Direction(Enum):
    SOURCE_TO_DEST = "Source -> Destination"
    DEST_TO_SOURCE = "Destination -> Source"

    @classmethod
    def from_ea(cls, value: Optional[str]) -> "Direction":
        # Bi-Directional and Unspecified are read as drawn
        if (value or "").strip().lower() == "destination -> source":
            return cls.DEST_TO_SOURCE
        return cls.SOURCE_TO_DEST


@dataclass(frozen=True)
class Connector:
    id: Id
    name: Optional[str]
    type: str               # EA.Connector.Type
    source: Element         # ClientID end
    destination: Element    # SupplierID end
    direction: Direction = Direction.SOURCE_TO_DEST
    tags: Tags = ()
    association_class: Optional[Element] = None


class ConnectionPart(Enum):
    SOURCE_TO_ASSOCIATION = "source-to-association"
    ASSOCIATION_TO_SOURCE = "association-to-source"
    ASSOCIATION_TO_DESTINATION = "association-to-destination"
    DESTINATION_TO_ASSOCIATION = "destination-to-association"


@dataclass(frozen=True)
class NormalizedConnector:
    """
    One leg of a connector with an association class.

    Reads through to the wrapped connector: tags are the ones whose key
    starts with `prefix`, returned with the prefix removed.
    """
    connector: Connector
    part: ConnectionPart
    prefix: str

    @property
    def id(self) -> Id:
        return self.connector.id

    @property
    def name(self) -> Optional[str]:
        return None

    @property
    def type(self) -> str:
        return self.connector.type

    @property
    def direction(self) -> Direction:
        return self.connector.direction

    @property
    def association_class(self) -> Optional[Element]:
        return None

    @property
    def source(self) -> Element:
        if self.part is ConnectionPart.SOURCE_TO_ASSOCIATION:
            return self.connector.source
        if self.part is ConnectionPart.DESTINATION_TO_ASSOCIATION:
            return self.connector.destination
        return self.connector.association_class

    @property
    def destination(self) -> Element:
        if self.part is ConnectionPart.ASSOCIATION_TO_SOURCE:
            return self.connector.source
        if self.part is ConnectionPart.ASSOCIATION_TO_DESTINATION:
            return self.connector.destination
        return self.connector.association_class

    @property
    def tags(self) -> Tags:
        n = len(self.prefix)
        return tuple(Tag(t.key[n:], t.value) for t in self.connector.tags
                     if t.key.startswith(self.prefix))


@dataclass
class Diagram:
    id: Id
    name: str
    type: str
    package: Optional[str] = None
    elements: List[Element] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)


@dataclass
class Package:
    id: Id
    name: str
    packages: List["Package"] = field(default_factory=list)
    diagrams: List[Diagram] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)
