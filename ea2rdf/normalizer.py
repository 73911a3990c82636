from __future__ import annotations
from typing import List, Union

from .models import ConnectionPart, Connector, Direction, NormalizedConnector
from .tags import (
    ASSOCIATION_DEST_PREFIX,
    ASSOCIATION_DEST_REV_PREFIX,
    ASSOCIATION_SOURCE_PREFIX,
    ASSOCIATION_SOURCE_REV_PREFIX,
)

ConnectorLike = Union[Connector, NormalizedConnector]

_PREFIXES = (
    ASSOCIATION_SOURCE_PREFIX,
    ASSOCIATION_SOURCE_REV_PREFIX,
    ASSOCIATION_DEST_PREFIX,
    ASSOCIATION_DEST_REV_PREFIX,
)

_PARTS = (
    ConnectionPart.SOURCE_TO_ASSOCIATION,
    ConnectionPart.ASSOCIATION_TO_SOURCE,
    ConnectionPart.ASSOCIATION_TO_DESTINATION,
    ConnectionPart.DESTINATION_TO_ASSOCIATION,
)


def normalize(connector: Connector, direction: Direction) -> List[ConnectorLike]:
    """
    Split a connector carrying an association class into its four legs.

    A connector without association class comes back as-is in a one-item
    list. Otherwise four views are returned, paired position by position
    with the association tag prefixes. `direction` decides which end is the
    semantic source: for DEST_TO_SOURCE the parts are reversed so that the
    ASSOCIATION_SOURCE_PREFIX tags always describe the leg between the
    semantic source and the association class.
    """
    if connector.association_class is None:
        return [connector]

    parts = list(_PARTS)
    if direction is Direction.DEST_TO_SOURCE:
        parts.reverse()

    return [NormalizedConnector(connector, part, prefix)
            for part, prefix in zip(parts, _PREFIXES)]
