"""Controller-indexed view over the connections aimed at one target."""
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from domain.modulation import Connection, ConnectionParameters, ModulationTarget, Region

logger = logging.getLogger(__name__)


class RoutingError(Exception):
    """Base error for routing lookups."""


class ConnectionNotFoundError(RoutingError, KeyError):
    """Raised when no connection links the requested controller and target."""

    def __init__(self, target: ModulationTarget, cc: int) -> None:
        super().__init__(f"No connection from controller {cc} to {target.label!r}")
        self.target = target
        self.cc = cc

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class ConnectionIndex:
    """Query the connections of a region that modulate a single target.

    The matching connections are captured when the index is built, so later
    edits to the region's connection list do not show through. Lookups walk
    the captured connections in declaration order and the first declared
    connection wins when several route the same controller to the target;
    :meth:`matches` returns all of them.
    """

    def __init__(self, region: Region, target: ModulationTarget) -> None:
        self._target = target
        self._connections: Tuple[Connection, ...] = tuple(
            connection for connection in region.connections if self._match(connection)
        )
        logger.debug(
            "Indexed %d of %d connections of region %s for %s",
            len(self._connections),
            len(region.connections),
            region.id,
            target.label,
        )

    @property
    def target(self) -> ModulationTarget:
        return self._target

    def _match(self, connection: Connection) -> bool:
        return connection.target == self._target

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------
    def size(self) -> int:
        """Return the number of connections aimed at the target."""

        return len(self._connections)

    def empty(self) -> bool:
        return self.size() == 0

    def matches(self, cc: int) -> List[Connection]:
        """Return every connection from controller *cc*, in declaration order."""

        return [
            connection
            for connection in self._connections
            if connection.source.is_controller and connection.source.cc == cc
        ]

    def at(self, cc: int) -> ConnectionParameters:
        """Return the shaping parameters of the first connection from *cc*.

        Raises :class:`ConnectionNotFoundError` when the controller does not
        modulate the target.
        """

        for connection in self._connections:
            if connection.source.is_controller and connection.source.cc == cc:
                return connection.parameters
        raise ConnectionNotFoundError(self._target, cc)

    def value_at(self, cc: int) -> float:
        """Return the depth of the connection found by :meth:`at`."""

        return self.at(cc).depth

    def controllers(self) -> List[int]:
        """Return the controllers modulating the target, in first-seen order."""

        seen: List[int] = []
        for connection in self._connections:
            cc = connection.source.cc
            if connection.source.is_controller and cc not in seen:
                seen.append(cc)
        return seen

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Connection]:
        return iter(self._connections)

    def __contains__(self, cc: object) -> bool:
        return any(
            connection.source.is_controller and connection.source.cc == cc
            for connection in self._connections
        )

    def __repr__(self) -> str:
        return f"ConnectionIndex(target={self._target.label!r}, size={self.size()})"


__all__ = ["ConnectionIndex", "ConnectionNotFoundError", "RoutingError"]
