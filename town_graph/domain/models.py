"""Domain models for the town graph.

Towns are identified by name only, and roads by their unordered pair of
towns: two roads joining the same towns are equal whatever their name or
weight. Result types are frozen dataclasses with slots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidInputError


@dataclass(order=True, slots=True)
class Town:
    """A graph vertex identified by its name.

    Equality, hashing and ordering all use ``name`` (case-sensitive).

    Attributes:
        name: Unique town name
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidInputError(
                f"Town name must be a string, got {type(self.name).__name__}",
                argument="name",
            )

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def rename(self, new_name: str) -> None:
        """Change the name of this town.

        Graphs index towns by name, so a town must not be renamed while it
        belongs to a graph: remove it first, rename it, then add it again.
        """
        if not isinstance(new_name, str):
            raise InvalidInputError("Town name must be a string", argument="name")
        self.name = new_name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """An undirected, weighted and named edge between two towns.

    Attributes:
        source: One end of the road
        destination: The other end of the road
        weight: Length of the road in miles (non-negative)
        name: Road name
    """

    source: Town
    destination: Town
    weight: int
    name: str

    def __post_init__(self) -> None:
        if self.source is None or self.destination is None:
            raise InvalidInputError("A road needs two towns", argument="town")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidInputError(
                f"Road weight must be an integer, got {self.weight!r}",
                argument="weight",
            )
        if self.weight < 0:
            raise InvalidInputError(
                f"Road weight must be non-negative, got {self.weight}",
                argument="weight",
            )

    @property
    def key(self) -> Tuple[str, str]:
        """Canonical (sorted) pair of endpoint names."""
        a, b = self.source.name, self.destination.name
        return (a, b) if a <= b else (b, a)

    def contains(self, town: Town) -> bool:
        """Check if ``town`` is one of the two ends of this road."""
        return self.source == town or self.destination == town

    def other(self, town: Town) -> Town:
        """Return the end of this road opposite ``town``."""
        if self.destination == town:
            return self.source
        return self.destination

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.source) + hash(self.destination)

    def __lt__(self, other: Road) -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"{self.name} {self.source.name} {self.destination.name}"


@dataclass(frozen=True, slots=True)
class RoadRecord:
    """A single road read from an import source.

    Attributes:
        name: Road name
        weight: Road length in miles
        source: Name of the first town
        destination: Name of the second town
    """

    name: str
    weight: int
    source: str
    destination: str


@dataclass(frozen=True, slots=True)
class PathHop:
    """One road travelled along a shortest path.

    Attributes:
        source: Town the hop leaves from
        road: Road used for the hop
        destination: Town the hop arrives at
    """

    source: Town
    road: Road
    destination: Town

    @property
    def weight(self) -> int:
        return self.road.weight

    def describe(self) -> str:
        """Format the hop as ``"<Source> via <Road> to <Dest> <Weight> mi"``."""
        return (
            f"{self.source.name} via {self.road.name} to "
            f"{self.destination.name} {self.road.weight} mi"
        )


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest path query between two towns.

    Attributes:
        path: Ordered tuple of town names from departure to arrival
        hops: Roads travelled, in order
        total_distance: Sum of hop weights, ``inf`` when unreachable
    """

    path: tuple[str, ...]
    hops: tuple[PathHop, ...] = field(default_factory=tuple)
    total_distance: float = float("inf")

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.hops) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of towns along the route."""
        return len(self.path)

    def descriptions(self) -> list[str]:
        """Return the formatted hop strings in travel order."""
        return [hop.describe() for hop in self.hops]
