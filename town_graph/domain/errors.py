"""Typed domain errors for the town graph.

Invalid input is always signalled with one of these errors; expected
"not found" outcomes (missing town, missing road, unreachable town) are
reported through ``False``, ``None`` or empty results instead.

All errors inherit from TownGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TownGraphError(Exception):
    """Base error for the town graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(TownGraphError):
    """A required argument is missing or malformed.

    Attributes:
        argument: Name of the offending argument, when known
    """

    argument: str = ""


@dataclass
class UnknownTownError(InvalidInputError):
    """A town referenced by an operation is not part of the graph.

    Attributes:
        town_name: Name of the town that was not found
    """

    town_name: str = ""


@dataclass
class RoadImportError(TownGraphError):
    """The road import file could not be read or parsed.

    Attributes:
        file_path: Path to the import file
        line_number: 1-based line number of the malformed record, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class NoRouteFoundError(TownGraphError):
    """No path exists between the requested towns.

    Attributes:
        departure: Departure town name
        arrival: Arrival town name
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(TownGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
