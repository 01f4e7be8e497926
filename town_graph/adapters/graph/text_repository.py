"""Text file road repository adapter.

Reads roads from a plain text file holding one record per line::

    RoadName,Weight;SourceTown;DestinationTown

Blank lines are ignored. Any other line that does not follow the format
aborts the import with a :class:`RoadImportError` pointing at the line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import RoadImportError
from ...domain.models import RoadRecord

FIELD_SEPARATOR = ";"
WEIGHT_SEPARATOR = ","


def parse_road_record(line: str) -> RoadRecord:
    """Parse a single ``RoadName,Weight;SourceTown;DestinationTown`` line.

    Raises:
        ValueError: If the line does not follow the format.
    """
    head, sep, towns = line.strip().partition(FIELD_SEPARATOR)
    if not sep:
        raise ValueError(f"missing {FIELD_SEPARATOR!r} separator")

    name, sep, weight_str = head.partition(WEIGHT_SEPARATOR)
    if not sep:
        raise ValueError(f"missing {WEIGHT_SEPARATOR!r} between road name and weight")

    source, sep, destination = towns.partition(FIELD_SEPARATOR)
    if not sep:
        raise ValueError("missing destination town")

    name, weight_str = name.strip(), weight_str.strip()
    source, destination = source.strip(), destination.strip()
    if not name or not source or not destination:
        raise ValueError("road name and both towns are required")

    weight = int(weight_str)
    if weight < 0:
        raise ValueError(f"negative weight {weight}")

    return RoadRecord(name=name, weight=weight, source=source, destination=destination)


@dataclass
class TextRoadRepository:
    """Road repository that loads from a delimited text file.

    This adapter implements RoadRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file name, encoding)
        path: Optional explicit file path, overriding the configured one
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    _records: Optional[List[RoadRecord]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def roads_path(self) -> Path:
        return self.path if self.path is not None else self.config.roads_path

    def load(self) -> Sequence[RoadRecord]:
        """Load every road record from the text file.

        Returns:
            The records in file order.

        Raises:
            RoadImportError: If the file cannot be read or a line is malformed.
        """
        if self._records is not None:
            return self._records

        path = self.roads_path
        self._logger.debug("Loading roads", extra={"roads_path": str(path)})

        records: List[RoadRecord] = []
        try:
            with path.open(encoding=self.config.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    try:
                        records.append(parse_road_record(line))
                    except ValueError as e:
                        raise RoadImportError(
                            f"Malformed road record at {path}:{line_number}",
                            cause=e,
                            file_path=str(path),
                            line_number=line_number,
                        )
        except (OSError, UnicodeDecodeError) as e:
            raise RoadImportError(
                f"Failed to read roads file {path}",
                cause=e,
                file_path=str(path),
            )

        self._records = records
        self._logger.info(
            "Roads loaded",
            extra={"roads_path": str(path), "records": len(records)},
        )
        return records

    def clear_cache(self) -> None:
        """Forget previously loaded records."""
        self._records = None
        self._logger.debug("Road cache cleared")
