"""Race result containers for the rally championship engine.

Recording a result credits the driver's championship total immediately,
so standings reflect every ``record_result`` call rather than the
contents of any race's entry list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from rally_engine.core.driver import Driver

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result protocol
# ---------------------------------------------------------------------------


class RaceResult(Protocol):
    """Operations every race type exposes to the championship."""

    def record_result(self, driver: Driver, position: int, points: int) -> None: ...

    def get_results(self) -> str: ...


@dataclass(frozen=True)
class ResultEntry:
    """One classified finisher of a race.

    Attributes:
        driver: Driver the result belongs to.
        position: Finishing position (1 = winner).
        points: Points awarded for this race.
    """

    driver: Driver
    position: int
    points: int


# ---------------------------------------------------------------------------
# Rally race
# ---------------------------------------------------------------------------


class RallyRaceResult:
    """Result sheet for a single rally.

    Entries are kept in insertion order.  Duplicate positions, repeated
    drivers and any points value are accepted as given.
    """

    __slots__ = ("race_name", "location", "_entries")

    def __init__(self, race_name: str, location: str) -> None:
        self.race_name: str = race_name
        self.location: str = location
        self._entries: list[ResultEntry] = []

    @property
    def entries(self) -> tuple[ResultEntry, ...]:
        return tuple(self._entries)

    def record_result(self, driver: Driver, position: int, points: int) -> None:
        """Append a result and credit *points* to *driver*."""
        if any(entry.position == position for entry in self._entries):
            logger.warning(
                "%s: position %d recorded more than once (%s)",
                self.race_name,
                position,
                driver.name,
            )
        self._entries.append(ResultEntry(driver, position, points))
        driver.add_points(points)
        logger.debug(
            "%s: %s P%d, %d points", self.race_name, driver.name, position, points
        )

    def get_results(self) -> str:
        """Render the classification sorted by position.

        Ties on position keep their recording order.
        """
        ordered = sorted(self._entries, key=lambda e: e.position)
        lines = [f"Race: {self.race_name} ({self.location})\n"]
        for entry in ordered:
            lines.append(
                f" Position {entry.position}: {entry.driver.name} - "
                f"{entry.points} points\n"
            )
        return "".join(lines)

    def __repr__(self) -> str:
        return (
            f"RallyRaceResult(race_name={self.race_name!r}, "
            f"location={self.location!r}, entries={len(self._entries)})"
        )
