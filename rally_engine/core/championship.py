"""Championship registry for the rally championship engine.

The :class:`ChampionshipManager` holds every registered driver and every
completed race of one championship.  Instances are constructed
explicitly and passed to whatever needs them, so independent
championships can coexist (e.g. one per test).
"""

from __future__ import annotations

import logging

import pandas as pd

from rally_engine.core.driver import Driver
from rally_engine.core.race import RaceResult

logger = logging.getLogger(__name__)

_STANDINGS_COLUMNS: list[str] = ["rank", "name", "country", "car", "points"]


class ChampionshipManager:
    """Registry of drivers and races for a single championship.

    Attributes:
        total_drivers: Number of ``register_driver`` calls so far.
        total_races: Number of ``add_race_result`` calls so far.
    """

    __slots__ = ("_drivers", "_races", "total_drivers", "total_races")

    def __init__(self) -> None:
        self._drivers: list[Driver] = []
        self._races: list[RaceResult] = []
        self.total_drivers: int = 0
        self.total_races: int = 0

    # -- Mutation -------------------------------------------------------------

    def register_driver(self, driver: Driver) -> None:
        """Add *driver* to the championship.  Duplicates are not detected."""
        self._drivers.append(driver)
        self.total_drivers += 1
        logger.debug("Registered driver %s (%s)", driver.name, driver.country)

    def add_race_result(self, race: RaceResult) -> None:
        """Add a completed race to the championship."""
        self._races.append(race)
        self.total_races += 1
        logger.debug("Added race %r (%d total)", race, self.total_races)

    # -- Queries --------------------------------------------------------------

    def get_drivers(self) -> list[Driver]:
        return list(self._drivers)

    def get_races(self) -> list[RaceResult]:
        return list(self._races)

    def _ranked_drivers(self) -> list[Driver]:
        # sorted() is stable: equal totals keep registration order.
        return sorted(self._drivers, key=lambda d: d.total_points, reverse=True)

    def get_standings(self) -> str:
        """Render the standings, highest points first.

        Each line reads ``"{rank}. {name} ({country}): {points} points"``
        with 1-based ranks.  Drivers level on points keep the order in
        which they were registered.
        """
        lines = [
            f"{rank}. {d.name} ({d.country}): {d.total_points} points\n"
            for rank, d in enumerate(self._ranked_drivers(), start=1)
        ]
        return "".join(lines)

    def standings_frame(self) -> pd.DataFrame:
        """Return the standings as a DataFrame in ``get_standings`` order."""
        rows = [
            {
                "rank": rank,
                "name": d.name,
                "country": d.country,
                "car": d.car.label,
                "points": d.total_points,
            }
            for rank, d in enumerate(self._ranked_drivers(), start=1)
        ]
        return pd.DataFrame(rows, columns=_STANDINGS_COLUMNS)

    def get_leading_driver(self) -> Driver | None:
        """Return the points leader, or ``None`` with no drivers registered.

        When several drivers share the top total, the one registered first
        is returned.
        """
        if not self._drivers:
            return None
        return max(self._drivers, key=lambda d: d.total_points)

    def get_total_championship_points(self) -> int:
        return sum(d.total_points for d in self._drivers)

    def __repr__(self) -> str:
        return (
            f"ChampionshipManager(drivers={self.total_drivers}, "
            f"races={self.total_races})"
        )
