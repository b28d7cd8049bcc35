"""Aggregate championship statistics.

Pure query functions over a :class:`ChampionshipManager`; none of them
mutate the registry.
"""

from __future__ import annotations

import numpy as np

from rally_engine.core.championship import ChampionshipManager

NO_DATA: str = "No data available"


def calculate_average_points_per_driver(manager: ChampionshipManager) -> float:
    """Return the mean points total across registered drivers.

    Returns 0.0 when no drivers are registered.
    """
    drivers = manager.get_drivers()
    if not drivers:
        return 0.0
    points = np.array([d.total_points for d in drivers], dtype=float)
    return float(points.mean())


def country_points(manager: ChampionshipManager) -> dict[str, int]:
    """Sum driver points per country, keyed in first-registered order."""
    totals: dict[str, int] = {}
    for driver in manager.get_drivers():
        totals[driver.country] = totals.get(driver.country, 0) + driver.total_points
    return totals


def find_most_successful_country(manager: ChampionshipManager) -> str:
    """Return the country whose drivers have scored the most points.

    Ties go to the country whose first driver was registered earliest.

    Returns:
        Country name, or :data:`NO_DATA` when no drivers are registered.
    """
    totals = country_points(manager)
    if not totals:
        return NO_DATA
    return max(totals, key=lambda country: totals[country])


def get_total_races_held(manager: ChampionshipManager) -> int:
    return manager.total_races
