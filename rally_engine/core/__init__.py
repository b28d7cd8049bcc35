"""Core domain modules for the rally championship engine."""

from rally_engine.core.car import (
    RallyCar,
    Surface,
    asphalt_car,
    calculate_performance,
    gravel_car,
)
from rally_engine.core.championship import ChampionshipManager
from rally_engine.core.driver import Driver
from rally_engine.core.race import RaceResult, RallyRaceResult, ResultEntry
from rally_engine.core.statistics import (
    NO_DATA,
    calculate_average_points_per_driver,
    country_points,
    find_most_successful_country,
    get_total_races_held,
)

__all__ = [
    "ChampionshipManager",
    "Driver",
    "NO_DATA",
    "RaceResult",
    "RallyCar",
    "RallyRaceResult",
    "ResultEntry",
    "Surface",
    "asphalt_car",
    "calculate_average_points_per_driver",
    "calculate_performance",
    "country_points",
    "find_most_successful_country",
    "get_total_races_held",
    "gravel_car",
]
