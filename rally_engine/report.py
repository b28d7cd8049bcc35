"""Console report for a loaded championship."""

from __future__ import annotations

from rally_engine.config import Championship
from rally_engine.core.statistics import (
    calculate_average_points_per_driver,
    find_most_successful_country,
    get_total_races_held,
)


def build_report(championship: Championship) -> str:
    """Render standings, leader, statistics, race results and car ratings."""
    manager = championship.manager
    out: list[str] = [manager.get_standings(), "\n"]

    out.append("===== CHAMPIONSHIP LEADER =====\n")
    leader = manager.get_leading_driver()
    if leader is None:
        out.append("No leader\n")
    else:
        out.append(f"{leader.name} with {leader.total_points} points\n")

    out.append("===== CHAMPIONSHIP STATISTICS =====\n")
    out.append(f"Total Drivers: {manager.total_drivers}\n")
    out.append(f"Total Races: {get_total_races_held(manager)}\n")
    out.append(
        "Average Points Per Driver: "
        f"{calculate_average_points_per_driver(manager):.2f}\n"
    )
    out.append(f"Most Successful Country: {find_most_successful_country(manager)}\n")
    out.append(
        f"Total Championship Points: {manager.get_total_championship_points()}\n"
    )

    out.append("===== RACE RESULTS =====\n")
    for race in manager.get_races():
        out.append(race.get_results())

    out.append("===== CAR PERFORMANCE RATINGS =====\n")
    for car in championship.performance_cars:
        surface = car.surface.value.capitalize()
        out.append(f"{surface} Car Performance: {car.calculate_performance():.1f}\n")

    return "".join(out)
