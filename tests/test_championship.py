"""Tests for the championship registry."""

from rally_engine.core.car import asphalt_car, gravel_car
from rally_engine.core.championship import ChampionshipManager
from rally_engine.core.driver import Driver
from rally_engine.core.race import RallyRaceResult

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _make_manager(*points: int) -> tuple[ChampionshipManager, list[Driver]]:
    """Register one driver per points value, in argument order."""
    car = asphalt_car("Hyundai", "i20", 375, 290)
    manager = ChampionshipManager()
    drivers = []
    for i, pts in enumerate(points):
        driver = Driver(f"D{i}", f"Country{i}", car)
        driver.add_points(pts)
        manager.register_driver(driver)
        drivers.append(driver)
    return manager, drivers


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def test_counters_track_registrations() -> None:
    manager, drivers = _make_manager(0, 0)
    assert manager.total_drivers == 2
    assert manager.total_races == 0

    manager.add_race_result(RallyRaceResult("Rally Sweden", "Umeå"))
    assert manager.total_races == 1
    assert len(manager.get_races()) == 1

    # Duplicate registration is not detected.
    manager.register_driver(drivers[0])
    assert manager.total_drivers == 3
    assert len(manager.get_drivers()) == 3


def test_instances_are_independent() -> None:
    first, _ = _make_manager(10)
    second = ChampionshipManager()
    assert first.total_drivers == 1
    assert second.total_drivers == 0
    assert second.get_drivers() == []


def test_get_drivers_is_defensive_copy() -> None:
    manager, drivers = _make_manager(5, 3)
    copy = manager.get_drivers()
    copy.clear()
    assert manager.get_drivers() == drivers
    manager.get_races().append(RallyRaceResult("Ghost", "Nowhere"))
    assert manager.get_races() == []


# ---------------------------------------------------------------------------
# Standings
# ---------------------------------------------------------------------------


def test_standings_sorted_descending() -> None:
    manager, _ = _make_manager(12, 40, 25)
    assert manager.get_standings() == (
        "1. D1 (Country1): 40 points\n"
        "2. D2 (Country2): 25 points\n"
        "3. D0 (Country0): 12 points\n"
    )


def test_standings_ties_keep_registration_order() -> None:
    manager, _ = _make_manager(30, 40, 30, 40)
    names = [line.split(" ")[1] for line in manager.get_standings().splitlines()]
    assert names == ["D1", "D3", "D0", "D2"]


def test_standings_frame_matches_text() -> None:
    manager, _ = _make_manager(30, 40)
    frame = manager.standings_frame()
    assert list(frame.columns) == ["rank", "name", "country", "car", "points"]
    assert frame["name"].tolist() == ["D1", "D0"]
    assert frame["rank"].tolist() == [1, 2]
    assert frame["points"].tolist() == [40, 30]
    assert frame["car"].iloc[0] == "Hyundai i20"


def test_empty_standings() -> None:
    manager = ChampionshipManager()
    assert manager.get_standings() == ""
    assert manager.standings_frame().empty


# ---------------------------------------------------------------------------
# Leader and totals
# ---------------------------------------------------------------------------


def test_leading_driver() -> None:
    manager, drivers = _make_manager(10, 50, 20)
    assert manager.get_leading_driver() is drivers[1]


def test_leading_driver_tie_goes_to_first_registered() -> None:
    manager, drivers = _make_manager(10, 40, 40)
    assert manager.get_leading_driver() is drivers[1]


def test_no_leader_when_empty() -> None:
    assert ChampionshipManager().get_leading_driver() is None


def test_total_points_matches_recorded_results() -> None:
    """Driver totals equal the sum of points passed to record_result."""
    car = gravel_car("Ford", "Fiesta", 380, 240)
    a = Driver("A", "France", car)
    b = Driver("B", "Belgium", car)
    manager = ChampionshipManager()
    manager.register_driver(a)
    manager.register_driver(b)

    awarded = {"A": 0, "B": 0}
    for race_idx, (pa, pb) in enumerate([(25, 18), (12, 25), (0, 15)]):
        race = RallyRaceResult(f"Race {race_idx}", "Somewhere")
        race.record_result(a, 1, pa)
        race.record_result(b, 2, pb)
        awarded["A"] += pa
        awarded["B"] += pb
        manager.add_race_result(race)

    assert a.total_points == awarded["A"]
    assert b.total_points == awarded["B"]
    assert manager.get_total_championship_points() == sum(awarded.values())
