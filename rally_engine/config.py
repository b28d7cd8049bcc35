"""Scenario loader for the rally championship engine.

A scenario file describes the cars, the drivers and the races of one
championship.  Loading it builds a fresh :class:`ChampionshipManager`
and replays every race in file order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rally_engine.core.car import RallyCar, Surface
from rally_engine.core.championship import ChampionshipManager
from rally_engine.core.driver import Driver
from rally_engine.core.race import RallyRaceResult

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
CHAMPIONSHIP_PATH: Path = DATA_DIR / "championship.yaml"

_CAR_FIELDS: tuple[str, ...] = ("surface", "make", "model", "horsepower")
_SURFACE_FIELDS: dict[Surface, str] = {
    Surface.GRAVEL: "suspension_travel",
    Surface.ASPHALT: "downforce",
}
_DRIVER_FIELDS: tuple[str, ...] = ("name", "country", "car")
_RACE_FIELDS: tuple[str, ...] = ("name", "location", "results")
_RESULT_FIELDS: tuple[str, ...] = ("driver", "position", "points")
_SHAPE_NAMES: dict[type, str] = {dict: "mapping", list: "list"}


@dataclass
class Championship:
    """A loaded championship scenario.

    Attributes:
        manager: Registry holding the drivers and replayed races.
        cars: Cars keyed by their scenario id.
        races: Races in the order they were held.
        performance_cars: Cars listed for the performance report.
    """

    manager: ChampionshipManager
    cars: dict[str, RallyCar] = field(default_factory=dict)
    races: list[RallyRaceResult] = field(default_factory=list)
    performance_cars: list[RallyCar] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise ValueError(
            f"{where} must be a {_SHAPE_NAMES[kind]}, got {type(value).__name__}"
        )
    return value


def _require(entry: dict[str, Any], fields: tuple[str, ...], where: str) -> None:
    _expect(entry, dict, where)
    for name in fields:
        if name not in entry:
            raise ValueError(f"{where} is missing required field '{name}'")


def _numeric(entry: dict[str, Any], name: str, where: str) -> int | float:
    val = entry[name]
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise ValueError(
            f"{where}: '{name}' must be numeric, got {type(val).__name__}"
        )
    return val


def _integer(entry: dict[str, Any], name: str, where: str) -> int:
    val = _numeric(entry, name, where)
    if isinstance(val, float) and not val.is_integer():
        raise ValueError(f"{where}: '{name}' must be an integer, got {val}")
    return int(val)


def _lookup(table: dict[str, Any], key: Any, kind: str, where: str) -> Any:
    try:
        return table[key]
    except (KeyError, TypeError):
        raise ValueError(f"{where}: unknown {kind} '{key}'") from None


# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _parse_cars(raw: Any) -> dict[str, RallyCar]:
    cars: dict[str, RallyCar] = {}
    for car_id, entry in _expect(raw, dict, "Section 'cars'").items():
        where = f"Car '{car_id}'"
        _require(entry, _CAR_FIELDS, where)
        try:
            surface = Surface(str(entry["surface"]).lower())
        except ValueError:
            raise ValueError(
                f"{where}: unknown surface '{entry['surface']}'"
            ) from None
        attribute = _SURFACE_FIELDS[surface]
        _require(entry, (attribute,), where)
        cars[car_id] = RallyCar(
            make=str(entry["make"]),
            model=str(entry["model"]),
            horsepower=_integer(entry, "horsepower", where),
            surface=surface,
            surface_attribute=float(_numeric(entry, attribute, where)),
        )
    return cars


def _parse_drivers(raw: Any, cars: dict[str, RallyCar]) -> list[Driver]:
    drivers: list[Driver] = []
    seen: set[str] = set()
    for idx, entry in enumerate(_expect(raw, list, "Section 'drivers'")):
        _require(entry, _DRIVER_FIELDS, f"Driver entry {idx}")
        name = str(entry["name"])
        where = f"Driver entry {idx} ({name})"
        # Results and car changes refer to drivers by name.
        if name in seen:
            raise ValueError(f"{where}: duplicate driver name '{name}'")
        seen.add(name)
        car = _lookup(cars, entry["car"], "car", where)
        drivers.append(Driver(name, str(entry["country"]), car))
    return drivers


def _replay_race(
    idx: int,
    entry: Any,
    drivers: dict[str, Driver],
    cars: dict[str, RallyCar],
) -> RallyRaceResult:
    _require(entry, _RACE_FIELDS, f"Race entry {idx}")
    where = f"Race entry {idx} ({entry['name']})"

    changes = _expect(entry.get("car_changes") or {}, dict, f"{where} car_changes")
    for driver_name, car_id in changes.items():
        driver = _lookup(drivers, driver_name, "driver", where)
        driver.set_car(_lookup(cars, car_id, "car", where))

    race = RallyRaceResult(str(entry["name"]), str(entry["location"]))
    for res_idx, result in enumerate(
        _expect(entry["results"], list, f"{where} results")
    ):
        res_where = f"{where} result {res_idx}"
        _require(result, _RESULT_FIELDS, res_where)
        race.record_result(
            _lookup(drivers, result["driver"], "driver", res_where),
            _integer(result, "position", res_where),
            _integer(result, "points", res_where),
        )
    return race


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_championship(path: Path | None = None) -> Championship:
    """Load a championship scenario from a YAML file and replay it.

    Drivers are registered in file order.  Each race then applies its
    ``car_changes``, records its results (crediting driver totals) and
    is added to the registry.

    Args:
        path: Optional override for the scenario file path.

    Returns:
        The populated :class:`Championship`.

    Raises:
        FileNotFoundError: If the scenario file does not exist.
        ValueError: If a section or entry has the wrong shape, is
            missing fields, has non-numeric or non-integral values, names
            an unknown surface, repeats a driver name, or references an
            unknown car or driver.
    """
    scenario_path = Path(path) if path is not None else CHAMPIONSHIP_PATH
    if not scenario_path.exists():
        raise FileNotFoundError(f"Championship file not found: {scenario_path}")

    with open(scenario_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    _expect(data, dict, f"Championship file {scenario_path.name}")

    cars = _parse_cars(data.get("cars") or {})
    driver_list = _parse_drivers(data.get("drivers") or [], cars)

    manager = ChampionshipManager()
    for driver in driver_list:
        manager.register_driver(driver)
    drivers_by_name = {d.name: d for d in driver_list}

    races: list[RallyRaceResult] = []
    for idx, entry in enumerate(
        _expect(data.get("races") or [], list, "Section 'races'")
    ):
        race = _replay_race(idx, entry, drivers_by_name, cars)
        manager.add_race_result(race)
        races.append(race)

    performance_cars = [
        _lookup(cars, car_id, "car", "performance_report")
        for car_id in _expect(
            data.get("performance_report") or [], list, "Section 'performance_report'"
        )
    ]

    logger.info(
        "Loaded %s: %d cars, %d drivers, %d races",
        scenario_path.name,
        len(cars),
        manager.total_drivers,
        manager.total_races,
    )
    return Championship(
        manager=manager, cars=cars, races=races, performance_cars=performance_cars
    )
