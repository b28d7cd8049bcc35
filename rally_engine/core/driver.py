"""Driver model for the rally championship engine.

A driver accumulates championship points through recorded race results
and may switch cars between races.
"""

from __future__ import annotations

from rally_engine.core.car import RallyCar


class Driver:
    """A rally driver with a running points total and a current car.

    Attributes:
        name: Driver name.
        country: Country the driver represents.
        total_points: Points accumulated so far (starts at 0).
        car: Car the driver currently competes in.
    """

    __slots__ = ("name", "country", "total_points", "car")

    def __init__(self, name: str, country: str, car: RallyCar) -> None:
        self.name: str = name
        self.country: str = country
        self.car: RallyCar = car
        self.total_points: int = 0

    def add_points(self, points: int) -> None:
        """Add *points* to the running total.  Negative values subtract."""
        self.total_points += points

    def set_car(self, car: RallyCar) -> None:
        """Switch to *car* for subsequent races."""
        self.car = car

    def performance(self) -> float:
        return self.car.calculate_performance()

    def __repr__(self) -> str:
        return (
            f"Driver(name={self.name!r}, country={self.country!r}, "
            f"total_points={self.total_points}, car={self.car.label!r})"
        )
