"""Rally car model for the championship engine.

A car is a tagged variant over the surface it is built for.  Gravel cars
carry a suspension travel figure, asphalt cars a downforce figure, and
:func:`calculate_performance` dispatches on the surface tag to combine
that figure with horsepower.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Surface tag
# ---------------------------------------------------------------------------


class Surface(Enum):
    """Surface a rally car is set up for."""

    GRAVEL = "gravel"
    ASPHALT = "asphalt"


# (horsepower weight, surface attribute weight) per surface.
_PERFORMANCE_WEIGHTS: dict[Surface, tuple[float, float]] = {
    Surface.GRAVEL: (0.7, 0.3),
    Surface.ASPHALT: (0.6, 0.4),
}

# ---------------------------------------------------------------------------
# Car
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RallyCar:
    """Immutable representation of a rally car.

    No range checks are applied; negative horsepower and the like are
    stored as given.

    Attributes:
        make: Manufacturer (e.g. "Toyota").
        model: Model name (e.g. "Yaris").
        horsepower: Engine output.
        surface: Surface variant of the car.
        surface_attribute: Suspension travel for gravel cars, downforce
            for asphalt cars.
    """

    make: str
    model: str
    horsepower: int
    surface: Surface
    surface_attribute: float

    @property
    def label(self) -> str:
        return f"{self.make} {self.model}"

    @property
    def suspension_travel(self) -> float:
        if self.surface is not Surface.GRAVEL:
            raise AttributeError(
                f"{self.label} is a {self.surface.value} car without suspension_travel"
            )
        return self.surface_attribute

    @property
    def downforce(self) -> float:
        if self.surface is not Surface.ASPHALT:
            raise AttributeError(
                f"{self.label} is a {self.surface.value} car without downforce"
            )
        return self.surface_attribute

    def calculate_performance(self) -> float:
        """Return the performance rating of this car."""
        return calculate_performance(self)


def gravel_car(
    make: str, model: str, horsepower: int, suspension_travel: float
) -> RallyCar:
    """Build a gravel-spec car."""
    return RallyCar(make, model, horsepower, Surface.GRAVEL, suspension_travel)


def asphalt_car(make: str, model: str, horsepower: int, downforce: float) -> RallyCar:
    """Build an asphalt-spec car."""
    return RallyCar(make, model, horsepower, Surface.ASPHALT, downforce)


# ---------------------------------------------------------------------------
# Performance
# ---------------------------------------------------------------------------


def calculate_performance(car: RallyCar) -> float:
    """Compute the performance rating of *car*.

    The rating is a weighted sum of horsepower and the surface-specific
    attribute::

        gravel:  0.7 * horsepower + 0.3 * suspension_travel
        asphalt: 0.6 * horsepower + 0.4 * downforce

    Args:
        car: Car to rate.

    Returns:
        Performance rating as a float.
    """
    hp_weight, surface_weight = _PERFORMANCE_WEIGHTS[car.surface]
    return car.horsepower * hp_weight + car.surface_attribute * surface_weight
