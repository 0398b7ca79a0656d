"""Position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Geographic coordinates of the rider in decimal degrees."""

    latitude: float
    longitude: float
