"""Coordinates domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float
