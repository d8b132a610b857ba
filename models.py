"""models.py

Dataclass representing the core domain object:

- Place: one named place read from the fixed-width places file.

Kept as a plain, frozen record so the indexing logic lives in hash_table.py
and the file format lives in data_loader.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    """A named place (city, town, CDP ...) in a given state."""

    identifier: int
    region: str              # two-letter state code, e.g. 'IL'
    name: str                # lookup key; the same name appears in many states
    population: int
    area: float
    latitude: float
    longitude: float

    # Nearest road intersection and the distance to it
    road_intersection: int
    distance: float
