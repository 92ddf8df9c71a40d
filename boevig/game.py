"""Basic game components: players, grid locations, terrain and directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marks an entity as a player."""


@dataclass(frozen=True)
class GridLocation:
    """A cell on the game grid."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Terrain:
    """The ground of a grid cell."""

    passable: bool = False


class Direction(enum.IntFlag):
    """Compass directions; diagonals combine two cardinal flags."""

    N = 1
    E = 2
    S = 4
    W = 8
    NE = N | E
    SE = S | E
    SW = S | W
    NW = N | W