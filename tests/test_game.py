import pytest

from boevig.game import Direction, GridLocation, Player, Terrain


@pytest.mark.parametrize(
    "value, name",
    [(1, "N"), (2, "E"), (4, "S"), (8, "W")],
)
def test_cardinal_direction_values(value, name):
    direction = Direction(value)
    assert direction.name == name
    assert int(direction) == value


@pytest.mark.parametrize(
    "value, name",
    [(3, "NE"), (6, "SE"), (12, "SW"), (9, "NW")],
)
def test_diagonals_combine_cardinals(value, name):
    direction = Direction(value)
    assert direction.name == name
    assert int(direction) == value


def test_diagonal_membership():
    assert Direction(1) in Direction(3)
    assert Direction(8) in Direction(9)
    assert Direction(1) not in Direction(6)


def test_direction_from_value():
    assert Direction(1) is Direction.N
    assert Direction(Direction.S | Direction.W) is Direction.SW


def test_grid_location_equality_and_hash():
    a = GridLocation(x=1, y=2)
    b = GridLocation(1, 2)
    assert a == b
    assert len({a, b}) == 1
    assert GridLocation(2, 1) != a


def test_grid_location_defaults_to_origin():
    assert GridLocation() == GridLocation(0, 0)


def test_terrain_passable():
    assert Terrain(passable=True).passable is True
    assert Terrain().passable is False


def test_player_repr():
    assert repr(Player()) == "Player()"