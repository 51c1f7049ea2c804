import pytest

from hexgrid import Axial, Cube, Direction
from hexgrid import hex_distance_axial, hex_distance_cube

SAMPLE = [Axial(x, z) for x in range(-3, 4) for z in range(-3, 4)]


def test_distance_reference_pair():
    # cube (3, -2, -1) to the origin
    assert Axial(3, -1).distance(Axial(0, 0)) == 3
    assert Cube(3, -2).distance(Cube.origin()) == 3
    assert hex_distance_cube(Cube(3, -2), Cube.origin()) == 3


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Axial(0, 0), Axial(0, 5), 5),
        (Axial(0, 0), Axial(2, -1), 2),
        (Axial(-2, 4), Axial(3, -1), 5),
        (Axial(1, 1), Axial(-1, -1), 4),
        (Axial(10**18, 0), Axial(0, 0), 10**18),
    ],
)
def test_distance_known_values(a: Axial, b: Axial, expected: int):
    assert a.distance(b) == expected
    assert hex_distance_axial(a, b) == expected


@pytest.mark.parametrize("a", SAMPLE)
def test_distance_identity(a: Axial):
    assert a.distance(a) == 0
    assert a.to_cube().distance(a.to_cube()) == 0


def test_distance_symmetric_and_cross_consistent():
    origin = Axial(1, -2)
    for b in SAMPLE:
        d = origin.distance(b)
        assert d == b.distance(origin)
        assert d == hex_distance_cube(origin.to_cube(), b.to_cube())
        assert d == hex_distance_cube(b.to_cube(), origin.to_cube())
        c = origin.to_cube() - b.to_cube()
        assert 2 * d == abs(c.x) + abs(c.y) + abs(c.z)


def test_distance_counts_steps():
    a = Axial.origin()
    for _ in range(4):
        a = a.neighbor(Direction.NORTH_EAST)
    a = a.neighbor(Direction.NORTH)
    assert a.distance(Axial.origin()) == 5
