import pytest

from covstats.side import Side
from covstats.traversal import Crossing, Traversal


def test_crossing_holds_side_and_coord():
    c = Crossing(Side.TOP, (1.0, 2.0))
    assert c.side is Side.TOP
    assert c.coord == (1.0, 2.0)


def test_new_traversal_is_empty():
    t = Traversal()
    assert t.empty()
    assert not t.entered()
    assert not t.exited()
    assert not t.traversed()


def test_enter_and_exit():
    t = Traversal()
    t.enter((0.0, 0.5), Side.LEFT)
    t.add((0.5, 0.5))
    t.exit((1.0, 0.5), Side.RIGHT)
    assert t.entered() and t.exited() and t.traversed()
    assert t.entry_side is Side.LEFT
    assert t.exit_side is Side.RIGHT
    assert t.exit_coordinate() == (1.0, 0.5)
    assert t.last_coordinate() == (1.0, 0.5)
    assert t.coords == [(0.0, 0.5), (0.5, 0.5), (1.0, 0.5)]


def test_enter_twice_fails():
    t = Traversal()
    t.enter((0.0, 0.0), Side.BOTTOM)
    with pytest.raises(RuntimeError):
        t.enter((0.0, 0.0), Side.BOTTOM)


def test_exit_coordinate_requires_exit():
    t = Traversal()
    t.add((0.2, 0.2))
    with pytest.raises(RuntimeError):
        t.exit_coordinate()


def test_last_coordinate_of_empty():
    with pytest.raises(IndexError):
        Traversal().last_coordinate()


def test_force_exit():
    t = Traversal()
    t.add((0.2, 0.2))
    t.force_exit(Side.TOP)
    assert t.exited()
    assert not t.traversed()
    assert t.exit_coordinate() == (0.2, 0.2)


def test_closed_ring():
    t = Traversal()
    for c in [(0, 0), (1, 0), (1, 1), (0, 0)]:
        t.add(c)
    assert t.is_closed_ring()

    short = Traversal()
    short.add((0, 0))
    short.add((0, 0))
    assert not short.is_closed_ring()


def test_multiple_unique_coordinates():
    t = Traversal()
    assert not t.multiple_unique_coordinates()
    t.add((1, 1))
    t.add((1, 1))
    assert not t.multiple_unique_coordinates()
    t.add((2, 1))
    assert t.multiple_unique_coordinates()