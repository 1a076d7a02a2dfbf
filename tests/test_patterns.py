import pytest

from game_logic import Grid, next_grid
from patterns import get_pattern, get_pattern_names, place_pattern


def test_unknown_pattern_is_none():
    assert get_pattern("Nope") is None


def test_get_pattern_returns_a_copy():
    pattern = get_pattern("Block")
    pattern[0, 0] = 0
    assert get_pattern("Block")[0, 0] == 1


def test_place_pattern_offsets_rows_as_y():
    grid = place_pattern(Grid(6, 6), get_pattern("Blinker"), 1, 4)
    assert grid.alive_cells() == [(1, 4), (2, 4), (3, 4)]


def test_place_pattern_wraps_edges():
    grid = place_pattern(Grid(5, 5), get_pattern("Block"), 4, 4)
    assert sorted(grid.alive_cells()) == [(0, 0), (0, 4), (4, 0), (4, 4)]
    # The wrapped block is still a block on the torus
    assert next_grid(grid) == grid


def test_place_pattern_overwrites_dead_cells():
    grid = Grid(4, 4).with_cells([(1, 0)])
    placed = place_pattern(grid, get_pattern("Glider"), 0, 0)
    assert not placed.is_alive(0, 0)
    assert placed.is_alive(1, 0)
    assert placed.population == 5
    assert grid.population == 1


@pytest.mark.parametrize("name", ["Block", "Beehive"])
def test_still_lifes_are_stable(name):
    grid = place_pattern(Grid(8, 8), get_pattern(name), 2, 2)
    assert next_grid(grid) == grid


@pytest.mark.parametrize("name", ["Blinker", "Toad", "Beacon"])
def test_oscillators_have_period_two(name):
    grid = place_pattern(Grid(10, 10), get_pattern(name), 3, 3)
    assert next_grid(grid) != grid
    assert next_grid(next_grid(grid)) == grid


def test_every_pattern_is_listed_and_non_empty():
    names = get_pattern_names()
    assert "Glider" in names
    for name in names:
        assert get_pattern(name).sum() > 0
