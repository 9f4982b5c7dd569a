import numpy as np
import pytest

from turmite_universe.color import rgb
from turmite_universe.grid import Grid, pack_cell


def test_new_grid_is_unvisited_and_black() -> None:
    grid = Grid(7, 5, 4)
    assert grid.cells.shape == (5, 7)
    for y in range(5):
        for x in range(7):
            assert grid.get_state(x, y) == 0
            assert grid.cell(x, y) == 0
    assert grid.visited_count() == 0


def test_set_state_packs_color_and_index() -> None:
    grid = Grid(10, 10, 4)
    grid.set_state(3, 2, 1)
    assert grid.cell(3, 2) == 0x7FFF0001
    assert grid.cells[2, 3] == 0x7FFF0001
    assert grid.get_state(3, 2) == 1


def test_set_state_zero_erases() -> None:
    grid = Grid(4, 4, 2)
    grid.set_state(1, 1, 1)
    grid.set_state(1, 1, 0)
    assert grid.cell(1, 1) == 0


@pytest.mark.parametrize("period", [1, 2, 3, 5, 256])
def test_every_index_round_trips(period: int) -> None:
    grid = Grid(3, 3, period)
    for k in range(period):
        grid.set_state(2, 0, k)
        assert grid.get_state(2, 0) == k
        assert 0 <= grid.get_state(2, 0) < period
        expected_color = rgb(k / period) if k else 0
        assert grid.cell(2, 0) & ~0xFF == expected_color


def test_pack_cell_matches_grid_write() -> None:
    grid = Grid(2, 2, 12)
    grid.set_state(0, 1, 7)
    assert grid.cell(0, 1) == pack_cell(7, 12)


def test_buffer_is_read_only_view() -> None:
    grid = Grid(4, 3, 4)
    view = grid.buffer
    with pytest.raises(ValueError):
        view[0, 0] = 1
    grid.set_state(0, 0, 2)
    assert view[0, 0] == grid.cell(0, 0)


def test_snapshot_is_independent() -> None:
    grid = Grid(4, 3, 4)
    snap = grid.snapshot()
    grid.set_state(1, 1, 3)
    assert snap[1, 1] == 0
    assert grid.cells.flags.writeable


def test_histogram_and_visited_count() -> None:
    grid = Grid(4, 4, 3)
    grid.set_state(0, 0, 1)
    grid.set_state(1, 0, 1)
    grid.set_state(2, 0, 2)
    assert grid.histogram().tolist() == [13, 2, 1]
    assert grid.visited_count() == 3
    assert np.array_equal(grid.states()[0, :3], [1, 1, 2])


def test_checksum_tracks_contents() -> None:
    a, b = Grid(5, 5, 4), Grid(5, 5, 4)
    assert a.checksum() == b.checksum()
    a.set_state(4, 4, 1)
    assert a.checksum() != b.checksum()
    b.set_state(4, 4, 1)
    assert a.checksum() == b.checksum()
