from __future__ import annotations

import numpy as np

from tetris_rl.game import Piece, TetrominoType, collides


def test_collides_walls_and_floor(grid):
    assert collides(Piece(x=-1, y=5, shape_index=TetrominoType.O), grid)
    assert collides(Piece(x=9, y=5, shape_index=TetrominoType.O), grid)
    assert collides(Piece(x=4, y=19, shape_index=TetrominoType.O), grid)
    assert not collides(Piece(x=8, y=18, shape_index=TetrominoType.O), grid)


def test_cells_above_the_top_never_hit_contents(grid):
    grid.grid[0, :] = 1
    # Rotation 1 of the I piece lies flat, one row above the board.
    piece = Piece(x=3, y=-1, shape_index=TetrominoType.I, rotation=1)
    assert all(y < 0 for _, y in piece.cells())
    assert not collides(piece, grid)


def test_collides_with_locked_cell(grid):
    grid.grid[10, 4] = 3
    assert collides(Piece(x=4, y=9, shape_index=TetrominoType.O), grid)
    assert not collides(Piece(x=5, y=9, shape_index=TetrominoType.O), grid)


def test_collision_characterization(grid):
    rng = np.random.default_rng(7)
    grid.grid[:] = (rng.random((20, 10)) < 0.3).astype(np.int8)
    for shape_index in range(7):
        for rotation in range(4):
            for x in range(-3, 13):
                for y in range(-4, 22):
                    piece = Piece(x=x, y=y, shape_index=shape_index, rotation=rotation)
                    expected = all(
                        0 <= cx < 10 and cy < 20 and (cy < 0 or grid.grid[cy, cx] == 0)
                        for cx, cy in piece.cells()
                    )
                    assert collides(piece, grid) is (not expected)


def test_clear_without_full_rows_is_a_noop(grid):
    grid.grid[19, :9] = 2
    grid.grid[5, 3] = 4
    before = grid.clone_state()
    assert grid.clear_full_lines() == 0
    np.testing.assert_array_equal(grid.grid, before)


def test_clear_removes_full_rows_and_shifts_down(grid):
    grid.grid[19, :] = 1
    grid.grid[18, :5] = 2
    grid.grid[17, :] = 3
    grid.grid[16, 7] = 4
    assert grid.clear_full_lines() == 2
    assert grid.grid[19, :5].tolist() == [2] * 5
    assert grid.grid[19, 5:].tolist() == [0] * 5
    assert grid.grid[18, 7] == 4
    assert not grid.grid[:18].any()


def test_clear_adjacent_full_rows_without_skipping(grid):
    grid.grid[16:20, :] = 5
    grid.grid[15, 0] = 6
    assert grid.clear_full_lines() == 4
    assert grid.grid[19, 0] == 6
    assert grid.grid.sum() == 6


def test_full_top_row_is_cleared(grid):
    grid.grid[0, :] = 1
    assert grid.clear_full_lines() == 1
    assert not grid.grid.any()


def test_lock_writes_one_based_ids(grid):
    result = grid.lock([(0, 19), (1, 19), (0, 18), (1, 18)], TetrominoType.O + 1)
    assert result.lines_cleared == 0
    assert not result.game_over
    assert grid.grid[19, 0] == 1


def test_lock_above_top_leaves_board_untouched(grid):
    result = grid.lock([(4, -1), (4, 0), (4, 1), (4, 2)], 2)
    assert result.game_over
    assert not grid.grid.any()


def test_render_ascii(grid):
    grid.grid[19, 0] = 1
    text = grid.render_ascii().splitlines()
    assert len(text) == 20
    assert text[-1].startswith("█·")
