from __future__ import annotations

import numpy as np
import pytest

from welltris.tetrimino import (
    TETRIMINO_COLORS,
    TETRIMINO_SHAPES,
    TetriminoKind,
    new_tetrimino,
    rotate_shape,
)


def test_catalog_covers_every_kind_with_four_cells() -> None:
    for kind in TetriminoKind:
        piece = new_tetrimino(kind)
        assert piece.kind is kind
        assert piece.color == TETRIMINO_COLORS[kind]
        assert piece.shape.shape == (4, 4)
        assert int(piece.shape.sum()) == 4


def test_new_tetrimino_returns_private_shape() -> None:
    piece = new_tetrimino(TetriminoKind.T)
    piece.rotate(clockwise=True)
    assert not np.array_equal(piece.shape, TETRIMINO_SHAPES[TetriminoKind.T])
    assert np.array_equal(new_tetrimino(TetriminoKind.T).shape, TETRIMINO_SHAPES[TetriminoKind.T])


@pytest.mark.parametrize("kind", [k for k in TetriminoKind if k is not TetriminoKind.O])
@pytest.mark.parametrize("clockwise", [True, False])
def test_four_rotations_restore_the_mask(kind: TetriminoKind, clockwise: bool) -> None:
    original = TETRIMINO_SHAPES[kind]
    shape = original.copy()
    for _ in range(4):
        shape = rotate_shape(kind, shape, clockwise)
    assert np.array_equal(shape, original)


@pytest.mark.parametrize("clockwise", [True, False])
def test_o_piece_is_a_fixed_point(clockwise: bool) -> None:
    original = TETRIMINO_SHAPES[TetriminoKind.O]
    assert np.array_equal(rotate_shape(TetriminoKind.O, original, clockwise), original)


def test_clockwise_rotation_of_t_piece() -> None:
    rotated = rotate_shape(TetriminoKind.T, TETRIMINO_SHAPES[TetriminoKind.T], clockwise=True)
    expected = np.array(
        [[0, 1, 0, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]], dtype=np.uint8
    )
    assert np.array_equal(rotated, expected)


def test_counter_clockwise_rotation_of_j_piece() -> None:
    rotated = rotate_shape(TetriminoKind.J, TETRIMINO_SHAPES[TetriminoKind.J], clockwise=False)
    expected = np.array(
        [[0, 1, 0, 0], [0, 1, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0]], dtype=np.uint8
    )
    assert np.array_equal(rotated, expected)


def test_i_piece_rotates_the_full_mask() -> None:
    rotated = rotate_shape(TetriminoKind.I, TETRIMINO_SHAPES[TetriminoKind.I], clockwise=True)
    expected = np.zeros((4, 4), dtype=np.uint8)
    expected[2, :] = 1
    assert np.array_equal(rotated, expected)


def test_opposite_rotations_cancel() -> None:
    for kind in TetriminoKind:
        original = TETRIMINO_SHAPES[kind]
        there = rotate_shape(kind, original, clockwise=True)
        back = rotate_shape(kind, there, clockwise=False)
        assert np.array_equal(back, original)


def test_rotate_method_keeps_kind_and_color() -> None:
    piece = new_tetrimino(TetriminoKind.S)
    color = piece.color
    piece.rotate(clockwise=False)
    assert piece.kind is TetriminoKind.S
    assert piece.color == color


def test_copy_is_independent() -> None:
    piece = new_tetrimino(TetriminoKind.L)
    clone = piece.copy()
    piece.rotate()
    assert np.array_equal(clone.shape, TETRIMINO_SHAPES[TetriminoKind.L])
    assert clone.kind is piece.kind
