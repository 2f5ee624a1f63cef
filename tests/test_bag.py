from __future__ import annotations

import random

import pytest

from welltris.bag import PieceBag, new_bag
from welltris.tetrimino import TetriminoKind


def _draw_many(bag: PieceBag, count: int) -> list[TetriminoKind]:
    kinds = []
    for _ in range(count):
        if bag.is_empty():
            bag.refill()
        kinds.append(bag.draw().kind)
    return kinds


def test_new_bag_holds_each_kind_once() -> None:
    rng = random.Random(5)
    for _ in range(50):
        kinds = [piece.kind for piece in new_bag(rng)]
        assert len(kinds) == 7
        assert set(kinds) == set(TetriminoKind)


def test_bag_orders_vary() -> None:
    rng = random.Random(11)
    orders = {tuple(piece.kind for piece in new_bag(rng)) for _ in range(30)}
    assert len(orders) > 1


def test_consecutive_bags_are_permutations() -> None:
    kinds = _draw_many(PieceBag(seed=3), 7 * 20)
    for start in range(0, len(kinds), 7):
        assert sorted(kinds[start:start + 7]) == sorted(TetriminoKind)


def test_gap_between_repeats_is_at_most_twelve() -> None:
    kinds = _draw_many(PieceBag(seed=8), 7 * 50)
    last_seen: dict[TetriminoKind, int] = {}
    for index, kind in enumerate(kinds):
        if kind in last_seen:
            assert index - last_seen[kind] - 1 <= 12
        last_seen[kind] = index


def test_seeded_bags_are_reproducible() -> None:
    first = _draw_many(PieceBag(seed=42), 21)
    second = _draw_many(PieceBag(seed=42), 21)
    assert first == second


def test_draw_from_empty_bag_raises() -> None:
    bag = PieceBag(seed=0)
    for _ in range(7):
        bag.draw()
    assert bag.is_empty()
    assert len(bag) == 0
    with pytest.raises(IndexError):
        bag.draw()


def test_peek_kinds_matches_draw_order() -> None:
    bag = PieceBag(seed=1)
    expected = bag.peek_kinds()
    assert [bag.draw().kind for _ in range(7)] == expected


def test_drawn_pieces_are_fresh_objects() -> None:
    bag = PieceBag(seed=2)
    first = bag.draw()
    bag.refill()
    pieces = [bag.draw() for _ in range(7)]
    assert all(piece is not first for piece in pieces)
    first.rotate()
    same_kind = next(p for p in pieces if p.kind is first.kind)
    if first.kind is not TetriminoKind.O:
        assert not (same_kind.shape == first.shape).all()
