from __future__ import annotations

import random

from crazyeights.engine.deck import create_deck, shuffle_deck
from crazyeights.engine.types import RANKS, SUITS


def test_create_deck_has_52_unique_cards() -> None:
    deck = create_deck()
    assert len(deck) == 52
    assert len({c.id for c in deck}) == 52
    assert {(c.suit, c.rank) for c in deck} == {(s, r) for s in SUITS for r in RANKS}


def test_create_deck_is_suit_major_and_stable() -> None:
    deck = create_deck()
    assert deck[0].id == "hearts-A"
    assert deck[12].id == "hearts-K"
    assert deck[13].id == "diamonds-A"
    assert deck[-1].id == "spades-K"
    assert [c.id for c in deck] == [c.id for c in create_deck()]


def test_shuffle_returns_permutation_without_mutating_input() -> None:
    deck = create_deck()
    before = [c.id for c in deck]
    shuffled = shuffle_deck(deck, random.Random(7))
    assert [c.id for c in deck] == before
    assert shuffled is not deck
    assert sorted(c.id for c in shuffled) == sorted(before)


def test_shuffle_without_rng_uses_module_random() -> None:
    shuffled = shuffle_deck(create_deck())
    assert len(shuffled) == 52
    assert len({c.id for c in shuffled}) == 52


def test_shuffle_has_no_positional_bias() -> None:
    rng = random.Random(2024)
    deck = create_deck()
    runs = 3000
    position_sums = {c.id: 0 for c in deck}
    first_counts = {c.id: 0 for c in deck}
    for _ in range(runs):
        shuffled = shuffle_deck(deck, rng)
        first_counts[shuffled[0].id] += 1
        for pos, c in enumerate(shuffled):
            position_sums[c.id] += pos

    # Mean position of every card should sit near the middle (25.5).
    for cid, total in position_sums.items():
        assert abs(total / runs - 25.5) < 2.5, cid
    # Every card shows up on top roughly runs/52 (~58) times.
    for cid, n in first_counts.items():
        assert 20 < n < 110, cid
