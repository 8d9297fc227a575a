from __future__ import annotations

import random
from typing import Sequence

from .types import RANKS, SUITS, Card


def card_id(suit: str, rank: str) -> str:
    return f"{suit}-{rank}"


def create_deck() -> list[Card]:
    """Return the standard 52-card deck, suit-major in `SUITS` order."""
    return [Card(id=card_id(s, r), suit=s, rank=r) for s in SUITS for r in RANKS]


def shuffle_deck(deck: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of `deck`; the input is left untouched."""
    cards = list(deck)
    # random.shuffle is Fisher-Yates
    (rng or random).shuffle(cards)
    return cards
