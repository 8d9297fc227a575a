from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Suit = Literal["hearts", "diamonds", "clubs", "spades"]
Rank = Literal["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
Side = Literal["player", "ai"]
GameStatus = Literal["waiting", "playing", "suit_selection", "game_over"]

# Enumeration order matters: it breaks ties when the AI picks a suit.
SUITS: tuple[Suit, ...] = ("hearts", "diamonds", "clubs", "spades")
RANKS: tuple[Rank, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

WILD_RANK: Rank = "8"

SUIT_SYMBOLS: dict[Suit, str] = {
    "hearts": "♥",
    "diamonds": "♦",
    "clubs": "♣",
    "spades": "♠",
}


@dataclass(frozen=True)
class Card:
    id: str
    suit: Suit
    rank: Rank

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK

    def label(self) -> str:
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"


def other_side(side: Side) -> Side:
    return "ai" if side == "player" else "player"
