from __future__ import annotations

from typing import TYPE_CHECKING

from .types import WILD_RANK, Card, Side, Suit

if TYPE_CHECKING:
    from .game import GameState


def is_valid_move(card: Card, active_suit: Suit | None, top_discard: Card | None) -> bool:
    """An 8 is always playable; otherwise match the active suit or the top rank."""
    if card.rank == WILD_RANK:
        return True
    if top_discard is None:
        return False
    return card.suit == active_suit or card.rank == top_discard.rank


def top_discard(state: GameState) -> Card | None:
    if not state.discard_pile:
        return None
    return state.discard_pile[-1]


def playable_cards(state: GameState, side: Side) -> list[Card]:
    """Cards of `side` that may be played right now, in hand order."""
    top = top_discard(state)
    return [c for c in state.hand(side) if is_valid_move(c, state.active_suit, top)]
