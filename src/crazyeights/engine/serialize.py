from __future__ import annotations

from typing import Sequence

from .game import GameState
from .types import Card


def card_to_dict(c: Card) -> dict[str, object]:
    return {"id": c.id, "suit": c.suit, "rank": c.rank}


def _cards(cards: Sequence[Card]) -> list[dict[str, object]]:
    return [card_to_dict(c) for c in cards]


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable snapshot of the current game state."""
    return {
        "deck": _cards(state.deck),
        "discard_pile": _cards(state.discard_pile),
        "player_hand": _cards(state.player_hand),
        "ai_hand": _cards(state.ai_hand),
        "current_turn": state.current_turn,
        "status": state.status,
        "winner": state.winner,
        "active_suit": state.active_suit,
    }
