from __future__ import annotations

from typing import Sequence

from .actions import Action, DrawCardAction, PlayCardAction
from .game import GameState, StepResult, step
from .rules import playable_cards
from .types import SUITS, Card, Suit


def choose_suit_for_eight(hand: Sequence[Card], played: Card) -> Suit:
    """Pick the suit the AI holds most of, ignoring the 8 being played.

    Ties go to the earliest suit in `SUITS` order.
    """
    counts: dict[Suit, int] = {s: 0 for s in SUITS}
    for c in hand:
        if c.id != played.id:
            counts[c.suit] += 1
    best: Suit = SUITS[0]
    for s in SUITS[1:]:
        if counts[s] > counts[best]:
            best = s
    return best


def choose_ai_action(state: GameState) -> Action:
    playable = playable_cards(state, "ai")
    if not playable:
        # The engine turns this into a skip when the deck is empty.
        return DrawCardAction(side="ai")

    non_wild = next((c for c in playable if not c.is_wild), None)
    card = non_wild or playable[0]
    if card.is_wild:
        return PlayCardAction(side="ai", card_id=card.id, declared_suit=choose_suit_for_eight(state.ai_hand, card))
    return PlayCardAction(side="ai", card_id=card.id)


def ai_take_turn(state: GameState) -> StepResult | None:
    """Play the AI's single action for this turn.

    Returns None without touching the state when it is not the AI's move.
    """
    if state.current_turn != "ai" or state.status != "playing" or state.winner is not None:
        return None
    return step(state, choose_ai_action(state))
