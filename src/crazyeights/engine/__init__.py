"""Headless rules engine for Crazy Eights.

IMPORTANT: This package must never import pygame.
"""

from .actions import ChooseSuitAction, DrawCardAction, PlayCardAction
from .ai import ai_take_turn, choose_ai_action, choose_suit_for_eight
from .deck import create_deck, shuffle_deck
from .game import GameConfig, GameState, StepResult, new_game, step, waiting_state
from .rules import is_valid_move, playable_cards, top_discard
from .types import RANKS, SUITS, Card, GameStatus, Rank, Side, Suit

__all__ = [
    "RANKS",
    "SUITS",
    "Card",
    "ChooseSuitAction",
    "DrawCardAction",
    "GameConfig",
    "GameState",
    "GameStatus",
    "PlayCardAction",
    "Rank",
    "Side",
    "StepResult",
    "Suit",
    "ai_take_turn",
    "choose_ai_action",
    "choose_suit_for_eight",
    "create_deck",
    "is_valid_move",
    "new_game",
    "playable_cards",
    "shuffle_deck",
    "step",
    "top_discard",
    "waiting_state",
]
