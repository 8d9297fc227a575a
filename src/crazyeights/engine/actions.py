from __future__ import annotations

from dataclasses import dataclass

from .types import Side, Suit


@dataclass(frozen=True)
class PlayCardAction:
    side: Side
    card_id: str
    # Only the AI declares a suit together with an 8; the player picks it afterwards.
    declared_suit: Suit | None = None


@dataclass(frozen=True)
class DrawCardAction:
    side: Side


@dataclass(frozen=True)
class ChooseSuitAction:
    side: Side
    suit: Suit


Action = PlayCardAction | DrawCardAction | ChooseSuitAction
