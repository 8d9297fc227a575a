from __future__ import annotations

import random
from dataclasses import dataclass, field

from .actions import Action, ChooseSuitAction, DrawCardAction, PlayCardAction
from .deck import create_deck, shuffle_deck
from .rules import is_valid_move, top_discard
from .types import RANKS, SUITS, WILD_RANK, Card, GameStatus, Side, Suit, other_side

Event = dict[str, object]

DECK_SIZE = len(SUITS) * len(RANKS)
INVALID_MOVE = "Invalid move! Match suit or rank, or play an 8."


@dataclass(frozen=True)
class GameConfig:
    hand_size: int = 8


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class GameState:
    config: GameConfig
    rng: random.Random
    deck: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    player_hand: list[Card] = field(default_factory=list)
    ai_hand: list[Card] = field(default_factory=list)
    current_turn: Side = "player"
    status: GameStatus = "waiting"
    winner: Side | None = None
    active_suit: Suit | None = None
    turns_taken: int = 0
    event_log: list[Event] = field(default_factory=list)

    def hand(self, side: Side) -> list[Card]:
        return self.player_hand if side == "player" else self.ai_hand


def waiting_state(config: GameConfig | None = None, rng: random.Random | None = None) -> GameState:
    """The empty pre-deal state shown before the first game starts."""
    return GameState(config=config or GameConfig(), rng=rng or random.Random())


def _starting_discard_index(deck: list[Card]) -> int:
    for i, c in enumerate(deck):
        if c.rank != WILD_RANK:
            return i
    # Only 8s left: take the first one anyway so the pile is never empty.
    return 0


def new_game(config: GameConfig | None = None, rng: random.Random | None = None) -> GameState:
    cfg = config or GameConfig()
    if cfg.hand_size < 1 or cfg.hand_size * 2 + 1 > DECK_SIZE:
        raise ValueError(f"Cannot deal two hands of {cfg.hand_size} from a 52-card deck.")

    rng = rng or random.Random()
    cards = shuffle_deck(create_deck(), rng)

    # Player first, then AI, from the front of the shuffled sequence.
    player_hand = cards[: cfg.hand_size]
    ai_hand = cards[cfg.hand_size : cfg.hand_size * 2]
    deck = cards[cfg.hand_size * 2 :]
    starter = deck.pop(_starting_discard_index(deck))

    state = GameState(
        config=cfg,
        rng=rng,
        deck=deck,
        discard_pile=[starter],
        player_hand=player_hand,
        ai_hand=ai_hand,
        current_turn="player",
        status="playing",
        winner=None,
        active_suit=starter.suit,
    )
    state.event_log.append({"type": "GAME_STARTED", "starter": starter.id, "active_suit": starter.suit})
    return state


def accounted_cards(state: GameState) -> list[Card]:
    return [*state.deck, *state.discard_pile, *state.player_hand, *state.ai_hand]


def _pass_turn(state: GameState) -> None:
    state.current_turn = other_side(state.current_turn)
    state.turns_taken += 1


def _end_game(state: GameState, winner: Side) -> None:
    state.status = "game_over"
    state.winner = winner
    state.event_log.append({"type": "GAME_ENDED", "winner": winner, "turns": state.turns_taken})


def _draw(state: GameState, action: DrawCardAction) -> StepResult:
    if state.status != "playing":
        return StepResult(ok=False, events=[], error="Cannot draw right now.")
    if action.side != state.current_turn:
        return StepResult(ok=False, events=[], error="Not your turn.")

    before = len(state.event_log)
    if not state.deck:
        state.event_log.append({"type": "TURN_SKIPPED", "side": action.side})
    else:
        card = state.deck.pop()
        state.hand(action.side).append(card)
        state.event_log.append({"type": "CARD_DRAWN", "side": action.side, "card_id": card.id})
    # Drawing always ends the turn, even if the drawn card is playable.
    _pass_turn(state)
    return StepResult(ok=True, events=state.event_log[before:])


def _play_card(state: GameState, action: PlayCardAction) -> StepResult:
    if state.status != "playing":
        return StepResult(ok=False, events=[], error="Cannot play right now.")
    if action.side != state.current_turn:
        return StepResult(ok=False, events=[], error="Not your turn.")

    hand = state.hand(action.side)
    index = next((i for i, c in enumerate(hand) if c.id == action.card_id), None)
    if index is None:
        return StepResult(ok=False, events=[], error="Card not in hand.")
    card = hand[index]
    if not is_valid_move(card, state.active_suit, top_discard(state)):
        return StepResult(ok=False, events=[], error=INVALID_MOVE)
    if card.is_wild and action.side == "ai" and action.declared_suit is None:
        return StepResult(ok=False, events=[], error="Declare a suit for the 8.")

    before = len(state.event_log)
    hand.pop(index)
    state.discard_pile.append(card)
    state.event_log.append({"type": "CARD_PLAYED", "side": action.side, "card_id": card.id})

    if card.is_wild and action.side == "ai":
        assert action.declared_suit is not None
        state.active_suit = action.declared_suit
        state.event_log.append({"type": "SUIT_CHOSEN", "side": "ai", "suit": action.declared_suit})
    elif not card.is_wild:
        state.active_suit = card.suit

    if not hand:
        _end_game(state, action.side)
    elif card.is_wild and action.side == "player":
        state.status = "suit_selection"
        state.event_log.append({"type": "SUIT_SELECTION_STARTED", "side": "player"})
    else:
        _pass_turn(state)
    return StepResult(ok=True, events=state.event_log[before:])


def _choose_suit(state: GameState, action: ChooseSuitAction) -> StepResult:
    if state.status != "suit_selection" or action.side != "player":
        return StepResult(ok=False, events=[], error="No suit to choose.")
    if action.suit not in SUITS:
        return StepResult(ok=False, events=[], error=f"Unknown suit: {action.suit}")

    before = len(state.event_log)
    state.active_suit = action.suit
    state.status = "playing"
    state.event_log.append({"type": "SUIT_CHOSEN", "side": "player", "suit": action.suit})
    _pass_turn(state)
    return StepResult(ok=True, events=state.event_log[before:])


def step(state: GameState, action: Action) -> StepResult:
    """Apply a single action to the game state.

    Mutates `state` in place. Rejected actions leave it untouched and carry a
    human-readable `error`.
    """
    if state.status == "game_over":
        return StepResult(ok=False, events=[], error="Game is over.")
    if state.status == "waiting":
        return StepResult(ok=False, events=[], error="Game has not started.")

    if isinstance(action, PlayCardAction):
        return _play_card(state, action)
    if isinstance(action, DrawCardAction):
        return _draw(state, action)
    if isinstance(action, ChooseSuitAction):
        return _choose_suit(state, action)
    return StepResult(ok=False, events=[], error="Unknown action.")
