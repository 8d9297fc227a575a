from __future__ import annotations

import random
from typing import Sequence

from crazyeights.engine.actions import DrawCardAction, PlayCardAction
from crazyeights.engine.ai import ai_take_turn, choose_ai_action, choose_suit_for_eight
from crazyeights.engine.deck import card_id
from crazyeights.engine.game import GameConfig, GameState
from crazyeights.engine.types import Card


def _card(suit: str, rank: str) -> Card:
    return Card(id=card_id(suit, rank), suit=suit, rank=rank)  # type: ignore[arg-type]


def _ai_turn_state(ai: Sequence[Card], deck: Sequence[Card] = (), top: Card | None = None) -> GameState:
    top = top or _card("hearts", "K")
    return GameState(
        config=GameConfig(),
        rng=random.Random(0),
        deck=list(deck),
        discard_pile=[top],
        player_hand=[_card("spades", "A"), _card("spades", "2")],
        ai_hand=list(ai),
        current_turn="ai",
        status="playing",
        active_suit=top.suit,
    )


def test_suit_choice_picks_most_held_suit() -> None:
    eight = _card("hearts", "8")
    hand = [eight, _card("clubs", "2"), _card("clubs", "5"), _card("spades", "9")]
    assert choose_suit_for_eight(hand, eight) == "clubs"


def test_suit_choice_ignores_the_eight_being_played() -> None:
    eight = _card("spades", "8")
    hand = [eight, _card("diamonds", "2")]
    assert choose_suit_for_eight(hand, eight) == "diamonds"


def test_suit_choice_ties_follow_enumeration_order() -> None:
    eight = _card("clubs", "8")
    hand = [eight, _card("spades", "2"), _card("diamonds", "5"), _card("spades", "3"), _card("diamonds", "9")]
    assert choose_suit_for_eight(hand, eight) == "diamonds"
    # nothing left at all: first suit
    assert choose_suit_for_eight([eight], eight) == "hearts"


def test_ai_prefers_non_eight() -> None:
    state = _ai_turn_state(ai=[_card("clubs", "8"), _card("spades", "K"), _card("hearts", "2")])
    action = choose_ai_action(state)
    assert action == PlayCardAction(side="ai", card_id="spades-K")


def test_ai_plays_eight_atomically_without_suit_selection() -> None:
    state = _ai_turn_state(ai=[_card("clubs", "8"), _card("diamonds", "3"), _card("diamonds", "4")])
    res = ai_take_turn(state)
    assert res is not None and res.ok
    assert state.discard_pile[-1].id == "clubs-8"
    assert state.active_suit == "diamonds"
    assert state.status == "playing"
    assert state.current_turn == "player"


def test_ai_draws_one_card_when_nothing_is_playable() -> None:
    state = _ai_turn_state(
        ai=[_card("spades", "3"), _card("clubs", "4")],
        deck=[_card("diamonds", "9"), _card("diamonds", "10")],
    )
    assert choose_ai_action(state) == DrawCardAction(side="ai")
    res = ai_take_turn(state)
    assert res is not None and res.ok
    assert len(state.ai_hand) == 3
    assert state.ai_hand[-1].id == "diamonds-10"
    assert len(state.deck) == 1
    assert state.current_turn == "player"


def test_ai_skips_when_deck_is_empty() -> None:
    state = _ai_turn_state(ai=[_card("spades", "3")])
    res = ai_take_turn(state)
    assert res is not None and res.ok
    assert res.events[0]["type"] == "TURN_SKIPPED"
    assert len(state.ai_hand) == 1
    assert state.current_turn == "player"


def test_ai_wins_with_last_card() -> None:
    state = _ai_turn_state(ai=[_card("hearts", "2")])
    res = ai_take_turn(state)
    assert res is not None and res.ok
    assert state.status == "game_over"
    assert state.winner == "ai"


def test_ai_wins_with_last_eight() -> None:
    state = _ai_turn_state(ai=[_card("spades", "8")])
    res = ai_take_turn(state)
    assert res is not None and res.ok
    assert state.status == "game_over"
    assert state.winner == "ai"
    assert state.active_suit == "hearts"


def test_ai_does_nothing_out_of_turn() -> None:
    state = _ai_turn_state(ai=[_card("hearts", "2")])
    state.current_turn = "player"
    assert ai_take_turn(state) is None
    assert len(state.ai_hand) == 1

    state.current_turn = "ai"
    state.status = "game_over"
    assert ai_take_turn(state) is None
