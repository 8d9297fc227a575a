from __future__ import annotations

import random

from crazyeights.engine.game import accounted_cards
from crazyeights.engine.rules import playable_cards
from crazyeights.session import GameSession


def _play_out(session: GameSession, max_turns: int = 300) -> None:
    """Drive the player side with the simplest legal choice until the game ends."""
    for _ in range(max_turns):
        st = session.state
        if st.status == "game_over":
            return
        if st.status == "suit_selection":
            session.choose_suit("hearts")
        else:
            options = playable_cards(st, "player")
            if options:
                session.play_card(options[0].id)
            else:
                session.draw_card()
        session.flush()
        ids = {c.id for c in accounted_cards(session.state)}
        assert len(ids) == 52


def test_same_seed_same_game() -> None:
    s1 = GameSession(rng=random.Random(424242))
    s2 = GameSession(rng=random.Random(424242))
    s1.start_new_game()
    s2.start_new_game()
    assert s1.snapshot() == s2.snapshot()

    _play_out(s1)
    _play_out(s2)
    assert s1.snapshot() == s2.snapshot()


def test_restart_replaces_all_state() -> None:
    session = GameSession(rng=random.Random(11))
    session.start_new_game()
    _play_out(session, max_turns=5)
    session.start_new_game()
    st = session.state
    assert len(st.player_hand) == 8
    assert len(st.ai_hand) == 8
    assert len(st.discard_pile) == 1
    assert st.status == "playing"
    assert st.winner is None
    assert session.pending is None
