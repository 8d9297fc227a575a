from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Literal

from crazyeights.engine.actions import ChooseSuitAction, DrawCardAction, PlayCardAction
from crazyeights.engine.ai import ai_take_turn
from crazyeights.engine.game import Event, GameConfig, GameState, StepResult, new_game, step, waiting_state
from crazyeights.engine.serialize import snapshot
from crazyeights.engine.types import SUITS, Suit
from crazyeights.services.telemetry import TelemetryService

logger = logging.getLogger(__name__)

TaskKind = Literal["ai_turn", "skip_turn"]


@dataclass(frozen=True)
class SessionConfig:
    ai_delay: float = 1.5
    skip_delay: float = 1.0
    welcome_message: str = "Welcome to Crazy Eights!"
    game: GameConfig = field(default_factory=GameConfig)


@dataclass
class PendingTask:
    kind: TaskKind
    remaining: float
    generation: int


def _ai_message(events: list[Event]) -> str:
    for ev in events:
        if ev.get("type") == "SUIT_CHOSEN":
            return f"AI played an 8 and chose {ev.get('suit')}. Your turn!"
        if ev.get("type") == "CARD_DRAWN":
            return "AI drew a card. Your turn!"
        if ev.get("type") == "TURN_SKIPPED":
            return "AI skipped turn. Your turn!"
    return "Your turn!"


class GameSession:
    """Owns the single game state and turns UI intents into engine steps.

    The presentation layer calls the intent methods and `update(dt)` once per
    frame. AI turns and empty-deck skips run as a delayed `PendingTask`; the
    generation counter drops tasks that were scheduled for an earlier game or
    before the player entered suit selection.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        rng: random.Random | None = None,
        telemetry: TelemetryService | None = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.rng = rng or random.Random()
        self.telemetry = telemetry
        self.state: GameState = waiting_state(self.config.game, self.rng)
        self.message: str = self.config.welcome_message
        self.show_rules = False
        self._pending: PendingTask | None = None
        self._generation = 0

    # -------- Intents --------
    def start_new_game(self) -> None:
        self._generation += 1
        self._pending = None
        self.state = new_game(self.config.game, self.rng)
        self.message = "Your turn! Match the suit or rank."
        logger.info("new game: starter=%s", self.state.discard_pile[-1].id)
        if self.telemetry is not None:
            self.telemetry.log("game_started", {"starter": self.state.discard_pile[-1].id})

    def play_card(self, card_id: str) -> StepResult | None:
        if self._pending is not None and self._pending.kind == "skip_turn":
            return None
        res = step(self.state, PlayCardAction(side="player", card_id=card_id))
        if not res.ok:
            self.message = res.error or "Invalid move."
            return res
        logger.debug("player played %s", card_id)
        if self.state.status == "suit_selection":
            # Anything scheduled before the 8 went down is stale now.
            self._generation += 1
            self.message = "Crazy 8! Choose a new suit."
        else:
            self.message = "AI's turn..."
        self._after_transition()
        return res

    def draw_card(self) -> StepResult | None:
        if self.state.status != "playing" or self.state.current_turn != "player":
            return None
        if self._pending is not None:
            return None
        if not self.state.deck:
            self.message = "Deck is empty! Skipping turn."
            self._schedule("skip_turn", self.config.skip_delay)
            return None
        res = step(self.state, DrawCardAction(side="player"))
        if res.ok:
            self.message = "You drew a card."
            self._after_transition()
        return res

    def choose_suit(self, suit: str) -> StepResult:
        if suit not in SUITS:
            raise ValueError(f"Unknown suit: {suit!r}")
        chosen: Suit = suit  # type: ignore[assignment]
        res = step(self.state, ChooseSuitAction(side="player", suit=chosen))
        if res.ok:
            self.message = f"Suit changed to {chosen}. AI's turn..."
            self._after_transition()
        return res

    def toggle_rules_panel(self) -> None:
        self.show_rules = not self.show_rules

    # -------- Scheduling --------
    @property
    def pending(self) -> PendingTask | None:
        return self._pending

    @property
    def ai_thinking(self) -> bool:
        return self.state.status == "playing" and self.state.current_turn == "ai"

    def update(self, dt: float) -> None:
        if self._pending is None:
            return
        self._pending.remaining -= dt
        if self._pending.remaining <= 0:
            self._fire()

    def flush(self) -> None:
        """Run every pending task right away, ignoring delays."""
        while self._pending is not None:
            self._fire()

    def _schedule(self, kind: TaskKind, delay: float) -> None:
        self._pending = PendingTask(kind=kind, remaining=delay, generation=self._generation)
        logger.debug("scheduled %s in %.2fs", kind, delay)

    def _fire(self) -> None:
        task = self._pending
        self._pending = None
        if task is None:
            return
        if task.generation != self._generation:
            logger.debug("dropping stale %s", task.kind)
            return

        if task.kind == "skip_turn":
            st = self.state
            if st.status != "playing" or st.current_turn != "player" or st.deck:
                logger.debug("dropping stale skip_turn")
                return
            step(st, DrawCardAction(side="player"))
            self._after_transition()
            return

        res = ai_take_turn(self.state)
        if res is None:
            logger.debug("dropping stale ai_turn")
            return
        if not res.ok:
            # The policy only proposes legal actions.
            logger.error("AI action rejected: %s", res.error)
            return
        self.message = _ai_message(res.events)
        self._after_transition()

    def _after_transition(self) -> None:
        st = self.state
        if st.status == "game_over":
            self.message = "You won!" if st.winner == "player" else "AI won!"
            logger.info("game over: winner=%s turns=%d", st.winner, st.turns_taken)
            if self.telemetry is not None:
                self.telemetry.log("game_over", {"winner": st.winner, "turns": st.turns_taken})
            return
        if st.status == "playing" and st.current_turn == "ai" and st.winner is None:
            self._schedule("ai_turn", self.config.ai_delay)

    # -------- Snapshot --------
    def snapshot(self) -> dict[str, object]:
        snap = snapshot(self.state)
        snap["message"] = self.message
        snap["show_rules"] = self.show_rules
        snap["ai_thinking"] = self.ai_thinking
        return snap
