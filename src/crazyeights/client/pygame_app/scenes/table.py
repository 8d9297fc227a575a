from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from crazyeights.engine.rules import playable_cards, top_discard
from crazyeights.engine.types import SUITS, Card
from crazyeights.session import GameSession

from ..app import GameContext, SceneTransition
from ..asset_manager import suit_color
from ..ui import Button, dim_screen, draw_text, draw_text_centered

FELT = (14, 78, 56)
HIGHLIGHT = (250, 210, 60)

PLAYER_CARD = (84, 120)
AI_CARD = (64, 92)
PILE_CARD = (96, 136)


def _row_rects(count: int, size: tuple[int, int], y: int, width: int, max_step: int) -> list[pygame.Rect]:
    """Lay out `count` cards centered on a row, overlapping once they run out of room."""
    if count == 0:
        return []
    w, h = size
    avail = width - 80
    step = min(max_step, (avail - w) // max(1, count - 1)) if count > 1 else 0
    total = w + step * (count - 1)
    x0 = (width - total) // 2
    return [pygame.Rect(x0 + i * step, y, w, h) for i in range(count)]


class TableScene:
    def __init__(self, ctx: GameContext, session: GameSession) -> None:
        self.ctx = ctx
        self.session = session
        self._next: SceneTransition | None = None

        width = ctx.screen.get_width()
        self.btn_rules = Button(rect=pygame.Rect(width - 270, 20, 120, 40), text="Rules", on_click=self._on_rules)
        self.btn_restart = Button(rect=pygame.Rect(width - 140, 20, 120, 40), text="Restart", on_click=self._on_restart)
        self.btn_play_again = Button(
            rect=pygame.Rect(width // 2 - 150, 430, 300, 56),
            text="Play Again",
            on_click=self._on_restart,
        )
        self.btn_close_rules = Button(
            rect=pygame.Rect(width // 2 - 100, 520, 200, 48),
            text="Got it!",
            on_click=self._on_rules,
        )
        self._suit_buttons = [
            Button(
                rect=pygame.Rect(width // 2 - 210 + (i % 2) * 220, 300 + (i // 2) * 90, 200, 70),
                text=suit.capitalize(),
                on_click=lambda s=suit: self.session.choose_suit(s),
                text_color=suit_color(suit),
            )
            for i, suit in enumerate(SUITS)
        ]

    # -------- Intents --------
    def _on_rules(self) -> None:
        self.session.toggle_rules_panel()

    def _on_restart(self) -> None:
        self.session.start_new_game()

    # -------- Layout --------
    def _player_rects(self) -> list[pygame.Rect]:
        return _row_rects(
            len(self.session.state.player_hand), PLAYER_CARD, 590, self.ctx.screen.get_width(), PLAYER_CARD[0] + 8
        )

    def _ai_rects(self) -> list[pygame.Rect]:
        return _row_rects(len(self.session.state.ai_hand), AI_CARD, 90, self.ctx.screen.get_width(), 36)

    def _draw_pile_rect(self) -> pygame.Rect:
        cx = self.ctx.screen.get_width() // 2
        return pygame.Rect(cx - PILE_CARD[0] - 60, 280, *PILE_CARD)

    def _discard_rect(self) -> pygame.Rect:
        cx = self.ctx.screen.get_width() // 2
        return pygame.Rect(cx + 60, 280, *PILE_CARD)

    def _hit_test_hand(self, pos: tuple[int, int]) -> Card | None:
        hand = self.session.state.player_hand
        # Later cards overlap earlier ones, so test from the top down.
        for rect, card in reversed(list(zip(self._player_rects(), hand))):
            if rect.collidepoint(pos):
                return card
        return None

    # -------- Scene protocol --------
    def handle_event(self, event: pygame.event.Event) -> None:
        st = self.session.state
        if self.session.show_rules:
            self.btn_close_rules.handle_event(event)
            return
        if st.status == "suit_selection":
            for b in self._suit_buttons:
                if b.handle_event(event):
                    return
            return
        if st.status == "game_over":
            self.btn_play_again.handle_event(event)
            self.btn_restart.handle_event(event)
            return

        if self.btn_rules.handle_event(event) or self.btn_restart.handle_event(event):
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._draw_pile_rect().collidepoint(event.pos):
                self.session.draw_card()
                return
            card = self._hit_test_hand(event.pos)
            if card is not None:
                self.session.play_card(card.id)

    def update(self, dt: float) -> SceneTransition | None:
        self.session.update(dt)
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(FELT)
        fonts = self.ctx.assets.fonts
        st = self.session.state

        draw_text(screen, fonts.big, "CRAZY 8s", (30, 20))
        turn_text = "Your Turn" if st.current_turn == "player" else "AI Thinking..."
        draw_text(screen, fonts.small, turn_text.upper(), (30, 56), color=(180, 230, 200))
        self.btn_rules.draw(screen, fonts.ui)
        self.btn_restart.draw(screen, fonts.ui)

        # AI hand, face down
        back = self.ctx.assets.card_back(AI_CARD)
        for rect in self._ai_rects():
            screen.blit(back, rect.topleft)
        draw_text_centered(screen, fonts.small, f"AI Opponent: {len(st.ai_hand)} cards", (screen.get_width() // 2, 200))

        self._draw_piles(screen)

        draw_text_centered(screen, fonts.ui, self.session.message, (screen.get_width() // 2, 505), color=(250, 240, 200))

        self._draw_player_hand(screen)
        draw_text(screen, fonts.small, f"{len(st.player_hand)} Cards", (30, screen.get_height() - 26))
        draw_text(screen, fonts.small, "Standard 52 Deck", (screen.get_width() - 150, screen.get_height() - 26))

        if st.status == "suit_selection":
            self._draw_suit_selector(screen)
        elif st.status == "game_over":
            self._draw_game_over(screen)
        if self.session.show_rules:
            self._draw_rules(screen)

    # -------- Drawing --------
    def _draw_piles(self, screen: pygame.Surface) -> None:
        fonts = self.ctx.assets.fonts
        st = self.session.state

        pile = self._draw_pile_rect()
        if st.deck:
            back = self.ctx.assets.card_back(PILE_CARD)
            screen.blit(back, (pile.x + 4, pile.y + 4))
            screen.blit(back, pile.topleft)
        else:
            pygame.draw.rect(screen, (10, 60, 44), pile, width=2, border_radius=10)
        draw_text_centered(screen, fonts.small, f"Draw Pile ({len(st.deck)})", (pile.centerx, pile.bottom + 16))

        discard = self._discard_rect()
        top = top_discard(st)
        if top is not None:
            screen.blit(self.ctx.assets.card_face(top, PILE_CARD), discard.topleft)
        draw_text_centered(screen, fonts.small, "Discard Pile", (discard.centerx, discard.bottom + 16))
        if st.active_suit is not None:
            draw_text_centered(
                screen,
                fonts.ui,
                f"Active suit: {st.active_suit}",
                (discard.centerx, discard.bottom + 40),
                color=(250, 130, 130) if st.active_suit in ("hearts", "diamonds") else (240, 240, 240),
            )

    def _draw_player_hand(self, screen: pygame.Surface) -> None:
        st = self.session.state
        can_act = st.current_turn == "player" and st.status == "playing"
        playable_ids = {c.id for c in playable_cards(st, "player")} if can_act else set()
        for rect, card in zip(self._player_rects(), st.player_hand):
            y = rect.y - 14 if card.id in playable_ids else rect.y
            screen.blit(self.ctx.assets.card_face(card, PLAYER_CARD), (rect.x, y))
            if card.id in playable_ids:
                pygame.draw.rect(screen, HIGHLIGHT, pygame.Rect(rect.x, y, *PLAYER_CARD), width=3, border_radius=10)

    def _draw_suit_selector(self, screen: pygame.Surface) -> None:
        dim_screen(screen)
        draw_text_centered(screen, self.ctx.assets.fonts.big, "Choose a New Suit", (screen.get_width() // 2, 260))
        for b in self._suit_buttons:
            b.draw(screen, self.ctx.assets.fonts.big)

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        dim_screen(screen)
        won = self.session.state.winner == "player"
        title = "You Won!" if won else "AI Won!"
        subtitle = (
            "Congratulations! You are the Crazy Eights master."
            if won
            else "Better luck next time! The AI was too quick."
        )
        cx = screen.get_width() // 2
        draw_text_centered(screen, self.ctx.assets.fonts.big, title, (cx, 340))
        draw_text_centered(screen, self.ctx.assets.fonts.ui, subtitle, (cx, 385))
        self.btn_play_again.draw(screen, self.ctx.assets.fonts.ui)

    def _draw_rules(self, screen: pygame.Surface) -> None:
        dim_screen(screen, alpha=200)
        fonts = self.ctx.assets.fonts
        cx = screen.get_width() // 2
        draw_text_centered(screen, fonts.big, "How to Play", (cx, 200))
        lines = self.ctx.rules.rules if self.ctx.rules is not None else ()
        y = 250
        for line in lines:
            draw_text_centered(screen, fonts.ui, f"- {line}", (cx, y))
            y += 34
        self.btn_close_rules.draw(screen, fonts.ui)
