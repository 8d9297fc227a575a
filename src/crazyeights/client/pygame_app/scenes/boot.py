from __future__ import annotations

import logging
import traceback

import pygame  # type: ignore[import-not-found]

from crazyeights.services.content import ContentError
from crazyeights.session import GameSession

from ..app import GameContext, SceneTransition
from ..ui import Button, draw_text
from .table import TableScene

logger = logging.getLogger(__name__)


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.content.validate_all()
            self.ctx.rules = self.ctx.content.load_rules()
            session = GameSession(
                config=self.ctx.rules.session_config(),
                rng=self.ctx.make_rng(),
                telemetry=self.ctx.telemetry,
            )
            session.start_new_game()
            self.ctx.session = session

            self.ctx.telemetry.log("boot", {"ok": True})
            return SceneTransition(TableScene(self.ctx, session))
        except (ContentError, OSError, ValueError) as e:
            logger.exception("boot failed")
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self._quit_button = Button(
                rect=pygame.Rect(20, 700, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 40, 30))
        font = self.ctx.assets.fonts.big
        draw_text(screen, font, "Crazy Eights", (20, 20))

        font2 = self.ctx.assets.fonts.ui
        if self._error is None:
            draw_text(screen, font2, "Shuffling...", (20, 80))
        else:
            draw_text(screen, font2, "BOOT ERROR", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, self.ctx.assets.fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, font2)
