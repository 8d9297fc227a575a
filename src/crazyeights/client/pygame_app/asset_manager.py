from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]

from crazyeights.engine.types import Card, Suit

RED = (200, 30, 40)
BLACK = (20, 20, 30)

SUIT_LETTERS: dict[Suit, str] = {"hearts": "H", "diamonds": "D", "clubs": "C", "spades": "S"}


def suit_color(suit: Suit) -> tuple[int, int, int]:
    return RED if suit in ("hearts", "diamonds") else BLACK


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    card: pygame.font.Font


class AssetManager:
    """Fonts plus procedurally drawn card faces and backs, cached by size."""

    def __init__(self) -> None:
        self._cache: dict[tuple[str, int, int], pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
            card=pygame.font.SysFont(None, 30),
        )

    def card_back(self, size: tuple[int, int]) -> pygame.Surface:
        key = ("back", size[0], size[1])
        if key in self._cache:
            return self._cache[key]
        surf = pygame.Surface(size, pygame.SRCALPHA)
        rect = surf.get_rect()
        pygame.draw.rect(surf, (60, 50, 160), rect, border_radius=10)
        pygame.draw.rect(surf, (110, 100, 220), rect.inflate(-10, -10), width=2, border_radius=8)
        self._cache[key] = surf
        return surf

    def card_face(self, card: Card, size: tuple[int, int]) -> pygame.Surface:
        key = (card.id, size[0], size[1])
        if key in self._cache:
            return self._cache[key]
        surf = pygame.Surface(size, pygame.SRCALPHA)
        rect = surf.get_rect()
        pygame.draw.rect(surf, (250, 250, 250), rect, border_radius=10)
        pygame.draw.rect(surf, (0, 0, 0), rect, width=2, border_radius=10)

        color = suit_color(card.suit)
        rank_img = self.fonts.card.render(card.rank, True, color)
        surf.blit(rank_img, (8, 6))
        suit_img = self.fonts.small.render(SUIT_LETTERS[card.suit], True, color)
        surf.blit(suit_img, (9, 6 + rank_img.get_height()))

        name_img = self.fonts.small.render(card.suit, True, color)
        surf.blit(name_img, name_img.get_rect(center=rect.center).topleft)
        self._cache[key] = surf
        return surf
