"""Window, drawing and asset loading for the Klondike game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from typing import NamedTuple

import pygame

from klondike.cards import Card, new_deck
from klondike.game import (
    CARD_OFFSET,
    COLUMN_STEP,
    GOAL_AREAS,
    HAND,
    HAND_AREA,
    MARGIN,
    PILE_AREAS,
    PILE_TOP,
    RESET_BUTTON,
    SOUND_BUTTON,
    STOCK_AREA,
    Klondike,
    SoundEffect,
)

WINDOW_SIZE = (1400, 900)
FRAME_RATE = 60
EXIT_FAILURE = 84

APP_ICON = "app_icon.bmp"
BACKGROUND = "backgrounds/background.jpeg"
VOID_CARD = "cards/no_card.bmp"
CARD_BACK = "cards/card_back.bmp"
SELECTOR_UP = "selector_up.bmp"
SELECTOR_DOWN = "selector_down.bmp"
SOUND_ON_ICON = "icons/volume.png"
SOUND_OFF_ICON = "icons/volume_off.png"
REFRESH_ICON = "icons/refresh.bmp"
WIN_IMAGE = "win.jpeg"
WIN_POSITION = (350, 350)
GOAL_PATTERNS = (
    "cards/goalDiamonds.bmp",
    "cards/goalClubs.bmp",
    "cards/goalHearts.bmp",
    "cards/goalSpades.bmp",
)


class AssetError(Exception):
    """Raised when an image or a sound cannot be loaded."""


class Placement(NamedTuple):
    """An image to draw and the window position of its top-left corner."""

    image: str
    position: tuple[int, int]


def card_image(card: Card) -> str:
    """Return the resource name of the image showing ``card``'s face."""
    path = PurePosixPath(card.texture())
    if path.parts and path.parts[0] == "resource":
        path = path.relative_to("resource")
    return str(path)


REQUIRED_IMAGES: tuple[str, ...] = (
    APP_ICON,
    BACKGROUND,
    VOID_CARD,
    CARD_BACK,
    SELECTOR_UP,
    SELECTOR_DOWN,
    SOUND_ON_ICON,
    SOUND_OFF_ICON,
    REFRESH_ICON,
    WIN_IMAGE,
    *GOAL_PATTERNS,
    *(card_image(card) for card in new_deck()),
)


class Assets:
    """Loads and caches the images and sounds found under a resource directory."""

    def __init__(self, resource_dir: str | Path = "resource") -> None:
        self.resource_dir = Path(resource_dir)
        self._images: dict[str, pygame.Surface] = {}
        self._sounds: dict[SoundEffect, pygame.mixer.Sound] = {}

    def image(self, name: str) -> pygame.Surface:
        """Return the image stored under ``name``, loading it on first use."""
        cached = self._images.get(name)
        if cached is not None:
            return cached
        path = self.resource_dir / name
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"cannot load image {path}: {exc}") from exc
        self._images[name] = surface
        return surface

    def sound(self, effect: SoundEffect) -> pygame.mixer.Sound:
        """Return the sound for ``effect``, loading it on first use."""
        cached = self._sounds.get(effect)
        if cached is not None:
            return cached
        path = self.resource_dir / "sounds" / f"{effect.value}.ogg"
        try:
            sound = pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"cannot load sound {path}: {exc}") from exc
        self._sounds[effect] = sound
        return sound

    def play(self, effect: SoundEffect, enabled: bool) -> bool:
        """Play ``effect`` if sound is enabled and audio is available.

        Returns whether a sound was started.
        """
        if not enabled or pygame.mixer.get_init() is None:
            return False
        self.sound(effect).play()
        return True


class KlondikeWindow:
    """Draws a :class:`Klondike` game and feeds it the player's clicks."""

    def __init__(
        self,
        game: Klondike | None = None,
        resource_dir: str | Path = "resource",
    ) -> None:
        self.game = game if game is not None else Klondike()
        self.assets = Assets(resource_dir)
        for name in REQUIRED_IMAGES:
            self.assets.image(name)
        self.game.on_sound = self.assets.play
        self.size: tuple[int, int] = WINDOW_SIZE
        self.running = False
        self._screen: pygame.Surface | None = None
        self._scaled_background: tuple[tuple[int, int], pygame.Surface] | None = None

    def layout(self) -> list[Placement]:
        """Return the images making up the current frame, in drawing order."""
        game = self.game
        placements = [Placement(BACKGROUND, (0, 0))]

        for pattern, goal, area in zip(GOAL_PATTERNS, game.goals, GOAL_AREAS):
            position = (area.left, area.top)
            placements.append(Placement(pattern, position))
            placements.append(Placement(card_image(goal[-1]), position))

        hand_position = (HAND_AREA.left, HAND_AREA.top)
        if game.hand and game.hand_index is not None:
            placements.append(
                Placement(card_image(game.hand[game.hand_index]), hand_position)
            )

        stock_position = (STOCK_AREA.left, STOCK_AREA.top)
        placements.append(Placement(VOID_CARD, stock_position))
        if game.hand and (
            game.hand_index is None or game.hand_index < len(game.hand) - 1
        ):
            placements.append(Placement(CARD_BACK, stock_position))

        for pile, area in zip(game.piles, PILE_AREAS):
            placements.append(Placement(VOID_CARD, (area.left, PILE_TOP)))
            for depth, card in enumerate(pile):
                name = card_image(card) if card.face_up else CARD_BACK
                placements.append(
                    Placement(name, (area.left, PILE_TOP + CARD_OFFSET * depth))
                )

        if game.selected == HAND:
            placements.append(Placement(SELECTOR_UP, hand_position))
            placements.append(
                Placement(SELECTOR_DOWN, (HAND_AREA.left, MARGIN + COLUMN_STEP))
            )
        elif game.selected is not None:
            left = PILE_AREAS[game.selected].left
            top = PILE_TOP + CARD_OFFSET * game.selector
            below = max(len(game.piles[game.selected]) - (game.selector + 1), 0)
            placements.append(Placement(SELECTOR_UP, (left, top)))
            placements.append(
                Placement(SELECTOR_DOWN, (left, top + COLUMN_STEP + CARD_OFFSET * below))
            )

        if game.is_game_won():
            placements.append(Placement(WIN_IMAGE, WIN_POSITION))

        sound_icon = SOUND_ON_ICON if game.sound else SOUND_OFF_ICON
        placements.append(Placement(sound_icon, (SOUND_BUTTON.left, SOUND_BUTTON.top)))
        placements.append(
            Placement(REFRESH_ICON, (RESET_BUTTON.left, RESET_BUTTON.top))
        )
        return placements

    def _background(self) -> pygame.Surface:
        if self._scaled_background is None or self._scaled_background[0] != self.size:
            scaled = pygame.transform.scale(self.assets.image(BACKGROUND), self.size)
            self._scaled_background = (self.size, scaled)
        return self._scaled_background[1]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current frame onto ``surface``."""
        for name, position in self.layout():
            image = self._background() if name == BACKGROUND else self.assets.image(name)
            surface.blit(image, position)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            width, height = event.size
            self.size = (max(width, WINDOW_SIZE[0]), max(height, WINDOW_SIZE[1]))
            if self._screen is not None:
                self._screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            x, y = event.pos
            self.game.click(x, y)

    def run(self) -> int:
        """Open the window and run the game until it is closed."""
        pygame.init()
        try:
            if pygame.mixer.get_init() is not None:
                for effect in SoundEffect:
                    self.assets.sound(effect)
            self._screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption("Klondike")
            pygame.display.set_icon(self.assets.image(APP_ICON))
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.game.show_last_cards()
                self._screen.fill((0, 0, 0))
                self.draw(self._screen)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            self._screen = None
            pygame.quit()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; return 0 on a normal exit and 84 on any failure."""
    parser = argparse.ArgumentParser(prog="klondike", description="Klondike solitaire.")
    parser.add_argument(
        "--resources", default="resource", help="directory holding images and sounds"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)
    try:
        game = Klondike(random.Random(args.seed))
        window = KlondikeWindow(game, args.resources)
        return window.run()
    except Exception:
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())