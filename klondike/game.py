"""Game rules and click handling for Klondike solitaire."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal, Union

from klondike.cards import KING, Card, Suit, new_deck, shuffle_deck

PILE_COUNT: Final = 7
GOAL_COUNT: Final = 4

MARGIN: Final = 50
COLUMN_STEP: Final = 160
CARD_WIDTH: Final = 140
CARD_HEIGHT: Final = 190
PILE_TOP: Final = 350
CARD_OFFSET: Final = 40

HAND: Final = "hand"
Selection = Union[int, Literal["hand"]]


class SoundEffect(Enum):
    """Sound effects the game asks to be played."""

    CARD_PLACE = "cardPlace"
    CARD_SLIDE = "cardSlide"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window coordinates."""

    left: int
    top: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Return whether the point lies inside; right and bottom edges are excluded."""
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )


SOUND_BUTTON: Final = Rect(1300, 50, 70, 70)
RESET_BUTTON: Final = Rect(1300, 150, 70, 70)
HAND_AREA: Final = Rect(MARGIN + COLUMN_STEP * 5, MARGIN, CARD_WIDTH, 200)
STOCK_AREA: Final = Rect(MARGIN + COLUMN_STEP * 6, MARGIN, CARD_WIDTH, 200)
GOAL_AREAS: Final = tuple(
    Rect(MARGIN + COLUMN_STEP * i, MARGIN, CARD_WIDTH, 200) for i in range(GOAL_COUNT)
)
PILE_AREAS: Final = tuple(
    Rect(MARGIN + COLUMN_STEP * i, MARGIN, CARD_WIDTH, 2000) for i in range(PILE_COUNT)
)

SoundCallback = Callable[[SoundEffect, bool], None]


class Klondike:
    """State of a Klondike game and the moves a player can make on it.

    ``hand`` is the stock; ``hand_index`` is the position of the card turned
    over from it, or ``None`` when no card is turned.  ``selected`` is ``None``,
    :data:`HAND`, or the index of a pile whose card at ``selector`` is picked up.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        on_sound: SoundCallback | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.on_sound = on_sound
        self.sound = True
        self.hand: list[Card] = []
        self.piles: list[list[Card]] = []
        self.goals: list[list[Card]] = []
        self.selected: Selection | None = None
        self.selector = 0
        self.hand_index: int | None = None
        self.reset()

    def _play(self, effect: SoundEffect) -> None:
        if self.on_sound is not None:
            self.on_sound(effect, self.sound)

    def reset(self) -> None:
        """Shuffle a fresh deck and deal a new game."""
        self.selected = None
        self.selector = 0
        self.hand_index = None
        self.hand = shuffle_deck(new_deck(), self.rng)
        self.piles = []
        for size in range(1, PILE_COUNT + 1):
            pile = [self.hand.pop() for _ in range(size)]
            pile[-1].face_up = True
            self.piles.append(pile)
        self.goals = [[Card(suit, 0)] for suit in Suit]

    def is_game_won(self) -> bool:
        """Return whether every foundation is topped by a king."""
        return all(goal[-1].value == KING for goal in self.goals)

    def show_last_cards(self) -> None:
        """Turn the top card of every non-empty pile face up."""
        for pile in self.piles:
            if pile:
                pile[-1].face_up = True

    def switch_sound(self) -> None:
        """Toggle sound effects on or off."""
        self.sound = not self.sound

    def hand_next(self) -> None:
        """Turn over the next card of the stock, wrapping back to none."""
        self._play(SoundEffect.CARD_SLIDE)
        last = len(self.hand) - 1 if self.hand else None
        if self.hand_index == last:
            self.hand_index = None
            return
        self.hand_index = 0 if self.hand_index is None else self.hand_index + 1
        self.selected = None

    def select_hand(self) -> None:
        """Pick up the turned stock card, or drop whatever is picked up."""
        if self.selected is not None or not self.hand or self.hand_index is None:
            self.selected = None
        else:
            self.selected = HAND

    def _take_from_hand(self, destination: list[Card]) -> None:
        assert self.hand_index is not None
        destination.append(self.hand.pop(self.hand_index))
        if self.hand_index > 0:
            self.hand_index -= 1

    def select_goal(self, pos: int) -> None:
        """Try to move the picked-up card onto foundation ``pos``."""
        if self.selected is None:
            return
        self._play(SoundEffect.CARD_PLACE)
        goal = self.goals[pos]
        suit = Suit(pos)
        if self.selected == HAND:
            assert self.hand_index is not None
            card = self.hand[self.hand_index]
            if card.value == goal[-1].value + 1 and card.suit == suit:
                self._take_from_hand(goal)
                self.selected = None
            return
        source = self.piles[self.selected]
        if len(source) - 1 != self.selector:
            return
        card = source[self.selector]
        if card.value == goal[-1].value + 1 and card.suit == suit:
            goal.append(source.pop())
            self.selected = None

    def hand_to_pile(self, x: int, y: int) -> None:
        """Try to move the turned stock card onto pile ``x`` at card ``y``."""
        pile = self.piles[x]
        if y < len(pile):
            assert self.hand_index is not None
            card = self.hand[self.hand_index]
            target = pile[y]
            if card.value == target.value - 1 and card.color() != target.color():
                self._take_from_hand(pile)
        if y == 0 and not pile and self.hand[self.hand_index].value == KING:
            self._take_from_hand(pile)

    def _move_run(self, source: list[Card], destination: list[Card]) -> None:
        run = source[self.selector:]
        del source[self.selector:]
        destination.extend(run)

    def pile_to_pile(self, x: int, y: int) -> None:
        """Try to move the picked-up run of cards onto pile ``x`` at card ``y``."""
        pile = self.piles[x]
        if pile and len(pile) - 1 != y:
            return
        assert isinstance(self.selected, int)
        source = self.piles[self.selected]
        if pile:
            card = source[self.selector]
            target = pile[y]
            if card.value == target.value - 1 and card.color() != target.color():
                self._move_run(source, pile)
        if y == 0 and not pile and source[self.selector].value == KING:
            self._move_run(source, pile)

    def action(self, x: int, y: int) -> None:
        """Pick up card ``y`` of pile ``x``, or drop the held cards there."""
        if self.selected is None:
            self.selected = x
            self.selector = y
            self._play(SoundEffect.CARD_SLIDE)
            return
        if self.selected == HAND:
            self.hand_to_pile(x, y)
        else:
            self.pile_to_pile(x, y)
        self.selected = None
        self.selector = 0
        self._play(SoundEffect.CARD_PLACE)

    def is_card_valid(self, x: int, y: int) -> bool:
        """Return whether card ``y`` of pile ``x`` can be clicked.

        A position past the end of the pile is a drop target only while
        something is picked up.
        """
        pile = self.piles[x]
        if y >= len(pile):
            return self.selected is not None
        return pile[y].face_up

    def select_pile(self, pos: int, y: int) -> None:
        """Handle a click at height ``y`` in the column of pile ``pos``."""
        pile = self.piles[pos]
        top = PILE_TOP
        for card in range(len(pile)):
            if top < y < top + CARD_OFFSET and self.is_card_valid(pos, card):
                self.action(pos, card)
                return
            top += CARD_OFFSET
        if not pile:
            if PILE_TOP < y < PILE_TOP + CARD_HEIGHT and self.is_card_valid(pos, 0):
                self.action(pos, 0)
            return
        top -= CARD_OFFSET
        last = len(pile) - 1
        if top < y < top + CARD_HEIGHT and self.is_card_valid(pos, last):
            self.action(pos, last)

    def click(self, x: int, y: int) -> None:
        """Handle a left-button release at window position ``(x, y)``."""
        if SOUND_BUTTON.contains(x, y):
            self.switch_sound()
        elif RESET_BUTTON.contains(x, y):
            self.reset()
        elif HAND_AREA.contains(x, y):
            self.select_hand()
        elif STOCK_AREA.contains(x, y):
            self.hand_next()
        else:
            for pos, area in enumerate(GOAL_AREAS):
                if area.contains(x, y):
                    self.select_goal(pos)
                    return
            for pos, area in enumerate(PILE_AREAS):
                if area.contains(x, y):
                    self.select_pile(pos, y)
                    return
            self.selected = None