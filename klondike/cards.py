"""Playing cards, suits and the 52-card deck."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

DECK_SIZE = 52
KING = 13
CARD_DIR = "resource/cards"
EMPTY_TEXTURE = f"{CARD_DIR}/no_card.bmp"

_RANK_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Color(Enum):
    """Colour of a card."""

    RED = 0
    BLACK = 1


class Suit(IntEnum):
    """The four suits, in the order they appear in a fresh deck."""

    DIAMONDS = 0
    CLUBS = 1
    HEARTS = 2
    SPADES = 3

    def color(self) -> Color:
        """Return the colour of the suit."""
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    @property
    def texture_name(self) -> str:
        return self.name.capitalize()


@dataclass(eq=False)
class Card:
    """A card; value 0 marks the empty base of a foundation."""

    suit: Suit
    value: int
    face_up: bool = False

    def color(self) -> Color:
        """Return the colour of the card's suit."""
        return self.suit.color()

    def texture(self) -> str:
        """Return the path of the image that shows the card's face."""
        if self.value == 0:
            return EMPTY_TEXTURE
        rank = _RANK_NAMES.get(self.value, str(self.value))
        return f"{CARD_DIR}/card{self.suit.texture_name}{rank}.bmp"

    def __eq__(self, other: object) -> bool:
        """Cards compare equal when their values match, whatever the suit."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]


def new_deck() -> list[Card]:
    """Return a full, ordered, face-down deck of 52 cards."""
    return [Card(suit, value) for suit in Suit for value in range(1, KING + 1)]


def shuffle_deck(cards: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return the first 52 cards of ``cards`` in a random order."""
    if len(cards) < DECK_SIZE:
        raise ValueError(f"a deck needs {DECK_SIZE} cards, got {len(cards)}")
    rng = rng if rng is not None else random.Random()
    order = rng.sample(range(DECK_SIZE), DECK_SIZE)
    return [cards[index] for index in order]


def describe_deck(cards: Iterable[Card]) -> str:
    """Return one line per card giving its suit number and value."""
    return "".join(
        f"Card : {int(card.suit)} | value : {card.value}\n" for card in cards
    )