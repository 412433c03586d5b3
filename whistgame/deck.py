"""Cards, the deck and the game-wide constants."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from whistgame.errors import (
    IllegalValueError,
    InsufficientCardsError,
)

DECK_SIZE = 48
MAX_GAME_PLAYERS = 6
MIN_GAME_PLAYERS = 3
MAX_GAME_ROUNDS = 30
MAX_CARDS = 8
MIN_CARDS = 1
SWAPS_NUMBER = 100
POINTS_PER_ROUND = 5
BONUS = 10
BONUS_ROUNDS_NUMBER = 5

VALUES = (3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 14, 15)


class Suit(IntEnum):
    """The four suits, in their sorting order."""

    DIAMONDS = 0
    CLUBS = 1
    SPADES = 2
    HEARTS = 3


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    value: int

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise IllegalValueError(f"unknown suit: {self.suit!r}") from None
        if self.value not in VALUES:
            raise IllegalValueError(f"illegal card value: {self.value!r}")
        object.__setattr__(self, "suit", suit)


class Deck:
    """The cards used for a game with a given number of players."""

    def __init__(self, players_number: int) -> None:
        if not MIN_GAME_PLAYERS <= players_number <= MAX_GAME_PLAYERS:
            raise IllegalValueError(
                f"players number must lie between {MIN_GAME_PLAYERS} "
                f"and {MAX_GAME_PLAYERS}, got {players_number}"
            )
        first = (MAX_GAME_PLAYERS - players_number) * 2
        self.cards: list[Card] = [
            Card(suit, value) for value in VALUES[first:] for suit in Suit
        ]

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck by swapping SWAPS_NUMBER pairs of distinct cards."""
        rng = rng if rng is not None else random.Random()
        size = len(self.cards)
        if size < 2:
            return
        for _ in range(SWAPS_NUMBER):
            a, b = rng.sample(range(size), 2)
            self.cards[a], self.cards[b] = self.cards[b], self.cards[a]

    def deal(self) -> Card:
        """Remove and return the card on top of the deck."""
        if not self.cards:
            raise InsufficientCardsError("the deck is empty")
        return self.cards.pop(0)


def compare_cards(first: Card, second: Card, trump: Suit | None) -> int:
    """Compare two cards under a trump suit.

    Returns 0 when the cards are equal, 1 when the first wins and 2 when
    the second wins. ``trump`` is None when there is no trump.
    """
    if first is None or second is None:
        raise IllegalValueError("both cards are required")
    if first.suit == second.suit and first.value == second.value:
        return 0
    if (
        (first.suit == trump and second.suit != trump)
        or (first.suit == second.suit and first.value > second.value)
        or (first.suit != second.suit and second.suit != trump)
    ):
        return 1
    return 2