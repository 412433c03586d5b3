"""Players and the cards they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from whistgame.deck import MAX_CARDS, Card
from whistgame.errors import (
    DuplicateError,
    FullError,
    IllegalValueError,
    IncorrectNameError,
    NotFoundError,
)


def card_sort_key(card: Card) -> tuple[int, int]:
    """Key that orders cards by suit, then by value."""
    return (int(card.suit), card.value)


def check_player_name(name: str) -> None:
    """Raise IncorrectNameError unless the name is acceptable.

    A name needs at least five characters and must start with a Latin letter.
    """
    if name is None:
        raise IllegalValueError("a name is required")
    if len(name) < 5 or not "a" <= name[0].lower() <= "z":
        raise IncorrectNameError(f"incorrect player name: {name!r}")


def _empty_hand() -> list[Card | None]:
    return [None] * MAX_CARDS


@dataclass(eq=False)
class Player:
    """A player; ``hand`` has MAX_CARDS slots, empty slots hold None."""

    name: str
    is_human: bool = False
    hand: list[Card | None] = field(default_factory=_empty_hand)

    def __post_init__(self) -> None:
        if self.name is None:
            raise IllegalValueError("a player needs a name")

    def add_card(self, card: Card) -> None:
        """Put a card into the first free slot of the hand."""
        if card is None:
            raise IllegalValueError("a card is required")
        if any(held is card for held in self.hand):
            raise DuplicateError("the card is already in the hand")
        for index, held in enumerate(self.hand):
            if held is None:
                self.hand[index] = card
                return
        raise FullError("the hand is full")

    def take_card(self, index: int) -> Card:
        """Remove and return the card in the given slot."""
        if not 0 <= index < MAX_CARDS:
            raise IllegalValueError(f"card slot out of range: {index}")
        card = self.hand[index]
        if card is None:
            raise NotFoundError(f"no card in slot {index}")
        self.hand[index] = None
        return card

    def sort_hand(self) -> None:
        """Sort the held cards by suit and value, moving empty slots last."""
        cards = sorted(
            (card for card in self.hand if card is not None), key=card_sort_key
        )
        self.hand[:] = cards + [None] * (MAX_CARDS - len(cards))

    def nth_card_index(self, number: int) -> int:
        """Return the slot of the number-th held card, counting from 1."""
        if not 1 <= number <= MAX_CARDS:
            raise IllegalValueError(f"card number out of range: {number}")
        held = [index for index, card in enumerate(self.hand) if card is not None]
        if number > len(held):
            raise IllegalValueError(f"the player holds fewer than {number} cards")
        return held[number - 1]

    def card_count(self) -> int:
        """Return how many cards the player holds."""
        return sum(card is not None for card in self.hand)