"""A single trick: the cards laid down by each player in turn."""

from __future__ import annotations

from typing import TypeVar

from whistgame.deck import MAX_CARDS, MAX_GAME_PLAYERS, Card
from whistgame.errors import (
    DuplicateError,
    FullError,
    IllegalValueError,
    NotFoundError,
)
from whistgame.player import Player

_T = TypeVar("_T")


def _required(value: _T | None, what: str) -> _T:
    if value is None:
        raise IllegalValueError(f"a {what} is required")
    return value


class Hand:
    """A trick in which ``players[i]`` lays down ``cards[i]``.

    Players are added in the order in which they play.
    """

    def __init__(self) -> None:
        self.cards: list[Card | None] = [None] * MAX_GAME_PLAYERS
        self.players: list[Player | None] = [None] * MAX_GAME_PLAYERS

    def add_player(self, player: Player) -> None:
        """Seat a player in the first free place."""
        _required(player, "player")
        if any(seated is player for seated in self.players):
            raise DuplicateError("the player is already in the hand")
        free = next((i for i, seated in enumerate(self.players) if seated is None), None)
        if free is None:
            raise FullError("the hand has no free place")
        self.players[free] = player

    def add_card(self, player: Player, card: Card) -> None:
        """Record the card laid down by a seated player."""
        _required(card, "card")
        self.cards[self.player_id(player)] = card

    def check_card(self, player: Player, card_id: int, trump: Card | None = None) -> bool:
        """Tell whether the player may lay down the card in slot ``card_id``."""
        _required(player, "player")
        if not 0 <= card_id < MAX_CARDS:
            raise IllegalValueError(f"card slot out of range: {card_id}")
        card = player.hand[card_id]
        if card is None:
            raise NotFoundError(f"no card in slot {card_id}")
        lead = self.cards[0]
        if lead is None:
            return True

        trump_suit = trump.suit if trump is not None else None
        held = [c for c in player.hand if c is not None]
        has_lead_suit = any(c.suit == lead.suit for c in held)
        has_trump = trump_suit is not None and any(c.suit == trump_suit for c in held)

        if card.suit == lead.suit:
            return True
        if has_lead_suit:
            return False
        return trump_suit is None or not has_trump or card.suit == trump_suit

    def player_id(self, player: Player) -> int:
        """Return the place of the player in the hand."""
        _required(player, "player")
        place = next((i for i, seated in enumerate(self.players) if seated is player), None)
        if place is None:
            raise NotFoundError("the player is not in the hand")
        return place