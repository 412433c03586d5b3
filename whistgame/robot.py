"""Decisions of a computer-controlled player."""

from __future__ import annotations

from whistgame.deck import MAX_CARDS, Card, Suit
from whistgame.errors import IllegalValueError, NotFoundError
from whistgame.player import Player
from whistgame.round import Round

HIGH_VALUES = (14, 15)
STRONG_TRUMP = 10
TOP_VALUE = 15


def _trump_suit(rnd: Round) -> Suit | None:
    return rnd.trump.suit if rnd.trump is not None else None


def _held(player: Player) -> list[tuple[int, Card]]:
    return [(index, card) for index, card in enumerate(player.hand) if card is not None]


def _highest(cards: list[tuple[int, Card]]) -> int:
    return max(cards, key=lambda item: item[1].value)[0]


def _lowest(cards: list[tuple[int, Card]]) -> int:
    return min(cards, key=lambda item: item[1].value)[0]


def choose_bid(player: Player, rnd: Round) -> int:
    """Return the number of hands the robot bids in the round."""
    if player is None or rnd is None:
        raise IllegalValueError("a player and a round are required")
    cards = [card for _, card in _held(player)]
    trump = _trump_suit(rnd)

    if rnd.round_type == 1:
        has_trump = trump is not None and any(card.suit == trump for card in cards)
        if has_trump:
            return 1 if rnd.check_bid(player, 1) else 0
        return 0 if rnd.check_bid(player, 0) else 1

    if rnd.round_type == MAX_CARDS:
        bids = sum(card.value in HIGH_VALUES for card in cards)
    else:
        bids = sum(
            (trump is not None and card.suit == trump and card.value >= STRONG_TRUMP)
            or card.value == TOP_VALUE
            for card in cards
        )
    if rnd.check_bid(player, bids):
        return bids
    return bids + 1 if bids == 0 else bids - 1


def choose_card(player: Player, rnd: Round) -> int:
    """Return the slot of the card the robot lays down in the current hand."""
    if player is None or rnd is None:
        raise IllegalValueError("a player and a round are required")
    hand = rnd.hand
    if hand is None:
        raise NotFoundError("the round has no hand")
    position = rnd.player_id(player)
    held = _held(player)
    if not held:
        raise NotFoundError("the player holds no cards")
    wants_hands = rnd.bids[position] > rnd.hands_number[position]

    if hand.players[0] is player:
        return _highest(held) if wants_hands else _lowest(held)

    lead = hand.cards[0]
    trump = _trump_suit(rnd)
    following = [item for item in held if lead is not None and item[1].suit == lead.suit]
    trumps = [item for item in held if trump is not None and item[1].suit == trump]

    if wants_hands:
        if following:
            return _highest(following)
        if trumps:
            return _highest(trumps)
        return _lowest(held)
    if following:
        return _lowest(following)
    if trumps:
        return _lowest(trumps)
    return _highest(held)