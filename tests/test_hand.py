import pytest

from whistgame.deck import MAX_GAME_PLAYERS, VALUES, Card, Deck, Suit
from whistgame.errors import (
    DuplicateError,
    FullError,
    IllegalValueError,
    NotFoundError,
)
from whistgame.hand import Hand
from whistgame.player import Player


def _seat(hand, count=MAX_GAME_PLAYERS):
    players = [Player("A", bool(i % 2)) for i in range(count)]
    for player in players:
        hand.add_player(player)
    return players


def _allowed(hand, player, slots, trump=None):
    return [hand.check_card(player, slot, trump) for slot in slots]


def _discard(player, *slots):
    for slot in slots:
        player.take_card(slot)


def test_create_hand_is_empty():
    hand = Hand()
    assert hand.cards == [None] * MAX_GAME_PLAYERS
    assert hand.players == [None] * MAX_GAME_PLAYERS


def test_add_player():
    hand = Hand()
    with pytest.raises(IllegalValueError):
        hand.add_player(None)

    players = _seat(hand)
    assert all(seated is player for seated, player in zip(hand.players, players))
    for player in players:
        with pytest.raises(DuplicateError):
            hand.add_player(player)

    with pytest.raises(FullError):
        hand.add_player(Player("A", True))
    assert hand.players == players


def test_add_card():
    hand = Hand()
    deck = Deck(MAX_GAME_PLAYERS)
    players = _seat(hand)
    for player, card in zip(players, deck.cards):
        hand.add_card(player, card)
    assert all(
        hand.players[i] is players[i] and hand.cards[i] is deck.cards[i]
        for i in range(MAX_GAME_PLAYERS)
    )

    with pytest.raises(NotFoundError):
        hand.add_card(Player("A"), deck.cards[MAX_GAME_PLAYERS])


def test_player_id():
    hand = Hand()
    players = _seat(hand, 3)
    assert [hand.player_id(p) for p in players] == [0, 1, 2]
    with pytest.raises(NotFoundError):
        hand.player_id(Player("A"))


@pytest.fixture
def dealt():
    hand = Hand()
    players = _seat(hand, 3)
    for suit in Suit:
        for j in range(6):
            players[j % 3].add_card(Card(suit, VALUES[j]))
    return hand, players


@pytest.mark.parametrize("slot", [-1, 8])
def test_check_card_rejects_bad_slots(dealt, slot):
    hand, players = dealt
    with pytest.raises(IllegalValueError):
        hand.check_card(players[0], slot, None)


def test_check_card_rejects_empty_slot(dealt):
    hand, players = dealt
    players[0].take_card(0)
    with pytest.raises(NotFoundError):
        hand.check_card(players[0], 0, None)


def test_check_card(dealt):
    hand, players = dealt

    assert _allowed(hand, players[0], (0, 2, 4, 6)) == [True] * 4

    hand.add_card(players[0], players[0].take_card(0))
    assert _allowed(hand, players[1], (2, 0)) == [False, True]

    _discard(players[1], 0, 1)
    assert _allowed(hand, players[1], (2,)) == [True]
    hand.add_card(players[1], players[1].take_card(2))

    trump = Card(Suit.CLUBS, VALUES[6])
    assert _allowed(hand, players[2], (2, 4, 0, 1), trump) == [False, False, True, True]

    _discard(players[2], 0, 1)
    assert _allowed(hand, players[2], (2, 4), trump) == [True, False]

    _discard(players[2], 2, 3)
    assert _allowed(hand, players[2], (4, 6), trump) == [True, True]