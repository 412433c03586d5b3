import pytest

from whistgame.deck import MAX_CARDS, MIN_GAME_PLAYERS, Card, Deck, Suit
from whistgame.errors import (
    DuplicateError,
    FullError,
    IllegalValueError,
    IncorrectNameError,
    NotFoundError,
)
from whistgame.player import Player, card_sort_key, check_player_name

NAMES = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J"]


def _player_with(cards):
    player = Player("A")
    for card in cards:
        player.add_card(card)
    return player


@pytest.mark.parametrize(
    "action",
    [
        lambda: Player(None, True),
        lambda: Player("A", True).add_card(None),
        lambda: check_player_name(None),
    ],
)
def test_missing_argument_is_illegal(action):
    with pytest.raises(IllegalValueError):
        action()


@pytest.mark.parametrize("index", range(10))
def test_create_player(index):
    player = Player(NAMES[index], index % 2 == 1)
    assert player.is_human == (index % 2 == 1)
    assert player.name == NAMES[index]
    assert player.hand == [None] * MAX_CARDS


def test_add_card():
    deck = Deck(MIN_GAME_PLAYERS)
    player = Player("A", True)
    for i in range(MAX_CARDS):
        player.add_card(deck.cards[i])
        assert player.hand[i] is deck.cards[i]
        with pytest.raises(DuplicateError):
            player.add_card(deck.cards[i])

    with pytest.raises(FullError):
        player.add_card(deck.cards[MAX_CARDS + 1])
    assert player.card_count() == MAX_CARDS


def test_add_card_fills_first_free_slot():
    player = _player_with(Card(Suit.CLUBS, v) for v in (3, 4, 5))
    player.take_card(1)
    extra = Card(Suit.HEARTS, 15)
    player.add_card(extra)
    assert player.hand[1] is extra


def test_take_card():
    card = Card(Suit.SPADES, 10)
    player = _player_with([card])
    assert player.take_card(0) is card
    assert player.hand[0] is None


@pytest.mark.parametrize(
    "slot, error",
    [(0, NotFoundError), (MAX_CARDS, IllegalValueError), (-1, IllegalValueError)],
)
def test_take_card_errors(slot, error):
    player = _player_with([Card(Suit.SPADES, 10)])
    player.take_card(0)
    with pytest.raises(error):
        player.take_card(slot)


def test_card_sort_key_orders_by_suit_then_value():
    cards = [
        Card(Suit.HEARTS, 3),
        Card(Suit.DIAMONDS, 15),
        Card(Suit.DIAMONDS, 4),
        Card(Suit.CLUBS, 9),
    ]
    assert sorted(cards, key=card_sort_key) == [
        Card(Suit.DIAMONDS, 4),
        Card(Suit.DIAMONDS, 15),
        Card(Suit.CLUBS, 9),
        Card(Suit.HEARTS, 3),
    ]


def test_sort_hand_moves_empty_slots_last():
    player = _player_with(
        [Card(Suit.HEARTS, 3), Card(Suit.DIAMONDS, 15), Card(Suit.CLUBS, 9)]
    )
    player.take_card(1)
    player.sort_hand()
    assert player.hand[:2] == [Card(Suit.CLUBS, 9), Card(Suit.HEARTS, 3)]
    assert player.hand[2:] == [None] * (MAX_CARDS - 2)


@pytest.mark.parametrize("name", ["Robot1", "alice", "Zorro"])
def test_check_player_name_accepts(name):
    assert check_player_name(name) is None


@pytest.mark.parametrize("name", ["", "Bob", "1robot", "_alice", "Robo"])
def test_check_player_name_rejects(name):
    with pytest.raises(IncorrectNameError):
        check_player_name(name)


@pytest.fixture
def gapped():
    player = _player_with(Card(Suit.DIAMONDS, v) for v in (3, 4, 5, 6))
    player.take_card(0)
    player.take_card(2)
    return player


def test_nth_card_index_skips_empty_slots(gapped):
    assert [gapped.nth_card_index(n) for n in (1, 2)] == [1, 3]


@pytest.mark.parametrize("number", [3, 0, MAX_CARDS + 1])
def test_nth_card_index_out_of_range(gapped, number):
    with pytest.raises(IllegalValueError):
        gapped.nth_card_index(number)


def test_card_count():
    player = Player("A")
    assert player.card_count() == 0
    player.add_card(Card(Suit.CLUBS, 12))
    player.add_card(Card(Suit.CLUBS, 13))
    assert player.card_count() == 2
    player.take_card(0)
    assert player.card_count() == 1