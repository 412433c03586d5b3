# whistgame

A rules engine for Whist, the bidding card game for three to six players.
A game runs over a fixed schedule of rounds. The package also has a simple
computer opponent.

## Modules

- `whistgame.deck`
  - `Suit`, `Card` and `Deck`.
  - The game constants, such as `MAX_GAME_PLAYERS`, `MAX_CARDS` and `BONUS`.
  - `compare_cards(first, second, trump)`, which returns 0 for equal cards,
    1 when the first card wins and 2 when the second wins.
  - A `Deck` is built for a number of players, from 3 to 6. It supports
    `len()`, `shuffle(rng)` and `deal()`.
- `whistgame.player`
  - `Player`, whose hand has a fixed number of slots; an empty slot holds
    `None`.
  - Methods `add_card`, `take_card`, `sort_hand`, `nth_card_index` and
    `card_count`.
  - `card_sort_key`, which orders cards by suit and then by value.
  - `check_player_name`, which rejects a name shorter than five characters
    or one that does not start with a Latin letter.
- `whistgame.hand`
  - `Hand`, a single trick: `players[i]` lays down `cards[i]`.
  - `check_card(player, card_id, trump)` tells whether a card may legally be
    played. A player must follow the lead suit if possible, and otherwise
    play a trump if they hold one.
- `whistgame.round`
  - `Round`, which deals cards with `distribute_card` and `distribute_deck`.
    The card after the deal becomes the trump.
  - Bids are checked and recorded with `check_bid` and `place_bid`.
  - `hand_winner` finds the winner of a complete trick.
  - `determine_score` scores the round, and `copy_score_from` carries scores
    over from another round.
  - `must_repeat` and `reinitialize` handle a round in which nobody took
    exactly what they bid.
- `whistgame.game`
  - `Game` of type 1 (1-8-1) or 8 (8-1-8).
  - `create_and_add_rounds` builds the round schedule.
  - `add_players_in_all_rounds` seats the players in each round, rotating
    who starts.
  - `reward_player`, `reward_players` and `reward_pending` handle the bonus
    for five won or lost rounds in a row.
- `whistgame.robot`
  - `choose_bid(player, rnd)` returns the bid of a computer-controlled player.
  - `choose_card(player, rnd)` returns the slot of the card it plays.
- `whistgame.errors`
  - `WhistError` and its subclasses, raised whenever a rule is broken.
  - The subclasses are `IllegalValueError`, `IllegalBidError`,
    `DuplicateError`, `DuplicateNameError`, `FullError`, `NotFoundError`,
    `InsufficientPlayersError`, `InsufficientCardsError` and
    `IncorrectNameError`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
import random

from whistgame.deck import Deck
from whistgame.game import Game
from whistgame.player import Player
from whistgame.robot import choose_bid

game = Game(1)  # 1 for 1-8-1, 8 for 8-1-8
for name in ("Alice", "Robot1", "Robot2"):
    game.add_player(Player(name))

game.create_and_add_rounds()
game.add_players_in_all_rounds()

first = game.rounds[0]
deck = Deck(game.players_number)
deck.shuffle(random.Random(7))
first.distribute_deck(deck)

for player in first.players:
    if player is not None:
        first.place_bid(player, choose_bid(player, first))
```

`Game.players` and `Round.players` have a fixed number of places, and empty
places hold `None`. Skip those places when you loop over the players.

A move that breaks the rules raises an exception derived from
`whistgame.errors.WhistError`. For example, the last player to bid may not
make the bids add up to the number of cards dealt. Such a bid makes
`place_bid` raise `IllegalBidError`.

## What it does not do

The package is a library of game rules only.

- It has no command to run, no screen and no graphical table.
- It has no loop that plays a whole game on its own. The caller decides
  when to deal, bid, play cards and move to the next round, and calls the
  methods above in that order.
- It does not save games anywhere.

## Running the tests

```
pytest
```