"""A round of whist: bids, tricks, trump and the score it produces."""

from __future__ import annotations

from contextlib import suppress

from whistgame.deck import (
    MAX_CARDS,
    MAX_GAME_PLAYERS,
    MIN_CARDS,
    MIN_GAME_PLAYERS,
    POINTS_PER_ROUND,
    Card,
    Deck,
    compare_cards,
)
from whistgame.errors import (
    DuplicateError,
    FullError,
    IllegalBidError,
    IllegalValueError,
    InsufficientCardsError,
    InsufficientPlayersError,
    NotFoundError,
)
from whistgame.hand import Hand
from whistgame.player import Player


class Round:
    """One round, in which every player receives ``round_type`` cards.

    The per-player lists are indexed by the player's place in ``players``.
    ``bonus`` holds 0 when the player was not rewarded, 1 for a positive
    and 2 for a negative reward.
    """

    def __init__(self, round_type: int) -> None:
        if not MIN_CARDS <= round_type <= MAX_CARDS:
            raise IllegalValueError(
                f"round type must lie between {MIN_CARDS} and {MAX_CARDS}, "
                f"got {round_type}"
            )
        self.round_type = round_type
        self.trump: Card | None = None
        self.bids: list[int] = [0] * MAX_GAME_PLAYERS
        self.hands_number: list[int] = [0] * MAX_GAME_PLAYERS
        self.bonus: list[int] = [0] * MAX_GAME_PLAYERS
        self.points_number: list[int] = [0] * MAX_GAME_PLAYERS
        self.players: list[Player | None] = [None] * MAX_GAME_PLAYERS
        self.hand: Hand | None = None

    def _seated(self) -> list[Player]:
        return [player for player in self.players if player is not None]

    def add_player(self, player: Player) -> None:
        """Seat a player in the first free place of the round."""
        if player is None:
            raise IllegalValueError("a player is required")
        if any(seated is player for seated in self.players):
            raise DuplicateError("the player is already in the round")
        for index, seated in enumerate(self.players):
            if seated is None:
                self.players[index] = player
                return
        raise FullError("the round has no free place")

    def add_players_in_hand(self, first_player: int) -> None:
        """Seat the round's players in the hand, starting from ``first_player``."""
        if not 0 <= first_player < MAX_GAME_PLAYERS:
            raise IllegalValueError(f"player place out of range: {first_player}")
        if self.hand is None:
            raise NotFoundError("the round has no hand")
        if len(self._seated()) < MIN_GAME_PLAYERS:
            raise InsufficientPlayersError("too few players in the round")
        order = self.players[first_player:] + self.players[:first_player]
        for player in order:
            if player is None:
                continue
            with suppress(DuplicateError, FullError):
                self.hand.add_player(player)

    def distribute_card(self, deck: Deck) -> None:
        """Deal one card from the deck to every player of the round."""
        if deck is None:
            raise IllegalValueError("a deck is required")
        seated = self._seated()
        if len(seated) < MIN_GAME_PLAYERS:
            raise InsufficientPlayersError("too few players in the round")
        if len(deck) < len(seated):
            raise InsufficientCardsError("too few cards left in the deck")
        for player in seated:
            player.add_card(deck.cards[0])
            deck.deal()

    def distribute_deck(self, deck: Deck) -> None:
        """Deal ``round_type`` cards to each player; the next card becomes trump."""
        if deck is None:
            raise IllegalValueError("a deck is required")
        for _ in range(self.round_type):
            self.distribute_card(deck)
        if len(deck):
            self.trump = deck.deal()

    def player_id(self, player: Player) -> int:
        """Return the place of the player in the round."""
        if player is None:
            raise IllegalValueError("a player is required")
        for index, seated in enumerate(self.players):
            if seated is player:
                return index
        raise NotFoundError("the player is not in the round")

    def bids_sum(self) -> int:
        """Return the sum of the bids of the seated players."""
        return sum(
            bid for bid, player in zip(self.bids, self.players) if player is not None
        )

    def check_bid(self, player: Player, bid: int) -> bool:
        """Tell whether the player may bid ``bid``.

        The last player to bid may not make the bids add up to the number
        of cards in the round.
        """
        if player is None:
            raise IllegalValueError("a player is required")
        if not MIN_CARDS - 1 <= bid <= self.round_type:
            return False
        position = self.player_id(player)
        if any(later is not None for later in self.players[position + 1 :]):
            return True
        return self.bids_sum() + bid != self.round_type

    def place_bid(self, player: Player, bid: int) -> None:
        """Record the player's bid, raising IllegalBidError if it is not allowed."""
        if not self.check_bid(player, bid):
            raise IllegalBidError(f"bid {bid} is not allowed")
        self.bids[self.player_id(player)] = bid

    def hand_winner(self) -> Player | None:
        """Return the player who won the current hand, or None if it is incomplete."""
        hand = self.hand
        if hand is None:
            return None
        players_number = sum(player is not None for player in hand.players)
        cards_number = sum(card is not None for card in hand.cards)
        if players_number < MIN_GAME_PLAYERS or players_number != cards_number:
            return None

        trump = self.trump.suit if self.trump is not None else None
        winner = hand.players[0]
        winning_card = hand.cards[0]
        if winning_card is None:
            return None
        for player, card in zip(hand.players[1:], hand.cards[1:]):
            if card is None:
                continue
            if compare_cards(winning_card, card, trump) == 2:
                winner, winning_card = player, card
        return winner

    def determine_score(self) -> None:
        """Add the points the players earned or lost in this round."""
        for index, player in enumerate(self.players):
            if player is None:
                continue
            bid = self.bids[index]
            taken = self.hands_number[index]
            if taken == bid:
                self.points_number[index] += POINTS_PER_ROUND + bid
            else:
                self.points_number[index] -= abs(taken - bid)

    def copy_score_from(self, other: Round) -> None:
        """Copy every player's score from another round into this one."""
        if other is None:
            raise IllegalValueError("a round is required")
        for index, player in enumerate(other.players):
            if player is None:
                continue
            self.points_number[self.player_id(player)] = other.points_number[index]

    def must_repeat(self) -> bool:
        """Tell whether no player took exactly the number of hands bid."""
        return not any(
            player is not None and bid == taken
            for player, bid, taken in zip(self.players, self.bids, self.hands_number)
        )

    def reinitialize(self) -> None:
        """Clear bids, hands taken, trump and hand so the round can be replayed."""
        self.bids = [0] * MAX_GAME_PLAYERS
        self.hands_number = [0] * MAX_GAME_PLAYERS
        self.trump = None
        self.hand = None