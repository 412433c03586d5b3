"""A whole game of whist: its players, its rounds and the rewards."""

from __future__ import annotations

from contextlib import suppress

from whistgame.deck import (
    BONUS,
    BONUS_ROUNDS_NUMBER,
    MAX_CARDS,
    MAX_GAME_PLAYERS,
    MAX_GAME_ROUNDS,
    MIN_GAME_PLAYERS,
    Deck,
)
from whistgame.errors import (
    DuplicateError,
    DuplicateNameError,
    FullError,
    IllegalValueError,
    InsufficientPlayersError,
    NotFoundError,
)
from whistgame.player import Player
from whistgame.round import Round

GAME_TYPES = (1, MAX_CARDS)
ROUND_STEPS = 6


class Game:
    """A game of type 1 (1-8-1) or 8 (8-1-8).

    ``players`` has MAX_GAME_PLAYERS places and ``rounds`` has
    MAX_GAME_ROUNDS places; empty places hold None.
    """

    def __init__(self, game_type: int) -> None:
        if game_type not in GAME_TYPES:
            raise IllegalValueError(f"game type must be 1 or 8, got {game_type}")
        self.game_type = game_type
        self.players_number = 0
        self.current_round = -1
        self.deck: Deck | None = None
        self.players: list[Player | None] = [None] * MAX_GAME_PLAYERS
        self.rounds: list[Round | None] = [None] * MAX_GAME_ROUNDS

    def add_player(self, player: Player) -> None:
        """Seat a player in the first free place of the game."""
        if player is None:
            raise IllegalValueError("a player is required")
        for seated in self.players:
            if seated is player:
                raise DuplicateError("the player is already in the game")
            if seated is not None and seated.name == player.name:
                raise DuplicateNameError(f"name already taken: {player.name!r}")
        for index, seated in enumerate(self.players):
            if seated is None:
                self.players[index] = player
                self.players_number += 1
                return
        raise FullError("the game has no free place")

    def add_round(self, rnd: Round) -> None:
        """Put a round into the first free place of the game."""
        if rnd is None:
            raise IllegalValueError("a round is required")
        if any(existing is rnd for existing in self.rounds):
            raise DuplicateError("the round is already in the game")
        for index, existing in enumerate(self.rounds):
            if existing is None:
                self.rounds[index] = rnd
                return
        raise FullError("the game has no free place for a round")

    def add_players_in_round(self, rnd: Round, first_player: int) -> None:
        """Seat the game's players in a round, starting from ``first_player``."""
        if rnd is None:
            raise IllegalValueError("a round is required")
        if not 0 <= first_player < MAX_GAME_PLAYERS:
            raise IllegalValueError(f"player place out of range: {first_player}")
        if self.players_number < MIN_GAME_PLAYERS:
            raise InsufficientPlayersError("too few players in the game")
        order = self.players[first_player:] + self.players[:first_player]
        for player in order:
            if player is None:
                continue
            with suppress(DuplicateError, FullError):
                rnd.add_player(player)

    def add_players_in_all_rounds(self) -> None:
        """Seat the players in every round, rotating who starts."""
        if self.players_number < MIN_GAME_PLAYERS:
            raise InsufficientPlayersError("too few players in the game")
        for index, rnd in enumerate(self.rounds):
            if rnd is not None:
                self.add_players_in_round(rnd, index % self.players_number)

    def create_and_add_rounds(self) -> None:
        """Create every round of the game, in playing order."""
        count = self.players_number
        if self.game_type == MAX_CARDS:
            step, turn = -1, 1
        else:
            step, turn = 1, MAX_CARDS
        types = [self.game_type] * count
        types += [self.game_type + step * k for k in range(1, ROUND_STEPS + 1)]
        types += [turn] * count
        types += [turn - step * k for k in range(1, ROUND_STEPS + 1)]
        types += [self.game_type] * count
        for round_type in types:
            self.add_round(Round(round_type))

    def _check_round_index(self, current_round: int) -> None:
        if not 0 <= current_round < MAX_GAME_ROUNDS:
            raise IllegalValueError(f"round index out of range: {current_round}")

    def _tally(self, player: Player, indices: range) -> tuple[int, int]:
        """Count the rounds won and lost by the player among ``indices``."""
        won = lost = 0
        for index in indices:
            rnd = self.rounds[index]
            if rnd is None:
                raise NotFoundError(f"round {index} does not exist")
            position = rnd.player_id(player)
            if rnd.bonus[position] == 0 and rnd.round_type != 1:
                if rnd.bids[position] == rnd.hands_number[position]:
                    won += 1
                else:
                    lost += 1
        return won, lost

    def reward_player(self, player: Player, current_round: int) -> int:
        """Reward the player if the last rounds were all won or all lost.

        Returns 0 when there is no reward, 1 for a positive and 2 for a
        negative reward.
        """
        if player is None:
            raise IllegalValueError("a player is required")
        self._check_round_index(current_round)
        first = current_round - BONUS_ROUNDS_NUMBER + 1
        if first < 0:
            return 0
        won, lost = self._tally(player, range(first, current_round + 1))
        rnd = self.rounds[current_round]
        position = rnd.player_id(player)
        if won == BONUS_ROUNDS_NUMBER:
            rnd.points_number[position] += BONUS
            rnd.bonus[position] = 1
            return 1
        if lost == BONUS_ROUNDS_NUMBER:
            rnd.points_number[position] -= BONUS
            rnd.bonus[position] = 2
            return 2
        return 0

    def reward_players(self, current_round: int) -> None:
        """Reward every player of the game who has earned it."""
        self._check_round_index(current_round)
        if current_round - BONUS_ROUNDS_NUMBER + 1 < 0:
            return
        for player in self.players:
            if player is not None:
                self.reward_player(player, current_round)

    def player_position(self, player: Player) -> int:
        """Return the player's place among the seated players."""
        if player is None:
            raise IllegalValueError("a player is required")
        seated = [p for p in self.players if p is not None]
        for position, candidate in enumerate(seated):
            if candidate is player:
                return position
        raise NotFoundError("the player is not in the game")

    def reward_pending(self, current_round: int, player: Player) -> int:
        """Tell whether the current round decides a reward for the player.

        Returns 1 when a positive and 2 when a negative reward is at stake,
        0 otherwise.
        """
        if player is None:
            raise IllegalValueError("a player is required")
        self._check_round_index(current_round)
        first = current_round - BONUS_ROUNDS_NUMBER + 1
        if first < 0:
            return 0
        won, lost = self._tally(player, range(first, current_round))
        if won == BONUS_ROUNDS_NUMBER - 1:
            return 1
        if lost == BONUS_ROUNDS_NUMBER - 1:
            return 2
        return 0