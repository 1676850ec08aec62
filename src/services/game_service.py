"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeclareWinnerRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    LeaveGameRequest,
    MoveRequest,
)
from src.core.config import get_settings
from src.core.exceptions import GameStateError, NotYourTurnError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Player, State
from src.db.repository import GameRepository
from src.tictactoe.board import Board
from src.tictactoe.formatting import print_board
from src.tictactoe.game import EventResult, TicTacToeGame
from src.tictactoe.matchmaking import CoinFlip, random_coin_flip

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe."""

    def __init__(
        self, repository: GameRepository, coin_flip: Optional[CoinFlip] = None
    ) -> None:
        self.repo = repository
        self.coin_flip = coin_flip or random_coin_flip(
            random.Random(get_settings().random_seed)
        )

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Open a new game. Nobody has joined yet."""
        starting_player = (
            Player[request.starting_player.upper()]
            if request.starting_player
            else Player.CIRCLES
        )
        new_game = TicTacToeGame.new_game(starting_player, self.coin_flip)
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """A participant requested to join. Matchmaking decides which symbol they play."""
        game = self._load_game(request.game_id)
        result = game.join(request.participant_id)
        return self._store_and_respond(request.game_id, game, result)

    def leave_game(self, request: LeaveGameRequest) -> GameResponse:
        """Participant disconnected. Leaving a game in progress forfeits it."""
        game = self._load_game(request.game_id)
        player = self._player_of(game, request.participant_id)
        result = game.leave(player)
        return self._store_and_respond(request.game_id, game, result)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""
        game = self._load_game(request.game_id)
        player = self._player_of(game, request.participant_id)

        # only the current mover may play. The game itself does not know who sends the event.
        if game.state == State.PLAYING and player != game.context.current_mover():
            err = NotYourTurnError(
                f"It is not your turn. Waiting for {game.context.current_mover().name.lower()} to make a move first."
            )
            logger.warning("Rejected move by %r: %s", request.participant_id, err)
            result = EventResult(accepted=False, state=game.state, reason=str(err))
            return self._create_game_response(request.game_id, game.to_model(), result)

        result = game.move(request.row, request.col)
        return self._store_and_respond(request.game_id, game, result)

    def declare_winner(self, request: DeclareWinnerRequest) -> GameResponse:
        """Winner decided out of band (already verified by the caller)."""
        game = self._load_game(request.game_id)
        result = game.declare_winner(Player[request.player.upper()])
        return self._store_and_respond(request.game_id, game, result)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _load_game(self, game_id: UUID) -> TicTacToeGame:
        return TicTacToeGame.from_model(self._fetch_game(game_id), self.coin_flip)

    def _player_of(self, game: TicTacToeGame, participant_id: str) -> Player:
        player = game.player_of(participant_id)
        if player is None:
            raise GameStateError(
                f"Participant {participant_id!r} is not playing in this game."
            )
        return player

    def _store_and_respond(
        self, game_id: UUID, game: TicTacToeGame, result: EventResult
    ) -> GameResponse:
        """Rejected events did not change anything, so there is nothing to store."""
        model = game.to_model()
        if result.accepted:
            self.repo.update_game(game_id, model)
        return self._create_game_response(game_id, model, result)

    def _create_game_response(
        self, game_id: UUID, model: GameModel, result: Optional[EventResult] = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        board = Board.from_rows(model.board)
        return GameResponse(
            game_id=game_id,
            status=State(model.status),
            board=model.board,
            rendered_board=print_board(board),
            turn=model.turn,
            players=model.registered_players,
            winner=model.winner,
            is_draw=(
                model.status == State.ENDED
                and model.winner is None
                and board.is_full()
            ),
            accepted=result.accepted if result else True,
            reason=result.reason if result else None,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
