"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is an event driven state machine (waiting --> playing --> ended) that owns the game context:
matchmaking on player joins, applying moves for the player whose turn it is and determining when the game is over.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Self, assert_never

from src.core.exceptions import GameError, GameStateError
from src.core.models import GameModel
from src.core.shared_types import AVAILABLE_PLAYER_NAMES, Player, State
from src.tictactoe.board import Board
from src.tictactoe.events import (
    CheckDraw,
    CheckWinner,
    Event,
    Move,
    PlayerJoin,
    PlayerLeave,
    Winner,
)
from src.tictactoe.matchmaking import CoinFlip, assign_symbol, random_coin_flip
from src.tictactoe.win_detector import has_winner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventResult:
    """What the caller gets back for every event: was it accepted, and in which state the machine ended up."""

    accepted: bool
    state: State
    reason: Optional[str] = None


@dataclass
class GameContext:
    board: Board = field(default_factory=Board.empty)
    turn: int = 0
    starting_player: Player = Player.CIRCLES
    crosses_player_id: Optional[str] = None
    circles_player_id: Optional[str] = None
    winner: Optional[Player] = None

    def player_id(self, player: Player) -> Optional[str]:
        return (
            self.crosses_player_id
            if player == Player.CROSSES
            else self.circles_player_id
        )

    def set_player_id(self, player: Player, participant_id: Optional[str]) -> None:
        if player == Player.CROSSES:
            self.crosses_player_id = participant_id
        else:
            self.circles_player_id = participant_id

    def player_of(self, participant_id: str) -> Optional[Player]:
        return next(
            (player for player in Player if self.player_id(player) == participant_id),
            None,
        )

    def current_mover(self) -> Player:
        """Turn parity combined with whoever moves on turn 0."""
        return Player((self.turn + self.starting_player) % 2)


class TicTacToeGame:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    def __init__(
        self,
        context: Optional[GameContext] = None,
        state: State = State.WAITING,
        coin_flip: Optional[CoinFlip] = None,
    ) -> None:
        self._context = context if context is not None else GameContext()
        self._state = state
        self._coin_flip = coin_flip or random_coin_flip()
        self._raised: deque[Event] = deque()

    @classmethod
    def new_game(
        cls,
        starting_player: Player = Player.CIRCLES,
        coin_flip: Optional[CoinFlip] = None,
    ) -> Self:
        """Empty board, no players, turn 0."""
        return cls(GameContext(starting_player=starting_player), coin_flip=coin_flip)

    @classmethod
    def from_model(cls, model: GameModel, coin_flip: Optional[CoinFlip] = None) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {state.value for state in State}:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(State)}"
            )

        context = GameContext(
            board=Board.from_rows(model.board),
            turn=model.turn,
            starting_player=_parse_player(model.starting_player),
            crosses_player_id=model.registered_players.get("crosses"),
            circles_player_id=model.registered_players.get("circles"),
            winner=_parse_player(model.winner) if model.winner else None,
        )
        return cls(context, State(model.status), coin_flip)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self._context.board.to_rows(),
            turn=self._context.turn,
            starting_player=self._context.starting_player.name.lower(),
            registered_players={
                player.name.lower(): participant_id
                for player in Player
                if (participant_id := self._context.player_id(player)) is not None
            },
            status=self._state.value,
            # NOTE Player.CROSSES == 0, so compare against None explicitly
            winner=(
                self._context.winner.name.lower()
                if self._context.winner is not None
                else None
            ),
        )

    @property
    def state(self) -> State:
        return self._state

    @property
    def context(self) -> GameContext:
        return self._context

    @property
    def is_over(self) -> bool:
        return self._state == State.ENDED

    @property
    def is_draw(self) -> bool:
        return self.is_over and self._context.winner is None and self._context.board.is_full()

    def player_of(self, participant_id: str) -> Optional[Player]:
        return self._context.player_of(participant_id)

    def send(self, event: Event) -> EventResult:
        """
        Process one external event to completion.
        ----

        1. dispatch to the handler of the current state (guards + actions)
        2. drain the internal events raised by the handler, in order
        3. report back whether the event was accepted

        A rejected event leaves the context untouched. Rejections are not errors for the caller.
        """
        assert not self._raised, "send() is not re-entrant"
        try:
            self._dispatch(event)
        except GameError as err:
            self._raised.clear()
            logger.warning("Rejected %r in state %s: %s", event, self._state, err)
            return EventResult(accepted=False, state=self._state, reason=str(err))

        while self._raised:
            # events raised after a move are meaningless once the game is over
            if self._state == State.ENDED:
                self._raised.clear()
                break
            self._dispatch(self._raised.popleft())

        return EventResult(accepted=True, state=self._state)

    # --- convenience wrappers ---
    def join(self, participant_id: str) -> EventResult:
        return self.send(PlayerJoin(participant_id))

    def leave(self, player: Player) -> EventResult:
        return self.send(PlayerLeave(player))

    def move(self, row: int, col: int) -> EventResult:
        return self.send(Move(row, col))

    def declare_winner(self, player: Player) -> EventResult:
        return self.send(Winner(player))

    # -- PRIVATE HELPERS ---
    def _dispatch(self, event: Event) -> None:
        match self._state:
            case State.WAITING:
                self._on_waiting(event)
            case State.PLAYING:
                self._on_playing(event)
            case State.ENDED:
                raise GameStateError(
                    f"Game has ended. No further events accepted ({type(event).__name__})."
                )
            case _:
                assert_never(self._state)

    def _raise(self, event: Event) -> None:
        self._raised.append(event)

    def _transition(self, new_state: State) -> None:
        logger.info("Game state %s -> %s", self._state, new_state)
        self._state = new_state

    def _on_waiting(self, event: Event) -> None:
        match event:
            case PlayerJoin(participant_id=participant_id):
                self._add_player(participant_id)
            case PlayerLeave(player=player):
                self._remove_player(player)
            case Move() | Winner() | CheckWinner() | CheckDraw():
                raise GameStateError(
                    f"Game is waiting for players. Cannot handle {type(event).__name__}."
                )
            case _:
                assert_never(event)

    def _on_playing(self, event: Event) -> None:
        match event:
            case Move(row=row, col=col):
                self._apply_move(row, col)
            case Winner(player=player):
                self._end_with_winner(player)
            case CheckWinner(player=player):
                if has_winner(self._context.board, player):
                    self._end_with_winner(player)
            case CheckDraw():
                if self._context.winner is None and self._context.board.is_full():
                    logger.info("Board is full without a winner: draw.")
                    self._transition(State.ENDED)
            case PlayerLeave(player=player):
                self._forfeit(player)
            case PlayerJoin():
                raise GameStateError(
                    "Cannot join this game. Game is not accepting new players. status: playing"
                )
            case _:
                assert_never(event)

    # --- ACTIONS ---
    def _add_player(self, participant_id: str) -> None:
        if self._context.player_of(participant_id) is not None:
            raise GameStateError(f"Participant {participant_id!r} already joined.")

        decision = assign_symbol(
            self._context.crosses_player_id,
            self._context.circles_player_id,
            self._coin_flip,
        )
        self._context.set_player_id(decision.player, participant_id)
        logger.info(
            "Participant %r joined as %s", participant_id, decision.player.name.lower()
        )

        if decision.startable:
            self._context.turn = 0
            self._transition(State.PLAYING)

    def _remove_player(self, player: Player) -> None:
        participant_id = self._context.player_id(player)
        if participant_id is None:
            raise GameStateError(f"Nobody is playing {player.name.lower()}.")
        self._context.set_player_id(player, None)
        logger.info("Participant %r (%s) left", participant_id, player.name.lower())

    def _forfeit(self, player: Player) -> None:
        """Leaving a game in progress hands the win to the opponent."""
        # for the typechecker/invariant: both slots are filled while playing
        assert self._context.player_id(player) is not None
        self._remove_player(player)
        self._end_with_winner(player.opponent)

    def _apply_move(self, row: int, col: int) -> None:
        mover = self._context.current_mover()
        # set_cell validates bounds and occupancy before touching the board
        self._context.board.set_cell(row, col, mover)
        self._context.turn += 1
        logger.debug(
            "Turn %d: %s played (%d, %d)", self._context.turn, mover.name.lower(), row, col
        )

        self._raise(CheckWinner(mover))
        self._raise(CheckDraw())

    def _end_with_winner(self, player: Player) -> None:
        self._context.winner = player
        logger.info("Winner: %s", player.name.lower())
        self._transition(State.ENDED)


def _parse_player(name: str) -> Player:
    if name.upper() not in AVAILABLE_PLAYER_NAMES:
        raise GameStateError(
            f"Unknown player {name!r}. Pick one from {','.join(n.lower() for n in AVAILABLE_PLAYER_NAMES)}."
        )
    return Player[name.upper()]
