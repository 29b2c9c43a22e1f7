"""
Othello game module.
Handles turn order, passes, terminal detection and the match loop.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Sequence, Tuple

from .board import Board, Coord, Player
from .rules import apply_move, has_legal_move, legal_moves

logger = logging.getLogger(__name__)

# Anything with `async choose_move(board, player, legal_moves)` or a bare
# async callable with the same signature
MoveChooser = Callable[[Board, Player, Sequence[Coord]], Awaitable[Coord]]


class GameState(Enum):
    AWAITING_MOVE = "awaiting_move"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class MoveRecord:
    """One applied move; `board` is the position before the move."""
    board: Board
    player: Player
    move: Coord


@dataclass(frozen=True)
class MatchResult:
    """Final board, winner (None for a draw) and the moves that were played."""
    board: Board
    winner: Optional[Player]
    moves: Tuple[MoveRecord, ...] = ()

    @property
    def score(self) -> Tuple[int, int]:
        return self.board.score()


def winner_of(board: Board) -> Optional[Player]:
    """The player with strictly more pieces, or None on equal counts."""
    black, white = board.score()
    if black > white:
        return Player.BLACK
    if white > black:
        return Player.WHITE
    return None


def _chooser(strategy: Any) -> MoveChooser:
    return getattr(strategy, 'choose_move', strategy)


class OthelloGame:
    """
    Game driver. Alternates turns between two strategies, passing when the
    player to move has no legal move and stopping once neither side can move.
    """

    def __init__(self, board: Optional[Board] = None, first_player: Player = Player.BLACK):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
            first_player: Player to move first
        """
        self._initial_board = board if board is not None else Board()
        self._first_player = Player(first_player)
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial position."""
        self.board = self._initial_board
        self.current_player = self._first_player
        self.state = GameState.AWAITING_MOVE
        self.move_history: List[MoveRecord] = []
        self.passes = 0
        self._resolve_passes()

    def _resolve_passes(self) -> None:
        """Hand the turn over while the player to move is stuck; detect the end."""
        if has_legal_move(self.board, self.current_player):
            return
        opponent = self.current_player.opponent
        if has_legal_move(self.board, opponent):
            logger.debug("%s has no legal move and passes", self.current_player)
            self.passes += 1
            self.current_player = opponent
        else:
            self.state = GameState.TERMINAL

    def get_valid_moves(self) -> List[Coord]:
        """Legal moves for the player to move (empty once the game is over)."""
        if self.is_game_over():
            return []
        return legal_moves(self.board, self.current_player)

    def is_game_over(self) -> bool:
        return self.state is GameState.TERMINAL

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            Player.BLACK, Player.WHITE, or None for a draw or an unfinished game
        """
        return winner_of(self.board) if self.is_game_over() else None

    def make_move(self, move: Coord) -> None:
        """
        Apply a move for the current player and advance the turn.

        The move is not validated; strategies must answer from the legal set.
        """
        player = self.current_player
        self.move_history.append(MoveRecord(self.board, player, Coord(*move)))
        self.board = apply_move(self.board, move, player)
        logger.debug("%s plays %s", player, tuple(move))
        self.current_player = player.opponent
        self._resolve_passes()

    async def step(self, strategies: Mapping[Player, Any]) -> Optional[Coord]:
        """
        Run one turn: ask the current player's strategy for a move and apply it.

        Returns:
            The move played, or None if the game is already over
        """
        if self.is_game_over():
            return None
        player = self.current_player
        if player not in strategies:
            raise ValueError(f"No strategy registered for {player}")
        valid_moves = legal_moves(self.board, player)
        move = await _chooser(strategies[player])(self.board, player, valid_moves)
        self.make_move(move)
        return Coord(*move)

    def result(self) -> MatchResult:
        if not self.is_game_over():
            raise RuntimeError("The game is not over yet")
        return MatchResult(self.board, self.get_winner(), tuple(self.move_history))

    async def play(self, strategies: Mapping[Player, Any]) -> MatchResult:
        """
        Play until neither player can move.

        Args:
            strategies: Mapping from Player to its strategy

        Returns:
            The MatchResult of the finished game
        """
        missing = [p for p in Player if p not in strategies]
        if missing:
            raise ValueError(f"No strategy registered for {', '.join(map(str, missing))}")

        while not self.is_game_over():
            await self.step(strategies)

        result = self.result()
        black, white = result.score
        logger.info(
            "Game over after %d moves. Black: %d, White: %d, winner: %s",
            len(result.moves), black, white, result.winner or "draw",
        )
        return result

    def __str__(self) -> str:
        result = str(self.board)
        if self.is_game_over():
            winner = self.get_winner()
            result += "\nGame over! It's a draw!" if winner is None else f"\nGame over! {winner} wins!"
        else:
            result += f"\nCurrent player: {self.current_player}"
        return result


async def play_match(black: Any, white: Any, board: Optional[Board] = None) -> MatchResult:
    """Play a full match between two strategies, black moving first."""
    game = OthelloGame(board)
    return await game.play({Player.BLACK: black, Player.WHITE: white})
