"""Game state: owns the live board and the side to move."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import InvalidArgumentError, InvalidMoveError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Position

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    placed: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_promotion(self) -> bool:
        return self.placed != self.piece


class GameState:
    """Live board plus side to move.

    The board is only mutated by :meth:`make_move` and the explicit
    injection setters. Queries simulate on copies and never touch it.
    Instances are not thread-safe; callers sharing one must serialize access.
    """

    __slots__ = ("_board", "_turn", "_history")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        self._history: list[MoveRecord] = []
        self.set_board(board if board is not None else Board.initial())
        self.set_turn(turn)

    def reset(self) -> None:
        """Return to the standard starting position with White to move."""
        self._board = Board.initial()
        self._turn = Color.WHITE
        self._history.clear()

    # ── State access / injection ─────────────────────────────────────────

    def get_turn(self) -> Color:
        return self._turn

    def set_turn(self, color: Color) -> None:
        if color is None:
            raise InvalidArgumentError("Turn color cannot be None")
        self._turn = color

    def get_board(self) -> Board:
        return self._board

    def set_board(self, board: Board) -> None:
        """Replace the live board. Clears the move history."""
        if board is None:
            raise InvalidArgumentError("Board cannot be None")
        self._board = board
        self._history.clear()

    turn = property(get_turn, set_turn)
    board = property(get_board, set_board)

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    # ── Moves ────────────────────────────────────────────────────────────

    def valid_moves(self, position: Position) -> set[Move] | None:
        """Legal moves for the piece on *position*, ``None`` if empty."""
        return Rules.valid_moves(self._board, position)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return Rules.legal_moves(self._board, self._turn)

    def make_move(self, move: Move) -> MoveRecord:
        """Validate and apply *move*, then pass the turn.

        Raises:
            InvalidMoveError: no own piece on the start square, or the move
                is not among that piece's valid moves.
        """
        if move is None:
            raise InvalidArgumentError("Move cannot be None")

        piece = self._board.get(move.start)
        if piece is None or piece.color != self._turn:
            _LOGGER.debug("Rejected %s: no %s piece on %s", move, self._turn, move.start)
            raise InvalidMoveError(
                f"No {self._turn} piece on {move.start} to move", move
            )

        valid = self.valid_moves(move.start)
        if not valid or move not in valid:
            _LOGGER.debug("Rejected %s: not a legal move", move)
            raise InvalidMoveError(f"Illegal move: {move}", move)

        placed = piece
        if piece.piece_type == PieceType.PAWN and move.promotion is not None:
            placed = Piece(piece.color, move.promotion)

        captured = self._board.get(move.end)
        self._board.place(move.end, placed)
        self._board.place(move.start, None)

        record = MoveRecord(move=move, piece=piece, placed=placed, captured=captured)
        self._history.append(record)
        self._turn = self._turn.opposite
        _LOGGER.debug("Applied %s; %s to move", move, self._turn)
        return record

    # ── Status ───────────────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._board, color)

    def is_in_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self._board, color)

    def is_in_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self._board, color)

    def result(self) -> GameResult:
        """Outcome of the game from the side to move's point of view."""
        result = Rules.game_result(self._board, self._turn)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Game over: %s (%s to move)", result.name, self._turn)
        return result

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since setup."""
        return len(self._history)
