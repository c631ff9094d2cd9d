"""King safety and game-status rules.

All checks run on copies of the caller's board; nothing here mutates the
board it is given.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.errors import InvalidArgumentError
from chessrules.core.move import Move
from chessrules.core.move_generator import ordered_piece_moves
from chessrules.core.types import Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # -- Attack detection ---------------------------------------------------

    @staticmethod
    def is_square_attacked(board: Board, target: Position, by_color: Color) -> bool:
        """Can any piece of *by_color* move to *target* (pseudo-legally)?"""
        for sq, piece in board:
            if piece.color != by_color:
                continue
            for move in ordered_piece_moves(board, sq):
                if move.end == target:
                    return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        Raises:
            InvalidStateError: if *color* has no king on the board.
        """
        king_sq = board.king_position(color)
        return Rules.is_square_attacked(board, king_sq, color.opposite)

    # -- Legality filter ----------------------------------------------------

    @staticmethod
    def simulate(board: Board, move: Move) -> Board:
        """Copy of *board* with the moving piece relocated.

        Promotion is not applied; only king safety depends on the result.
        """
        sim = board.copy()
        sim.place(move.end, sim.get(move.start))
        sim.place(move.start, None)
        return sim

    @staticmethod
    def ordered_valid_moves(board: Board, position: Position) -> list[Move] | None:
        """Legal moves of the piece on *position* in canonical order.

        Returns ``None`` (not an empty list) if the square is empty.
        """
        if board is None or position is None:
            raise InvalidArgumentError("Board and position cannot be None")
        piece = board.get(position)
        if piece is None:
            return None
        return [
            move
            for move in ordered_piece_moves(board, position)
            if not Rules.is_in_check(Rules.simulate(board, move), piece.color)
        ]

    @staticmethod
    def valid_moves(board: Board, position: Position) -> set[Move] | None:
        """Moves of the piece on *position* that keep its own king safe."""
        moves = Rules.ordered_valid_moves(board, position)
        return None if moves is None else set(moves)

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """All legal moves for *color*, square by square in row-major order."""
        legal: list[Move] = []
        for sq in board.pieces(color):
            legal.extend(Rules.ordered_valid_moves(board, sq) or ())
        return legal

    # -- Game status --------------------------------------------------------

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return any(Rules.ordered_valid_moves(board, sq) for sq in board.pieces(color))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the current game result for *side_to_move*."""
        if Rules.has_legal_move(board, side_to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
