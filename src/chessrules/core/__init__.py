"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Position, Rules

    board = Board.initial()
    for move in Rules.valid_moves(board, Position.parse("g1")):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import (
    ChessError,
    InvalidArgumentError,
    InvalidMoveError,
    InvalidStateError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    PROMOTION_TYPES,
    ordered_piece_moves,
    piece_moves,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Position, all_positions, is_on_board

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidArgumentError",
    "InvalidMoveError",
    "InvalidStateError",
    # Types / helpers
    "Position",
    "all_positions",
    "is_on_board",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Rules",
    # Move generation
    "PROMOTION_TYPES",
    "ordered_piece_moves",
    "piece_moves",
]
