"""Chess rules engine: board model, move generation and game status."""

from chessrules.core import (
    Board,
    ChessError,
    Color,
    GameResult,
    InvalidArgumentError,
    InvalidMoveError,
    InvalidStateError,
    Move,
    Piece,
    PieceType,
    Position,
    Rules,
)
from chessrules.game import GameState, MoveRecord

__version__ = "0.1.0"

__all__ = [
    "Board",
    "ChessError",
    "Color",
    "GameResult",
    "GameState",
    "InvalidArgumentError",
    "InvalidMoveError",
    "InvalidStateError",
    "Move",
    "MoveRecord",
    "Piece",
    "PieceType",
    "Position",
    "Rules",
]
