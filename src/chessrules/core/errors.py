"""Exception hierarchy raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessrules`."""


class InvalidArgumentError(ChessError, ValueError):
    """A required input was missing or outside its allowed range."""


class InvalidMoveError(ChessError):
    """A move was rejected by :meth:`GameState.make_move`."""

    def __init__(self, message: str, move: Move | None = None) -> None:
        super().__init__(message)
        self.move = move


class InvalidStateError(ChessError, RuntimeError):
    """A king-dependent query ran on a board without that side's king."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color.name} king on board")
        self.color = color
