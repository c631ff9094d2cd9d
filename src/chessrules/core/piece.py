"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidArgumentError

# Diagram character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_SYMBOLS = "♙♘♗♖♕♔♟♞♝♜♛♚"

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __post_init__(self) -> None:
        if self.color is None or self.piece_type is None:
            raise InvalidArgumentError("Piece color and type cannot be None")

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its diagram character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidArgumentError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[int(self.color) * 6 + int(self.piece_type) - 1]
