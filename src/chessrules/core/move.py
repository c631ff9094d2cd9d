"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.errors import InvalidArgumentError
from chessrules.core.types import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Equality covers all three fields, so a promotion to a queen and a plain
    move between the same squares are different moves.
    """

    start: Position
    end: Position
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise InvalidArgumentError("Move start and end cannot be None")
        if self.promotion is not None and self.promotion not in _PROMO_CHARS:
            raise InvalidArgumentError(
                f"Cannot promote to {self.promotion!r}"
            )

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.start}{self.end}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long-algebraic text such as ``'e2e4'`` or ``'a7a8q'``."""
        if len(text) not in (4, 5):
            raise InvalidArgumentError(f"Invalid move text: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            try:
                promotion = _PROMO_TYPES[text[4]]
            except KeyError:
                raise InvalidArgumentError(
                    f"Invalid promotion piece in {text!r}"
                ) from None
        return cls(Position.parse(text[:2]), Position.parse(text[2:4]), promotion)
