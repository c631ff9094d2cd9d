"""Board coordinates.

Rows and columns are 1-based, matching the usual rank/file numbering:
row 1 is White's back rank, column 1 is the a-file.

    (1, 1) = a1, (1, 8) = h1
    (8, 1) = a8, (8, 8) = h8
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessrules.core.errors import InvalidArgumentError

BOARD_SIZE = 8

_FILES = "abcdefgh"


def is_on_board(row: int, column: int) -> bool:
    """Whether (*row*, *column*) lies on the 8x8 grid."""
    return 1 <= row <= BOARD_SIZE and 1 <= column <= BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable, validated square coordinate."""

    row: int
    column: int

    def __post_init__(self) -> None:
        for value in (self.row, self.column):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgumentError(
                    f"Row and column must be integers, got {value!r}"
                )
        if not is_on_board(self.row, self.column):
            raise InvalidArgumentError(
                f"Row and column must be between 1 and {BOARD_SIZE}, "
                f"got ({self.row}, {self.column})"
            )

    # ── Navigation ───────────────────────────────────────────────────────

    def offset(self, d_row: int, d_column: int) -> Position | None:
        """Square shifted by the given deltas, or ``None`` if off the grid."""
        row = self.row + d_row
        column = self.column + d_column
        if not is_on_board(row, column):
            return None
        return Position(row, column)

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse a square name, e.g. ``'e4'`` → ``Position(4, 5)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise InvalidArgumentError(f"Invalid square name: {name!r}")
        return cls(int(name[1]), _FILES.index(name[0]) + 1)

    def __str__(self) -> str:
        return f"{_FILES[self.column - 1]}{self.row}"


def all_positions() -> Iterator[Position]:
    """Every square in row-major order: a1, b1, ..., h1, a2, ..., h8."""
    for row in range(1, BOARD_SIZE + 1):
        for column in range(1, BOARD_SIZE + 1):
            yield Position(row, column)
