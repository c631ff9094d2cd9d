"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidArgumentError, InvalidStateError
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position, all_positions

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable mapping from :class:`Position` to :class:`Piece`.

    An absent key is an empty square. The board only holds value objects, so
    :meth:`copy` yields a fully independent board.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: dict[Position, Piece] = {}

    # -- Element access -----------------------------------------------------

    def get(self, position: Position) -> Piece | None:
        """Piece on *position*, or ``None`` if the square is empty."""
        if position is None:
            raise InvalidArgumentError("Position cannot be None")
        return self._squares.get(position)

    def place(self, position: Position, piece: Piece | None) -> None:
        """Put *piece* on *position*, replacing any occupant.

        Passing ``None`` empties the square. No legality checking is done.
        """
        if position is None:
            raise InvalidArgumentError("Position cannot be None")
        if piece is None:
            self._squares.pop(position, None)
        else:
            self._squares[position] = piece

    def __getitem__(self, position: Position) -> Piece | None:
        return self.get(position)

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self.place(position, piece)

    def is_empty(self, position: Position) -> bool:
        return self.get(position) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Position]:
        """Squares occupied by *color*, in row-major order."""
        return [
            pos
            for pos in all_positions()
            if (piece := self._squares.get(pos)) is not None and piece.color == color
        ]

    def king_position(self, color: Color) -> Position:
        """Return the square of *color*'s king.

        Raises:
            InvalidStateError: if *color* has no king on the board.
        """
        for pos in all_positions():
            piece = self._squares.get(pos)
            if (
                piece is not None
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return pos
        raise InvalidStateError(color)

    def __iter__(self) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares with their pieces, in row-major order."""
        for pos in all_positions():
            piece = self._squares.get(pos)
            if piece is not None:
                yield pos, piece

    def __len__(self) -> int:
        return len(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = {}

    def reset_to_standard_setup(self) -> None:
        """Clear the board and place the 32 pieces of the starting position."""
        self.clear()
        for col in range(1, BOARD_SIZE + 1):
            self._squares[Position(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            self._squares[Position(7, col)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK, start=1):
            self._squares[Position(1, col)] = Piece(Color.WHITE, pt)
            self._squares[Position(8, col)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset_to_standard_setup()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(frozenset(self._squares.items()))

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for col in range(1, BOARD_SIZE + 1):
                p = self._squares.get(Position(row, col))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
