"""Pseudo-legal move generation.

Everything here ignores king safety; :mod:`chessrules.core.rules` filters the
result down to legal moves.

Moves come out in a canonical order: the per-piece direction tables below are
walked in order, and promotion variants follow ``PROMOTION_TYPES``.
"""

from __future__ import annotations

from collections.abc import Callable

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidArgumentError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Position

# (d_row, d_column) pairs
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# color -> (forward row delta, home row, promotion row)
_PAWN_RANKS: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 2, 8),
    Color.BLACK: (-1, 7, 1),
}


# -- Public API -------------------------------------------------------------


def piece_moves(board: Board, position: Position) -> set[Move]:
    """Pseudo-legal moves of the piece on *position*.

    Returns an empty set if the square is empty.
    """
    return set(ordered_piece_moves(board, position))


def ordered_piece_moves(board: Board, position: Position) -> list[Move]:
    """Same as :func:`piece_moves`, as a list in canonical order."""
    if board is None or position is None:
        raise InvalidArgumentError("Board and position cannot be None")
    piece = board.get(position)
    if piece is None:
        return []
    moves: list[Move] = []
    _GENERATORS[piece.piece_type](board, position, piece, moves)
    return moves


# -- Piece-specific generators (private) ------------------------------------


def _add_with_promotion(
    start: Position, end: Position, promotion_row: int, moves: list[Move]
) -> None:
    if end.row == promotion_row:
        for pt in PROMOTION_TYPES:
            moves.append(Move(start, end, pt))
    else:
        moves.append(Move(start, end))


def _gen_pawn(board: Board, sq: Position, piece: Piece, moves: list[Move]) -> None:
    forward, home_row, promotion_row = _PAWN_RANKS[piece.color]

    one_step = sq.offset(forward, 0)
    if one_step is not None and board.is_empty(one_step):
        _add_with_promotion(sq, one_step, promotion_row, moves)
        if sq.row == home_row:
            two_step = sq.offset(2 * forward, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

    for d_col in (-1, 1):
        cap_sq = sq.offset(forward, d_col)
        if cap_sq is None:
            continue
        target = board.get(cap_sq)
        if target is not None and target.color != piece.color:
            _add_with_promotion(sq, cap_sq, promotion_row, moves)


def _gen_steps(
    offsets: tuple[tuple[int, int], ...],
) -> Callable[[Board, Position, Piece, list[Move]], None]:
    def generate(board: Board, sq: Position, piece: Piece, moves: list[Move]) -> None:
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is None:
                continue
            target = board.get(to_sq)
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    return generate


def _gen_sliding(
    directions: tuple[tuple[int, int], ...],
) -> Callable[[Board, Position, Piece, list[Move]], None]:
    def generate(board: Board, sq: Position, piece: Piece, moves: list[Move]) -> None:
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                target = board.get(to_sq)
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break

    return generate


_GENERATORS: dict[PieceType, Callable[[Board, Position, Piece, list[Move]], None]] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_steps(KNIGHT_OFFSETS),
    PieceType.BISHOP: _gen_sliding(BISHOP_DIRS),
    PieceType.ROOK: _gen_sliding(ROOK_DIRS),
    PieceType.QUEEN: _gen_sliding(QUEEN_DIRS),
    PieceType.KING: _gen_steps(KING_OFFSETS),
}
assert set(_GENERATORS) == set(PieceType), "every piece type needs a generator"
