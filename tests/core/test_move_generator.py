"""Tests for pseudo-legal move generation."""

from boards import board_from_diagram, sq
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import ordered_piece_moves, piece_moves
from chessrules.core.piece import Piece

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


def targets(board: Board, square: str) -> set[str]:
    return {str(m.end) for m in piece_moves(board, sq(square))}


def lone(piece: Piece, square: str) -> Board:
    board = Board()
    board.place(sq(square), piece)
    return board


class TestEmptySquare:
    def test_no_moves(self, empty_board: Board) -> None:
        assert piece_moves(empty_board, sq("d4")) == set()


class TestPawn:
    def test_single_and_double_push(self, initial_board: Board) -> None:
        assert piece_moves(initial_board, sq("e2")) == {
            Move(sq("e2"), sq("e3")),
            Move(sq("e2"), sq("e4")),
        }

    def test_black_single_and_double_push(self, initial_board: Board) -> None:
        assert targets(initial_board, "d7") == {"d6", "d5"}

    def test_no_double_push_off_home_rank(self) -> None:
        assert targets(lone(WHITE_PAWN, "e3"), "e3") == {"e4"}

    def test_blocked_push(self) -> None:
        board = lone(WHITE_PAWN, "e2")
        board.place(sq("e3"), BLACK_PAWN)
        assert piece_moves(board, sq("e2")) == set()

    def test_double_push_blocked_on_destination(self) -> None:
        board = lone(BLACK_PAWN, "c7")
        board.place(sq("c5"), WHITE_PAWN)
        assert targets(board, "c7") == {"c6"}

    def test_captures_only_enemies(self) -> None:
        board = lone(WHITE_PAWN, "d4")
        board.place(sq("c5"), BLACK_PAWN)
        board.place(sq("e5"), Piece(Color.WHITE, PieceType.KNIGHT))
        assert targets(board, "d4") == {"d5", "c5"}

    def test_no_capture_of_empty_diagonal(self) -> None:
        assert targets(lone(BLACK_PAWN, "a5"), "a5") == {"a4"}

    def test_push_promotion_variants(self) -> None:
        moves = ordered_piece_moves(lone(WHITE_PAWN, "a7"), sq("a7"))
        assert moves == [
            Move(sq("a7"), sq("a8"), PieceType.QUEEN),
            Move(sq("a7"), sq("a8"), PieceType.ROOK),
            Move(sq("a7"), sq("a8"), PieceType.BISHOP),
            Move(sq("a7"), sq("a8"), PieceType.KNIGHT),
        ]

    def test_black_promotion_on_first_rank(self) -> None:
        moves = piece_moves(lone(BLACK_PAWN, "h2"), sq("h2"))
        assert {m.promotion for m in moves} == {
            PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT,
        }
        assert all(m.end == sq("h1") for m in moves)

    def test_capture_promotion_variants(self) -> None:
        board = board_from_diagram(
            """
            r n . . . . . .
            . P . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            """
        )
        moves = piece_moves(board, sq("b7"))
        assert len(moves) == 4
        assert all(m.end == sq("a8") and m.is_promotion for m in moves)

    def test_no_plain_move_to_last_rank(self) -> None:
        moves = piece_moves(lone(WHITE_PAWN, "g7"), sq("g7"))
        assert Move(sq("g7"), sq("g8")) not in moves


class TestKnight:
    def test_center(self) -> None:
        assert len(piece_moves(lone(Piece(Color.WHITE, PieceType.KNIGHT), "d4"), sq("d4"))) == 8

    def test_corner(self) -> None:
        assert targets(lone(Piece(Color.BLACK, PieceType.KNIGHT), "a1"), "a1") == {"b3", "c2"}

    def test_own_pieces_block(self, initial_board: Board) -> None:
        assert targets(initial_board, "g1") == {"f3", "h3"}

    def test_canonical_order(self) -> None:
        moves = ordered_piece_moves(lone(Piece(Color.WHITE, PieceType.KNIGHT), "d4"), sq("d4"))
        assert [str(m.end) for m in moves] == ["e6", "c6", "e2", "c2", "f5", "b5", "f3", "b3"]


class TestSliding:
    def test_rook_stops_at_capture(self) -> None:
        board = lone(Piece(Color.WHITE, PieceType.ROOK), "d4")
        board.place(sq("g4"), BLACK_PAWN)
        ends = targets(board, "d4")
        assert {"e4", "f4", "g4"} <= ends
        assert "h4" not in ends
        assert len(ends) == 13

    def test_rook_stops_before_own_piece(self) -> None:
        board = lone(Piece(Color.WHITE, PieceType.ROOK), "a1")
        board.place(sq("a3"), WHITE_PAWN)
        assert targets(board, "a1") == {"a2", "b1", "c1", "d1", "e1", "f1", "g1", "h1"}

    def test_bishop_corner(self) -> None:
        ends = targets(lone(Piece(Color.BLACK, PieceType.BISHOP), "a1"), "a1")
        assert ends == {"b2", "c3", "d4", "e5", "f6", "g7", "h8"}

    def test_queen_center(self) -> None:
        assert len(piece_moves(lone(Piece(Color.WHITE, PieceType.QUEEN), "d4"), sq("d4"))) == 27

    def test_boxed_in_at_start(self, initial_board: Board) -> None:
        for name in ("a1", "c1", "d1", "f8", "h8"):
            assert piece_moves(initial_board, sq(name)) == set()


class TestKing:
    def test_edge(self) -> None:
        ends = targets(lone(Piece(Color.WHITE, PieceType.KING), "e1"), "e1")
        assert ends == {"d1", "f1", "d2", "e2", "f2"}

    def test_capture_enemy_not_own(self) -> None:
        board = lone(Piece(Color.BLACK, PieceType.KING), "e8")
        board.place(sq("d8"), Piece(Color.BLACK, PieceType.QUEEN))
        board.place(sq("f8"), Piece(Color.WHITE, PieceType.BISHOP))
        assert targets(board, "e8") == {"f8", "d7", "e7", "f7"}

    def test_ignores_king_safety(self) -> None:
        board = lone(Piece(Color.WHITE, PieceType.KING), "e1")
        board.place(sq("d8"), Piece(Color.BLACK, PieceType.ROOK))
        assert "d1" in targets(board, "e1")
