"""Unit tests for /src/chess/board.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.chess.board import BACK_RANK_ORDER, Board, create_initial_board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square, all_squares
from src.core.exceptions import InvalidBoardError, InvalidCoordinateError

STARTING_DIAGRAM = """
rnbqkbnr
pppppppp
........
........
........
........
PPPPPPPP
RNBQKBNR
"""


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Black back rank on row 0, black pawns on row 1, white pawns on row 6, white back rank on row 7"""
    board = create_initial_board()

    # top row: black pieces
    assert board.piece(Square(0, 0)) == Piece(PieceType.ROOK, Color.BLACK)
    assert board.piece(Square(1, 0)) == Piece(PieceType.KNIGHT, Color.BLACK)
    assert board.piece(Square(2, 0)) == Piece(PieceType.BISHOP, Color.BLACK)
    assert board.piece(Square(3, 0)) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.piece(Square(4, 0)) == Piece(PieceType.KING, Color.BLACK)
    assert board.piece(Square(5, 0)) == Piece(PieceType.BISHOP, Color.BLACK)
    assert board.piece(Square(6, 0)) == Piece(PieceType.KNIGHT, Color.BLACK)
    assert board.piece(Square(7, 0)) == Piece(PieceType.ROOK, Color.BLACK)

    for x in range(8):
        assert board.piece(Square(x, 1)) == Piece(PieceType.PAWN, Color.BLACK)

    # rows 2 through 5 all empty
    for y in range(2, 6):
        for x in range(8):
            assert board.piece(Square(x, y)) is None

    for x in range(8):
        assert board.piece(Square(x, 6)) == Piece(PieceType.PAWN, Color.WHITE)

    # bottom row: white pieces, same order (queen on the 4th column for both colors)
    assert board.piece(Square(0, 7)) == Piece(PieceType.ROOK, Color.WHITE)
    assert board.piece(Square(1, 7)) == Piece(PieceType.KNIGHT, Color.WHITE)
    assert board.piece(Square(2, 7)) == Piece(PieceType.BISHOP, Color.WHITE)
    assert board.piece(Square(3, 7)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.piece(Square(4, 7)) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square(5, 7)) == Piece(PieceType.BISHOP, Color.WHITE)
    assert board.piece(Square(6, 7)) == Piece(PieceType.KNIGHT, Color.WHITE)
    assert board.piece(Square(7, 7)) == Piece(PieceType.ROOK, Color.WHITE)


@pytest.mark.parametrize("square", all_squares())
def test_initial_placement_for_every_square(square: Square) -> None:
    """Pawns iff row 1 or 6, back rank pieces iff row 0 or 7 (black on top), nothing anywhere else"""
    piece = create_initial_board().piece(square)
    if square.y in (1, 6):
        assert piece is not None and piece.type == PieceType.PAWN
    elif square.y in (0, 7):
        assert piece is not None
        assert piece.type == BACK_RANK_ORDER[square.x]
        assert piece.color == (Color.BLACK if square.y == 0 else Color.WHITE)
    else:
        assert piece is None


def test_initial_board_is_deterministic() -> None:
    assert create_initial_board() == create_initial_board()
    assert create_initial_board() == Board.from_diagram(STARTING_DIAGRAM)


def test_empty_board(empty_board: Board) -> None:
    assert all(empty_board.is_empty(square) for square in all_squares())
    assert len(empty_board.grid) == 8
    assert all(len(row) == 8 for row in empty_board.grid)


@pytest.mark.parametrize(
    "grid",
    [
        tuple((None,) * 8 for _ in range(7)),  # too few rows
        tuple((None,) * 8 for _ in range(9)),  # too many rows
        tuple((None,) * (7 if y == 3 else 8) for y in range(8)),  # one short row
    ],
)
def test_board_must_be_8x8(grid: tuple) -> None:
    with pytest.raises(InvalidBoardError):
        Board(grid)


def test_board_from_placement() -> None:
    """Convenience method: only the given squares hold a piece"""
    white_knight = Piece(PieceType.KNIGHT, Color.WHITE)
    board = Board.from_placement({Square(3, 4): white_knight})
    assert board.piece(Square(3, 4)) == white_knight
    assert board.locate_color(Color.WHITE) == [Square(3, 4)]
    assert board.locate_color(Color.BLACK) == []


def test_board_from_placement_off_the_board() -> None:
    with pytest.raises(InvalidCoordinateError):
        Board.from_placement({Square(8, 0): Piece(PieceType.KING, Color.BLACK)})


# -- DIAGRAMS --
def test_diagram_roundtrip() -> None:
    """Reading the diagram back in gives the same board"""
    board = Board.from_diagram(
        """
        ....k...
        ........
        ..n.....
        ........
        ...P....
        ........
        ........
        ....K..R
        """
    )
    assert board.piece(Square(4, 0)) == Piece(PieceType.KING, Color.BLACK)
    assert board.piece(Square(2, 2)) == Piece(PieceType.KNIGHT, Color.BLACK)
    assert board.piece(Square(3, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.piece(Square(7, 7)) == Piece(PieceType.ROOK, Color.WHITE)
    assert Board.from_diagram(board.to_diagram()) == board


def test_initial_board_to_diagram() -> None:
    assert create_initial_board().to_diagram() == STARTING_DIAGRAM.strip()


@pytest.mark.parametrize(
    "diagram",
    [
        "\n".join(["........"] * 7),  # 7 rows
        "\n".join(["......."] + ["........"] * 7),  # short row
        "\n".join(["...x...."] + ["........"] * 7),  # unknown piece letter
    ],
)
def test_invalid_diagram(diagram: str) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_diagram(diagram)


# -- QUERIES --
@pytest.mark.parametrize("square", [Square(-1, 0), Square(0, -1), Square(8, 3), Square(3, 8)])
def test_reading_off_the_board(initial_board: Board, square: Square) -> None:
    """Fail fast instead of reading some other cell / an index error"""
    with pytest.raises(InvalidCoordinateError):
        initial_board.piece(square)


def test_locate_color(initial_board: Board) -> None:
    """16 pieces each, found in row-major order"""
    white = initial_board.locate_color(Color.WHITE)
    black = initial_board.locate_color(Color.BLACK)
    assert len(white) == len(black) == 16
    assert black[0] == Square(0, 0)
    assert white[0] == Square(0, 6)
    assert all(square.y in (6, 7) for square in white)


# -- FUNCTIONAL UPDATES --
def test_place_piece_returns_new_board(empty_board: Board) -> None:
    """The original board should never change"""
    queen = Piece(PieceType.QUEEN, Color.BLACK)
    new_board = empty_board.place_piece(Square(2, 5), queen)
    assert new_board.piece(Square(2, 5)) == queen
    assert empty_board.piece(Square(2, 5)) is None


def test_remove_piece(initial_board: Board) -> None:
    new_board = initial_board.remove_piece(Square(4, 7))
    assert new_board.piece(Square(4, 7)) is None
    assert initial_board.piece(Square(4, 7)) == Piece(PieceType.KING, Color.WHITE)


def test_move_piece(initial_board: Board) -> None:
    """Piece relocates, source square is cleared, original board untouched"""
    new_board = initial_board.move_piece(Square(4, 6), Square(4, 4))
    assert new_board.piece(Square(4, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert new_board.piece(Square(4, 6)) is None
    assert initial_board.piece(Square(4, 6)) == Piece(PieceType.PAWN, Color.WHITE)
    assert initial_board.piece(Square(4, 4)) is None


def test_move_piece_onto_itself(initial_board: Board) -> None:
    """Moving onto the same square leaves the board as it was (the piece does not vanish)"""
    assert initial_board.move_piece(Square(4, 7), Square(4, 7)) == initial_board


def test_board_is_frozen(initial_board: Board) -> None:
    with pytest.raises(FrozenInstanceError):
        initial_board.grid = Board.empty().grid  # type: ignore[misc]


def test_board_from_lists_cannot_be_mutated_afterwards() -> None:
    """Lists passed in are copied into tuples"""
    rows = [[None] * 8 for _ in range(8)]
    board = Board(rows)  # type: ignore[arg-type]
    rows[0][0] = Piece(PieceType.ROOK, Color.BLACK)
    assert board.piece(Square(0, 0)) is None
    assert isinstance(board.grid, tuple)
