"""The Game board: an 8x8 grid of optional pieces. Boards are values, every update returns a new Board."""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares, require_within_bounds
from src.core.exceptions import InvalidBoardError

Row = tuple[Optional[Piece], ...]
Grid = tuple[Row, ...]

EMPTY_SQUARE_CHAR = "."

BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Rows are counted from the top of the array: black starts at the top, white at the bottom
BACK_RANK_ROW: dict[Color, int] = {Color.BLACK: 0, Color.WHITE: BOARD_DIMENSIONS[1] - 1}
PAWN_START_ROW: dict[Color, int] = {Color.BLACK: 1, Color.WHITE: BOARD_DIMENSIONS[1] - 2}


@dataclass(frozen=True)
class Board:
    grid: Grid

    def __post_init__(self) -> None:
        n_files, n_rows = BOARD_DIMENSIONS
        if len(self.grid) != n_rows or any(len(row) != n_files for row in self.grid):
            raise InvalidBoardError(
                f"Board must have exactly {n_rows} rows of {n_files} squares."
            )
        # normalise to tuples so that the frozen board cannot be mutated through a list that was passed in
        object.__setattr__(self, "grid", tuple(tuple(row) for row in self.grid))

    # --- CREATION LOGIC ---
    @classmethod
    def empty(cls) -> Self:
        n_files, n_rows = BOARD_DIMENSIONS
        return cls(tuple((None,) * n_files for _ in range(n_rows)))

    @classmethod
    def initial(cls) -> Self:
        """
        Standard starting arrangement.
        * row 0: black back rank (rook, knight, bishop, queen, king, bishop, knight, rook)
        * row 1: black pawns
        * row 6: white pawns
        * row 7: white back rank, same order
        """
        rows: list[list[Optional[Piece]]] = [list(row) for row in cls.empty().grid]
        for color in Color:
            for x, piece_type in enumerate(BACK_RANK_ORDER):
                rows[BACK_RANK_ROW[color]][x] = Piece(piece_type, color)
                rows[PAWN_START_ROW[color]][x] = Piece(PieceType.PAWN, color)
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_placement(cls, placement: dict[Square, Piece]) -> Self:
        """Convenience method: start from an empty board and drop pieces on the given squares."""
        require_within_bounds(*placement.keys())
        rows: list[list[Optional[Piece]]] = [list(row) for row in cls.empty().grid]
        for square, piece in placement.items():
            rows[square.y][square.x] = piece
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_diagram(cls, diagram: str) -> Self:
        """
        Construct a board from a text diagram.
        ----

        8 non-empty lines of 8 characters, read top row (y=0) first.
        A letter is a piece (upper case white, lower case black), a '.' an empty square.
        ex. standard starting position:

        rnbqkbnr
        pppppppp
        ........
        ........
        ........
        ........
        PPPPPPPP
        RNBQKBNR
        """
        lines = [line.strip() for line in diagram.strip().splitlines() if line.strip()]
        rows: list[Row] = []
        for line in lines:
            rows.append(
                tuple(
                    None if character == EMPTY_SQUARE_CHAR else Piece.from_letter(character)
                    for character in line
                )
            )
        return cls(tuple(rows))

    def to_diagram(self) -> str:
        """reverse operation of `from_diagram()`. Handy in log messages and failing test output."""
        return "\n".join(
            "".join(
                piece.letter() if piece is not None else EMPTY_SQUARE_CHAR
                for piece in row
            )
            for row in self.grid
        )

    # --- QUERIES ---
    def piece(self, square: Square) -> Optional[Piece]:
        require_within_bounds(square)
        return self.grid[square.y][square.x]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def squares(self) -> list[Square]:
        return all_squares()

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in self.squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    # --- FUNCTIONAL UPDATES ---
    def place_piece(self, square: Square, piece: Optional[Piece]) -> Self:
        """New board with `piece` on `square` (None clears the square). This board is left untouched."""
        require_within_bounds(square)
        rows = [list(row) for row in self.grid]
        rows[square.y][square.x] = piece
        return type(self)(tuple(tuple(row) for row in rows))

    def remove_piece(self, square: Square) -> Self:
        return self.place_piece(square, None)

    def move_piece(self, from_square: Square, to_square: Square) -> Self:
        """Relocate whatever stands on `from_square` to `to_square`, overwriting the target. No rules are checked here."""
        require_within_bounds(from_square, to_square)
        if from_square == to_square:
            return self
        rows = [list(row) for row in self.grid]
        rows[to_square.y][to_square.x] = rows[from_square.y][from_square.x]
        rows[from_square.y][from_square.x] = None
        return type(self)(tuple(tuple(row) for row in rows))


def create_initial_board() -> Board:
    return Board.initial()
