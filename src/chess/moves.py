"""
Geometry/Base movement rules, move enumeration and move application.

Key idea: Use strategy pattern to define the movement geometry for each piece type.

IMPORTANT (asymmetric validation):
`is_valid_move()` only looks at the geometry of a single move. Under the default (simplified) rules it does NOT reject a rook, bishop,
queen, knight or king landing on a piece of its own color, and it does NOT check whether the squares in between are empty.
Only `get_possible_moves()` filters out moves onto your own pieces. Callers that use `is_valid_move()` on its own must do that check themselves
(or use RulesPolicy.STRICT).

Also NOT implemented on purpose: check(mate), castling, en passant, promotion.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares, require_within_bounds
from src.core.config import DEFAULT_RULES, RulesConfig
from src.core.exceptions import EmptySquareError


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def move_piece(self, from_square: Square, to_square: Square) -> Self: ...


Vector = tuple[int, int]

# White moves UP the array (towards row 0), black moves DOWN (towards row 7)
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: BOARD_DIMENSIONS[1] - 2, Color.BLACK: 1}

SLIDING_PIECES: frozenset[PieceType] = frozenset(
    {PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN}
)


def distance(from_square: Square, to_square: Square) -> Vector:
    """(|dx|, |dy|) between two squares"""
    return abs(to_square.x - from_square.x), abs(to_square.y - from_square.y)


# --- MOVEMENT RULES ---
def pawn_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    A pawn:
    - moves a single square forward onto an empty square.
    - can move two squares forward from its starting row, if both squares are empty.
    - takes diagonally (one step forward), but only an opponent's piece.
    """
    pawn = board.piece(from_square)
    if pawn is None:
        return False

    direction = PAWN_DIRECTION[pawn.color]
    same_file = to_square.x == from_square.x
    one_forward = to_square.y == from_square.y + direction

    # Regular push
    if same_file and one_forward and board.piece(to_square) is None:
        return True

    # Initial two-square push: square in between must be empty as well
    if (
        same_file
        and from_square.y == PAWN_START_ROW[pawn.color]
        and to_square.y == from_square.y + 2 * direction
        and board.piece(to_square) is None
        and board.piece(from_square.offset(0, direction)) is None
    ):
        return True

    # Capture
    target = board.piece(to_square)
    if (
        abs(to_square.x - from_square.x) == 1
        and one_forward
        and target is not None
        and target.color != pawn.color
    ):
        return True

    return False


def knight_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """Knights jump in an L-shape: |dx| + |dy| = 3, neither of them 0"""
    dx, dy = distance(from_square, to_square)
    return (dx, dy) in ((2, 1), (1, 2))


def bishop_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """Bishops move diagonally: |dx| = |dy|"""
    dx, dy = distance(from_square, to_square)
    return dx == dy


def rook_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    dx, dy = distance(from_square, to_square)
    return dx == 0 or dy == 0


def queen_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return bishop_rule(from_square, to_square, board) or rook_rule(
        from_square, to_square, board
    )


def king_rule(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The king can move by a single square at the time, in any direction.
    NOTE: |dx| = |dy| = 0 passes as well. That "move" is never enumerated (the king would land on itself).
    """
    dx, dy = distance(from_square, to_square)
    return dx <= 1 and dy <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Square, Square, Board], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: pawn_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.ROOK: rook_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.KING: king_rule,
}


# --- STRICT RULES ---
def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Squares strictly in between two squares on the same rank, file or diagonal.
    Returns an empty list when the squares are adjacent, identical, or not on a common line.
    """
    dx = to_square.x - from_square.x
    dy = to_square.y - from_square.y
    if not (dx == 0 or dy == 0 or abs(dx) == abs(dy)):
        return []

    steps = max(abs(dx), abs(dy))
    step_x = (dx > 0) - (dx < 0)
    step_y = (dy > 0) - (dy < 0)
    return [from_square.offset(i * step_x, i * step_y) for i in range(1, steps)]


def path_is_clear(from_square: Square, to_square: Square, board: Board) -> bool:
    return all(
        board.piece(square) is None for square in squares_between(from_square, to_square)
    )


# --- RULES ENGINE API ---
def is_valid_move(
    board: Board,
    from_square: Square,
    to_square: Square,
    mover: Color,
    config: RulesConfig = DEFAULT_RULES,
) -> bool:
    """
    Is moving the piece on `from_square` to `to_square` allowed for the player with the `mover` pieces?
    ----

    * False if `from_square` is empty or holds an opponent's piece.
    * Otherwise the geometric rule for the piece type decides.

    ----
    WARNING: under the simplified rules a non-pawn landing on its own color is NOT rejected here. See `get_possible_moves()`.

    Raises InvalidCoordinateError if either square is off the board.
    """
    require_within_bounds(from_square, to_square)

    piece = board.piece(from_square)
    if piece is None or piece.color != mover:
        return False

    if config.is_strict:
        if from_square == to_square:
            return False
        target = board.piece(to_square)
        if target is not None and target.color == mover:
            return False
        if piece.type in SLIDING_PIECES and not path_is_clear(
            from_square, to_square, board
        ):
            return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(from_square, to_square, board)


def get_possible_moves(
    board: Board,
    position: Square,
    mover: Color,
    config: RulesConfig = DEFAULT_RULES,
) -> list[Square]:
    """
    All destinations of the piece standing on `position`.
    ----

    Scans the board row by row (y = 0..7, and x = 0..7 within a row), so the order of the result is always the same.
    A square is kept if the move is valid AND the square is either empty or holds an opponent's piece.
    (This is where "you cannot capture your own piece" is enforced.)

    NOTE: Does not check that `position` holds a piece of `mover` -- if it does not, you simply get no moves.
    """
    require_within_bounds(position)

    possible_moves: list[Square] = []
    for candidate in all_squares():
        if not is_valid_move(board, position, candidate, mover, config):
            continue
        target = board.piece(candidate)
        if target is None or target.color != mover:
            possible_moves.append(candidate)
    return possible_moves


@dataclass(frozen=True)
class MoveResult:
    """Board after the move + the piece that got taken (if any). Unpacks as `board, captured = apply_move(...)`"""

    board: Board
    captured: Optional[Piece] = None

    def __iter__(self) -> Iterator:
        return iter((self.board, self.captured))


def apply_move(board: Board, from_square: Square, to_square: Square) -> MoveResult:
    """
    Perform a move, without checking whether it is legal (call `is_valid_move()` / `get_possible_moves()` first).
    ----

    The piece on `to_square` (if any) is reported as captured. The board passed in is left untouched.
    """
    require_within_bounds(from_square, to_square)
    if board.piece(from_square) is None:
        raise EmptySquareError(f"No piece on {from_square} to move.")

    if from_square == to_square:
        return MoveResult(board=board, captured=None)

    captured = board.piece(to_square)
    new_board = board.move_piece(from_square, to_square)
    return MoveResult(board=new_board, captured=captured)
