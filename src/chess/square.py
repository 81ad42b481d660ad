"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidCoordinateError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    Array coordinates, not chess notation:
    x is the column (0 = left), y is the row (0 = top of the board, where black starts).
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])

    def offset(self, dx: int, dy: int) -> Square:
        return Square(self.x + dx, self.y + dy)


def require_within_bounds(*squares: Square) -> None:
    """Fail fast before any rules logic touches a square that is not on the board."""
    for square in squares:
        if not square.is_within_bounds():
            raise InvalidCoordinateError(
                f"Square {square} is off the board. Both coordinates must lie in [0, {BOARD_DIMENSIONS[0] - 1}]."
            )


def all_squares() -> list[Square]:
    """Every square, in row-major order (top row first, left to right)."""
    return [
        Square(x, y)
        for y in range(BOARD_DIMENSIONS[1])
        for x in range(BOARD_DIMENSIONS[0])
    ]
