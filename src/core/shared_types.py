"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE Domain layer (src/chess/pieces.py) has its own Enum versions of Color and PieceType.
# --- These string versions are what the API layer speaks. Convert between them by member name: Color[c.name]


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Policy(StrEnum):
    SIMPLIFIED = "simplified"
    STRICT = "strict"
