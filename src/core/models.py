"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/repository layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the repository, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make SessionModel easier to read
PieceColor = str
PieceLetter = str
Coordinates = tuple[int, int]


@dataclass
class SessionModel:
    """Transport-safe representation of a game session used between Service, Repository, and Game layers."""

    board: str  # board diagram, see Board.to_diagram()
    current_player: PieceColor
    selected: Optional[Coordinates] = None
    captured: list[PieceLetter] = field(default_factory=list)
    policy: str = "simplified"
