"""
The GameSession is the state a caller (UI, service, test harness) keeps around while playing:
board, whose turn it is, the selected square, the cached possible moves of the selection, and the captured pieces.

The rules engine in moves.py stays stateless, this class owns all mutable state of a single game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from loguru import logger

from src.chess.board import Board
from src.chess.moves import apply_move, get_possible_moves
from src.chess.pieces import Color, Piece
from src.chess.square import Square, require_within_bounds
from src.core.config import DEFAULT_RULES, RulesConfig, RulesPolicy
from src.core.exceptions import GameError, IllegalMoveError, NotYourTurnError
from src.core.models import SessionModel


class ClickOutcome(Enum):
    MOVED = auto()
    SELECTED = auto()
    CLEARED = auto()
    IGNORED = auto()


@dataclass
class GameSession:
    board: Board
    current_player: Color = Color.WHITE
    selected: Optional[Square] = None
    possible_moves: list[Square] = field(default_factory=list)
    captured: list[Piece] = field(default_factory=list)
    config: RulesConfig = DEFAULT_RULES

    @classmethod
    def new(cls, config: RulesConfig = DEFAULT_RULES) -> Self:
        """Standard starting position, white to move."""
        return cls(board=Board.initial(), config=config)

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Define how to construct a GameSession from the information the Service layer actually has"""

        # Validation
        if model.current_player.upper() not in Color.__members__:
            raise GameError(
                f"Invalid player color: {model.current_player!r}. \nPick one from {','.join([c.name.lower() for c in Color])}"
            )
        if model.policy.upper() not in RulesPolicy.__members__:
            raise GameError(
                f"Invalid rules policy: {model.policy!r}. \nPick one from {','.join([p.value for p in RulesPolicy])}"
            )

        session = cls(
            board=Board.from_diagram(model.board),
            current_player=Color[model.current_player.upper()],
            captured=[Piece.from_letter(letter) for letter in model.captured],
            config=RulesConfig(policy=RulesPolicy[model.policy.upper()]),
        )
        # the cached possible moves are not transported, recompute them for the selection
        if model.selected is not None:
            session.select(Square(*model.selected))
        return session

    def to_model(self) -> SessionModel:
        """Encode back into a format the Service layer uses"""
        return SessionModel(
            board=self.board.to_diagram(),
            current_player=self.current_player.name.lower(),
            selected=(self.selected.x, self.selected.y) if self.selected else None,
            captured=[piece.letter() for piece in self.captured],
            policy=self.config.policy.value,
        )

    # --- SESSION API ---
    def select(self, square: Square) -> list[Square]:
        """
        Select one of your own pieces and return where it can go.
        Selecting anything else (empty square, opponent's piece) clears the selection.
        """
        require_within_bounds(square)
        piece = self.board.piece(square)
        if piece is None or piece.color != self.current_player:
            self._clear_selection()
            return []

        self.selected = square
        self.possible_moves = get_possible_moves(
            self.board, square, self.current_player, self.config
        )
        logger.debug(
            f"{self.current_player.name.lower()} selected {square}: {len(self.possible_moves)} possible moves"
        )
        return list(self.possible_moves)

    def click(self, square: Square) -> ClickOutcome:
        """
        Handle a click on a square
        -----

        1. Something selected and the square is one of its possible moves? --> make the move
        2. Clicked on one of your own pieces? --> select it
        3. Anything else --> drop the selection
        """
        require_within_bounds(square)
        had_selection = self.selected is not None

        if self.selected is not None and square in self.possible_moves:
            self._play(self.selected, square)
            return ClickOutcome.MOVED

        if self.select(square):
            return ClickOutcome.SELECTED

        # a piece without any moves still counts as selected
        if self.selected is not None:
            return ClickOutcome.SELECTED
        return ClickOutcome.CLEARED if had_selection else ClickOutcome.IGNORED

    def move(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """
        Make a move in one go (without the select/click round trip).
        Returns the captured piece, if any.
        """
        require_within_bounds(from_square, to_square)
        piece = self.board.piece(from_square)
        if piece is None or piece.color != self.current_player:
            raise NotYourTurnError(
                f"No {self.current_player.name.lower()} piece on {from_square}. It is {self.status_line()}"
            )

        if to_square not in get_possible_moves(
            self.board, from_square, self.current_player, self.config
        ):
            raise IllegalMoveError(f"Move not allowed: {from_square} -> {to_square}")

        return self._play(from_square, to_square)

    def captured_by(self, color: Color) -> list[Piece]:
        """Pieces the player with `color` has taken (in the order they were taken)"""
        return [piece for piece in self.captured if piece.color != color]

    def status_line(self) -> str:
        return "White's Turn" if self.current_player == Color.WHITE else "Black's Turn"

    # -- PRIVATE HELPERS ---
    def _play(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Apply an already checked move, record the capture and pass the turn"""
        result = apply_move(self.board, from_square, to_square)
        self.board = result.board
        if result.captured is not None:
            self.captured.append(result.captured)
            logger.info(
                f"{self.current_player.name.lower()} captured {result.captured.type.name.lower()} on {to_square}"
            )

        logger.info(
            f"{self.current_player.name.lower()} moved {from_square} -> {to_square}"
        )
        self.current_player = self.current_player.opponent
        self._clear_selection()
        return result.captured

    def _clear_selection(self) -> None:
        self.selected = None
        self.possible_moves = []
