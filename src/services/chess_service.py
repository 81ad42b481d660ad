"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

from uuid import UUID

from loguru import logger

from src.api.models import (
    ClickRequest,
    ClickResponse,
    CreateSessionRequest,
    DeleteSessionRequest,
    GetSessionRequest,
    MoveRequest,
    PieceModel,
    PossibleMovesRequest,
    PossibleMovesResponse,
    SessionResponse,
    SquareModel,
)
from src.chess.game import GameSession
from src.chess.moves import get_possible_moves
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.config import RulesConfig, RulesPolicy
from src.core.exceptions import SessionNotFoundError
from src.core.models import SessionModel
from src.core.shared_types import Color, PieceType, Policy
from src.db.repository import SessionRepository


class ChessService:
    """Orchestration of layers for a game session."""

    def __init__(self, repository: SessionRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new game from the standard starting position."""

        config = RulesConfig(policy=RulesPolicy[request.policy.name])
        session = GameSession.new(config)

        stored_model, session_id = self.repo.create_session(session.to_model())
        logger.info(f"Created session {session_id} ({request.policy} rules)")

        return self._create_session_response(session_id, stored_model)

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """
        Retrieve current session state.
        ----
        Used in "polling" loop by frontend to redraw the board.
        """
        model = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, model)

    def possible_moves(self, request: PossibleMovesRequest) -> PossibleMovesResponse:
        """Where can the piece on the requested square go? (always asked on behalf of the player whose turn it is)"""

        session = GameSession.from_model(self._fetch_session(request.session_id))
        square = self._to_square(request.square)
        moves = get_possible_moves(
            session.board, square, session.current_player, session.config
        )
        logger.debug(f"Session {request.session_id}: {len(moves)} moves from {square}")

        return PossibleMovesResponse(
            session_id=request.session_id,
            square=request.square,
            color=Color[session.current_player.name],
            possible_moves=[self._to_square_model(move) for move in moves],
        )

    def click_square(self, request: ClickRequest) -> ClickResponse:
        """A click on the board: select a piece, make a move with the selected piece, or drop the selection."""

        session = GameSession.from_model(self._fetch_session(request.session_id))
        outcome = session.click(self._to_square(request.square))

        after_click = session.to_model()
        self.repo.update_session(request.session_id, after_click)

        return ClickResponse(
            outcome=outcome.name.lower(),
            session=self._create_session_response(request.session_id, after_click),
        )

    def make_move(self, request: MoveRequest) -> SessionResponse:
        """Make a move attempt."""

        session = GameSession.from_model(self._fetch_session(request.session_id))

        # Attempt the move (raises if it is not the mover's piece / not a possible move)
        session.move(
            self._to_square(request.from_square), self._to_square(request.to_square)
        )

        after_move = session.to_model()
        self.repo.update_session(request.session_id, after_move)

        return self._create_session_response(request.session_id, after_move)

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to delete a session record."""
        if self.repo.delete_session(request.session_id) is None:
            raise SessionNotFoundError(
                f"Session with session_id={request.session_id} not found."
            )
        logger.info(f"Deleted session {request.session_id}")

    # -- Internal helpers --
    def _create_session_response(
        self, session_id: UUID, model: SessionModel
    ) -> SessionResponse:
        """Convert info in SessionModel to a SessionResponse (for session with given ID.)"""

        session = GameSession.from_model(model)
        return SessionResponse(
            session_id=session_id,
            board=[
                [self._to_piece_model(piece) if piece else None for piece in row]
                for row in session.board.grid
            ],
            current_player=Color[session.current_player.name],
            status=session.status_line(),
            selected=(
                self._to_square_model(session.selected) if session.selected else None
            ),
            possible_moves=[self._to_square_model(sq) for sq in session.possible_moves],
            captured=[self._to_piece_model(piece) for piece in session.captured],
            policy=Policy[session.config.policy.name],
        )

    def _fetch_session(self, session_id: UUID) -> SessionModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        model = self.repo.get_session(session_id)
        if model is None:
            raise SessionNotFoundError(f"Session with {session_id=} not found.")
        return model

    @staticmethod
    def _to_square(square: SquareModel) -> Square:
        return Square(square.x, square.y)

    @staticmethod
    def _to_square_model(square: Square) -> SquareModel:
        return SquareModel(x=square.x, y=square.y)

    @staticmethod
    def _to_piece_model(piece: Piece) -> PieceModel:
        return PieceModel(
            type=PieceType[piece.type.name],
            color=Color[piece.color.name],
            symbol=piece.symbol(),
        )
