"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest

from src.chess.board import Board
from src.db.memory_repository import InMemorySessionRepository
from src.services.chess_service import ChessService

EMPTY_DIAGRAM = "\n".join(["........"] * 8)


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def session_repo() -> Generator[InMemorySessionRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemorySessionRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(session_repo: InMemorySessionRepository) -> ChessService:
    return ChessService(session_repo)
