"""Unit tests for src/api/models.py"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CreateSessionRequest, MoveRequest, SquareModel
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Policy


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - SquareModel --
@pytest.mark.parametrize("x, y", [(0, 0), (7, 7), (3, 4)])
def test_valid_square(x: int, y: int) -> None:
    square = SquareModel(x=x, y=y)
    assert (square.x, square.y) == (x, y)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, 8), (8, 8), (100, -100)])
def test_square_off_the_board(x: int, y: int) -> None:
    """Coordinates outside [0, 7] are rejected with our own exception"""
    with pytest.raises(InvalidRequestError):
        _ = SquareModel(x=x, y=y)


def test_square_not_a_number() -> None:
    """Type errors are still reported by pydantic itself"""
    with pytest.raises(ValidationError):
        _ = SquareModel(x="e", y=4)  # type: ignore[arg-type]


# -- Validation - MoveRequest --
def test_valid_move_request(mock_id: UUID) -> None:
    request = MoveRequest(
        session_id=mock_id,
        from_square=SquareModel(x=4, y=6),
        to_square={"x": 4, "y": 4},  # type: ignore[arg-type]
    )
    assert request.to_square == SquareModel(x=4, y=4)


def test_invalid_nested_square(mock_id: UUID) -> None:
    """Validation of nested squares raises the same exception"""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(
            session_id=mock_id,
            from_square={"x": 4, "y": 6},  # type: ignore[arg-type]
            to_square={"x": 4, "y": 9},  # type: ignore[arg-type]
        )


# -- Validation - CreateSessionRequest --
def test_policy_defaults_to_simplified() -> None:
    assert CreateSessionRequest().policy == Policy.SIMPLIFIED


def test_policy_from_string() -> None:
    assert CreateSessionRequest(policy="strict").policy == Policy.STRICT  # type: ignore[arg-type]


def test_unknown_policy() -> None:
    with pytest.raises(ValidationError):
        _ = CreateSessionRequest(policy="chaotic")  # type: ignore[arg-type]
