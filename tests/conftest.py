"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.shared_types import Player
from src.db.schema import Base
from src.tictactoe.game import TicTacToeGame
from src.tictactoe.matchmaking import fixed_coin_flip

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def new_game() -> TicTacToeGame:
    """Fresh game where the first joiner always gets crosses (coin flip is fixed)."""
    return TicTacToeGame.new_game(coin_flip=fixed_coin_flip(Player.CROSSES))


@pytest.fixture
def playing_game(new_game: TicTacToeGame) -> TicTacToeGame:
    """Alice plays crosses, Bob plays circles. Circles moves first (the default starting player)."""
    new_game.join("alice")
    new_game.join("bob")
    return new_game
