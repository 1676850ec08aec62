"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """Current snapshot of one game. Overwritten on every accepted event (no history kept)."""

    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board: Mapped[list[list[str]]] = mapped_column(JSON)
    turn: Mapped[int] = mapped_column(default=0)
    starting_player: Mapped[str]
    registered_players: Mapped[dict[str, str]] = mapped_column(JSON, default=dict)
    status: Mapped[str]
    winner: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
