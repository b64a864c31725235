"""ORM models for the three LernCasino tables."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lerncasino.db.base import Base


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """Maps to the 'users' table."""

    __tablename__ = "users"

    # Integer (not BigInteger) so SQLite treats it as the rowid alias.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    avatar_color: Mapped[str | None] = mapped_column(String(16), nullable=True)

    stats: Mapped[UserStats | None] = relationship("UserStats", back_populates="user", uselist=False)


class UserStats(Base):
    """Maps to the 'user_stats' table. One row per user."""

    __tablename__ = "user_stats"

    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), primary_key=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
    xp: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    coins: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    hearts: Mapped[int] = mapped_column(Integer, nullable=False, default=3, server_default="3")
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    best_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    last_login: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    user: Mapped[User] = relationship("User", back_populates="stats")


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


class Question(Base):
    """Maps to the 'questions' table. Seeded once, read-only afterwards."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer_a: Mapped[str] = mapped_column(Text, nullable=False)
    answer_b: Mapped[str] = mapped_column(Text, nullable=False)
    answer_c: Mapped[str] = mapped_column(Text, nullable=False)
    answer_d: Mapped[str] = mapped_column(Text, nullable=False)
    correct_index: Mapped[int] = mapped_column(Integer, nullable=False)

    @property
    def answers(self) -> list[str]:
        return [self.answer_a, self.answer_b, self.answer_c, self.answer_d]
