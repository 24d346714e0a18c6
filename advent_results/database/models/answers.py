# advent_results/database/models/answers.py
from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from advent_results.database.base import Base
from advent_results.database.models.test import Test


class UserTestCorrectAnswer(Base):
    """
    Immutable fact: one user's correct submission for one test.
    One per user per test (enforced by unique constraint).
    """
    __tablename__ = "user_test_correct_answers"
    __table_args__ = (
        UniqueConstraint("user_id", "test_id", name="uq_correct_answers_user_test"),
        Index("ix_correct_answers_user_time", "user_id", "answering_time"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    test_id: Mapped[int] = mapped_column(ForeignKey("tests.id", ondelete="CASCADE"), index=True)

    answering_time: Mapped[datetime] = mapped_column(DateTime(timezone=False))
    # time from test start to submission
    answering_duration_ms: Mapped[int] = mapped_column(BigInteger, default=0)

    test: Mapped["Test"] = relationship("Test")

    @property
    def answering_duration(self) -> timedelta:
        return timedelta(milliseconds=self.answering_duration_ms or 0)


class UserTestWrongAnswer(Base):
    """
    Immutable fact: one wrong submission. Many per user per test.
    """
    __tablename__ = "user_test_wrong_answers"
    __table_args__ = (
        Index("ix_wrong_answers_user_time", "user_id", "time"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    test_id: Mapped[int] = mapped_column(ForeignKey("tests.id", ondelete="CASCADE"), index=True)

    time: Mapped[datetime] = mapped_column(DateTime(timezone=False))
    answer: Mapped[str | None] = mapped_column(String(256), nullable=True)

    test: Mapped["Test"] = relationship("Test")
