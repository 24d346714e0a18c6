# advent_results/database/models/result.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from advent_results.database.base import Base


class Result(Base):
    """
    One row per user. Created on the first score/place write, updated in place
    afterwards. Adding a week means adding its two columns here and a slot in
    advent_results.database.week_slots.
    """
    __tablename__ = "results"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        index=True,
    )

    week1_place: Mapped[int | None] = mapped_column(Integer, nullable=True)
    week1_points: Mapped[int | None] = mapped_column(Integer, nullable=True)

    week2_place: Mapped[int | None] = mapped_column(Integer, nullable=True)
    week2_points: Mapped[int | None] = mapped_column(Integer, nullable=True)

    week3_place: Mapped[int | None] = mapped_column(Integer, nullable=True)
    week3_points: Mapped[int | None] = mapped_column(Integer, nullable=True)

    final_place: Mapped[int | None] = mapped_column(Integer, nullable=True)
    final_points: Mapped[int | None] = mapped_column(Integer, nullable=True)
