# advent_results/database/models/test.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from advent_results.database.base import Base


class Test(Base):
    """
    One test per advent day. start_date stays NULL until the test is opened.
    """
    __tablename__ = "tests"
    __table_args__ = (
        UniqueConstraint("number", name="uq_tests_number"),
    )
    # not a pytest test class
    __test__ = False

    id: Mapped[int] = mapped_column(primary_key=True)
    number: Mapped[int] = mapped_column(Integer)  # advent day, 1..24

    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True, index=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)

    answer: Mapped[str | None] = mapped_column(String(256), nullable=True)
