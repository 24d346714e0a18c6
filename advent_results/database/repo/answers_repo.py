from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from advent_results.database.models import Test, UserTestCorrectAnswer, UserTestWrongAnswer


@dataclass(frozen=True, slots=True)
class WrongAnswerDay:
    day: date
    count: int


async def sum_answering_duration(
    session: AsyncSession,
    user_id: str,
    date_from: datetime,
    date_to: datetime,
) -> timedelta:
    """
    Total time-to-answer of correct answers given in (date_from, date_to].
    """
    res = await session.execute(
        select(func.coalesce(func.sum(UserTestCorrectAnswer.answering_duration_ms), 0)).where(
            UserTestCorrectAnswer.user_id == user_id,
            UserTestCorrectAnswer.answering_time > date_from,
            UserTestCorrectAnswer.answering_time <= date_to,
        )
    )
    return timedelta(milliseconds=int(res.scalar_one() or 0))


async def get_correct_answer_dates(
    session: AsyncSession,
    user_id: str,
    date_from: datetime,
    date_to: datetime,
) -> list[date]:
    """
    Start days of tests started in [date_from, date_to) and answered correctly
    in (date_from, date_to]. Not deduplicated.
    """
    q = (
        select(Test.start_date)
        .select_from(UserTestCorrectAnswer)
        .join(Test, Test.id == UserTestCorrectAnswer.test_id)
        .where(UserTestCorrectAnswer.user_id == user_id)
        .where(Test.start_date >= date_from, Test.start_date < date_to)
        .where(
            UserTestCorrectAnswer.answering_time > date_from,
            UserTestCorrectAnswer.answering_time <= date_to,
        )
    )
    res = await session.execute(q)
    return [start_date.date() for start_date in res.scalars().all()]


async def get_wrong_answers_count_per_day(
    session: AsyncSession,
    user_id: str,
    date_from: datetime,
    date_to: datetime,
) -> list[WrongAnswerDay]:
    q = (
        select(Test.start_date)
        .select_from(UserTestWrongAnswer)
        .join(Test, Test.id == UserTestWrongAnswer.test_id)
        .where(
            UserTestWrongAnswer.user_id == user_id,
            UserTestWrongAnswer.time >= date_from,
            UserTestWrongAnswer.time <= date_to,
            Test.start_date.is_not(None),
        )
    )
    res = await session.execute(q)

    # grouped in Python: calendar-date extraction differs per dialect
    per_day = Counter(start_date.date() for start_date in res.scalars().all())
    return [WrongAnswerDay(day=day, count=count) for day, count in per_day.items()]


async def count_wrong_answers(session: AsyncSession, user_id: str, test_id: int) -> int:
    res = await session.execute(
        select(func.count(UserTestWrongAnswer.id)).where(
            UserTestWrongAnswer.test_id == test_id,
            UserTestWrongAnswer.user_id == user_id,
        )
    )
    return int(res.scalar_one() or 0)


async def get_correct_answer_time(session: AsyncSession, user_id: str, test_id: int) -> datetime | None:
    # at most one row: uq_correct_answers_user_test
    res = await session.execute(
        select(UserTestCorrectAnswer.answering_time).where(
            UserTestCorrectAnswer.user_id == user_id,
            UserTestCorrectAnswer.test_id == test_id,
        )
    )
    return res.scalar_one_or_none()
