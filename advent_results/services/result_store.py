# advent_results/services/result_store.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from advent_results.database.models import Result, User
from advent_results.database.repo import answers_repo, results_repo, users
from advent_results.database.repo.answers_repo import WrongAnswerDay
from advent_results.database.session import Database
from advent_results.database.week_slots import WeekSlot, week_slot
from advent_results.errors import CorrectAnswerNotFoundError

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WriteResult:
    saved: bool
    error: str | None = None


class ResultStore:
    """
    Reads answer history and reads/writes the per-user Result row.

    Every call runs in its own session; nothing is kept between calls.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    # ------------------------
    # Reads
    # ------------------------

    async def list_user_ids(self) -> list[str]:
        async with self.db.session() as session:
            return await users.get_user_ids(session)

    async def get_user_by_id(self, user_id: str) -> User | None:
        async with self.db.session() as session:
            return await users.get_user_by_id(session, user_id)

    async def sum_answering_duration(self, user_id: str, date_from: datetime, date_to: datetime) -> timedelta:
        async with self.db.session() as session:
            return await answers_repo.sum_answering_duration(session, user_id, date_from, date_to)

    async def list_correct_answer_dates(self, user_id: str, date_from: datetime, date_to: datetime) -> list[date]:
        async with self.db.session() as session:
            return await answers_repo.get_correct_answer_dates(session, user_id, date_from, date_to)

    async def list_final_results(self) -> list[Result]:
        async with self.db.session() as session:
            return await results_repo.get_final_results(session)

    async def count_wrong_answers_per_day(
        self,
        user_id: str,
        date_from: datetime,
        date_to: datetime,
    ) -> list[WrongAnswerDay]:
        async with self.db.session() as session:
            return await answers_repo.get_wrong_answers_count_per_day(session, user_id, date_from, date_to)

    async def get_result_by_user_id(self, user_id: str) -> Result | None:
        async with self.db.session() as session:
            return await results_repo.get_result_by_user_id(session, user_id)

    async def count_wrong_answers(self, user_id: str, test_id: int) -> int:
        async with self.db.session() as session:
            return await answers_repo.count_wrong_answers(session, user_id, test_id)

    async def get_correct_answer_time(self, user_id: str, test_id: int) -> datetime:
        async with self.db.session() as session:
            answering_time = await answers_repo.get_correct_answer_time(session, user_id, test_id)
        if answering_time is None:
            raise CorrectAnswerNotFoundError(user_id, test_id)
        return answering_time

    # ------------------------
    # Final result writes (errors propagate)
    # ------------------------

    async def set_final_place(self, user_id: str, place: int) -> None:
        async with self.db.unit_of_work() as session:
            await results_repo.upsert_result_field(session, user_id, Result.final_place.key, place)

    async def set_final_points(self, user_id: str, points: int) -> None:
        async with self.db.unit_of_work() as session:
            await results_repo.upsert_result_field(session, user_id, Result.final_points.key, points)

    # ------------------------
    # Weekly writes (persistence errors reported in WriteResult)
    # ------------------------

    async def set_weekly_place(self, user_id: str, week: int, place: int) -> WriteResult:
        slot = week_slot(week)
        log.info("Going to save place for user %s and week %s...", user_id, week)
        return await self._save_weekly(user_id, slot, slot.place.key, place, what="place")

    async def set_weekly_points(self, user_id: str, week: int, points: int) -> WriteResult:
        slot = week_slot(week)
        log.info("Going to save score for user %s and week %s...", user_id, week)
        return await self._save_weekly(user_id, slot, slot.points.key, points, what="score")

    async def _save_weekly(self, user_id: str, slot: WeekSlot, field: str, value: int, *, what: str) -> WriteResult:
        try:
            async with self.db.unit_of_work() as session:
                await results_repo.upsert_result_field(session, user_id, field, value)
        except SQLAlchemyError as e:
            log.exception("An error occurred during saving %s for user %s and week %s", what, user_id, slot.week)
            return WriteResult(saved=False, error=str(e))
        return WriteResult(saved=True)
