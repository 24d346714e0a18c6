# advent_results/database/week_slots.py
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import InstrumentedAttribute

from advent_results.database.models import Result
from advent_results.errors import InvalidWeekError


@dataclass(frozen=True, slots=True)
class WeekSlot:
    """
    Place and points columns of Result for one competition week.
    """
    week: int
    place: InstrumentedAttribute[int | None]
    points: InstrumentedAttribute[int | None]

    def get_place(self, row: Result) -> int | None:
        return getattr(row, self.place.key)

    def get_points(self, row: Result) -> int | None:
        return getattr(row, self.points.key)


WEEK_SLOTS: dict[int, WeekSlot] = {
    1: WeekSlot(1, Result.week1_place, Result.week1_points),
    2: WeekSlot(2, Result.week2_place, Result.week2_points),
    3: WeekSlot(3, Result.week3_place, Result.week3_points),
}

WEEK_COUNT = len(WEEK_SLOTS)


def week_slot(week: int) -> WeekSlot:
    # bool is an int subclass; True must not resolve to week 1
    if isinstance(week, bool) or not isinstance(week, int):
        raise InvalidWeekError(week)
    slot = WEEK_SLOTS.get(week)
    if slot is None:
        raise InvalidWeekError(week)
    return slot
