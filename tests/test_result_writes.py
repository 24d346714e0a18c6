import asyncio

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from advent_results.database.models import Result
from advent_results.database.week_slots import WEEK_COUNT, WEEK_SLOTS
from advent_results.errors import InvalidWeekError
from advent_results.services.result_store import WriteResult
from factories import USER_ID


async def _result_rows(db, user_id):
    async with db.session() as session:
        res = await session.execute(select(func.count(Result.id)).where(Result.user_id == user_id))
        return res.scalar_one()


@pytest.mark.asyncio
@pytest.mark.parametrize("week", range(1, WEEK_COUNT + 1))
async def test_weekly_points_only_touch_their_week(store, users, week):
    res = await store.set_weekly_points(USER_ID, week, 57)
    assert res == WriteResult(saved=True)

    row = await store.get_result_by_user_id(USER_ID)
    assert row is not None
    for w, slot in WEEK_SLOTS.items():
        assert slot.get_points(row) == (57 if w == week else None)
        assert slot.get_place(row) is None
    assert row.final_points is None
    assert row.final_place is None


@pytest.mark.asyncio
@pytest.mark.parametrize("week", range(1, WEEK_COUNT + 1))
async def test_weekly_place_updates_existing_row(store, users, week):
    await store.set_final_points(USER_ID, 300)
    await store.set_weekly_place(USER_ID, week, 4)
    await store.set_weekly_place(USER_ID, week, 2)

    row = await store.get_result_by_user_id(USER_ID)
    assert WEEK_SLOTS[week].get_place(row) == 2
    assert row.final_points == 300


@pytest.mark.asyncio
async def test_weekly_place_and_points_are_independent(store, users):
    await store.set_weekly_place(USER_ID, 2, 1)
    await store.set_weekly_points(USER_ID, 2, 120)
    await store.set_weekly_points(USER_ID, 1, 80)

    row = await store.get_result_by_user_id(USER_ID)
    assert (row.week1_place, row.week1_points) == (None, 80)
    assert (row.week2_place, row.week2_points) == (1, 120)
    assert (row.week3_place, row.week3_points) == (None, None)


@pytest.mark.asyncio
@pytest.mark.parametrize("week", [0, -1, WEEK_COUNT + 1, 52, True, "1"])
async def test_invalid_week_raises_and_writes_nothing(store, db, users, week):
    with pytest.raises(InvalidWeekError):
        await store.set_weekly_place(USER_ID, week, 1)
    with pytest.raises(InvalidWeekError):
        await store.set_weekly_points(USER_ID, week, 10)

    assert await store.get_result_by_user_id(USER_ID) is None
    assert await _result_rows(db, USER_ID) == 0


@pytest.mark.asyncio
async def test_invalid_week_is_a_value_error(store, users):
    with pytest.raises(ValueError, match="Missing week 4 in model"):
        await store.set_weekly_points(USER_ID, 4, 10)


@pytest.mark.asyncio
async def test_final_place_upsert_is_idempotent(store, db, users):
    await store.set_final_place(USER_ID, 3)
    await store.set_final_place(USER_ID, 3)

    assert await _result_rows(db, USER_ID) == 1
    row = await store.get_result_by_user_id(USER_ID)
    assert row.final_place == 3
    assert row.final_points is None


@pytest.mark.asyncio
async def test_final_points_creates_row_then_keeps_other_fields(store, users):
    await store.set_weekly_points(USER_ID, 1, 90)
    await store.set_final_points(USER_ID, 250)
    await store.set_final_place(USER_ID, 7)

    results = await store.list_final_results()
    assert len(results) == 1
    row = results[0]
    assert (row.user_id, row.final_points, row.final_place, row.week1_points) == (USER_ID, 250, 7, 90)


@pytest.mark.asyncio
async def test_list_final_results_returns_every_row(store, users):
    user_id, other_user_id = users
    await store.set_final_points(user_id, 10)
    await store.set_final_points(other_user_id, 20)

    results = await store.list_final_results()
    assert {(r.user_id, r.final_points) for r in results} == {(user_id, 10), (other_user_id, 20)}


@pytest.mark.asyncio
async def test_list_final_results_empty(store):
    assert await store.list_final_results() == []


@pytest.mark.asyncio
async def test_weekly_write_failure_is_reported_not_raised(store, caplog):
    # no such user: foreign key violation
    with caplog.at_level("ERROR", logger="advent_results.services.result_store"):
        res = await store.set_weekly_place("ghost", 1, 1)

    assert res.saved is False
    assert res.error
    assert "saving place for user ghost and week 1" in caplog.text
    assert await store.get_result_by_user_id("ghost") is None


@pytest.mark.asyncio
async def test_final_write_failure_propagates(store):
    with pytest.raises(IntegrityError):
        await store.set_final_place("ghost", 1)


@pytest.mark.asyncio
async def test_concurrent_first_weekly_writes_leave_one_row(store, db, users):
    results = await asyncio.gather(
        store.set_weekly_place(USER_ID, 2, 5),
        store.set_weekly_place(USER_ID, 2, 6),
    )

    assert all(r.saved for r in results)
    assert await _result_rows(db, USER_ID) == 1
    row = await store.get_result_by_user_id(USER_ID)
    assert row.week2_place in {5, 6}
