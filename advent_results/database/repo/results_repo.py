from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from advent_results.database.models import Result

_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


async def get_result_by_user_id(session: AsyncSession, user_id: str) -> Result | None:
    res = await session.execute(select(Result).where(Result.user_id == user_id))
    return res.scalar_one_or_none()


async def get_final_results(session: AsyncSession) -> list[Result]:
    res = await session.execute(select(Result))
    return list(res.scalars().all())


async def upsert_result_field(session: AsyncSession, user_id: str, field: str, value: Any) -> None:
    """
    Creates the user's Result row with only `field` set, or updates just that
    column of the existing row. One statement (ON CONFLICT on user_id), so two
    concurrent first writes still end with a single row.
    """
    dialect = session.get_bind().dialect.name
    insert = _INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Upsert is not supported for dialect {dialect!r}")

    stmt = insert(Result).values(user_id=user_id, **{field: value}).on_conflict_do_update(
        index_elements=[Result.user_id],
        set_={field: value},
    )
    await session.execute(stmt)
