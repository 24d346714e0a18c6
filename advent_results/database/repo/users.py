# advent_results/database/repo/users.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from advent_results.database.models.user import User


async def get_user_ids(session: AsyncSession) -> list[str]:
    res = await session.execute(select(User.id))
    return list(res.scalars().all())


async def get_user_by_id(session: AsyncSession, user_id: str) -> Optional[User]:
    res = await session.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()
