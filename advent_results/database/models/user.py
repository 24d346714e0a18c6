# advent_results/database/models/user.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from advent_results.database.base import Base


class User(Base):
    __tablename__ = "users"

    # opaque id issued by the identity provider
    id: Mapped[str] = mapped_column(String(450), primary_key=True)

    user_name: Mapped[str | None] = mapped_column(String(256), nullable=True, index=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), server_default=func.now())
