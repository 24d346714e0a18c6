# advent_results/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./advent_results.db"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _to_bool(value: str | None, key_name: str) -> bool:
    raw = (value or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise RuntimeError(f"Invalid boolean for {key_name}: {value!r}")


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL

    # log every SQL statement (noisy)
    sql_echo: bool = False

    # --- environment ---
    environment: str = "production"  # production | development

    @property
    def is_dev(self) -> bool:
        return self.environment.lower() in {"dev", "development", "local"}

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @classmethod
    def load(cls, env: dict[str, str] | None = None) -> "Settings":
        """
        Loads from process env (and .env if present).
        An explicit mapping skips .env and os.environ entirely.
        """
        if env is None:
            load_dotenv()
            env = dict(os.environ)

        database_url = (env.get("DATABASE_URL") or DEFAULT_DATABASE_URL).strip()
        if "://" not in database_url:
            raise RuntimeError(f"Invalid DATABASE_URL: {database_url!r}")

        sql_echo = _to_bool(env.get("SQL_ECHO"), "SQL_ECHO")
        environment = (env.get("ENVIRONMENT") or "production").strip() or "production"

        return cls(
            database_url=database_url,
            sql_echo=sql_echo,
            environment=environment,
        )
