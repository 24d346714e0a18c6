import asyncio
import logging

from advent_results.config import Settings
from advent_results.database import Database
from advent_results.services.result_store import ResultStore


def setup_logging(is_dev: bool) -> None:
    """
    Clean production logging:
    - app logs: INFO (or DEBUG in dev)
    - SQLAlchemy logs: WARNING+ (no query/pool spam)
    """
    app_level = logging.DEBUG if is_dev else logging.INFO

    logging.basicConfig(
        level=app_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    for name in (
        "sqlalchemy",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "sqlalchemy.orm",
        "asyncpg",
        "aiosqlite",
    ):
        logging.getLogger(name).setLevel(logging.WARNING)


async def main() -> None:
    settings = Settings.load()
    setup_logging(settings.is_dev)
    log = logging.getLogger("advent_results")

    db = Database(settings.database_url, echo=settings.sql_echo)
    try:
        await db.init_models()
        log.info("DB initialized")

        store = ResultStore(db)
        user_ids = await store.list_user_ids()
        results = await store.list_final_results()
        log.info("Users: %s, result rows: %s", len(user_ids), len(results))
    except Exception:
        log.exception("DB bootstrap failed")
        raise
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(main())
