"""
Store seeding script.

Replaces every stored post with the sample posts. Run it with
``python -m app.db.seed``.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger, settings
from app.data import SAMPLE_POSTS
from app.db.database import Database
from app.repositories import PostRepository

logger = file_logger(getLogger(__name__))


async def seed(database: Database) -> int:
    """Replace the collection with ``SAMPLE_POSTS`` and return the inserted count."""
    async with database.session() as session:
        posts = await PostRepository(session).replace_all(SAMPLE_POSTS)
    return len(posts)


async def main() -> None:
    database = Database(settings)
    try:
        await database.init()
        inserted = await seed(database)
        logger.info(f"{inserted} blog posts inserted successfully")
    finally:
        await database.close()


if __name__ == "__main__":
    asyncio_run(main())
