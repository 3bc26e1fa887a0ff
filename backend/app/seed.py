"""Populate the configured database with synthetic articles.

Usage:
    python -m app.seed            # Settings.seed_count articles (50 by default)
    python -m app.seed --count 10 --seed 42
"""

import argparse
import asyncio
import logging

from app.config import get_settings
from app.infrastructure.database import Database
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository
from app.infrastructure.database.seeder import ArticleSeeder
from app.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Seed the articles table with generated data.")
    parser.add_argument(
        "--count",
        type=int,
        default=settings.seed_count,
        help=f"number of articles to create (default: {settings.seed_count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="random seed for reproducible data",
    )
    return parser.parse_args(argv)


async def seed(database: Database, count: int, seed: int | None = None) -> int:
    """Create tables if needed and insert ``count`` articles."""
    await database.create_all()
    async with database.session_factory() as session:
        seeder = ArticleSeeder(SQLAlchemyArticleRepository(session))
        articles = await seeder.run(count=count, seed=seed)
    return len(articles)


async def _main(args: argparse.Namespace) -> None:
    settings = get_settings()
    database = Database(settings.database_url, echo=settings.database_echo)
    try:
        total = await seed(database, args.count, args.seed)
        logger.info("Inserted %d articles into %s", total, database.engine.url.database)
    finally:
        await database.dispose()


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    asyncio.run(_main(_parse_args(argv)))


if __name__ == "__main__":
    main()
