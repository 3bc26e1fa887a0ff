"""Synthetic article data for local development and tests."""

import logging
import random

from app.application.interfaces import ArticleRepository
from app.domain.entities import TITLE_MAX_LENGTH, Article

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 50

_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua enim ad minim veniam "
    "quis nostrud exercitation ullamco laboris nisi aliquip ex ea commodo "
    "consequat duis aute irure in reprehenderit voluptate velit esse cillum "
    "fugiat nulla pariatur excepteur sint occaecat cupidatat non proident sunt "
    "culpa qui officia deserunt mollit anim id est laborum"
).split()


def _sentence(rng: random.Random, min_words: int, max_words: int) -> str:
    words = rng.choices(_WORDS, k=rng.randint(min_words, max_words))
    return " ".join(words).capitalize() + "."


def _paragraph(rng: random.Random) -> str:
    return " ".join(_sentence(rng, 6, 14) for _ in range(rng.randint(3, 6)))


def make_article(rng: random.Random | None = None) -> Article:
    """Build an unsaved Article with random title, content and publication flag."""
    rng = rng or random.Random()
    title = _sentence(rng, 3, 8)[:TITLE_MAX_LENGTH]
    content = "\n\n".join(_paragraph(rng) for _ in range(rng.randint(2, 5)))
    return Article(title=title, content=content, published=rng.random() < 0.5)


class ArticleSeeder:
    """Populates the store with generated articles through the repository port."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def run(self, count: int = DEFAULT_SEED_COUNT, seed: int | None = None) -> list[Article]:
        if count < 0:
            raise ValueError("count must be zero or positive")
        rng = random.Random(seed)
        created = [await self._repository.create(make_article(rng)) for _ in range(count)]
        logger.info("Seeded %d articles", len(created))
        return created
