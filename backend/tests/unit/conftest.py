import pytest

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def get_all(self) -> list[Article]:
        return [self._articles[key] for key in sorted(self._articles)]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()
