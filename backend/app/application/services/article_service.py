"""Application service (use case) for Article operations."""

import logging

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.domain.entities import FILLABLE_FIELDS, Article
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        fields = data.model_dump(include=FILLABLE_FIELDS, exclude_none=True)
        article = await self._repository.create(Article(**fields))
        logger.info("Created article id=%s", article.id)
        return article

    async def update_article(self, article: Article, data: ArticleUpdate) -> Article:
        """Apply the fillable fields of ``data`` to an already-resolved article."""
        article.update(**data.model_dump(include=FILLABLE_FIELDS))
        updated = await self._repository.update(article)
        logger.info("Updated article id=%s", updated.id)
        return updated

    async def delete_article(self, article: Article) -> Article:
        """Hard-delete the article and return its last known state."""
        deleted = await self._repository.delete(article.id)
        if not deleted:
            raise EntityNotFoundError("Article", article.id)
        logger.info("Deleted article id=%s", article.id)
        return article
