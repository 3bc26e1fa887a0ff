"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.infrastructure.database.models import ArticleModel


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC.
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Each mutating operation commits before it returns.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            # Some backends hand back 0/1; the API contract is a strict bool.
            published=bool(model.published),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            published=entity.published,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.commit()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.content = article.content
        model.published = article.published
        model.updated_at = article.updated_at
        await self._session.commit()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.commit()
        return True
