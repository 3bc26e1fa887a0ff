"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    ArticleCreate,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticleMessageEnvelope,
    ArticleResponse,
    ArticleUpdate,
    ErrorEnvelope,
)
from app.application.services import ArticleService
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/article", tags=["Articles"])

CREATED_MESSAGE = "Article created successfully"
UPDATED_MESSAGE = "Article updated successfully"
DELETED_MESSAGE = "Article deleted successfully"

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}
_INVALID = {422: {"model": ErrorEnvelope}}


async def get_article_or_404(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Article:
    """Resolve the path identifier to a stored article before the handler runs."""
    if not (article_id.isascii() and article_id.isdigit()):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Article", article_id)),
        )
    try:
        return await service.get_article(int(article_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=ArticleListEnvelope)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListEnvelope:
    """Retrieve every article."""
    articles = await service.list_articles()
    return ArticleListEnvelope(articles=[_to_response(a) for a in articles])


@router.get("/{article_id}", response_model=ArticleEnvelope, responses=_NOT_FOUND)
async def get_article(
    article: Article = Depends(get_article_or_404),
) -> ArticleEnvelope:
    """Retrieve a single article by ID."""
    return ArticleEnvelope(article=_to_response(article))


@router.post(
    "",
    response_model=ArticleMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleMessageEnvelope:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleMessageEnvelope(message=CREATED_MESSAGE, article=_to_response(article))


@router.put(
    "/{article_id}",
    response_model=ArticleMessageEnvelope,
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_article(
    data: ArticleUpdate,
    article: Article = Depends(get_article_or_404),
    service: ArticleService = Depends(get_article_service),
) -> ArticleMessageEnvelope:
    """Replace the title, content and (optionally) published flag of an article."""
    updated = await service.update_article(article, data)
    return ArticleMessageEnvelope(message=UPDATED_MESSAGE, article=_to_response(updated))


@router.delete("/{article_id}", response_model=ArticleMessageEnvelope, responses=_NOT_FOUND)
async def delete_article(
    article: Article = Depends(get_article_or_404),
    service: ArticleService = Depends(get_article_service),
) -> ArticleMessageEnvelope:
    """Delete an article by ID, echoing its last known state."""
    try:
        deleted = await service.delete_article(article)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleMessageEnvelope(message=DELETED_MESSAGE, article=_to_response(deleted))
