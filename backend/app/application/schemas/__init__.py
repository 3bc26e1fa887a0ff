from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleListEnvelope,
    ArticleEnvelope,
    ArticleMessageEnvelope,
    ErrorEnvelope,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleListEnvelope",
    "ArticleEnvelope",
    "ArticleMessageEnvelope",
    "ErrorEnvelope",
]
