"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, StrictStr, ValidationInfo, field_validator

from app.domain.entities import TITLE_MAX_LENGTH

# String forms accepted for `published` besides JSON booleans and 0/1.
_PUBLISHED_LITERALS: dict[str, bool] = {"1": True, "0": False}


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    ``title`` and ``content`` are mandatory; ``published`` may be omitted.
    Unknown keys (``id``, timestamps, ...) are ignored.
    """

    title: StrictStr = Field(..., max_length=TITLE_MAX_LENGTH, examples=["Hello"])
    content: str = Field(..., examples=["World"])
    published: bool | None = Field(None, examples=[True])

    @field_validator("title", mode="before")
    @classmethod
    def _title_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("The title field is required.")
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _content_as_text(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("The content field is required.")
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValueError("The content field must be text.")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("The content field must be text.")
        return value if isinstance(value, str) else str(value)

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"The {info.field_name} field is required.")
        return value

    @field_validator("published", mode="before")
    @classmethod
    def _coerce_published(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value in _PUBLISHED_LITERALS:
            return _PUBLISHED_LITERALS[value]
        raise ValueError("The published field must be true or false.")


class ArticleUpdate(ArticleCreate):
    """Schema for updating an existing article — same rules as creation.

    Partial updates are not supported: ``title`` and ``content`` must be sent
    every time. An omitted ``published`` leaves the stored value untouched.
    """


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleListEnvelope(BaseModel):
    success: bool = True
    articles: list[ArticleResponse]


class ArticleEnvelope(BaseModel):
    success: bool = True
    article: ArticleResponse


class ArticleMessageEnvelope(BaseModel):
    """Envelope for mutating operations: a human-readable message plus the record."""

    success: bool = True
    message: str
    article: ArticleResponse


class ErrorEnvelope(BaseModel):
    """Body of every 4xx/5xx response."""

    success: bool = False
    message: str
    errors: dict[str, list[str]] | None = None
