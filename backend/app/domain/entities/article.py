"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

TITLE_MAX_LENGTH = 225

# Fields a client request may set; everything else is owned by the store.
FILLABLE_FIELDS = frozenset({"title", "content", "published"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Article:
    """Core domain entity representing a published or draft article."""

    title: str
    content: str
    published: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def update(
        self,
        title: str | None = None,
        content: str | None = None,
        published: bool | None = None,
    ) -> None:
        """Update article fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if published is not None:
            self.published = published
        self.updated_at = _utcnow()
