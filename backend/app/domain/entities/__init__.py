from .article import Article, FILLABLE_FIELDS, TITLE_MAX_LENGTH

__all__ = [
    "Article",
    "FILLABLE_FIELDS",
    "TITLE_MAX_LENGTH",
]
