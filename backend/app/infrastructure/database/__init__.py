from .base import Base
from .models import ArticleModel
from .session import Database, get_database, get_db_session

__all__ = [
    "Base",
    "ArticleModel",
    "Database",
    "get_database",
    "get_db_session",
]
