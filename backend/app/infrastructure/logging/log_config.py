"""Process-wide logging setup driven by ``Settings``.

``log_level`` sets the root logger. The ``log_level_sql`` and
``log_level_uvicorn`` settings tune the SQLAlchemy and uvicorn loggers on
their own, so SQL echo can stay quiet while article events are logged at INFO.
Called from the application lifespan and from ``python -m app.seed``.
"""

import logging
import sys

from app.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → third-party loggers it controls.
_CATEGORY_LOGGERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
)


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _ensure_root_handler(root)

    applied = {}
    for field_name, logger_names in _CATEGORY_LOGGERS:
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[field_name] = logging.getLevelName(level)

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, applied)


def _ensure_root_handler(root: logging.Logger) -> None:
    """Attach a stderr handler unless uvicorn (or pytest) already installed one."""
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Map a level name such as ``"debug"`` to its constant; unknown names mean INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
