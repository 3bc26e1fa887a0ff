"""Health check endpoint — reports application and database status."""

from fastapi import APIRouter, Depends, Request

from app.infrastructure.database import Database, get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request, database: Database = Depends(get_database)) -> dict:
    """Always 200; `status` degrades when the database does not answer."""
    settings = request.app.state.settings
    database_ok = await database.ping()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ok" if database_ok else "unavailable",
    }
