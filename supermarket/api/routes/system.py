"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from supermarket.api.routes.produce import StoreDependency
from supermarket.config import settings

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Greeting endpoint used by smoke tests."""

    return {"message": "Supermarket produce API"}


@router.get("/health")
async def health_check(store: StoreDependency) -> dict[str, str | int]:
    """Health check reporting the number of stored produce records."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "produce_count": len(store),
    }
