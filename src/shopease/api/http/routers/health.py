"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends

from src.shopease.api.http.deps import get_storage
from src.shopease.core.storage import Storage

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic liveness probe, 200 as long as the process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready")
def readiness(storage: Storage = Depends(get_storage)) -> dict[str, Any]:
    """Readiness check reporting the size of the entity store."""
    return {
        "status": "ready",
        "checks": {
            "store": {
                "status": "healthy",
                "products": storage.count_products(),
                "orders": storage.count_orders(),
            }
        },
    }
