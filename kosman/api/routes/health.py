"""Health check route."""

from fastapi import APIRouter

from kosman.core.config import settings

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report service liveness."""
    return {"status": "healthy", "service": "kosman", "version": settings.VERSION}
