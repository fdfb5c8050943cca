"""Health check."""

from fastapi import APIRouter, Depends

from wolpage import __version__
from wolpage.api.deps import get_platform
from wolpage.schemas.system import HealthResponse
from wolpage.services.wol_dispatcher import PlatformKind

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(platform: PlatformKind = Depends(get_platform)):
    """Lightweight connectivity check."""
    return HealthResponse(version=__version__, platform=platform.value)


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
