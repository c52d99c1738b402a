"""Health Controller."""

from fastapi import APIRouter

from apps.social.presentation.http.schemas import HealthResponse
from apps.social.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["general"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)
