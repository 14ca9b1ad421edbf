"""
NLP Text Record Service - Health Endpoint

GET /health - Returns service health status (no API key required)
"""

from fastapi import APIRouter
from schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    summary="Health check",
    description="Returns the health status of the service. Does not require an API key.",
    response_model=HealthResponse,
)
async def health():
    return HealthResponse(status="Up")
