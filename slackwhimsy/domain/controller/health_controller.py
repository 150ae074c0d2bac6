from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ..config.settings import Settings, get_settings
from ..dto.health_dto import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check 엔드포인트"""
    health = HealthResponse(
        status="healthy",
        slack_configured=settings.slack_configured,
        claude_configured=settings.claude_configured,
        signature_enforced=settings.is_production
    )
    return JSONResponse(content=health.model_dump())
