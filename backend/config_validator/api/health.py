"""Health check endpoint."""

import time
from fastapi import APIRouter, Depends

from config_validator.config import Settings, get_settings
from config_validator.api.validation import get_validation_engine
from config_validator.models.responses import HealthResponse
from config_validator.validators import ValidationEngine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    engine: ValidationEngine = Depends(get_validation_engine),
):
    """Service health with the number of loaded field rules."""
    rules_loaded = len(engine.registry)

    return HealthResponse(
        status="healthy" if rules_loaded else "degraded",
        version=settings.APP_VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
        rules_loaded=rules_loaded,
    )
