from __future__ import annotations

from fastapi import APIRouter, Depends

from ..relays import Relays
from ..schemas.translation import HealthResponse
from .dependencies import get_relays

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def healthcheck(relays: Relays = Depends(get_relays)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Medical Translator API is running",
        mode=relays.mode,
    )
