"""Translation API routes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from ..errors import RelayError, TranslationFailed
from ..schemas.translation import (
    RelayMode,
    TranslatePayload,
    TranslateResponse,
)
from ..services.translation import TranslationRelay
from ..validation import parse_translation_request
from .dependencies import get_translation_relay

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["translate"])


@router.post(
    "/translate",
    response_model=TranslateResponse,
    response_model_exclude_unset=True,
)
async def translate(
    payload: TranslatePayload,
    relay: TranslationRelay = Depends(get_translation_relay),
) -> TranslateResponse:
    """Translate between English and the selected dialect."""

    request = parse_translation_request(
        payload.text, payload.target_language, payload.current_speaker
    )
    try:
        result = await relay.translate(request)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("Unexpected translation failure")
        raise TranslationFailed() from exc

    fields: dict[str, Any] = {
        "translation": result.translated_text,
        "original": result.source_text,
        "target_language": request.target_dialect,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if result.mode is RelayMode.OFFLINE:
        fields["translation_direction"] = result.direction
        fields["demo_mode"] = True
    return TranslateResponse(**fields)
